from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

NO_BODY_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class ProxyRequest(BaseModel):
    method: str
    target_path: str
    query: list[tuple[str, str]] = Field(default_factory=list)
    body: Any = None

    @property
    def forwarded_body(self) -> Any:
        """The JSON body to send upstream, or None when nothing should be attached."""
        if self.method.upper() in NO_BODY_METHODS:
            return None
        if self.body is None or self.body == {}:
            return None
        return self.body
