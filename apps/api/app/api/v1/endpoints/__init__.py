from __future__ import annotations

from app.api.v1.endpoints import proxy, tutor

__all__ = ["proxy", "tutor"]
