from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SUBJECT = "math"
DEFAULT_DAYS_UNTIL_EXAM = 30


def _text_or_none(value):
    return value if isinstance(value, str) else None


class SolveRequest(BaseModel):
    question: str | None = None
    subject: str | None = None

    coerce_text = field_validator("question", "subject", mode="before")(_text_or_none)


class CheckAnswerRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    student_answer: str | None = Field(default=None, alias="studentAnswer")

    coerce_text = field_validator("student_answer", mode="before")(_text_or_none)


class GeneratePlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    subject: str | None = None
    days_until_exam: int | None = Field(default=None, alias="daysUntilExam")

    coerce_subject = field_validator("subject", mode="before")(_text_or_none)

    @field_validator("days_until_exam", mode="before")
    @classmethod
    def coerce_days(cls, value):
        # Unusable values fall back to the default horizon instead of rejecting the request.
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return None


class ChatRequest(BaseModel):
    message: str | None = None

    coerce_text = field_validator("message", mode="before")(_text_or_none)


class BackendCompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    prompt: str
    temperature: float = Field(default=0.1, ge=0.0, le=1.0)
    max_tokens: int = Field(default=1024, gt=0)

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "prompt": self.prompt,
            "stream": False,
            "options": {
                "temperature": self.temperature,
                "num_predict": self.max_tokens,
            },
        }


class CompletionResult(BaseModel):
    ok: bool
    text: str = ""
    status_code: int | None = None
    message: str | None = None
    data: dict | list | None = None

    @classmethod
    def success(cls, text: str, data: dict | list | None = None) -> "CompletionResult":
        return cls(ok=True, text=text, data=data)

    @classmethod
    def failure(cls, message: str, status_code: int | None = None) -> "CompletionResult":
        return cls(ok=False, status_code=status_code, message=message)
