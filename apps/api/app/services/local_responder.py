from __future__ import annotations

import random
import re

from app.core.config import settings
from app.utils import tutor_texts as texts

_WORD_RE = re.compile(r"\w+")


class LocalResponder:
    """Canned answers served when the inference backend is unavailable or fails.

    Everything here is a pure function of its inputs except the chat filler,
    which draws from ``rng``. Pass a seeded ``random.Random`` for reproducible
    output.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def solve(self, question: str, subject: str | None) -> str:
        if subject != "math":
            return texts.CZECH_OVERVIEW
        lowered = question.lower()
        if any(keyword in lowered for keyword in texts.SOLVE_KEYWORDS):
            return texts.MATH_SOLVE_STEPS
        if any(keyword in lowered for keyword in texts.CALCULUS_KEYWORDS):
            return texts.MATH_CALCULUS_RULES
        return texts.MATH_GENERIC

    def feedback(self, student_answer: str) -> str:
        return texts.FEEDBACK_TEMPLATE.replace("{answer}", student_answer)

    def plan(self, subject: str | None) -> str:
        return texts.MATH_PLAN if subject == "math" else texts.CZECH_PLAN

    def chat(self, message: str) -> str:
        lowered = message.lower()
        words = _WORD_RE.findall(lowered)

        if any(word.startswith(texts.GREETING_STEMS) or word in texts.GREETING_WORDS for word in words):
            return texts.CHAT_GREETING
        if any(phrase in lowered for phrase in texts.HOW_ARE_YOU_PHRASES):
            return texts.CHAT_HOW_ARE_YOU
        if "?" in message:
            return texts.CHAT_QUESTION
        return self.rng.choice(texts.CHAT_FILLERS)


local_responder = LocalResponder(random.Random(settings.chat_seed) if settings.chat_seed is not None else None)
