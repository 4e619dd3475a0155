from __future__ import annotations

import random

import pytest

from app.services.local_responder import LocalResponder
from app.utils import tutor_texts as texts


@pytest.fixture
def responder():
    return LocalResponder(random.Random(0))


def test_math_solve_keyword_selects_step_by_step_answer(responder):
    assert responder.solve("Реши уравнение x^2 = 4", "math") == texts.MATH_SOLVE_STEPS


def test_math_calculus_keyword_selects_rules(responder):
    assert responder.solve("Найди производная от x^3", "math") == texts.MATH_CALCULUS_RULES
    assert responder.solve("Вычисли интеграл", "math") == texts.MATH_CALCULUS_RULES


def test_math_without_keywords_returns_generic_block(responder):
    assert responder.solve("Что такое логарифм", "math") == texts.MATH_GENERIC


@pytest.mark.parametrize("subject", ["czech", "other", None])
def test_non_math_subject_returns_czech_overview(responder, subject):
    assert responder.solve("Реши что-нибудь", subject) == texts.CZECH_OVERVIEW


def test_plan_is_one_of_two_fixed_texts(responder):
    assert responder.plan("math") == texts.MATH_PLAN
    assert responder.plan("math") == responder.plan("math")
    for subject in ("czech", "biology", "", None):
        assert responder.plan(subject) == texts.CZECH_PLAN


def test_feedback_quotes_answer(responder):
    assert responder.feedback("42") == 'Ваш ответ: "42" выглядит неплохо. Продолжайте практиковаться!'


@pytest.mark.parametrize("message", ["Привет!", "здравствуйте, учитель", "Hi there", "hello"])
def test_chat_greeting(responder, message):
    assert responder.chat(message) == texts.CHAT_GREETING


def test_chat_greeting_does_not_match_inside_words(responder):
    assert responder.chat("this is fine?") == texts.CHAT_QUESTION


def test_chat_how_are_you_and_question(responder):
    assert responder.chat("Как дела") == texts.CHAT_HOW_ARE_YOU
    assert responder.chat("Сколько падежей в чешском?") == texts.CHAT_QUESTION


def test_chat_filler_is_reproducible_with_seeded_rng():
    first = [LocalResponder(random.Random(123)).chat("Учу падежи") for _ in range(3)]
    second = [LocalResponder(random.Random(123)).chat("Учу падежи") for _ in range(3)]

    assert first == second
    assert all(reply in texts.CHAT_FILLERS for reply in first)


def test_chat_filler_draws_from_all_options():
    responder = LocalResponder(random.Random(1))

    seen = {responder.chat("Просто текст") for _ in range(200)}

    assert seen == set(texts.CHAT_FILLERS)
