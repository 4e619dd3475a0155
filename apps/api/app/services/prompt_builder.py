from __future__ import annotations

MATH_SOLVE_TEMPLATE = """Ты опытный репетитор по математике. Подробно реши следующую задачу:

"{question}"

Объясни каждый шаг решения. Если есть несколько способов решения, покажи наиболее понятный. В конце укажи итоговый ответ."""

CZECH_SOLVE_TEMPLATE = """Ты опытный репетитор по чешскому языку. Подробно ответь на следующий вопрос:

"{question}"

Дай полное объяснение, приведи примеры, где это уместно. Если вопрос связан с грамматикой, объясни правила и исключения."""

GENERIC_SOLVE_TEMPLATE = 'Ответь на вопрос ученика: "{question}"'

SUBJECT_DISPLAY_NAMES = {"math": "математика"}
DEFAULT_DISPLAY_NAME = "чешский язык"


def subject_display_name(subject: str | None) -> str:
    return SUBJECT_DISPLAY_NAMES.get(subject or "", DEFAULT_DISPLAY_NAME)


def build_solve_prompt(question: str, subject: str | None) -> str:
    # str.replace keeps braces inside the question intact
    if subject == "math":
        template = MATH_SOLVE_TEMPLATE
    elif subject == "czech":
        template = CZECH_SOLVE_TEMPLATE
    else:
        template = GENERIC_SOLVE_TEMPLATE
    return template.replace("{question}", question)


def build_check_answer_prompt(student_answer: str) -> str:
    return (
        f'Ты опытный репетитор. Оцени ответ ученика: "{student_answer}". '
        "Дай конструктивную обратную связь, укажи на сильные стороны и что можно улучшить."
    )


def build_plan_prompt(subject: str | None, days: int) -> str:
    return (
        f'Ты опытный репетитор. Создай детальный план обучения по предмету "{subject_display_name(subject)}" '
        f"на {days} дней. Разбей по неделям и укажи конкретные темы для изучения каждый день. "
        "План должен быть структурированным и последовательным."
    )


def build_chat_prompt(message: str) -> str:
    return (
        "Ты дружелюбный репетитор по математике и чешскому языку. "
        "Отвечай кратко и понятно, на языке ученика.\n\n"
        f"Ученик: {message}\n"
        "Репетитор:"
    )
