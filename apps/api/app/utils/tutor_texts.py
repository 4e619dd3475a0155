from __future__ import annotations

MATH_SOLVE_STEPS = (
    "Конечно, давайте разберем эту задачу:\n\n"
    "Первым шагом нужно определить, какой метод лучше подходит для решения. "
    "Обычно начинаем с анализа условий.\n\n"
    "Решение:\n"
    "1. Выделяем основные данные из условия\n"
    "2. Применяем соответствующую формулу\n"
    "3. Выполняем вычисления шаг за шагом\n\n"
    "Итоговый ответ: [демо-версия] Для получения точного решения необходимо подключение к API."
)

MATH_CALCULUS_RULES = (
    "Для решения задач с производными и интегралами нужно применять правила "
    "дифференцирования и интегрирования.\n\n"
    "Основные правила дифференцирования:\n"
    "- (C)' = 0, где C - константа\n"
    "- (x^n)' = n*x^(n-1)\n"
    "- (u + v)' = u' + v'\n"
    "- (u*v)' = u'*v + u*v'\n\n"
    "[демо-версия] Для полного решения обратитесь к API."
)

MATH_GENERIC = (
    "Отвечаю на вопрос по математике:\n\n"
    "Это важная тема в математике. Для глубокого понимания необходимо рассмотреть "
    "несколько ключевых концепций:\n\n"
    "1. Основные определения\n"
    "2. Формулы и их применение \n"
    "3. Типовые задачи и методы их решения\n\n"
    "[демо-версия] Для более конкретного ответа необходимо подключение к API."
)

CZECH_OVERVIEW = (
    "О чешском языке:\n\n"
    "Чешский язык принадлежит к западнославянской группе языков. Он имеет много общего "
    "с другими славянскими языками, включая русский, но также имеет свои уникальные особенности.\n\n"
    "В чешском языке есть:\n"
    "- 7 падежей \n"
    "- Длинные и краткие гласные\n"
    "- Ударение всегда падает на первый слог\n\n"
    "[демо-версия] Для более подробного ответа необходимо подключение к API."
)

SOLVE_KEYWORDS = ("реши", "решить")
CALCULUS_KEYWORDS = ("производная", "интеграл")

FEEDBACK_TEMPLATE = 'Ваш ответ: "{answer}" выглядит неплохо. Продолжайте практиковаться!'

MATH_PLAN = """План подготовки по математике на 30 дней:

Неделя 1: Основы алгебры
- День 1-2: Числовые множества и операции
- День 3-4: Уравнения первой степени
- День 5-7: Системы линейных уравнений

Неделя 2: Функции
- День 8-10: Основные функции и их графики
- День 11-14: Преобразования графиков

Неделя 3: Производные
- День 15-18: Определение и правила дифференцирования
- День 19-21: Применение производных

Неделя 4: Подготовка к экзамену
- День 22-25: Решение типовых задач
- День 26-28: Пробные тесты
- День 29-30: Повторение сложных тем

[демо-версия] Для персонализированного плана обратитесь к API."""

CZECH_PLAN = """План изучения чешского языка на 30 дней:

Неделя 1: Основы
- День 1-3: Алфавит и произношение
- День 4-7: Базовые фразы и приветствия

Неделя 2: Грамматика I
- День 8-11: Существительные и падежи
- День 12-14: Глаголы и спряжения

Неделя 3: Разговорная практика
- День 15-18: Повседневные диалоги
- День 19-21: Описание событий и планов

Неделя 4: Укрепление знаний
- День 22-25: Чтение и аудирование
- День 26-28: Письменные упражнения
- День 29-30: Финальное повторение

[демо-версия] Для персонализированного плана обратитесь к API."""

# Russian greetings inflect, so they match as word prefixes.
GREETING_STEMS = ("привет", "здравствуй")
GREETING_WORDS = ("hello", "hi", "hey")
HOW_ARE_YOU_PHRASES = ("как дела", "how are you")

CHAT_GREETING = "Привет! Я ваш репетитор по математике и чешскому языку. Чем могу помочь?"
CHAT_HOW_ARE_YOU = "У меня всё отлично, спасибо! Готов помочь вам с учёбой. Что будем изучать сегодня?"
CHAT_QUESTION = (
    "Хороший вопрос! В демо-режиме я не могу дать подробный ответ, "
    "но попробуйте разделы «Решение задач» и «План обучения»."
)
CHAT_FILLERS = (
    "Интересно! Расскажите подробнее, что именно вы хотите изучить.",
    "Понимаю. Давайте попробуем разобрать это на примере задачи.",
    "Отличная мысль! Регулярная практика помогает лучше подготовиться к экзамену.",
    "Я вас слушаю. Можете сформулировать это в виде вопроса?",
    "Хорошо! Если хотите, я могу составить для вас план подготовки.",
)

SOLVE_PLACEHOLDER = "Не получилось сгенерировать решение."
FEEDBACK_PLACEHOLDER = "Не удалось оценить ответ."
PLAN_PLACEHOLDER = "Не удалось создать план обучения."
CHAT_PLACEHOLDER = "Не удалось получить ответ."

FAILURE_NOTICE = "Произошла ошибка при обращении к API: {message}.\n\n"

STATUS_DEMO = (
    "API работает в демо-режиме. Настройте OLLAMA_SERVER в переменных окружения "
    "(на Vercel: Project Settings, Environment Variables) или отключите DEMO_MODE."
)
STATUS_CONNECTED = "API работает, подключен к Ollama: {url}"
