"""Тексты бота"""

TEXTS = {
    "ru": {
        "start_member": "👋 Привет, {name}! Ты в команде: я буду присылать вопросы стендапа по расписанию.\n\nТвой id: {user_id}",
        "start_guest": "👋 Привет, {name}! Ты пока не в списке команды.\n\nПередай администратору свой id: {user_id}",
        "help_text": (
            "Я провожу ежедневный стендап.\n\n"
            "В назначенное время я пришлю первый вопрос. Отвечай одним сообщением "
            "на каждый вопрос, и после последнего ответа я опубликую отчёт в общем чате."
        ),
        "summary_header": "📝 Стендап {name}",
        "completed": "✅ Спасибо! Твой отчёт опубликован в общем чате.",
        "already_completed": "Ты уже ответил на все вопросы. Отчёт в общем чате.",
        "btn_team_chat": "💬 Открыть общий чат",
        "admin_only": "⛔️ Эта команда доступна только администраторам.",
        "cycle_started": "🚀 Стендап `{cycle_id}` запущен: вопросы доставлены {delivered} из {total}.",
        "cycle_busy": "⏳ Стендап уже запускается, попробуйте позже.",
        "no_cycle": "Стендап ещё не запускался.",
        "status_title": "📊 Стендап {cycle_id}",
        "status_line": "• {name}: {answered}/{total}",
        "status_not_delivered": "• {name}: вопрос не доставлен",
        "no_reports": "Нет опубликованных отчётов.",
        "history_title": "🗂 Последние отчёты (всего {total}):",
        "export_preparing": "⏳ Подготавливаю экспорт...",
        "export_empty": "Нет данных для экспорта.",
        "export_caption": "📊 Экспорт отчётов ({count} ответов)",
        "admin_help": (
            "🔧 Команды администратора\n\n"
            "🚀 `/standup` — запустить стендап сейчас\n"
            "📊 `/status` — прогресс текущего стендапа\n"
            "🗂 `/history` — последние отчёты\n"
            "💾 `/export` — экспорт отчётов в CSV"
        ),
    },
    "en": {
        "start_member": "👋 Hi, {name}! You are on the team: I will send you standup questions on schedule.\n\nYour id: {user_id}",
        "start_guest": "👋 Hi, {name}! You are not on the team list yet.\n\nSend your id to an administrator: {user_id}",
        "help_text": (
            "I run the daily standup.\n\n"
            "At the scheduled time I will send you the first question. Reply with one "
            "message per question; after the last answer I will post your report to the team chat."
        ),
        "summary_header": "📝 {name}'s standup status is",
        "completed": "✅ Thanks! Your standup status has been posted to the team chat.",
        "already_completed": "You already answered all standup questions. Check the team chat.",
        "btn_team_chat": "💬 Open team chat",
        "admin_only": "⛔️ This command is for administrators only.",
        "cycle_started": "🚀 Standup `{cycle_id}` started: questions delivered to {delivered} of {total}.",
        "cycle_busy": "⏳ A standup is already starting, try again later.",
        "no_cycle": "No standup has been started yet.",
        "status_title": "📊 Standup {cycle_id}",
        "status_line": "• {name}: {answered}/{total}",
        "status_not_delivered": "• {name}: question not delivered",
        "no_reports": "No reports have been posted.",
        "history_title": "🗂 Latest reports ({total} total):",
        "export_preparing": "⏳ Preparing export...",
        "export_empty": "Nothing to export.",
        "export_caption": "📊 Report export ({count} answers)",
        "admin_help": (
            "🔧 Admin commands\n\n"
            "🚀 `/standup` — start a standup now\n"
            "📊 `/status` — progress of the current standup\n"
            "🗂 `/history` — latest reports\n"
            "💾 `/export` — export reports to CSV"
        ),
    },
}


def get_text(lang: str, key: str, **kwargs) -> str:
    """Получить текст на нужном языке (по умолчанию русский)"""
    texts = TEXTS.get(lang) or TEXTS["ru"]
    text = texts.get(key) or TEXTS["ru"].get(key, key)
    return text.format(**kwargs) if kwargs else text
