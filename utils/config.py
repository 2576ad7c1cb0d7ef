"""Конфигурация бота"""
import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from dotenv import load_dotenv

from utils.questions import Question, load_questions

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULE = "0 15 10 * * 1-5"


def parse_ids(raw: str) -> List[int]:
    """Разобрать список id через запятую"""
    # Порядок сохраняем, повторы убираем
    return list(dict.fromkeys(int(id.strip()) for id in (raw or "").split(",") if id.strip()))


def parse_chat_id(raw: str) -> Union[int, str, None]:
    """Числовой id чата или @username канала"""
    raw = (raw or "").strip()
    if not raw:
        return None
    if raw.lstrip("-").isdigit():
        return int(raw)
    return raw


@dataclass
class Settings:
    bot_token: str
    team_members: List[int]
    team_chat_id: Union[int, str, None]
    questions: List[Question]
    schedule: str = DEFAULT_SCHEDULE
    timezone: str = "UTC"
    team_chat_url: Optional[str] = None
    admin_ids: List[int] = field(default_factory=list)
    lang: str = "ru"
    log_file: Optional[str] = "standup.log"
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Загрузить настройки из окружения (.env)"""
    bot_token = os.getenv("BOT_TOKEN")
    if not bot_token:
        raise ValueError("BOT_TOKEN не установлен в .env файле")

    team_chat_id = parse_chat_id(os.getenv("TEAM_CHAT_ID", ""))
    if team_chat_id is None:
        raise ValueError("TEAM_CHAT_ID не установлен в .env файле")

    team_members = parse_ids(os.getenv("TEAM_MEMBERS", ""))
    if not team_members:
        logger.warning("TEAM_MEMBERS пуст: вопросы никому не будут отправлены")

    admin_ids = parse_ids(os.getenv("ADMIN_IDS", ""))
    if not admin_ids:
        logger.warning("ADMIN_IDS не установлены. Админ-команды будут недоступны.")

    return Settings(
        bot_token=bot_token,
        team_members=team_members,
        team_chat_id=team_chat_id,
        questions=load_questions(os.getenv("QUESTIONS_FILE") or None),
        schedule=os.getenv("STANDUP_SCHEDULE", DEFAULT_SCHEDULE),
        timezone=os.getenv("SCHEDULE_TIMEZONE", "UTC"),
        team_chat_url=os.getenv("TEAM_CHAT_URL") or None,
        admin_ids=admin_ids,
        lang=os.getenv("BOT_LANG", "ru"),
        log_file=os.getenv("LOG_FILE", "standup.log") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
