"""Общие клавиатуры"""
from typing import Optional
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from utils.i18n import get_text


def get_team_chat_keyboard(url: Optional[str], lang: str = "ru") -> Optional[InlineKeyboardMarkup]:
    """Кнопка-ссылка на общий чат (если ссылка настроена)"""
    if not url:
        return None
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(
            text=get_text(lang, "btn_team_chat"),
            url=url
        )]
    ])
