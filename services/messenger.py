"""Отправка сообщений через Telegram"""
from dataclasses import dataclass
from typing import Optional, Union

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import InlineKeyboardMarkup


ChatId = Union[int, str]


@dataclass(frozen=True)
class SendResult:
    """Результат отправки: id чата и сообщения или описание ошибки"""
    ok: bool
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    error: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def failure(cls, exc: Exception) -> "SendResult":
        return cls(ok=False, error=type(exc).__name__, description=str(exc))


class TelegramMessenger:
    """Обёртка над Bot.send_message, которая не бросает ошибки Telegram"""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def _send(
        self,
        chat_id: ChatId,
        text: str,
        reply_markup: InlineKeyboardMarkup = None,
        parse_mode: Optional[str] = "HTML",
    ) -> SendResult:
        try:
            message = await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                reply_markup=reply_markup,
                parse_mode=parse_mode,
            )
        except TelegramAPIError as e:
            return SendResult.failure(e)
        return SendResult(ok=True, chat_id=message.chat.id, message_id=message.message_id)

    async def send_direct(
        self,
        user_id: int,
        text: str,
        reply_markup: InlineKeyboardMarkup = None,
    ) -> SendResult:
        """Личное сообщение участнику; chat_id в результате - его личный чат"""
        return await self._send(user_id, text, reply_markup=reply_markup)

    async def send_to_chat(self, chat_id: ChatId, text: str) -> SendResult:
        """Сообщение в общий чат команды"""
        return await self._send(chat_id, text)
