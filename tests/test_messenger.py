"""Тесты отправки сообщений"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from aiogram.exceptions import TelegramForbiddenError

from services.messenger import TelegramMessenger


def make_bot(**kwargs):
    bot = MagicMock()
    bot.send_message = AsyncMock(**kwargs)
    return bot


async def test_send_direct_returns_chat_id():
    """Тест: при успехе возвращаются id чата и сообщения"""
    bot = make_bot(return_value=SimpleNamespace(chat=SimpleNamespace(id=555), message_id=7))
    messenger = TelegramMessenger(bot)

    result = await messenger.send_direct(555, "<b>Hi</b>")

    assert result.ok
    assert result.chat_id == 555
    assert result.message_id == 7
    bot.send_message.assert_awaited_once_with(
        chat_id=555, text="<b>Hi</b>", reply_markup=None, parse_mode="HTML"
    )


async def test_telegram_error_becomes_failed_result():
    """Тест: ошибка Telegram не выбрасывается, а попадает в результат"""
    error = TelegramForbiddenError(method=MagicMock(), message="bot was blocked by the user")
    messenger = TelegramMessenger(make_bot(side_effect=error))

    result = await messenger.send_direct(555, "Hi")

    assert not result.ok
    assert result.chat_id is None
    assert result.error == "TelegramForbiddenError"
    assert "blocked" in result.description


async def test_send_to_chat():
    bot = make_bot(return_value=SimpleNamespace(chat=SimpleNamespace(id=-100500), message_id=1))
    messenger = TelegramMessenger(bot)

    result = await messenger.send_to_chat("@team", "report")

    assert result.ok
    assert bot.send_message.await_args.kwargs["chat_id"] == "@team"
