"""Хендлеры ответов на вопросы стендапа"""
from typing import Optional
from aiogram import Router
from aiogram.enums import ChatType, ContentType
from aiogram.types import Message

from services.processor import ResponseProcessor
from services.session import InboundMessage

router = Router()


def display_name(message: Message) -> Optional[str]:
    """@username или полное имя отправителя"""
    user = message.from_user
    if user is None:
        return None
    if user.username:
        return f"@{user.username}"
    return user.full_name


def inbound_from_message(message: Message, subtype: str = None) -> InboundMessage:
    """Преобразовать сообщение aiogram во входящее событие"""
    # Стикеры, фото, сервисные сообщения и т.п. - не текстовый ответ
    if subtype is None and message.content_type != ContentType.TEXT:
        subtype = ContentType(message.content_type).value
    # Неизвестные команды (например, опечатка в /status) - не ответ
    elif subtype is None and (message.text or "").startswith("/"):
        subtype = "command"

    return InboundMessage(
        sender_id=message.from_user.id if message.from_user else 0,
        chat_id=message.chat.id,
        is_private=message.chat.type == ChatType.PRIVATE,
        text=message.text,
        sender_name=display_name(message),
        subtype=subtype,
    )


@router.message()
async def handle_answer(message: Message, processor: ResponseProcessor):
    """Любое сообщение, не пойманное командами, - возможный ответ"""
    await processor.handle_message(inbound_from_message(message))


@router.edited_message()
async def handle_edited(message: Message, processor: ResponseProcessor):
    """Редактирование ответов не поддерживается"""
    await processor.handle_message(inbound_from_message(message, subtype="edited"))
