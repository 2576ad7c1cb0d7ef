"""Базовые хендлеры (команды /start, /help)"""
from aiogram import Router
from aiogram.types import Message
from aiogram.filters import Command

from services.coordinator import CycleCoordinator
from utils.config import Settings
from utils.i18n import get_text

router = Router()


@router.message(Command("start"))
async def cmd_start(message: Message, settings: Settings, coordinator: CycleCoordinator):
    """Команда /start"""
    user = message.from_user
    key = "start_member" if coordinator.is_participant(user.id) else "start_guest"
    await message.answer(get_text(settings.lang, key, name=user.full_name, user_id=user.id))


@router.message(Command("help"))
async def cmd_help(message: Message, settings: Settings):
    """Команда /help"""
    await message.answer(get_text(settings.lang, "help_text"))
