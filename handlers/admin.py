"""Админские хендлеры"""
import os
import csv
from aiogram import Router
from aiogram.types import Message, FSInputFile
from aiogram.filters import Command

from models import get_session
from services.archive import StandupArchive, CSV_FIELDS, export_filename
from services.coordinator import CycleCoordinator
from utils.config import Settings
from utils.i18n import get_text

router = Router()


def admin_only(func):
    """Декоратор для проверки прав администратора"""
    async def wrapper(message: Message, settings: Settings, **kwargs):
        if message.from_user.id not in settings.admin_ids:
            await message.answer(get_text(settings.lang, "admin_only"))
            return
        return await func(message, settings=settings, **kwargs)
    return wrapper


@router.message(Command("standup"))
@admin_only
async def cmd_standup(message: Message, settings: Settings, coordinator: CycleCoordinator, **kwargs):
    """Команда /standup - запустить стендап вне расписания"""
    session = await coordinator.start_cycle()
    if session is None:
        await message.answer(get_text(settings.lang, "cycle_busy"))
        return

    await message.answer(
        get_text(
            settings.lang,
            "cycle_started",
            cycle_id=session.cycle_id,
            delivered=len(session.conversations),
            total=len(coordinator.participants),
        ),
        parse_mode="Markdown"
    )


@router.message(Command("status"))
@admin_only
async def cmd_status(message: Message, settings: Settings, coordinator: CycleCoordinator, **kwargs):
    """Команда /status - прогресс текущего стендапа"""
    session = coordinator.session
    if session is None:
        await message.answer(get_text(settings.lang, "no_cycle"))
        return

    lines = [get_text(settings.lang, "status_title", cycle_id=session.cycle_id), ""]
    progress = session.progress()
    for participant_id in coordinator.participants:
        conversation = session.get_conversation(participant_id)
        name = (conversation.display_name if conversation else None) or str(participant_id)
        if participant_id not in progress:
            lines.append(get_text(settings.lang, "status_not_delivered", name=name))
        else:
            lines.append(get_text(
                settings.lang, "status_line",
                name=name,
                answered=progress[participant_id],
                total=session.total,
            ))

    await message.answer("\n".join(lines))


@router.message(Command("history"))
@admin_only
async def cmd_history(message: Message, settings: Settings, **kwargs):
    """Команда /history - последние опубликованные отчёты"""
    async for session in get_session():
        archive = StandupArchive(session)
        lines = await archive.generate_history_text(limit=10)
        total = await archive.get_total_reports()

    if not lines:
        await message.answer(get_text(settings.lang, "no_reports"))
        return

    await message.answer("\n".join([get_text(settings.lang, "history_title", total=total)] + lines))


@router.message(Command("export"))
@admin_only
async def cmd_export(message: Message, settings: Settings, **kwargs):
    """Команда /export - экспорт отчётов в CSV"""
    await message.answer(get_text(settings.lang, "export_preparing"))

    async for session in get_session():
        archive = StandupArchive(session)
        data = await archive.export_to_csv_data()

    if not data:
        await message.answer(get_text(settings.lang, "export_empty"))
        return

    # Создаём директорию exports если её нет
    os.makedirs("exports", exist_ok=True)
    filename = export_filename()

    with open(filename, 'w', newline='', encoding='utf-8-sig') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(data)

    await message.answer_document(
        document=FSInputFile(filename),
        caption=get_text(settings.lang, "export_caption", count=len(data))
    )


@router.message(Command("admin"))
@admin_only
async def cmd_admin_help(message: Message, settings: Settings, **kwargs):
    """Команда /admin - справка для админов"""
    await message.answer(get_text(settings.lang, "admin_help"), parse_mode="Markdown")
