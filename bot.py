"""Главный файл бота"""
import asyncio
import logging
from aiogram import Bot, Dispatcher

from utils.config import Settings, load_settings
from models import init_db, async_session_maker
from handlers import common_router, admin_router, standup_router
from services.coordinator import CycleCoordinator
from services.messenger import TelegramMessenger
from services.processor import ResponseProcessor
from services.publisher import SummaryPublisher
from services.scheduler import create_scheduler

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings):
    """Логи в консоль и (если задан LOG_FILE) в файл"""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


async def main():
    """Главная функция запуска бота"""
    settings = load_settings()
    setup_logging(settings)

    # Инициализация БД (архив отчётов)
    logger.info("Инициализация базы данных...")
    await init_db()

    bot = Bot(token=settings.bot_token)
    messenger = TelegramMessenger(bot)

    coordinator = CycleCoordinator(messenger, settings.questions, settings.team_members)
    publisher = SummaryPublisher(messenger, settings.team_chat_id, lang=settings.lang)
    processor = ResponseProcessor(
        coordinator,
        messenger,
        publisher,
        lang=settings.lang,
        team_chat_url=settings.team_chat_url,
        session_factory=async_session_maker,
    )

    # Зависимости доступны хендлерам по имени аргумента
    dp = Dispatcher(settings=settings, coordinator=coordinator, processor=processor)

    # Команды раньше, чем обработчик ответов
    dp.include_router(common_router)
    dp.include_router(admin_router)
    dp.include_router(standup_router)

    scheduler = create_scheduler(coordinator, settings.schedule, settings.timezone)
    scheduler.start()

    logger.info(
        f"Бот запущен: {len(settings.team_members)} участников, "
        f"{len(settings.questions)} вопросов"
    )

    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        scheduler.shutdown(wait=False)
        await bot.session.close()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Бот остановлен")
