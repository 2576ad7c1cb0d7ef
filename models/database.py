"""Настройка базы данных SQLAlchemy"""
import os
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from typing import AsyncGenerator

# Архив опубликованных отчётов; состояние текущего цикла в БД не хранится
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///standup.db")

engine = create_async_engine(DATABASE_URL, echo=False)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def init_db():
    """Инициализация базы данных"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Получить сессию БД"""
    async with async_session_maker() as session:
        yield session
