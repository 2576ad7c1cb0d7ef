"""Общие фикстуры тестов"""
import pytest
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from models.database import Base
from services.coordinator import CycleCoordinator
from services.messenger import SendResult
from services.processor import ResponseProcessor
from services.publisher import SummaryPublisher
from services.session import InboundMessage
from utils.questions import Question

TEAM_CHAT = -100500


class FakeMessenger:
    """Записывает отправленные сообщения вместо Telegram"""

    def __init__(self, fail_direct=(), fail_posts=False):
        self.direct = []
        self.posted = []
        self.fail_direct = set(fail_direct)
        self.fail_posts = fail_posts

    async def send_direct(self, user_id, text, reply_markup=None):
        self.direct.append((user_id, text, reply_markup))
        if user_id in self.fail_direct:
            return SendResult(ok=False, error="TelegramForbiddenError", description="bot was blocked by the user")
        # Личный чат в Telegram совпадает с id пользователя
        return SendResult(ok=True, chat_id=user_id, message_id=len(self.direct))

    async def send_to_chat(self, chat_id, text):
        self.posted.append((chat_id, text))
        if self.fail_posts:
            return SendResult(ok=False, error="TelegramBadRequest", description="chat not found")
        return SendResult(ok=True, chat_id=chat_id, message_id=len(self.posted))

    def sent_to(self, user_id):
        return [text for to, text, _ in self.direct if to == user_id]


@pytest.fixture
def questions():
    return [
        Question(text="What did you do yesterday?", color="🟠"),
        Question(text="What will you do today?", color="🔵"),
        Question(text="Is there anything blocking your progress?", color="🟢"),
    ]


@pytest.fixture
def messenger():
    return FakeMessenger()


@pytest.fixture
def coordinator(messenger, questions):
    return CycleCoordinator(messenger, questions, participants=[101, 202])


@pytest.fixture
def processor(coordinator, messenger):
    publisher = SummaryPublisher(messenger, TEAM_CHAT, lang="en")
    return ResponseProcessor(coordinator, messenger, publisher, lang="en")


def dm(sender_id, text, **kwargs):
    """Личное текстовое сообщение от участника"""
    params = dict(
        sender_id=sender_id,
        chat_id=sender_id,
        is_private=True,
        text=text,
        sender_name=f"user{sender_id}",
    )
    params.update(kwargs)
    return InboundMessage(**params)


@pytest.fixture
async def session_maker():
    """Фабрика сессий тестовой БД в памяти"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool)
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield maker

    await engine.dispose()


@pytest.fixture
async def test_session(session_maker):
    """Создать тестовую сессию БД"""
    async with session_maker() as session:
        yield session
