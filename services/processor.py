"""Обработка ответов участников"""
import enum
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from keyboards import get_team_chat_keyboard
from services.archive import StandupArchive
from services.coordinator import CycleCoordinator
from services.messenger import TelegramMessenger
from services.publisher import SummaryPublisher, format_question
from services.session import Conversation, CycleSession, InboundMessage
from utils.i18n import get_text

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    IGNORED = "ignored"
    ALREADY_COMPLETE = "already_complete"
    NEXT_QUESTION = "next_question"
    COMPLETED = "completed"


class ResponseProcessor:
    """
    Обрабатывает одно входящее личное сообщение.

    Ответ привязывается к вопросу только по позиции: n-е сообщение
    участника считается ответом на n-й вопрос.
    """

    def __init__(
        self,
        coordinator: CycleCoordinator,
        messenger: TelegramMessenger,
        publisher: SummaryPublisher,
        lang: str = "ru",
        team_chat_url: Optional[str] = None,
        session_factory: Optional[async_sessionmaker] = None,
    ):
        self.coordinator = coordinator
        self.messenger = messenger
        self.publisher = publisher
        self.lang = lang
        self.team_chat_url = team_chat_url
        self.session_factory = session_factory

    async def handle_message(self, event: InboundMessage) -> Outcome:
        if not event.is_private:
            return Outcome.IGNORED

        if event.subtype or event.text is None:
            logger.info(f"Сообщение от {event.sender_id} пропущено: тип {event.subtype} не поддерживается")
            return Outcome.IGNORED

        if not self.coordinator.is_participant(event.sender_id):
            logger.info(f"Сообщение от {event.sender_id} пропущено: не участник стендапа")
            return Outcome.IGNORED

        session = self.coordinator.session
        conversation = session.get_conversation(event.sender_id) if session else None
        if conversation is None:
            logger.info(f"У участника {event.sender_id} нет вопросов в текущем цикле")
            return Outcome.IGNORED

        if event.sender_name:
            conversation.display_name = event.sender_name

        if session.is_complete(event.sender_id):
            logger.info(f"Участник {event.sender_id} уже ответил на все вопросы")
            await self._notify(conversation, "already_completed")
            return Outcome.ALREADY_COMPLETE

        # Между записью и проверкой нет await - операция атомарна в event loop
        record = session.record_answer(event.sender_id, event.text)
        logger.info(
            f"Ответ '{record.answer}' от {event.sender_id} на вопрос '{record.question}'"
        )

        next_question = session.next_question(event.sender_id)
        if next_question is None:
            await self._complete(session, conversation)
            return Outcome.COMPLETED

        result = await self.messenger.send_direct(conversation.chat_id, format_question(next_question))
        if not result.ok:
            logger.error(
                f"Не удалось отправить вопрос участнику {event.sender_id}: "
                f"{result.error} {result.description}"
            )
        return Outcome.NEXT_QUESTION

    async def _complete(self, session: CycleSession, conversation: Conversation):
        """Опубликовать итог, поблагодарить участника, сохранить отчёт"""
        participant_id = conversation.participant_id
        display_name = conversation.display_name or str(participant_id)
        answers = list(session.get_answers(participant_id))

        logger.info(f"{display_name} ответил на все вопросы, публикуем отчёт")
        published = await self.publisher.publish(display_name, answers)

        # Благодарим даже если публикация не удалась
        await self._notify(conversation, "completed")

        if self.session_factory is not None:
            await self._archive(session, conversation, display_name, answers, published.ok)

    async def _notify(self, conversation: Conversation, key: str):
        keyboard = get_team_chat_keyboard(self.team_chat_url, self.lang)
        result = await self.messenger.send_direct(
            conversation.chat_id,
            get_text(self.lang, key),
            reply_markup=keyboard,
        )
        if not result.ok:
            logger.error(
                f"Не удалось отправить сообщение участнику {conversation.participant_id}: "
                f"{result.error} {result.description}"
            )

    async def _archive(self, session, conversation, display_name, answers, posted: bool):
        try:
            async with self.session_factory() as db_session:
                archive = StandupArchive(db_session)
                await archive.save_report(
                    cycle_id=session.cycle_id,
                    participant_id=conversation.participant_id,
                    display_name=display_name,
                    answers=answers,
                    posted=posted,
                )
        except SQLAlchemyError as e:
            logger.error(f"Не удалось сохранить отчёт {display_name}: {e}")
