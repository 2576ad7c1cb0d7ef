"""Запуск цикла стендапа"""
import asyncio
import logging
from typing import List, Optional, Sequence

from services.messenger import SendResult, TelegramMessenger
from services.publisher import format_question
from services.session import CycleSession
from utils.questions import Question

logger = logging.getLogger(__name__)


class CycleCoordinator:
    """
    Владелец состояния текущего цикла.

    Каждый запуск создаёт новую CycleSession, старая просто отбрасывается.
    ResponseProcessor читает coordinator.session по ссылке.
    """

    def __init__(
        self,
        messenger: TelegramMessenger,
        questions: Sequence[Question],
        participants: Sequence[int],
    ):
        self.messenger = messenger
        self.questions: List[Question] = list(questions)
        self.participants: List[int] = list(dict.fromkeys(participants))
        self.session: Optional[CycleSession] = None
        self._lock = asyncio.Lock()

    def is_participant(self, user_id: int) -> bool:
        return user_id in self.participants

    @property
    def is_starting(self) -> bool:
        return self._lock.locked()

    async def start_cycle(self) -> Optional[CycleSession]:
        """
        Начать новый цикл: сбросить состояние и разослать первый вопрос.

        Возвращает новую сессию или None, если предыдущий запуск
        ещё рассылает вопросы.
        """
        if self.is_starting:
            logger.warning("Стендап уже запускается, новый запуск пропущен")
            return None

        async with self._lock:
            session = CycleSession(self.questions)
            self.session = session
            logger.info(f"Запуск стендапа {session.cycle_id}...")

            if not session.questions:
                logger.warning("Список вопросов пуст, стендап отменён")
                return session

            await asyncio.gather(*(
                self._send_first_question(session, participant_id)
                for participant_id in self.participants
            ))

            logger.info(
                f"Стендап {session.cycle_id}: первый вопрос доставлен "
                f"{len(session.conversations)} из {len(self.participants)}"
            )
            return session

    async def _send_first_question(self, session: CycleSession, participant_id: int) -> SendResult:
        question = session.questions[0]
        logger.info(f"Отправка вопроса '{question.text}' участнику {participant_id}")
        result = await self.messenger.send_direct(participant_id, format_question(question))
        if not result.ok:
            logger.error(
                f"Не удалось отправить вопрос участнику {participant_id}: "
                f"{result.error} {result.description}"
            )
            return result

        # Записываем в сессию, захваченную при запуске, а не в self.session
        session.open_conversation(participant_id, result.chat_id)
        return result
