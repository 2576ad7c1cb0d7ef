"""Состояние одного цикла стендапа"""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from utils.questions import Question


@dataclass(frozen=True)
class AnswerRecord:
    """Записанный ответ: вопрос, его метка и текст ответа"""
    question: str
    color: str
    answer: str


@dataclass
class Conversation:
    """Личный чат бота с участником в рамках цикла"""
    participant_id: int
    chat_id: int
    display_name: Optional[str] = None


@dataclass(frozen=True)
class InboundMessage:
    """Входящее сообщение, независимое от aiogram"""
    sender_id: int
    chat_id: int
    is_private: bool
    text: Optional[str]
    sender_name: Optional[str] = None
    subtype: Optional[str] = None


def new_cycle_id() -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"cycle_{timestamp}"


class CycleSession:
    """
    Состояние одного цикла: участник -> чат, чат -> ответы.

    Следующий вопрос определяется только количеством ответов:
    вопрос с индексом len(ответов). Если сообщения участника придут
    не в том порядке, ответы сдвинутся относительно вопросов.
    """

    def __init__(self, questions: Sequence[Question], cycle_id: str = None):
        self.cycle_id = cycle_id or new_cycle_id()
        self.questions: Tuple[Question, ...] = tuple(questions)
        self.conversations: Dict[int, Conversation] = {}
        self.answers: Dict[int, List[AnswerRecord]] = {}

    @property
    def total(self) -> int:
        return len(self.questions)

    def open_conversation(self, participant_id: int, chat_id: int) -> Conversation:
        """Запомнить чат участника и завести пустой список ответов"""
        conversation = Conversation(participant_id=participant_id, chat_id=chat_id)
        self.conversations[participant_id] = conversation
        self.answers[chat_id] = []
        return conversation

    def get_conversation(self, participant_id: int) -> Optional[Conversation]:
        return self.conversations.get(participant_id)

    def get_answers(self, participant_id: int) -> Optional[List[AnswerRecord]]:
        conversation = self.conversations.get(participant_id)
        if conversation is None:
            return None
        return self.answers.get(conversation.chat_id)

    def is_complete(self, participant_id: int) -> bool:
        answers = self.get_answers(participant_id)
        return answers is not None and len(answers) >= self.total

    def next_question(self, participant_id: int) -> Optional[Question]:
        """Вопрос, которого ждём от участника (None, если ответил на все)"""
        answers = self.get_answers(participant_id)
        if answers is None or len(answers) >= self.total:
            return None
        return self.questions[len(answers)]

    def record_answer(self, participant_id: int, text: str) -> AnswerRecord:
        """Добавить ответ на текущий вопрос участника"""
        answers = self.get_answers(participant_id)
        if answers is None:
            raise KeyError(f"Нет разговора с участником {participant_id}")
        if len(answers) >= self.total:
            raise ValueError(f"Участник {participant_id} уже ответил на все вопросы")

        question = self.questions[len(answers)]
        record = AnswerRecord(question=question.text, color=question.color, answer=text)
        answers.append(record)
        return record

    def progress(self) -> Dict[int, int]:
        """Количество ответов по каждому участнику с открытым разговором"""
        return {
            participant_id: len(self.answers.get(conversation.chat_id, []))
            for participant_id, conversation in self.conversations.items()
        }
