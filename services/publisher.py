"""Публикация отчёта в общий чат"""
import logging
from typing import List, Sequence

from aiogram import html

from services.messenger import ChatId, SendResult, TelegramMessenger
from services.session import AnswerRecord
from utils.i18n import get_text
from utils.questions import Question

logger = logging.getLogger(__name__)


def format_question(question: Question) -> str:
    """Текст вопроса для личного сообщения"""
    text = html.bold(html.quote(question.text))
    if question.color:
        return f"{html.quote(question.color)} {text}"
    return text


# Ограничение Telegram на длину сообщения
MAX_MESSAGE_LENGTH = 4096


def _build_block(record: AnswerRecord, answer: str) -> str:
    title = html.bold(html.quote(record.question))
    if record.color:
        title = f"{html.quote(record.color)} {title}"
    return f"{title}\n{html.quote(answer)}"


def _truncate(text: str, budget: int) -> str:
    """Начало текста, которое после экранирования занимает не больше budget символов"""
    used = 0
    for i, ch in enumerate(text):
        used += len(html.quote(ch))
        if used > budget:
            return text[:i]
    return text


def build_summary_blocks(answers: Sequence[AnswerRecord], limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """
    Блок на каждый ответ: метка, вопрос, ответ - в порядке ответов.

    Слишком длинный ответ обрезается, чтобы блок поместился в одно сообщение.
    """
    blocks = []
    for record in answers:
        block = _build_block(record, record.answer)
        if len(block) > limit:
            block = _build_block(record, _truncate(record.answer, limit - len(_build_block(record, "…"))) + "…")
        blocks.append(block)
    return blocks


def build_summary_parts(
    display_name: str,
    answers: Sequence[AnswerRecord],
    lang: str = "ru",
    limit: int = MAX_MESSAGE_LENGTH,
) -> List[str]:
    """Отчёт, разбитый на сообщения по границам блоков"""
    header = get_text(lang, "summary_header", name=html.bold(html.quote(display_name)))
    parts = []
    current = header
    for block in build_summary_blocks(answers, limit):
        if len(current) + 2 + len(block) <= limit:
            current = f"{current}\n\n{block}"
        else:
            parts.append(current)
            current = block
    parts.append(current)
    return parts


class SummaryPublisher:
    """Отправляет итог участника в общий чат"""

    def __init__(self, messenger: TelegramMessenger, team_chat_id: ChatId, lang: str = "ru"):
        self.messenger = messenger
        self.team_chat_id = team_chat_id
        self.lang = lang

    async def publish(self, display_name: str, answers: Sequence[AnswerRecord]) -> SendResult:
        """Отправить отчёт; длинный отчёт уходит несколькими сообщениями"""
        result = None
        for part in build_summary_parts(display_name, answers, self.lang):
            result = await self.messenger.send_to_chat(self.team_chat_id, part)
            if not result.ok:
                # Повторной отправки нет
                logger.error(
                    f"Не удалось опубликовать отчёт {display_name}: {result.error} {result.description}"
                )
                return result

        logger.info(f"Отчёт {display_name} опубликован в {self.team_chat_id}")
        return result
