"""Архив опубликованных отчётов"""
from datetime import datetime
from typing import Dict, List, Sequence
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from models import Report, ReportAnswer
from services.session import AnswerRecord


class StandupArchive:
    """Сохранение и выборка отчётов стендапа"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save_report(
        self,
        cycle_id: str,
        participant_id: int,
        display_name: str,
        answers: Sequence[AnswerRecord],
        posted: bool = True,
    ) -> Report:
        """Сохранить отчёт участника вместе с ответами"""
        report = Report(
            cycle_id=cycle_id,
            participant_id=participant_id,
            display_name=display_name,
            posted=posted,
        )
        report.answers = [
            ReportAnswer(position=i, question=a.question, color=a.color, answer=a.answer)
            for i, a in enumerate(answers)
        ]
        self.session.add(report)
        await self.session.commit()
        return report

    async def get_total_reports(self, cycle_id: str = None) -> int:
        """Количество отчётов (всего или за цикл)"""
        query = select(func.count(Report.id))
        if cycle_id:
            query = query.where(Report.cycle_id == cycle_id)

        result = await self.session.execute(query)
        return result.scalar() or 0

    async def get_recent_reports(self, limit: int = 10) -> List[Report]:
        """Последние отчёты, новые первыми"""
        query = (
            select(Report)
            .options(selectinload(Report.answers))
            .order_by(Report.created_at.desc(), Report.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def generate_history_text(self, limit: int = 10) -> List[str]:
        """Строки для команды /history"""
        lines = []
        for report in await self.get_recent_reports(limit):
            created = report.created_at.strftime("%Y-%m-%d %H:%M") if report.created_at else ""
            mark = "" if report.posted else " ⚠️"
            lines.append(
                f"• {created} — {report.display_name or report.participant_id} "
                f"({len(report.answers)} отв.){mark}"
            )
        return lines

    async def export_to_csv_data(self, cycle_id: str = None) -> List[Dict]:
        """Подготовить данные для экспорта в CSV: строка на каждый ответ"""
        query = (
            select(Report)
            .options(selectinload(Report.answers))
            .order_by(Report.id)
        )
        if cycle_id:
            query = query.where(Report.cycle_id == cycle_id)

        result = await self.session.execute(query)

        csv_data = []
        for report in result.scalars().all():
            created = report.created_at.strftime("%Y-%m-%d %H:%M:%S") if report.created_at else ""
            for answer in report.answers:
                csv_data.append({
                    "cycle_id": report.cycle_id,
                    "participant_id": report.participant_id,
                    "display_name": report.display_name or "",
                    "created_at": created,
                    "position": answer.position + 1,
                    "question": answer.question,
                    "answer": answer.answer,
                })

        return csv_data


CSV_FIELDS = ["cycle_id", "participant_id", "display_name", "created_at", "position", "question", "answer"]


def export_filename(now: datetime = None) -> str:
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"exports/standup_{timestamp}.csv"
