"""Модель опубликованного отчёта стендапа"""
from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from .database import Base


class Report(Base):
    __tablename__ = "standup_reports"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    cycle_id = Column(String, nullable=False)
    participant_id = Column(BigInteger, nullable=False, index=True)
    display_name = Column(String, nullable=True)
    posted = Column(Boolean, default=True)  # False, если публикация в чат не удалась
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Ответы в порядке вопросов
    answers = relationship(
        "ReportAnswer",
        back_populates="report",
        cascade="all, delete-orphan",
        order_by="ReportAnswer.position",
    )
    
    __table_args__ = (
        Index("idx_cycle_participant", "cycle_id", "participant_id"),
    )
    
    def __repr__(self):
        return f"<Report(id={self.id}, cycle={self.cycle_id}, participant={self.participant_id})>"
