"""Модель ответа в отчёте"""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship
from .database import Base


class ReportAnswer(Base):
    __tablename__ = "standup_answers"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(Integer, ForeignKey("standup_reports.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)  # 0, 1, 2... порядок вопросов
    question = Column(Text, nullable=False)
    color = Column(String, default="")
    answer = Column(Text, nullable=False)
    
    # Связь с отчётом
    report = relationship("Report", back_populates="answers")
    
    __table_args__ = (
        Index("idx_report_position", "report_id", "position"),
    )
    
    def __repr__(self):
        return f"<ReportAnswer(id={self.id}, position={self.position})>"
