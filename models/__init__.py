from .database import init_db, get_session, async_session_maker
from .report import Report
from .report_answer import ReportAnswer

__all__ = ["init_db", "get_session", "async_session_maker", "Report", "ReportAnswer"]
