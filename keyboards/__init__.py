from .common import get_team_chat_keyboard

__all__ = ["get_team_chat_keyboard"]
