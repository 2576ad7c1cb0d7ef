from .common import router as common_router
from .admin import router as admin_router
from .standup import router as standup_router

__all__ = ["common_router", "admin_router", "standup_router"]
