"""API routers."""

from .contents import router as contents_router
from .conversations import router as conversations_router
from .health import router as health_router
from .messages import router as messages_router
from .search import router as search_router

__all__ = [
    "contents_router",
    "conversations_router",
    "health_router",
    "messages_router",
    "search_router",
]
