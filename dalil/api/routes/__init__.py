"""
API Routes module - Endpoint definitions.

- chat.py   : The relay endpoint
- stats.py  : Usage statistics
- health.py : Health check endpoint
"""
from dalil.api.routes.chat import router as chat_router
from dalil.api.routes.health import router as health_router
from dalil.api.routes.stats import router as stats_router

__all__ = [
    "chat_router",
    "health_router",
    "stats_router",
]
