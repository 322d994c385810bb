"""
Request dependencies - Access to the objects owned by the application.

The stats tracker and chat service are created once in `create_app()`
and stored on `app.state`; handlers receive them through these
functions rather than importing module-level globals.
"""
from fastapi import Request

from dalil.core.config import Settings
from dalil.services.chat_service import ChatService
from dalil.stats.tracker import StatsTracker


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


def get_stats_tracker(request: Request) -> StatsTracker:
    return request.app.state.stats
