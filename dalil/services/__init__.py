"""
Services module - Business logic and orchestration.

Services contain the core application logic and no HTTP concerns
(those belong in api/).
"""
from dalil.services.chat_service import ChatService

__all__ = [
    "ChatService",
]
