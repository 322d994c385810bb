"""
Chat Routes - The relay endpoint.

  POST /api/chat

Every outcome is a `{"reply": ...}` body. Errors raised by the service
are rendered by the RelayException handler in main.py.
"""
from fastapi import APIRouter, Depends

from dalil.core.logging_config import get_logger
from dalil.models.chat import ChatRequest, ChatResponse
from dalil.services.chat_service import ChatService
from dalil.api.dependencies import get_chat_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chat"],
    responses={
        400: {"model": ChatResponse, "description": "Empty or too long message"},
        500: {"model": ChatResponse, "description": "Completion API failure"},
    }
)


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Ask the health-education assistant",
)
def send_message(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Forward a user message to the model and return its reply.

    The message is trimmed; an empty message is rejected before any
    upstream call. Sync handler: runs on the thread pool while the
    Groq call blocks.
    """
    reply = chat_service.process_message(request.message)
    return ChatResponse(reply=reply)
