# /app/routers/sessions_router.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..core.exceptions import AppError
from ..models import chatbot_model
from ..services import chatbot_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[chatbot_model.ChatSessionDetail],
    summary="Get Chat History",
    description="Lists every session that has at least one message, most recently active first."
)
def get_chat_sessions(
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return chatbot_service.list_chat_sessions(db)
    except Exception as e:
        logger.exception("Error fetching sessions")
        raise AppError("Failed to fetch sessions", details=str(e))


@router.post(
    "",
    response_model=chatbot_model.ChatSessionSummary,
    summary="Create a New Chat Session",
)
def create_chat_session(
    request: chatbot_model.NewChatSessionRequest,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return chatbot_service.start_new_chat_session(request.title, db)
    except Exception as e:
        logger.exception("Error creating session")
        raise AppError("Failed to create session", details=str(e))


@router.delete(
    "",
    response_model=chatbot_model.ClearSessionsResponse,
    summary="Clear All Chat Sessions",
)
def clear_chat_sessions(
    db: DatabaseService = Depends(get_db_service)
):
    try:
        deleted = chatbot_service.clear_chat_sessions(db)
    except Exception as e:
        logger.exception("Error clearing sessions")
        raise AppError("Failed to clear sessions", details=str(e))
    return chatbot_model.ClearSessionsResponse(success=True, deleted=deleted)


@router.get(
    "/{session_id}",
    response_model=chatbot_model.ChatSessionDetail,
    summary="Get a Single Chat Session with History",
    responses={404: {"model": chatbot_model.ErrorResponse}},
)
def get_chat_session_details(
    session_id: str,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        return chatbot_service.get_chat_session_details(session_id, db)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error fetching session %s", session_id)
        raise AppError("Failed to fetch session", details=str(e))


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a Chat Session",
    description="Permanently deletes a chat session and all of its messages.",
    responses={404: {"model": chatbot_model.ErrorResponse}},
)
def delete_chat_session(
    session_id: str,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        chatbot_service.delete_chat_session(session_id, db)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error deleting session %s", session_id)
        raise AppError("Failed to delete session", details=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
