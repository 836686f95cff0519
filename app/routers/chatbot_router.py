# /app/routers/chatbot_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..core.exceptions import AppError, RequestValidationFailed, REQUIRED_FIELD_MESSAGES
from ..models import chatbot_model
from ..services import chatbot_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": chatbot_model.ErrorResponse, "description": "A required field is missing"},
    500: {"model": chatbot_model.ErrorResponse, "description": "AI backend or database failure"},
}


@router.post(
    "/chat",
    response_model=chatbot_model.ChatResponse,
    responses=_ERROR_RESPONSES,
    summary="Send a Chat Message",
    description="Answers a typed message using the recent history of the session as context."
)
async def send_chat_message(
    request: chatbot_model.ChatRequest,
    db: DatabaseService = Depends(get_db_service)
):
    if not request.message or not request.sessionId:
        raise RequestValidationFailed(REQUIRED_FIELD_MESSAGES["/api/chat"])

    try:
        summary = await chatbot_service.handle_chat_message(request.sessionId, request.message, db)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error in chat endpoint for session %s", request.sessionId)
        raise AppError(f"Failed to process message: {e}", details=str(e))
    return chatbot_model.ChatResponse(summary=summary)


@router.post(
    "/upload",
    response_model=chatbot_model.UploadResponse,
    responses=_ERROR_RESPONSES,
    summary="Upload a Study File",
    description="Summarizes an uploaded text, Markdown, PDF, Word or audio file, optionally following custom instructions."
)
async def upload_study_file(
    file: Optional[UploadFile] = File(None),
    sessionId: Optional[str] = Form(None),
    customInstructions: Optional[str] = Form(None),
    db: DatabaseService = Depends(get_db_service)
):
    if file is None or not file.filename or not sessionId:
        raise RequestValidationFailed(REQUIRED_FIELD_MESSAGES["/api/upload"])

    try:
        file_bytes = await file.read()
        summary, file_kind = await chatbot_service.handle_file_upload(
            session_id=sessionId,
            file_name=file.filename,
            file_bytes=file_bytes,
            custom_instructions=customInstructions or None,
            db=db,
        )
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error in upload endpoint for session %s", sessionId)
        raise AppError(f"Failed to process file: {e}", details=str(e))
    return chatbot_model.UploadResponse(summary=summary, fileType=file_kind)
