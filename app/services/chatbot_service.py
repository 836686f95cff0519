# /app/services/chatbot_service.py

import asyncio
import logging
from typing import List, Optional, Tuple

from app.core import config
from app.core.exceptions import GenerationError, SessionNotFoundError
from app.db.models.chat_models import ChatSession, MessageRole, FileKind
from .database_service import DatabaseService
from . import (
    context_assembler,
    document_extractor,
    gemini_service,
    generation_dispatcher,
    prompt_composer,
    response_sanitizer,
)

logger = logging.getLogger(__name__)


# --- Helper Functions ---

def _generate_chat_name(first_message: str) -> str:
    words = first_message.split()
    if not words:
        return config.DEFAULT_SESSION_TITLE
    return " ".join(words[:5]) + ("..." if len(words) > 5 else "")


def _ensure_session(session_id: str, first_input: str, db: DatabaseService) -> None:
    """
    Sessions are created on the first interaction. A client that already
    holds a session id from POST /sessions keeps it; an unknown id is
    registered with a title taken from the first input.
    """
    _, created = db.get_or_create_chat_session(session_id, _generate_chat_name(first_input))
    if created:
        logger.info("Created chat session %s on first message", session_id)


def _persist_exchange(
    session_id: str,
    assistant_text: str,
    db: DatabaseService,
) -> None:
    db.add_chat_message(session_id, MessageRole.ASSISTANT, assistant_text)
    db.touch_chat_session(session_id)


def _upload_message_content(file_name: str, custom_instructions: Optional[str]) -> str:
    if custom_instructions:
        return f"Uploaded: {file_name}\n\nInstructions: {custom_instructions}"
    return f"Uploaded: {file_name}"


# --- Public Service Functions ---

async def handle_chat_message(session_id: str, message: str, db: DatabaseService) -> str:
    """
    Runs the full pipeline for a typed message and returns the cleaned answer.
    Raises AIConfigurationError before touching the database when no key is set,
    and GenerationError when the model call fails.
    """
    client = gemini_service.get_gemini_client()
    _ensure_session(session_id, message, db)

    history = context_assembler.fetch_context(session_id, db)
    db.add_chat_message(session_id, MessageRole.USER, message)

    transcript = context_assembler.render_chat_transcript(history)
    prompt = prompt_composer.compose_chat_prompt(transcript, message)

    result = await generation_dispatcher.dispatch_text(client, prompt, config.GEMINI_CHAT_MODEL)
    if result.is_error:
        raise GenerationError(f"Failed to process message: {result.reason}", details=result.reason)

    answer = response_sanitizer.clean_ai_response(result.text)
    _persist_exchange(session_id, answer, db)
    return answer


async def handle_file_upload(
    session_id: str,
    file_name: str,
    file_bytes: bytes,
    custom_instructions: Optional[str],
    db: DatabaseService,
) -> Tuple[str, FileKind]:
    """
    Summarizes (or follows the custom instructions for) an uploaded file.
    PDF and audio go to the model as attachments and degrade to a fallback
    message on failure; extracted text goes through the text path.
    """
    file_kind = document_extractor.detect_file_kind(file_name)
    extracted_text = await asyncio.to_thread(document_extractor.extract_text, file_bytes, file_name)

    client = gemini_service.get_gemini_client()
    _ensure_session(session_id, f"Uploaded: {file_name}", db)

    history = context_assembler.fetch_context(session_id, db)
    db.add_chat_message(
        session_id,
        MessageRole.USER,
        _upload_message_content(file_name, custom_instructions),
        file_name=file_name,
        file_type=file_kind,
    )

    transcript = context_assembler.render_upload_transcript(history)

    if extracted_text == document_extractor.MULTIMODAL_SENTINEL:
        prompt = prompt_composer.compose_media_upload_prompt(transcript, file_name, file_kind, custom_instructions)
        result = await generation_dispatcher.dispatch_multimodal(
            client,
            prompt,
            file_bytes,
            document_extractor.get_media_mime_type(file_kind, file_name),
            file_name,
            file_kind,
            config.GEMINI_UPLOAD_MODEL,
        )
    else:
        prompt = prompt_composer.compose_text_upload_prompt(transcript, file_name, extracted_text, custom_instructions)
        result = await generation_dispatcher.dispatch_text(client, prompt, config.GEMINI_UPLOAD_MODEL)
        if result.is_error:
            raise GenerationError(f"Failed to process file: {result.reason}", details=result.reason)

    answer = response_sanitizer.clean_ai_response(result.text)
    _persist_exchange(session_id, answer, db)
    return answer, file_kind


def start_new_chat_session(title: Optional[str], db: DatabaseService, user_id: Optional[str] = None) -> ChatSession:
    return db.create_chat_session(title or config.DEFAULT_SESSION_TITLE, user_id=user_id)


def list_chat_sessions(db: DatabaseService) -> List[ChatSession]:
    """Sessions that hold at least one message, most recently active first."""
    return db.get_chat_sessions_with_messages()


def get_chat_session_details(session_id: str, db: DatabaseService) -> ChatSession:
    session = db.get_chat_session_by_id(session_id)
    if session is None:
        raise SessionNotFoundError(f"Chat session with ID {session_id} not found.")
    return session


def delete_chat_session(session_id: str, db: DatabaseService) -> None:
    if not db.delete_chat_session(session_id):
        raise SessionNotFoundError(f"Chat session with ID {session_id} not found.")


def clear_chat_sessions(db: DatabaseService) -> int:
    deleted = db.delete_all_chat_sessions()
    logger.info("Cleared %d chat sessions", deleted)
    return deleted
