# /app/services/context_assembler.py

from typing import List, NamedTuple, Optional

from app.core import config
from app.db.models.chat_models import MessageRole
from .database_service import DatabaseService

TRANSCRIPT_MARKER = "\n\nPrevious conversation in this session:\n"
UPLOAD_CLOSING_LINE = "Based on the conversation above, continue helping the user with their studies."


class ContextEntry(NamedTuple):
    role: MessageRole
    content: str


def fetch_context(session_id: str, db: DatabaseService, limit: int = config.CONTEXT_MESSAGE_LIMIT) -> List[ContextEntry]:
    """
    Returns at most the last `limit` messages of a session, oldest first.
    An unknown or empty session simply has no context.
    """
    messages = db.get_messages_by_session_id(session_id, limit=limit)
    return [ContextEntry(role=MessageRole(m.role), content=m.content) for m in messages]


def _speaker(role: MessageRole) -> str:
    return "User" if role == MessageRole.USER else "Assistant"


def render_transcript(
    entries: List[ContextEntry],
    char_limit: Optional[int] = None,
    closing_line: Optional[str] = None,
) -> str:
    if not entries:
        return ""

    transcript = TRANSCRIPT_MARKER
    for entry in entries:
        content = entry.content
        if char_limit is not None and len(content) > char_limit:
            content = content[:char_limit] + "..."
        transcript += f"{_speaker(entry.role)}: {content}\n\n"

    if closing_line:
        transcript += f"\n{closing_line}\n"
    return transcript


def render_chat_transcript(entries: List[ContextEntry]) -> str:
    """Full message bodies; used when the new input is plain text."""
    return render_transcript(entries)


def render_upload_transcript(entries: List[ContextEntry]) -> str:
    """Bodies clipped to keep the prompt small next to an uploaded file."""
    return render_transcript(
        entries,
        char_limit=config.UPLOAD_CONTEXT_CHAR_LIMIT,
        closing_line=UPLOAD_CLOSING_LINE,
    )
