# /app/services/database_service.py

from typing import List, Optional, Generator, Tuple
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db, ping
from app.db.models.chat_models import ChatSession, ChatMessage, MessageRole, FileKind

# --- Repository Imports ---
from .database_helpers.chat_repository_sql import ChatRepositorySQL


class DatabaseService:
    """
    The session store used by every service. Routers receive it through
    `get_db_service`; services never touch SQLAlchemy directly.
    """

    def __init__(self, db_session: Session):
        self.db_session = db_session
        self.chat_repo = ChatRepositorySQL(db_session)

    # --- CHAT SESSION METHODS (DELEGATED) ---
    def create_chat_session(self, title: str, user_id: Optional[str] = None, session_id: Optional[str] = None) -> ChatSession: return self.chat_repo.create_session(title, user_id, session_id)
    def get_chat_session_by_id(self, session_id: str) -> Optional[ChatSession]: return self.chat_repo.get_session_by_id(session_id)
    def get_or_create_chat_session(self, session_id: str, title: str) -> Tuple[ChatSession, bool]: return self.chat_repo.get_or_create_session(session_id, title)
    def get_chat_sessions_with_messages(self) -> List[ChatSession]: return self.chat_repo.get_sessions_with_messages()
    def touch_chat_session(self, session_id: str) -> None: self.chat_repo.touch_session(session_id)
    def delete_chat_session(self, session_id: str) -> bool: return self.chat_repo.delete_session_by_id(session_id)
    def delete_all_chat_sessions(self) -> int: return self.chat_repo.delete_all_sessions()

    # --- CHAT MESSAGE METHODS (DELEGATED) ---
    def add_chat_message(
        self,
        session_id: str,
        role: MessageRole,
        content: str,
        file_name: Optional[str] = None,
        file_type: Optional[FileKind] = None,
    ) -> ChatMessage:
        return self.chat_repo.add_message(session_id, role, content, file_name, file_type)

    def get_messages_by_session_id(self, session_id: str, limit: Optional[int] = None) -> List[ChatMessage]:
        return self.chat_repo.get_messages_by_session_id(session_id, limit)

    # --- HEALTH ---
    def ping(self) -> None: ping(self.db_session)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
