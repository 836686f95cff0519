# /app/services/database_helpers/chat_repository_sql.py

import uuid
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from app.db.models.chat_models import ChatSession, ChatMessage, MessageRole, FileKind


class ChatRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Chat Session Methods ---
    def create_session(self, title: str, user_id: Optional[str] = None, session_id: Optional[str] = None) -> ChatSession:
        new_session = ChatSession(
            id=session_id or f"session_{uuid.uuid4().hex[:16]}",
            title=title,
            user_id=user_id,
        )
        self.db.add(new_session)
        self.db.commit()
        self.db.refresh(new_session)
        return new_session

    def get_session_by_id(self, session_id: str) -> Optional[ChatSession]:
        return self.db.query(ChatSession).filter(ChatSession.id == session_id).first()

    def get_or_create_session(self, session_id: str, title: str) -> Tuple[ChatSession, bool]:
        """Returns the session and whether this call inserted it."""
        existing = self.get_session_by_id(session_id)
        if existing is not None:
            return existing, False
        try:
            return self.create_session(title, session_id=session_id), True
        except IntegrityError:
            # A concurrent request inserted the same id first.
            self.db.rollback()
            existing = self.get_session_by_id(session_id)
            if existing is None:
                raise
            return existing, False

    def get_sessions_with_messages(self) -> List[ChatSession]:
        return (
            self.db.query(ChatSession)
            .filter(ChatSession.messages.any())
            .options(selectinload(ChatSession.messages))
            .order_by(ChatSession.updated_at.desc())
            .all()
        )

    def touch_session(self, session_id: str) -> None:
        session = self.get_session_by_id(session_id)
        if session:
            session.updated_at = datetime.now(timezone.utc)
            self.db.commit()

    def delete_session_by_id(self, session_id: str) -> bool:
        session = self.get_session_by_id(session_id)
        if session:
            self.db.delete(session)
            self.db.commit()
            return True
        return False

    def delete_all_sessions(self) -> int:
        # ORM-level delete so the message cascade runs on every backend.
        sessions = self.db.query(ChatSession).all()
        for session in sessions:
            self.db.delete(session)
        self.db.commit()
        return len(sessions)

    # --- Chat Message Methods ---
    def add_message(
        self,
        session_id: str,
        role: MessageRole,
        content: str,
        file_name: Optional[str] = None,
        file_type: Optional[FileKind] = None,
    ) -> ChatMessage:
        new_message = ChatMessage(
            session_id=session_id,
            role=role,
            content=content,
            file_name=file_name,
            file_type=file_type,
        )
        self.db.add(new_message)
        self.db.commit()
        self.db.refresh(new_message)
        return new_message

    def get_messages_by_session_id(self, session_id: str, limit: Optional[int] = None) -> List[ChatMessage]:
        """Messages oldest-first. With a limit, only the most recent `limit` are returned."""
        query = self.db.query(ChatMessage).filter(ChatMessage.session_id == session_id)
        if limit is None:
            return query.order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc()).all()
        newest_first = query.order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc()).limit(limit).all()
        return list(reversed(newest_first))
