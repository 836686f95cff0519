# /app/db/models/chat_models.py

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship

from ..base_class import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageRole(str, enum.Enum):
    USER = "USER"
    ASSISTANT = "ASSISTANT"


class FileKind(str, enum.Enum):
    TEXT = "TEXT"
    PDF = "PDF"
    DOCX = "DOCX"
    AUDIO = "AUDIO"


class ChatSession(Base):
    __tablename__ = "chatsessions"
    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    user_id = Column(String, index=True, nullable=True)  # anonymous sessions are allowed
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    messages = relationship(
        "ChatMessage",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by=lambda: [ChatMessage.created_at, ChatMessage.id],
    )


class ChatMessage(Base):
    """An immutable message. Rows are only ever inserted, never updated."""
    __tablename__ = "chatmessages"
    # Integer key doubles as the insertion-order tiebreak for equal timestamps.
    id = Column(Integer, primary_key=True, autoincrement=True)
    session_id = Column(String, ForeignKey("chatsessions.id", ondelete="CASCADE"), index=True, nullable=False)
    role = Column(Enum(MessageRole, name="message_role"), nullable=False)
    content = Column(Text, nullable=False)
    file_name = Column(String, nullable=True)
    file_type = Column(Enum(FileKind, name="file_kind"), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    session = relationship("ChatSession", back_populates="messages")
