# /app/models/chatbot_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from app.db.models.chat_models import MessageRole, FileKind


class ChatRequest(BaseModel):
    """
    Body of POST /api/chat. Both fields are optional at the schema level so a
    missing one is answered with the static 400 message rather than a 422.
    """
    model_config = ConfigDict(
        json_schema_extra={"example": {"message": "What is photosynthesis?", "sessionId": "session_1a2b3c4d5e6f7a8b"}}
    )

    message: Optional[str] = None
    sessionId: Optional[str] = None


class ChatResponse(BaseModel):
    summary: str = Field(..., description="The cleaned, plain-text answer of the assistant.")


class UploadResponse(BaseModel):
    summary: str = Field(..., description="The cleaned, plain-text answer of the assistant.")
    fileType: FileKind = Field(..., description="The kind detected from the uploaded file's extension.")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class ChatMessage(BaseModel):
    """A single persisted message, as returned inside a session."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    role: MessageRole
    content: str
    fileName: Optional[str] = Field(None, validation_alias="file_name")
    fileType: Optional[FileKind] = Field(None, validation_alias="file_type")
    createdAt: datetime = Field(..., validation_alias="created_at")


class ChatSessionSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    userId: Optional[str] = Field(None, validation_alias="user_id")
    createdAt: datetime = Field(..., validation_alias="created_at")
    updatedAt: datetime = Field(..., validation_alias="updated_at")


class ChatSessionDetail(ChatSessionSummary):
    """A session together with its complete, ordered message history."""
    messages: List[ChatMessage] = Field(default_factory=list)


class NewChatSessionRequest(BaseModel):
    title: Optional[str] = Field(None, description="Display title; defaults to 'New Chat'.")


class ClearSessionsResponse(BaseModel):
    success: bool
    deleted: int
