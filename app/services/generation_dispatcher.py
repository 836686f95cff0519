# /app/services/generation_dispatcher.py

"""
Sends composed prompts to the model and reports the outcome as a tagged
result instead of letting exceptions decide the control flow.

- Text path: OK, or ERROR when the backend fails (the caller turns it into a 500).
- Multi-modal path: OK, or FALLBACK with a readable message; it never fails.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from app.db.models.chat_models import FileKind
from .gemini_service import GeminiClient

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "Sorry, I could not generate a summary. Please try again."


class GenerationOutcome(str, enum.Enum):
    OK = "ok"
    FALLBACK = "fallback"
    ERROR = "error"


@dataclass(frozen=True)
class GenerationResult:
    outcome: GenerationOutcome
    text: str = ""
    reason: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "GenerationResult":
        return cls(GenerationOutcome.OK, text=text or EMPTY_RESPONSE_TEXT)

    @classmethod
    def fallback(cls, text: str, reason: str) -> "GenerationResult":
        return cls(GenerationOutcome.FALLBACK, text=text, reason=reason)

    @classmethod
    def error(cls, reason: str) -> "GenerationResult":
        return cls(GenerationOutcome.ERROR, reason=reason)

    @property
    def is_error(self) -> bool:
        return self.outcome == GenerationOutcome.ERROR


def _fallback_message(file_name: str, file_kind: FileKind, error: Exception) -> str:
    kind_label = "PDF" if file_kind == FileKind.PDF else "audio"
    detail = str(error) or "Please try again or use a different file format."
    return f"I've received the {kind_label} file \"{file_name}\", but I'm having trouble processing it directly. {detail}"


async def dispatch_text(client: GeminiClient, prompt: str, model_name: str) -> GenerationResult:
    try:
        text = await client.generate_text(prompt, model_name)
    except Exception as e:
        logger.exception("Text generation failed on model %s", model_name)
        return GenerationResult.error(str(e) or e.__class__.__name__)
    return GenerationResult.ok(text)


async def dispatch_multimodal(
    client: GeminiClient,
    prompt: str,
    data: bytes,
    mime_type: str,
    file_name: str,
    file_kind: FileKind,
    model_name: str,
) -> GenerationResult:
    try:
        text = await client.generate_with_attachment(prompt, data, mime_type, model_name)
    except Exception as e:
        logger.error("Error processing %s %s with Gemini: %s", file_kind.value, file_name, e)
        return GenerationResult.fallback(_fallback_message(file_name, file_kind, e), reason=str(e))
    return GenerationResult.ok(text)
