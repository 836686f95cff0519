# /app/services/document_extractor.py

import io
import logging
import os

from docx import Document as DocxDocument

from app.db.models.chat_models import FileKind

logger = logging.getLogger(__name__)

# Returned instead of text when the model must read the raw file itself.
MULTIMODAL_SENTINEL = "__DELEGATE_TO_MULTIMODAL__"

_EXTENSION_KINDS = {
    "txt": FileKind.TEXT,
    "md": FileKind.TEXT,
    "pdf": FileKind.PDF,
    "doc": FileKind.DOCX,
    "docx": FileKind.DOCX,
    "mp3": FileKind.AUDIO,
    "wav": FileKind.AUDIO,
    "m4a": FileKind.AUDIO,
    "ogg": FileKind.AUDIO,
    "webm": FileKind.AUDIO,
    "flac": FileKind.AUDIO,
    "aac": FileKind.AUDIO,
}

AUDIO_MIME_TYPES = {
    "mp3": "audio/mp3",
    "wav": "audio/wav",
    "m4a": "audio/mp4",
    "ogg": "audio/ogg",
    "webm": "audio/webm",
    "flac": "audio/flac",
    "aac": "audio/aac",
}
DEFAULT_AUDIO_MIME_TYPE = "audio/mp3"
PDF_MIME_TYPE = "application/pdf"


def _extension(filename: str) -> str:
    return os.path.splitext(filename.lower())[1].lstrip(".")


def detect_file_kind(filename: str) -> FileKind:
    """Unrecognised extensions are treated as plain text."""
    return _EXTENSION_KINDS.get(_extension(filename), FileKind.TEXT)


def get_audio_mime_type(filename: str) -> str:
    return AUDIO_MIME_TYPES.get(_extension(filename), DEFAULT_AUDIO_MIME_TYPE)


def get_media_mime_type(file_kind: FileKind, filename: str) -> str:
    if file_kind == FileKind.PDF:
        return PDF_MIME_TYPE
    return get_audio_mime_type(filename)


def _extract_text_from_docx(file_bytes: bytes, filename: str) -> str:
    try:
        document = DocxDocument(io.BytesIO(file_bytes))
        text = "\n".join(paragraph.text for paragraph in document.paragraphs).strip()
    except Exception as e:
        # Legacy .doc files and corrupt archives end up here.
        logger.warning("Could not extract text from DOCX %s: %s", filename, e)
        return (
            f"[Document: {filename}]\n\n"
            "The text of this document could not be extracted. "
            "It appears to contain study materials that need to be summarized."
        )
    if not text:
        return f"Extracted text from {filename}.\n\n[The document did not contain any readable paragraphs.]"
    return text


def extract_text(file_bytes: bytes, filename: str) -> str:
    """
    Returns the text content of an upload, or MULTIMODAL_SENTINEL for
    PDF and audio files, which are sent to the model as attachments.
    """
    file_kind = detect_file_kind(filename)

    if file_kind in (FileKind.PDF, FileKind.AUDIO):
        return MULTIMODAL_SENTINEL
    if file_kind == FileKind.DOCX:
        return _extract_text_from_docx(file_bytes, filename)
    return file_bytes.decode("utf-8", errors="replace")
