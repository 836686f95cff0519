# /tests/test_generation_dispatcher.py

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.db.models.chat_models import FileKind
from app.services import generation_dispatcher
from app.services.generation_dispatcher import GenerationOutcome, EMPTY_RESPONSE_TEXT


@pytest.fixture
def ai_client():
    client = MagicMock()
    client.generate_text = AsyncMock(return_value="Hi 👋")
    client.generate_with_attachment = AsyncMock(return_value="PDF summary 📚")
    return client


@pytest.mark.asyncio
async def test_text_path_returns_ok(ai_client):
    result = await generation_dispatcher.dispatch_text(ai_client, "prompt", "chat-model")

    assert result.outcome == GenerationOutcome.OK
    assert result.text == "Hi 👋"
    ai_client.generate_text.assert_awaited_once_with("prompt", "chat-model")


@pytest.mark.asyncio
async def test_text_path_reports_backend_failure_as_error(ai_client):
    ai_client.generate_text.side_effect = RuntimeError("quota exceeded")

    result = await generation_dispatcher.dispatch_text(ai_client, "prompt", "chat-model")

    assert result.is_error
    assert result.reason == "quota exceeded"
    assert result.text == ""


@pytest.mark.asyncio
async def test_empty_model_answer_becomes_apology(ai_client):
    ai_client.generate_text.return_value = ""

    result = await generation_dispatcher.dispatch_text(ai_client, "prompt", "chat-model")

    assert result.outcome == GenerationOutcome.OK
    assert result.text == EMPTY_RESPONSE_TEXT


@pytest.mark.asyncio
async def test_multimodal_path_sends_bytes_and_mime_type(ai_client):
    result = await generation_dispatcher.dispatch_multimodal(
        ai_client, "prompt", b"%PDF", "application/pdf", "lecture.pdf", FileKind.PDF, "upload-model"
    )

    assert result.outcome == GenerationOutcome.OK
    assert result.text == "PDF summary 📚"
    ai_client.generate_with_attachment.assert_awaited_once_with("prompt", b"%PDF", "application/pdf", "upload-model")


@pytest.mark.asyncio
async def test_multimodal_failure_falls_back_without_raising(ai_client):
    """
    GIVEN: the backend rejects the attachment.
    WHEN:  the multi-modal path is dispatched.
    THEN:  a fallback message naming the file and the error is returned.
    """
    ai_client.generate_with_attachment.side_effect = RuntimeError("Request payload size exceeds the limit")

    result = await generation_dispatcher.dispatch_multimodal(
        ai_client, "prompt", b"ID3", "audio/mp3", "lecture-04.mp3", FileKind.AUDIO, "upload-model"
    )

    assert result.outcome == GenerationOutcome.FALLBACK
    assert "lecture-04.mp3" in result.text
    assert "audio file" in result.text
    assert "Request payload size exceeds the limit" in result.text
    assert not result.is_error


@pytest.mark.asyncio
async def test_fallback_without_error_text_suggests_retry(ai_client):
    ai_client.generate_with_attachment.side_effect = RuntimeError()

    result = await generation_dispatcher.dispatch_multimodal(
        ai_client, "prompt", b"%PDF", "application/pdf", "lecture.pdf", FileKind.PDF, "upload-model"
    )

    assert result.text.startswith('I\'ve received the PDF file "lecture.pdf"')
    assert result.text.endswith("Please try again or use a different file format.")
