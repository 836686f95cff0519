# /tests/test_prompt_composer.py

from app.db.models.chat_models import FileKind
from app.services import prompt_composer, prompt_library

TRANSCRIPT = "\n\nPrevious conversation in this session:\nUser: hi\n\nAssistant: hello\n\n"


def test_chat_prompt_orders_persona_transcript_and_message():
    prompt = prompt_composer.compose_chat_prompt(TRANSCRIPT, "What is 2+2?")

    persona_at = prompt.index("You are NotesAura AI")
    transcript_at = prompt.index("Previous conversation in this session:")
    message_at = prompt.index("User's current message: What is 2+2?")

    assert persona_at == 0
    assert persona_at < transcript_at < message_at
    assert prompt.endswith(prompt_library.CLOSING_REMINDER)
    assert "9. REMEMBER the conversation history and refer to previous topics discussed" in prompt


def test_chat_prompt_without_history_has_no_transcript_marker():
    prompt = prompt_composer.compose_chat_prompt("", "Hi")

    assert "Previous conversation" not in prompt
    assert "User's current message: Hi" in prompt


def test_chat_prompt_keeps_braces_in_user_text():
    prompt = prompt_composer.compose_chat_prompt("", "What does {x | x > 0} mean?")
    assert "{x | x > 0}" in prompt


def test_text_upload_prompt_places_instructions_before_extracted_text():
    """
    GIVEN: a .txt upload with custom instructions.
    WHEN:  the upload prompt is composed.
    THEN:  both appear verbatim, instructions first.
    """
    prompt = prompt_composer.compose_text_upload_prompt(
        "", "notes.txt", "Photosynthesis converts light to energy", "list 3 key terms"
    )

    instructions_at = prompt.index("list 3 key terms")
    content_at = prompt.index("Photosynthesis converts light to energy")
    assert instructions_at < content_at
    assert "File content:\nPhotosynthesis converts light to energy" in prompt


def test_text_upload_prompt_defaults_to_summarizing():
    prompt = prompt_composer.compose_text_upload_prompt(TRANSCRIPT, "notes.md", "Cells divide by mitosis.")

    assert 'Please summarize the following content from the file "notes.md":\n\nCells divide by mitosis.' in prompt
    assert "10. Connect new file content with previously discussed materials when relevant" in prompt
    assert prompt.index("Previous conversation") < prompt.index("Please summarize")


def test_pdf_prompt_asks_for_analysis_without_audio_rules():
    prompt = prompt_composer.compose_media_upload_prompt("", "lecture.pdf", FileKind.PDF)

    assert 'Please analyze and summarize the content of this PDF document titled "lecture.pdf".' in prompt
    assert "transcribe the ENTIRE audio" not in prompt
    assert "Make sure to process the complete audio" not in prompt


def test_audio_prompt_demands_complete_transcription():
    prompt = prompt_composer.compose_media_upload_prompt("", "class.m4a", FileKind.AUDIO)

    assert "transcribe and summarize the complete content of this audio file" in prompt
    assert "Make sure to process the complete audio from beginning to end." in prompt
    assert "11. For audio files, transcribe the ENTIRE audio content completely from start to finish" in prompt
    assert "12. Do not skip any parts of the audio" in prompt


def test_media_prompt_with_instructions_quotes_them():
    prompt = prompt_composer.compose_media_upload_prompt(
        TRANSCRIPT, "lecture.pdf", FileKind.PDF, "make flashcards"
    )

    assert 'uploaded a PDF document titled "lecture.pdf" with the following specific instructions:' in prompt
    assert '"make flashcards"' in prompt
    assert "Please analyze and summarize" not in prompt
