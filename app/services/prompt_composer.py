# /app/services/prompt_composer.py

"""
Builds the single instruction string sent to the model.

Every prompt has the same shape: persona preamble, then the conversation
transcript (possibly empty), then the task for this request, then a closing
reminder. Nothing here does I/O.
"""

from typing import Optional

from app.db.models.chat_models import FileKind
from . import prompt_library


def _persona(*rule_blocks: str) -> str:
    return prompt_library.STUDY_ASSISTANT_PERSONA.format(behaviour_rules="\n".join(rule_blocks))


def _assemble(persona: str, transcript: str, task: str) -> str:
    return f"{persona}{transcript}\n\n{task}\n\n{prompt_library.CLOSING_REMINDER}"


def compose_chat_prompt(transcript: str, message: str) -> str:
    task = prompt_library.CHAT_TASK.format(message=message)
    return _assemble(_persona(prompt_library.CHAT_HISTORY_RULES), transcript, task)


def compose_text_upload_prompt(
    transcript: str,
    file_name: str,
    extracted_text: str,
    custom_instructions: Optional[str] = None,
) -> str:
    """Prompt for uploads whose text was extracted locally (TEXT, DOCX)."""
    if custom_instructions:
        task = prompt_library.TEXT_UPLOAD_CUSTOM_TASK.format(
            file_name=file_name,
            instructions=custom_instructions,
            content=extracted_text,
        )
    else:
        task = prompt_library.TEXT_UPLOAD_DEFAULT_TASK.format(file_name=file_name, content=extracted_text)
    return _assemble(_persona(prompt_library.UPLOAD_HISTORY_RULES), transcript, task)


def compose_media_upload_prompt(
    transcript: str,
    file_name: str,
    file_kind: FileKind,
    custom_instructions: Optional[str] = None,
) -> str:
    """
    Prompt for uploads the model reads itself (PDF, AUDIO). The file travels
    as an attachment, so no content is embedded here.
    """
    is_audio = file_kind == FileKind.AUDIO
    file_description = "audio file" if is_audio else "PDF document"

    if custom_instructions:
        task = prompt_library.MEDIA_UPLOAD_CUSTOM_TASK.format(
            file_description=file_description,
            file_name=file_name,
            instructions=custom_instructions,
        )
    else:
        task = prompt_library.MEDIA_UPLOAD_DEFAULT_TASK.format(
            task_description=prompt_library.AUDIO_TASK_DESCRIPTION if is_audio else prompt_library.PDF_TASK_DESCRIPTION,
            file_description=file_description,
            file_name=file_name,
            reminder=prompt_library.AUDIO_COMPLETENESS_REMINDER if is_audio else "",
        ).rstrip()

    rules = [prompt_library.UPLOAD_HISTORY_RULES]
    if is_audio:
        rules.append(prompt_library.AUDIO_TRANSCRIPTION_RULES)
    return _assemble(_persona(*rules), transcript, task)
