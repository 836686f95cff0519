# /app/services/response_sanitizer.py

import re

# Applied in this exact order; later patterns assume earlier ones already ran.
_MARKUP_RULES = [
    # Bold: **text** and __text__
    (re.compile(r"\*\*(.*?)\*\*"), r"\1"),
    (re.compile(r"__(.*?)__"), r"\1"),
    # Italic: *text* and _text_ (snake_case words are left alone)
    (re.compile(r"(?<!\*)\*(?!\*)(.*?)\*(?!\*)"), r"\1"),
    (re.compile(r"(?<!\w)_(?!_)(.+?)_(?!\w)"), r"\1"),
    # Header hashes at the start of a line, indented or not
    (re.compile(r"^[ \t]*#{1,6}\s+", re.MULTILINE), ""),
    # Quotation marks around terms (apostrophes inside words are kept)
    (re.compile(r'"([^"]+)"'), r"\1"),
    (re.compile(r"“([^”]+)”"), r"\1"),
    (re.compile(r"(?<!\w)'([^'\n]+)'(?!\w)"), r"\1"),
    # Fenced code blocks lose the fences and the language tag
    (re.compile(r"```.*?\n([\s\S]*?)```"), r"\1"),
    # Inline code
    (re.compile(r"`([^`]+)`"), r"\1"),
    # No more than one blank line in a row
    (re.compile(r"\n{3,}"), "\n\n"),
]


def _apply_rules(text: str) -> str:
    for pattern, replacement in _MARKUP_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def clean_ai_response(text: str) -> str:
    """
    Strips markdown artifacts from a model answer while keeping emoji and
    every other character of the content.

    Unwrapping code can expose markup (a header inside backticks), so the
    rules are re-applied until the text stops changing. Every rule only
    removes characters, which bounds the number of passes.
    """
    cleaned = _apply_rules(text)
    while True:
        again = _apply_rules(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again
