# /app/services/gemini_service.py

import logging
from typing import Optional

import google.generativeai as genai

from app.core import config
from app.core.exceptions import AIConfigurationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Thin wrapper over the Gemini SDK. One instance serves the whole process;
    the model name is chosen per call so chat and uploads can differ.
    """

    def __init__(self, api_key: str):
        genai.configure(api_key=api_key)
        logger.info("Initialized Google Generative AI with API key: %s...", api_key[:10])

    @staticmethod
    def _response_text(response) -> str:
        # A blocked or empty candidate has no parts; `.text` would raise.
        if not response.parts:
            return ""
        return response.text

    async def generate_text(self, prompt: str, model_name: str) -> str:
        """The workhorse for text-only, non-streaming requests."""
        model = genai.GenerativeModel(model_name)
        logger.info("Sending prompt to Gemini model %s (%d chars)", model_name, len(prompt))
        response = await model.generate_content_async(prompt)
        logger.info("Received response from Gemini model %s", model_name)
        return self._response_text(response)

    async def generate_with_attachment(self, prompt: str, data: bytes, mime_type: str, model_name: str) -> str:
        """
        Multi-modal request: the instruction plus one inline binary part.
        The SDK base64-encodes the bytes on the wire.
        """
        model = genai.GenerativeModel(model_name)
        content = [prompt, {"mime_type": mime_type, "data": data}]
        logger.info(
            "Sending %s attachment (%d bytes) to Gemini model %s", mime_type, len(data), model_name
        )
        response = await model.generate_content_async(content)
        logger.info("Received multi-modal response from Gemini model %s", model_name)
        return self._response_text(response)


# --- PROCESS-WIDE CLIENT ---
_client: Optional[GeminiClient] = None


def init_gemini_client(api_key: Optional[str] = None) -> Optional[GeminiClient]:
    """Builds the shared client. Called once from the application lifespan."""
    global _client
    api_key = api_key if api_key is not None else config.GEMINI_API_KEY
    if not api_key:
        logger.error("GEMINI_API_KEY not found in environment variables")
        _client = None
        return None
    _client = GeminiClient(api_key)
    return _client


def get_gemini_client() -> GeminiClient:
    if _client is None:
        raise AIConfigurationError("AI service not properly configured")
    return _client
