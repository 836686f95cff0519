# /app/core/config.py

import os
from dotenv import load_dotenv

# --- ENVIRONMENT LOADING ---
# Values from a local .env file are picked up for development; real
# environment variables always win.
load_dotenv()

# --- DATABASE ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./notesaura.db")

# --- GENERATIVE AI BACKEND ---
# The key is optional at import time. A missing key is reported per request
# as a configuration error before any call to the model is attempted.
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

# The chat endpoint and the upload endpoint run on separately configured models.
GEMINI_CHAT_MODEL = os.getenv("GEMINI_CHAT_MODEL", "models/gemini-flash-latest")
GEMINI_UPLOAD_MODEL = os.getenv("GEMINI_UPLOAD_MODEL", "gemini-2.0-flash")

# --- RUNTIME ---
APP_ENV = os.getenv("APP_ENV", "production")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")

# --- CONVERSATION CONTEXT ---
CONTEXT_MESSAGE_LIMIT = 20
UPLOAD_CONTEXT_CHAR_LIMIT = 200

DEFAULT_SESSION_TITLE = "New Chat"


def is_development() -> bool:
    return APP_ENV.lower() == "development"
