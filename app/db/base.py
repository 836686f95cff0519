# /app/db/base.py

# Central registry for all SQLAlchemy models.
# Importing them here guarantees Base.metadata knows about every table
# before init_db runs create_all.

from .base_class import Base

from .models.chat_models import ChatSession, ChatMessage
