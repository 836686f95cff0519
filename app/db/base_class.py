# /app/db/base_class.py

from sqlalchemy.orm import declarative_base

# All ORM models inherit from this Base so metadata.create_all sees every table.
Base = declarative_base()
