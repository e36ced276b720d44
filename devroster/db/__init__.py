"""Database package - all database-related code."""
from devroster.db.connection import init_db, get_db_session, close_db
from devroster.db.models import Base, DeveloperModel

__all__ = [
    "init_db",
    "get_db_session",
    "close_db",
    "Base",
    "DeveloperModel",
]
