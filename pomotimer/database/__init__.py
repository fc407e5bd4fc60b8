"""Database package."""

from .db import configure_engine, get_session, init_db
from .models import KeyValue

__all__ = ["configure_engine", "get_session", "init_db", "KeyValue"]
