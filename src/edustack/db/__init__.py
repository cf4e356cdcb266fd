# src/edustack/db/__init__.py
from .base import Base
from .session import create_all, get_session, make_engine, make_sessionmaker

__all__ = ["Base", "create_all", "get_session", "make_engine", "make_sessionmaker"]
