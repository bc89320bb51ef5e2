"""Database package initialization."""

from .connection import SessionLocal, engine, get_db, get_session, get_session_context
from .models import (
    Base,
    Competition,
    Contract,
    Manager,
    Match,
    Player,
    PlayerStats,
    Season,
    Stadium,
    Trophy,
)

__all__ = [
    "Base",
    "Competition",
    "Contract",
    "Manager",
    "Match",
    "Player",
    "PlayerStats",
    "Season",
    "SessionLocal",
    "Stadium",
    "Trophy",
    "engine",
    "get_db",
    "get_session",
    "get_session_context",
]
