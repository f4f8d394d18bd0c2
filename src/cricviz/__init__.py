"""Cricviz - cumulative cricket player statistics."""

from .config import settings
from .database import get_database_engine, get_session
from .errors import CricvizError, PlayerNotFoundError
from .innings import update_innings
from .metrics import batting_average, batting_strike_rate

__all__ = [
    "settings",
    "get_database_engine",
    "get_session",
    "CricvizError",
    "PlayerNotFoundError",
    "update_innings",
    "batting_average",
    "batting_strike_rate",
]
