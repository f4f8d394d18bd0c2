"""Database models for the cricviz statistics engine."""

from .base import Base
from .cricketer import Cricketer, COUNTER_FIELDS, BATTING_COUNTERS, BOWLING_COUNTERS

__all__ = [
    "Base",
    "Cricketer",
    "COUNTER_FIELDS",
    "BATTING_COUNTERS",
    "BOWLING_COUNTERS",
]
