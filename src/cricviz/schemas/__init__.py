"""Pydantic schemas for data validation."""

from .cricketer import CricketerCreate, CricketerResponse, VALID_ROLES
from .scorecard import BattingEntry, BowlingEntry, InningsScorecard

__all__ = [
    "CricketerCreate",
    "CricketerResponse",
    "VALID_ROLES",
    "BattingEntry",
    "BowlingEntry",
    "InningsScorecard",
]
