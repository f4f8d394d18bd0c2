"""Cricketer model holding a player's cumulative career statistics."""

from typing import Optional, Union

from sqlalchemy import CheckConstraint, Column, String, Integer
from sqlalchemy.orm import validates

from .base import Base
from .. import metrics


BATTING_COUNTERS = (
    "innings_batted",
    "not_out",
    "runs_scored",
    "balls_faced",
    "fours_scored",
    "sixes_scored",
    "high_score",
    "centuries",
    "half_centuries",
)

BOWLING_COUNTERS = (
    "innings_bowled",
    "balls_bowled",
    "runs_given",
    "wickets_taken",
)

COUNTER_FIELDS = ("matches",) + BATTING_COUNTERS + BOWLING_COUNTERS


class Cricketer(Base):
    """A player and their accumulated batting and bowling counters.

    Counters start at 0 unless given explicitly; ``None`` marks a value that
    is not known (e.g. balls faced for players from before it was recorded).
    """

    __tablename__ = "cricketers"

    # Identity and classification
    name = Column(String(100), nullable=False, unique=True, index=True)
    country = Column(String(50), nullable=True)
    role = Column(String(20), nullable=True)  # Batter, Bowler, All-rounder, Wicketkeeper

    matches = Column(Integer, default=0, nullable=True)

    # Batting
    innings_batted = Column(Integer, default=0, nullable=True)
    not_out = Column(Integer, default=0, nullable=True)
    runs_scored = Column(Integer, default=0, nullable=True)
    balls_faced = Column(Integer, default=0, nullable=True)
    fours_scored = Column(Integer, default=0, nullable=True)
    sixes_scored = Column(Integer, default=0, nullable=True)
    high_score = Column(Integer, default=0, nullable=True)
    centuries = Column(Integer, default=0, nullable=True)
    half_centuries = Column(Integer, default=0, nullable=True)

    # Bowling
    innings_bowled = Column(Integer, default=0, nullable=True)
    balls_bowled = Column(Integer, default=0, nullable=True)
    runs_given = Column(Integer, default=0, nullable=True)
    wickets_taken = Column(Integer, default=0, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "not_out IS NULL OR innings_batted IS NULL OR not_out <= innings_batted",
            name="ck_cricketer_not_out_le_innings",
        ),
    )

    def __init__(self, **kwargs):
        for field in COUNTER_FIELDS:
            kwargs.setdefault(field, 0)
        super().__init__(**kwargs)

    @validates("name")
    def validate_name(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError("Cricketer name cannot be empty")
        return value

    @validates(*COUNTER_FIELDS)
    def validate_counter(self, key, value):
        if value is not None and value < 0:
            raise ValueError(f"{key} cannot be negative, got {value}")
        if value is not None and key in ("not_out", "innings_batted"):
            not_out = value if key == "not_out" else self.not_out
            innings_batted = value if key == "innings_batted" else self.innings_batted
            if not_out is not None and innings_batted is not None and not_out > innings_batted:
                raise ValueError(
                    f"not_out ({not_out}) cannot exceed innings_batted ({innings_batted})"
                )
        return value

    @property
    def batting_average(self) -> Optional[Union[int, float]]:
        return metrics.batting_average(self)

    @property
    def batting_strike_rate(self) -> Optional[float]:
        return metrics.batting_strike_rate(self)

    def __repr__(self) -> str:
        return f"<Cricketer(name='{self.name}', country='{self.country}', matches={self.matches})>"
