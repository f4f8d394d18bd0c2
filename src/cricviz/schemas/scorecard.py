"""Pydantic schemas for innings scorecards.

A batting scorecard row is ``[name, is_out, runs, balls, fours, sixes]``::

    [
        ["Rohit Sharma", True, 26, 77, 3, 1],
        ["Shubman Gill", True, 50, 101, 8, 0],
        ["Jasprit Bumrah", False, 0, 2, 0, 0],
    ]

A bowling scorecard row is ``[name, balls_bowled, maidens, runs_given, wickets]``::

    [
        ["Mitchell Starc", 114, 7, 61, 1],
        ["Josh Hazlewood", 126, 10, 43, 2],
    ]
"""

from typing import Any, List, Sequence, Tuple

from pydantic import BaseModel, Field, model_validator


BATTING_ROW_FIELDS: Tuple[str, ...] = ("name", "was_out", "runs", "balls", "fours", "sixes")
BOWLING_ROW_FIELDS: Tuple[str, ...] = ("name", "balls_bowled", "maidens", "runs_given", "wickets")


def _row_to_dict(row: Any, fields: Sequence[str]) -> Any:
    """Map a fixed-arity row onto field names; other values pass through."""
    if isinstance(row, (list, tuple)):
        if len(row) != len(fields):
            raise ValueError(
                f"Expected {len(fields)} values ({', '.join(fields)}), got {len(row)}: {row!r}"
            )
        return dict(zip(fields, row))
    return row


class BattingEntry(BaseModel):
    """One batter's line in an innings."""

    name: str = Field(..., min_length=1, max_length=100, description="Player name")
    was_out: bool = Field(..., description="Whether the batter was dismissed")
    runs: int = Field(..., ge=0, description="Runs scored")
    balls: int = Field(..., ge=0, description="Balls faced")
    fours: int = Field(0, ge=0, description="Fours hit")
    sixes: int = Field(0, ge=0, description="Sixes hit")

    @model_validator(mode="before")
    @classmethod
    def parse_row(cls, data):
        return _row_to_dict(data, BATTING_ROW_FIELDS)

    @classmethod
    def from_row(cls, row: Any) -> "BattingEntry":
        if isinstance(row, cls):
            return row
        return cls.model_validate(row)


class BowlingEntry(BaseModel):
    """One bowler's figures in an innings."""

    name: str = Field(..., min_length=1, max_length=100, description="Player name")
    balls_bowled: int = Field(..., ge=0, description="Balls bowled")
    maidens: int = Field(0, ge=0, description="Maiden overs bowled")
    runs_given: int = Field(..., ge=0, description="Runs conceded")
    wickets: int = Field(..., ge=0, le=10, description="Wickets taken")

    @model_validator(mode="before")
    @classmethod
    def parse_row(cls, data):
        return _row_to_dict(data, BOWLING_ROW_FIELDS)

    @classmethod
    def from_row(cls, row: Any) -> "BowlingEntry":
        if isinstance(row, cls):
            return row
        return cls.model_validate(row)


class InningsScorecard(BaseModel):
    """Both scorecards of one innings, as read from a scorecard file."""

    batting: List[BattingEntry] = Field(..., min_length=2, max_length=11)
    bowling: List[BowlingEntry] = Field(default_factory=list)
