"""Apply innings scorecards to cumulative player statistics.

Batting entries are applied first, in order, then bowling entries. Each
player is looked up, updated and persisted before the next entry is read;
there is no transaction across the batch. If a name cannot be resolved the
update stops there with ``PlayerNotFoundError`` and everything already
persisted stays persisted.

A name is expected to appear at most once per scorecard.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from loguru import logger

from .errors import PlayerNotFoundError
from .models import Cricketer
from .schemas import BattingEntry, BowlingEntry
from .store import PlayerStore


HALF_CENTURY = 50
CENTURY = 100


def _add(record: Cricketer, field: str, delta: int) -> None:
    current = getattr(record, field)
    if current is None:
        # unknown total stays unknown
        logger.warning(f"{record.name}: {field} is not recorded, leaving it unset")
        return
    setattr(record, field, current + delta)


def _resolve(store: PlayerStore, name: str) -> Cricketer:
    record = store.find_by_name(name)
    if record is None:
        logger.warning(f"Player not found: {name!r}")
        raise PlayerNotFoundError(name)
    return record


def apply_batting_entry(record: Cricketer, entry: BattingEntry) -> None:
    """Add one batting innings to ``record`` (no persistence)."""
    _add(record, "matches", 1)
    # innings_batted first so not_out never runs ahead of it
    _add(record, "innings_batted", 1)
    _add(record, "not_out", 0 if entry.was_out else 1)
    _add(record, "runs_scored", entry.runs)
    _add(record, "balls_faced", entry.balls)
    _add(record, "fours_scored", entry.fours)
    _add(record, "sixes_scored", entry.sixes)

    if record.high_score is not None and record.high_score < entry.runs:
        record.high_score = entry.runs

    if HALF_CENTURY <= entry.runs < CENTURY:
        _add(record, "half_centuries", 1)
    elif entry.runs >= CENTURY:
        _add(record, "centuries", 1)


def apply_bowling_entry(record: Cricketer, entry: BowlingEntry) -> None:
    """Add one bowling innings to ``record`` (no persistence).

    Maidens are part of a bowling row but no counter tracks them.
    """
    _add(record, "balls_bowled", entry.balls_bowled)
    _add(record, "runs_given", entry.runs_given)
    _add(record, "wickets_taken", entry.wickets)
    _add(record, "matches", 1)
    _add(record, "innings_bowled", 1)


def update_innings(
    store: PlayerStore,
    batting_scorecard: Iterable[Any],
    bowling_scorecard: Iterable[Any],
) -> Dict[str, int]:
    """Update player records with one innings' scorecards.

    Rows may be fixed-arity sequences or ``BattingEntry``/``BowlingEntry``
    objects. All rows are validated before any record is touched.

    Returns the number of batting and bowling entries applied.

    Raises:
        PlayerNotFoundError: a name has no record; later entries are skipped.
        pydantic.ValidationError: a row is malformed; nothing is applied.
    """
    batting: List[BattingEntry] = [BattingEntry.from_row(row) for row in batting_scorecard]
    bowling: List[BowlingEntry] = [BowlingEntry.from_row(row) for row in bowling_scorecard]

    stats = {"batting": 0, "bowling": 0}

    for entry in batting:
        batter = _resolve(store, entry.name)
        apply_batting_entry(batter, entry)
        store.persist(batter)
        stats["batting"] += 1
        logger.debug(f"Batting: {entry.name} {entry.runs} ({entry.balls})")

    for entry in bowling:
        bowler = _resolve(store, entry.name)
        apply_bowling_entry(bowler, entry)
        store.persist(bowler)
        stats["bowling"] += 1
        logger.debug(f"Bowling: {entry.name} {entry.wickets}/{entry.runs_given}")

    logger.info(f"Innings applied: {stats}")
    return stats
