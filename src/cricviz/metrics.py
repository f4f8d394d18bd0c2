"""Derived batting metrics computed from a player's accumulated counters.

Both functions are total: when the counters they need are missing they
return ``None`` instead of raising, so "cannot be computed" stays distinct
from zero.
"""

from typing import Any, Optional, Union


def batting_average(record: Any) -> Optional[Union[int, float]]:
    """Runs scored divided by the number of innings the player was out in.

    Returns ``None`` if any of runs scored, innings batted and not outs is
    missing, or if the player has not batted yet. A player who was never
    dismissed gets their runs scored back as is.
    """
    runs_scored = getattr(record, "runs_scored", None)
    innings_batted = getattr(record, "innings_batted", None)
    not_out = getattr(record, "not_out", None)

    if runs_scored is None or innings_batted is None or not_out is None:
        return None
    if innings_batted == 0:
        return None

    dismissals = innings_batted - not_out
    if dismissals == 0:
        return runs_scored
    return runs_scored * 1.0 / dismissals


def batting_strike_rate(record: Any) -> Optional[float]:
    """Runs scored per 100 balls faced.

    Returns ``None`` if innings batted, runs scored or balls faced is missing,
    or if no balls faced are recorded (including historical data gaps for
    players who have batted).
    """
    innings_batted = getattr(record, "innings_batted", None)
    runs_scored = getattr(record, "runs_scored", None)
    balls_faced = getattr(record, "balls_faced", None)

    if innings_batted is None or runs_scored is None:
        return None
    if balls_faced is None or balls_faced == 0:
        return None

    return (runs_scored * 100.0) / float(balls_faced)
