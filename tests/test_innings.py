import pytest
from pydantic import ValidationError

from cricviz.errors import PlayerNotFoundError
from cricviz.innings import update_innings
from cricviz.models import Cricketer
from cricviz.schemas import BattingEntry, BowlingEntry


def test_batting_entry_adds_deltas(store, dravid):
    before = store.snapshot(dravid)

    stats = update_innings(store, [["Rahul Dravid", True, 26, 77, 3, 1]], [])

    assert stats == {"batting": 1, "bowling": 0}
    after = store.snapshot(dravid)
    assert after["not_out"] == before["not_out"]
    assert after["runs_scored"] == before["runs_scored"] + 26
    assert after["balls_faced"] == before["balls_faced"] + 77
    assert after["fours_scored"] == before["fours_scored"] + 3
    assert after["sixes_scored"] == before["sixes_scored"] + 1
    assert after["matches"] == before["matches"] + 1
    assert after["innings_batted"] == before["innings_batted"] + 1
    assert after["high_score"] == before["high_score"]
    assert after["centuries"] == before["centuries"]
    assert after["half_centuries"] == before["half_centuries"]


def test_not_out_increments_when_batter_survives(store, dravid):
    update_innings(store, [["Rahul Dravid", False, 12, 30, 1, 0]], [])
    assert dravid.not_out == 33
    assert dravid.not_out <= dravid.innings_batted


def test_applying_same_scorecard_twice_doubles_deltas(store, ponting):
    before = store.snapshot(ponting)
    scorecard = [["Ricky Ponting", True, 40, 60, 5, 0]]

    update_innings(store, scorecard, [])
    once = store.snapshot(ponting)
    update_innings(store, scorecard, [])
    twice = store.snapshot(ponting)

    assert once != twice
    assert twice["runs_scored"] == before["runs_scored"] + 80
    assert twice["balls_faced"] == before["balls_faced"] + 120
    assert twice["innings_batted"] == before["innings_batted"] + 2
    assert twice["matches"] == before["matches"] + 2


@pytest.mark.parametrize(
    "runs, halves, hundreds",
    [(75, 1, 0), (120, 0, 1), (49, 0, 0), (50, 1, 0), (99, 1, 0), (100, 0, 1), (0, 0, 0)],
)
def test_milestones_are_mutually_exclusive(store, starc, runs, halves, hundreds):
    update_innings(store, [["Mitchell Starc", True, runs, 150, 0, 0]], [])
    assert starc.half_centuries == halves
    assert starc.centuries == hundreds


def test_high_score_only_advances(store, dravid):
    update_innings(store, [["Rahul Dravid", True, 180, 300, 20, 0]], [])
    assert dravid.high_score == 270

    update_innings(store, [["Rahul Dravid", True, 271, 400, 30, 1]], [])
    assert dravid.high_score == 271


def test_bowling_entry_adds_deltas_and_ignores_maidens(store, starc):
    before = store.snapshot(starc)

    stats = update_innings(store, [], [["Mitchell Starc", 114, 7, 61, 1]])

    assert stats == {"batting": 0, "bowling": 1}
    after = store.snapshot(starc)
    assert after["balls_bowled"] == before["balls_bowled"] + 114
    assert after["runs_given"] == before["runs_given"] + 61
    assert after["wickets_taken"] == before["wickets_taken"] + 1
    assert after["matches"] == before["matches"] + 1
    assert after["innings_bowled"] == before["innings_bowled"] + 1
    assert not hasattr(starc, "maidens_bowled")
    changed = {k for k in after if after[k] != before[k]}
    assert changed == {"balls_bowled", "runs_given", "wickets_taken", "matches", "innings_bowled"}


def test_batting_processed_before_bowling_in_order(store):
    update_innings(
        store,
        [["Ricky Ponting", True, 10, 20, 1, 0], ["Rahul Dravid", True, 5, 9, 0, 0]],
        [["Mitchell Starc", 60, 1, 30, 2], ["Rahul Dravid", 12, 0, 9, 0]],
    )
    assert [name for name, _ in store.persisted] == [
        "Ricky Ponting", "Rahul Dravid", "Mitchell Starc", "Rahul Dravid",
    ]


def test_each_record_persisted_after_its_own_update(store, dravid):
    update_innings(store, [["Rahul Dravid", True, 30, 40, 2, 0]], [])
    name, snapshot = store.persisted[0]
    assert name == "Rahul Dravid"
    assert snapshot["runs_scored"] == 13_318


def test_unknown_player_raises_without_mutation(store):
    before = {name: store.snapshot(r) for name, r in store.records.items()}

    with pytest.raises(PlayerNotFoundError) as excinfo:
        update_innings(store, [["Unknown Player", True, 10, 20, 1, 0]], [])

    assert excinfo.value.name == "Unknown Player"
    assert str(excinfo.value) == "Unknown Player"
    assert store.persisted == []
    assert {name: store.snapshot(r) for name, r in store.records.items()} == before


def test_partial_commit_keeps_processed_players(store, dravid, ponting, starc):
    with pytest.raises(PlayerNotFoundError) as excinfo:
        update_innings(
            store,
            [
                ["Rahul Dravid", True, 55, 90, 6, 0],
                ["Ricky Ponting", False, 101, 130, 12, 2],
                ["Nobody Special", True, 0, 1, 0, 0],
            ],
            [["Mitchell Starc", 60, 1, 30, 2]],
        )

    assert excinfo.value.name == "Nobody Special"
    assert [name for name, _ in store.persisted] == ["Rahul Dravid", "Ricky Ponting"]
    assert dravid.half_centuries == 64
    assert ponting.centuries == 42
    assert starc.matches == 0


def test_unknown_bowler_after_batting_committed(store, dravid):
    with pytest.raises(PlayerNotFoundError):
        update_innings(
            store,
            [["Rahul Dravid", True, 1, 2, 0, 0]],
            [["Ghost Bowler", 30, 0, 20, 0]],
        )
    assert [name for name, _ in store.persisted] == ["Rahul Dravid"]


def test_malformed_row_rejected_before_any_update(store):
    with pytest.raises(ValidationError):
        update_innings(
            store,
            [["Rahul Dravid", True, 10, 20, 1, 0], ["Ricky Ponting", True, -5, 20, 0, 0]],
            [],
        )
    assert store.persisted == []


def test_accepts_entry_objects(store, dravid):
    update_innings(
        store,
        [BattingEntry(name="Rahul Dravid", was_out=True, runs=12, balls=20, fours=2, sixes=0)],
        [BowlingEntry(name="Rahul Dravid", balls_bowled=6, maidens=0, runs_given=4, wickets=0)],
    )
    assert dravid.runs_scored == 13_300
    assert dravid.balls_bowled == 6
    assert dravid.matches == 166


def test_missing_counter_stays_missing(store_factory):
    tendulkar = Cricketer(
        name="Sachin Tendulkar", innings_batted=329, not_out=33,
        runs_scored=15_921, balls_faced=None, high_score=248,
    )
    store = store_factory([tendulkar])
    update_innings(store, [["Sachin Tendulkar", True, 60, 110, 7, 1]], [])

    assert tendulkar.balls_faced is None
    assert tendulkar.runs_scored == 15_981
    assert tendulkar.batting_strike_rate is None


def test_wrong_arity_row_rejected_before_any_update(store):
    with pytest.raises(ValidationError):
        update_innings(
            store,
            [["Rahul Dravid", True, 10, 20, 1, 0]],
            [["Mitchell Starc", 60, 1, 30]],
        )
    assert store.persisted == []


def test_not_out_innings_on_fresh_record(store, starc):
    update_innings(store, [["Mitchell Starc", False, 4, 9, 1, 0]], [])
    assert (starc.innings_batted, starc.not_out) == (1, 1)
    assert starc.batting_average == 4
