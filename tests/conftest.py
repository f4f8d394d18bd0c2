from typing import Dict, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cricviz.models import Base, Cricketer, COUNTER_FIELDS


class InMemoryPlayerStore:
    """Dict-backed player store that snapshots every persisted record."""

    def __init__(self, records: List[Cricketer]):
        self.records: Dict[str, Cricketer] = {r.name: r for r in records}
        self.persisted: List[tuple] = []

    def find_by_name(self, name: str) -> Optional[Cricketer]:
        return self.records.get(name)

    def persist(self, record: Cricketer) -> None:
        self.persisted.append((record.name, counters(record)))

    @staticmethod
    def snapshot(record: Cricketer) -> Dict[str, Optional[int]]:
        return counters(record)


def counters(record: Cricketer) -> Dict[str, Optional[int]]:
    return {field: getattr(record, field) for field in COUNTER_FIELDS}


def make_cricketer(name: str, **kwargs) -> Cricketer:
    return Cricketer(name=name, **kwargs)


@pytest.fixture
def dravid() -> Cricketer:
    return make_cricketer(
        "Rahul Dravid", country="India", role="Batter", matches=164, innings_batted=286,
        not_out=32, runs_scored=13_288, balls_faced=31_258, high_score=270,
        centuries=36, half_centuries=63,
    )


@pytest.fixture
def ponting() -> Cricketer:
    return make_cricketer(
        "Ricky Ponting", country="Australia", role="Batter", matches=168, innings_batted=287,
        not_out=29, runs_scored=13_378, balls_faced=22_782, high_score=257,
        centuries=41, half_centuries=62,
    )


@pytest.fixture
def starc() -> Cricketer:
    return make_cricketer("Mitchell Starc", country="Australia", role="Bowler")


@pytest.fixture
def store(dravid, ponting, starc) -> InMemoryPlayerStore:
    return InMemoryPlayerStore([dravid, ponting, starc])


@pytest.fixture
def engine():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store_factory():
    return InMemoryPlayerStore
