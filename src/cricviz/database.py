"""Engine and session handling for the cricketer table.

The engine is built lazily from ``settings.database`` unless the CLI has
pointed it somewhere else with ``configure_database``.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import MetaData, create_engine, Engine
from sqlalchemy.orm import sessionmaker, Session

from .config import settings


_engine: Engine | None = None
_session_factory: sessionmaker | None = None
_url_override: Optional[str] = None


def configure_database(url: Optional[str]) -> None:
    """Use ``url`` instead of the configured URL; ``None`` restores it."""
    global _engine, _session_factory, _url_override
    if _engine is not None:
        _engine.dispose()
    _engine, _session_factory = None, None
    _url_override = url


def get_database_engine() -> Engine:
    """Return the shared engine, building it on first use."""
    global _engine, _session_factory
    if _engine is None:
        _engine = create_engine(
            _url_override or settings.database.url,
            echo=settings.database.echo,
            pool_pre_ping=True,
        )
        # records stay readable after the session that loaded them closes
        _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)
    return _engine


@contextmanager
def get_session() -> Iterator[Session]:
    """Session committed on clean exit, rolled back if the block raises."""
    get_database_engine()
    with _session_factory() as session:
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        session.commit()


def _metadata() -> MetaData:
    from .models import Base
    return Base.metadata


def create_tables() -> None:
    _metadata().create_all(bind=get_database_engine())


def drop_tables() -> None:
    _metadata().drop_all(bind=get_database_engine())
