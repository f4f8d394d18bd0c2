"""Player store: name lookup and persistence of cricketer records."""

from typing import Optional, Protocol

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import PlayerNotFoundError
from .models import Cricketer


class PlayerStore(Protocol):
    """What the innings processor needs from persistence."""

    def find_by_name(self, name: str) -> Optional[Cricketer]:
        ...

    def persist(self, record: Cricketer) -> None:
        ...


class SqlAlchemyPlayerStore:
    """Player store backed by a SQLAlchemy session.

    Every ``persist`` commits on its own, so records saved before a later
    failure stay saved.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_name(self, name: str) -> Optional[Cricketer]:
        return self.session.scalars(
            select(Cricketer).where(Cricketer.name == name)
        ).first()

    def persist(self, record: Cricketer) -> None:
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def add(self, record: Cricketer) -> Cricketer:
        """Create a new record."""
        self.persist(record)
        logger.info(f"Added cricketer {record.name!r}")
        return record

    def ban(self, name: str) -> None:
        """Delete the record of the player called ``name``."""
        record = self.find_by_name(name)
        if record is None:
            raise PlayerNotFoundError(name)
        try:
            self.session.delete(record)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        logger.info(f"Banned cricketer {name!r}")
