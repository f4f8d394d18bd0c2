"""Exceptions raised by the statistics engine."""


class CricvizError(Exception):
    """Base exception for cricviz errors."""
    pass


class PlayerNotFoundError(CricvizError, LookupError):
    """Raised when a player name has no matching record.

    The offending name is kept on ``name`` and used as the message.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name
