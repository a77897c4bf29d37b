"""Clock port - source of the current time."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Returns the current timezone-aware UTC time."""

    def now(self) -> datetime: ...
