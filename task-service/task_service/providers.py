"""Clock and id capabilities injected into the creation service."""

import uuid
from datetime import date, datetime, timezone
from typing import Callable, Protocol

IdGenerator = Callable[[], str]


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        # local calendar day, time of day dropped
        return date.today()


class FixedClock:
    """Clock frozen at one instant; today() is that instant's date."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()


def uuid4_text() -> str:
    return str(uuid.uuid4())
