from datetime import UTC, datetime, timedelta


class SystemClock:
    def __init__(self, utc: bool = False) -> None:
        self._utc = utc

    def now(self) -> datetime:
        if self._utc:
            return datetime.now(UTC)
        return datetime.now()


class FrozenClock:
    """
    Clock that returns a fixed time until advanced.

    Useful for deterministic testing.
    """

    def __init__(self, frozen: datetime) -> None:
        self._frozen = frozen

    def now(self) -> datetime:
        return self._frozen

    def advance(self, delta: timedelta) -> datetime:
        self._frozen = self._frozen + delta
        return self._frozen

    def set(self, moment: datetime) -> None:
        self._frozen = moment


class SteppingClock:
    """Clock that moves forward by a fixed step on every read."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self._next = start
        self._step = step
        self.reads = 0

    def now(self) -> datetime:
        current = self._next
        self._next = current + self._step
        self.reads += 1
        return current
