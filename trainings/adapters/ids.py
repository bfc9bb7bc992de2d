from collections.abc import Iterable
from uuid import UUID, uuid4


class UuidFactory:
    def new_id(self) -> UUID:
        return uuid4()


class SequenceIdFactory:
    """Hands out pre-determined ids in order. Raises when exhausted."""

    def __init__(self, ids: Iterable[UUID | str]) -> None:
        self._ids = [i if isinstance(i, UUID) else UUID(i) for i in ids]
        self._pos = 0

    def new_id(self) -> UUID:
        if self._pos >= len(self._ids):
            raise LookupError("SequenceIdFactory exhausted")
        value = self._ids[self._pos]
        self._pos += 1
        return value
