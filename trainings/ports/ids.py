from typing import Protocol
from uuid import UUID


class IdFactoryPort(Protocol):
    def new_id(self) -> UUID:
        """Return a fresh unique identifier."""
        ...
