from trainings.adapters.clock import FrozenClock, SteppingClock, SystemClock
from trainings.adapters.ids import SequenceIdFactory, UuidFactory

__all__ = [
    "FrozenClock",
    "SequenceIdFactory",
    "SteppingClock",
    "SystemClock",
    "UuidFactory",
]
