"""
Catalog component - input and output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from trainings.domain.entities import StatusTarget, Training, TrainingLevel
from trainings.domain.result import DomainError

# --- Input Models ---


@dataclass(frozen=True)
class CreateTrainingInput:
    """Input for creating a training."""

    title: str
    description: str
    date: datetime
    location: str
    capacity: int
    level: TrainingLevel
    price: Decimal | int | float


@dataclass(frozen=True)
class UpdateStatusInput:
    """Input for moving a training to another status."""

    training: Training
    target: StatusTarget


@dataclass(frozen=True)
class CancelTrainingInput:
    """Input for canceling a training."""

    training: Training
    reason: str


@dataclass(frozen=True)
class SearchTrainingsInput:
    """Input for a date-range search."""

    trainings: tuple[Training, ...]
    start_date: date | datetime
    end_date: date | datetime


# --- Output Models ---


@dataclass(frozen=True)
class TrainingOutput:
    """Output of a create, update or cancel operation."""

    training: Training | None
    errors: list[DomainError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class SearchOutput:
    """Output of a search."""

    trainings: list[Training]
    total: int
