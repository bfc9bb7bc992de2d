"""
Training factory - builds a new Training from untrusted input.

The new record starts in draft with created_at == updated_at.
"""

from datetime import datetime
from decimal import Decimal

from trainings.domain.entities import Training, TrainingLevel, draft_status
from trainings.domain.result import Result
from trainings.domain.validation import validate_training
from trainings.ports.clock import ClockPort
from trainings.ports.ids import IdFactoryPort
from trainings.rules.models import Rules


def create_training(
    *,
    title: str,
    description: str,
    date: datetime,
    location: str,
    capacity: int,
    level: TrainingLevel,
    price: Decimal | int | float,
    clock: ClockPort,
    ids: IdFactoryPort,
    rules: Rules | None = None,
) -> Result[Training]:
    """
    Create a draft Training.

    Rule precedence: title, description, location, capacity, price.
    Only the first violation is reported.
    """
    now = clock.now()
    candidate = {
        "id": ids.new_id(),
        "title": title,
        "description": description,
        "date": date,
        "location": location,
        "capacity": capacity,
        "level": level,
        "price": price,
        "status": draft_status().model_dump(),
        "created_at": now,
        "updated_at": now,
    }
    return validate_training(candidate, rules)
