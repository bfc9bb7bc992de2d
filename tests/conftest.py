"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any
from uuid import uuid4

import pytest

from trainings.adapters.clock import FrozenClock, SteppingClock
from trainings.adapters.ids import UuidFactory
from trainings.domain.entities import Training
from trainings.domain.factory import create_training
from trainings.domain.result import Success

START = datetime(2025, 4, 1, 9, 0, 0)


@pytest.fixture
def clock() -> SteppingClock:
    """A clock that moves one second forward per read."""
    return SteppingClock(START, step=timedelta(seconds=1))


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(START)


@pytest.fixture
def ids() -> UuidFactory:
    return UuidFactory()


@pytest.fixture
def training_data() -> dict[str, Any]:
    """Valid factory input."""
    return {
        "title": "Introduction to Agile",
        "description": "Agile fundamentals for beginners",
        "date": datetime(2025, 6, 1, 10, 0),
        "location": "Chiyoda, Tokyo",
        "capacity": 20,
        "level": "beginner",
        "price": Decimal("50000"),
    }


@pytest.fixture
def make_training(
    clock: SteppingClock, ids: UuidFactory, training_data: dict[str, Any]
) -> Callable[..., Training]:
    """Build a valid draft training, overriding any factory input."""

    def _make(**overrides: Any) -> Training:
        result = create_training(**{**training_data, **overrides}, clock=clock, ids=ids)
        assert isinstance(result, Success), result
        return result.value

    return _make


@pytest.fixture
def draft(make_training: Callable[..., Training]) -> Training:
    return make_training()


@pytest.fixture
def in_status() -> Callable[..., Training]:
    """Construct a training directly in any status, bypassing the lifecycle."""

    def _build(status: dict[str, Any], **overrides: Any) -> Training:
        data: dict[str, Any] = {
            "id": uuid4(),
            "title": "Scrum Master Training",
            "description": "The role of the scrum master",
            "date": datetime(2025, 6, 15, 10, 0),
            "location": "Shibuya, Tokyo",
            "capacity": 15,
            "level": "intermediate",
            "price": Decimal("70000"),
            "status": status,
            "created_at": START,
            "updated_at": START,
        }
        data.update(overrides)
        return Training.model_validate(data)

    return _build
