from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from pydantic import ValidationError

from trainings.domain.entities import (
    CanceledStatus,
    DraftStatus,
    Training,
    canceled_status,
    completed_status,
    draft_status,
    open_status,
    status_for,
)
from trainings.domain.result import DomainError, Failure, Success
from trainings.domain.validation import validate_training
from trainings.rules.models import CancellationRules, Rules


def test_status_factories():
    assert draft_status().type == "draft"
    assert open_status().type == "open"
    assert completed_status().type == "completed"
    assert canceled_status("Venue unavailable").reason == "Venue unavailable"


def test_canceled_status_rejects_short_reason():
    with pytest.raises(ValidationError):
        canceled_status("ab")


def test_status_for_targets():
    assert status_for("draft") == DraftStatus()
    assert status_for("completed").type == "completed"


def test_training_is_frozen(in_status: Callable[..., Training]):
    training = in_status({"type": "open"})
    with pytest.raises(ValidationError):
        training.title = "Changed"  # type: ignore[misc]


def test_status_is_discriminated(in_status: Callable[..., Training]):
    training = in_status({"type": "canceled", "reason": "Instructor ill"})
    assert isinstance(training.status, CanceledStatus)
    assert training.status_type == "canceled"


def test_status_defaults_to_draft():
    now = datetime(2025, 1, 1)
    training = Training(
        id=uuid4(),
        title="t",
        description="d",
        date=now,
        location="l",
        capacity=1,
        level="advanced",
        price=0,
        created_at=now,
        updated_at=now,
    )
    assert training.status == DraftStatus()


class TestValidateTraining:
    def test_valid_candidate(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "open"}).model_dump()

        result = validate_training(candidate)

        assert isinstance(result, Success)
        assert result.value.status.type == "open"

    def test_reports_only_first_violation(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "draft"}).model_dump()
        candidate.update(description="", capacity=0)

        result = validate_training(candidate)

        assert result == Failure(
            DomainError(
                code="description_required",
                message="Description is required",
                field="description",
            )
        )

    def test_updated_before_created(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "draft"}).model_dump()
        candidate["updated_at"] = candidate["created_at"] - timedelta(seconds=1)

        result = validate_training(candidate)

        assert isinstance(result, Failure)
        assert result.error.code == "timestamps_out_of_order"
        assert result.error.field is None

    def test_cancel_reason_checked_in_status(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "draft"}).model_dump()
        candidate["status"] = {"type": "canceled", "reason": "abc"}

        result = validate_training(candidate)

        assert isinstance(result, Failure)
        assert result.error.code == "reason_too_short"
        assert result.error.field == "status"

    def test_cancel_reason_uses_rules(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "draft"}).model_dump()
        candidate["status"] = {"type": "canceled", "reason": "abc"}
        rules = Rules(cancellation=CancellationRules(reason_min_length=3))

        assert isinstance(validate_training(candidate, rules), Success)

    def test_wrong_type_is_invalid_field(self, in_status: Callable[..., Training]):
        candidate = in_status({"type": "draft"}).model_dump()
        candidate["capacity"] = "many"

        result = validate_training(candidate)

        assert isinstance(result, Failure)
        assert result.error.code == "invalid_field"
        assert result.error.message.startswith("capacity:")
