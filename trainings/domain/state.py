from typing import get_args

from trainings.domain.entities import (
    StatusTarget,
    StatusType,
    Training,
    check_cancel_reason,
    status_for,
)
from trainings.domain.result import DomainError, Failure, Result, Success, fail
from trainings.domain.validation import validate_training
from trainings.ports.clock import ClockPort
from trainings.rules.models import Rules, default_rules

STATUS_TARGETS: tuple[str, ...] = get_args(StatusTarget)


def transition_error(current: StatusType, target: StatusTarget) -> DomainError | None:
    """
    Return why current -> target is refused, or None if it is allowed.

    Same-state moves are always allowed (they are no-ops). Draft may not
    jump straight to completed; completed and canceled are final.
    """
    if current == target:
        return None

    if current == "draft" and target == "completed":
        return DomainError(
            code="draft_to_completed",
            message="A draft training cannot be completed directly; open it first",
            field="status",
        )

    if current == "completed":
        return DomainError(
            code="completed_immutable",
            message="A completed training cannot change status",
            field="status",
        )

    if current == "canceled":
        return DomainError(
            code="canceled_immutable",
            message="A canceled training cannot change status",
            field="status",
        )

    return None


def can_transition(current: StatusType, target: StatusTarget) -> bool:
    """Determine if a status update is allowed."""
    return target in STATUS_TARGETS and transition_error(current, target) is None


def update_status(
    training: Training,
    target: StatusTarget,
    clock: ClockPort,
    rules: Rules | None = None,
) -> Result[Training]:
    """
    Return a NEW Training moved to ``target``.

    Updating to the current status returns the same training untouched,
    updated_at included. The clock is only read when the status changes.
    """
    if target not in STATUS_TARGETS:
        return fail(
            "invalid_target",
            f"Unknown status target: {target!r}",
            field="status",
        )

    if training.status.type == target:
        return Success(training)

    error = transition_error(training.status.type, target)
    if error:
        return Failure(error)

    candidate = training.model_dump()
    candidate["status"] = status_for(target).model_dump()
    candidate["updated_at"] = clock.now()
    return validate_training(candidate, rules)


def cancel(
    training: Training,
    reason: str,
    clock: ClockPort,
    rules: Rules | None = None,
) -> Result[Training]:
    """
    Return a NEW Training in the canceled state carrying ``reason``.

    The reason is checked before the source state. Only draft and open
    trainings can be canceled.
    """
    min_length = (rules or default_rules()).cancellation.reason_min_length
    error = check_cancel_reason(reason, min_length)
    if error:
        return Failure(error)

    if training.status.type == "completed":
        return fail(
            "completed_not_cancelable",
            "A completed training cannot be canceled",
            field="status",
        )

    if training.status.type == "canceled":
        return fail(
            "already_canceled",
            "The training is already canceled",
            field="status",
        )

    candidate = training.model_dump()
    candidate["status"] = {"type": "canceled", "reason": reason}
    candidate["updated_at"] = clock.now()
    return validate_training(candidate, rules)
