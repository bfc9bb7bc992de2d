"""
Full-invariant validation for Training records.

Every construction and every mutation funnels its candidate through
``validate_training`` so the rules live in one place (the model).
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from trainings.domain.entities import Training
from trainings.domain.result import DomainError, Failure, Result, Success
from trainings.rules.models import Rules

# Codes raised by the model's own validators; anything else pydantic
# reports (wrong types, unknown literals) is folded into "invalid_field".
DOMAIN_CODES = frozenset(
    {
        "title_required",
        "description_required",
        "location_required",
        "capacity_too_small",
        "price_negative",
        "timestamps_out_of_order",
        "reason_required",
        "reason_too_short",
    }
)


def first_violation(exc: ValidationError) -> DomainError:
    """Convert the first pydantic error into a DomainError."""
    errors = exc.errors(include_url=False)
    if not errors:
        return DomainError(code="invalid_field", message="Validation error")

    err = errors[0]
    loc = err.get("loc") or ()
    field = str(loc[0]) if loc else None
    code = err["type"] if err["type"] in DOMAIN_CODES else "invalid_field"
    message = err["msg"]
    if code == "invalid_field" and field:
        message = f"{field}: {message}"
    return DomainError(code=code, message=message, field=field)


def validate_training(
    candidate: Mapping[str, Any], rules: Rules | None = None
) -> Result[Training]:
    """
    Validate a candidate record against every Training invariant.

    Returns the validated Training, or a Failure carrying the first
    violated rule in field order.
    """
    try:
        training = Training.model_validate(dict(candidate), context={"rules": rules})
    except ValidationError as e:
        return Failure(first_violation(e))
    return Success(training)
