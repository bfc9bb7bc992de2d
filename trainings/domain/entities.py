from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from trainings.domain.result import DomainError
from trainings.rules.models import Rules, default_rules

# --- Enums / Literals ---
TrainingLevel = Literal["beginner", "intermediate", "advanced"]
StatusType = Literal["draft", "open", "completed", "canceled"]
# Cancellation has its own operation and is not a valid update target
StatusTarget = Literal["draft", "open", "completed"]

_DEFAULT_RULES = default_rules()


def _rules(info: ValidationInfo) -> Rules:
    if info.context and info.context.get("rules") is not None:
        return info.context["rules"]
    return _DEFAULT_RULES


def check_cancel_reason(reason: str, min_length: int) -> DomainError | None:
    """Return the first violated cancellation-reason rule, if any."""
    if not reason:
        return DomainError(
            code="reason_required",
            message="Cancellation reason is required",
            field="reason",
        )
    if len(reason) < min_length:
        return DomainError(
            code="reason_too_short",
            message=f"Cancellation reason must be at least {min_length} characters",
            field="reason",
        )
    return None


# --- Status ---

class DraftStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["draft"] = "draft"


class OpenStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["open"] = "open"


class CompletedStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["completed"] = "completed"


class CanceledStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["canceled"] = "canceled"
    reason: str

    @field_validator("reason")
    @classmethod
    def _check_reason(cls, value: str, info: ValidationInfo) -> str:
        error = check_cancel_reason(value, _rules(info).cancellation.reason_min_length)
        if error:
            raise PydanticCustomError(error.code, error.message)
        return value


TrainingStatus = Annotated[
    DraftStatus | OpenStatus | CompletedStatus | CanceledStatus,
    Field(discriminator="type"),
]


def draft_status() -> DraftStatus:
    return DraftStatus()


def open_status() -> OpenStatus:
    return OpenStatus()


def completed_status() -> CompletedStatus:
    return CompletedStatus()


def canceled_status(reason: str) -> CanceledStatus:
    """Build a canceled status. Raises ValidationError on an invalid reason."""
    return CanceledStatus(reason=reason)


def status_for(target: StatusTarget) -> DraftStatus | OpenStatus | CompletedStatus:
    match target:
        case "draft":
            return draft_status()
        case "open":
            return open_status()
        case "completed":
            return completed_status()
    raise ValueError(f"Unknown status target: {target}")


# --- Training ---

class Training(BaseModel):
    """
    A schedulable training course.

    Field order matters: validation reports the first violated rule, so the
    checked text fields come before capacity and price.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    title: str
    description: str
    date: datetime
    location: str
    capacity: int
    level: TrainingLevel
    price: Decimal
    status: TrainingStatus = Field(default_factory=DraftStatus)

    created_at: datetime
    updated_at: datetime

    @field_validator("title", "description", "location")
    @classmethod
    def _require_text(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise PydanticCustomError(
                f"{info.field_name}_required",
                f"{info.field_name.capitalize()} is required",
            )
        return value

    @field_validator("capacity")
    @classmethod
    def _check_capacity(cls, value: int, info: ValidationInfo) -> int:
        minimum = _rules(info).training.capacity_min
        if value < minimum:
            raise PydanticCustomError(
                "capacity_too_small",
                "Capacity must be at least {minimum}",
                {"minimum": minimum},
            )
        return value

    @field_validator("price")
    @classmethod
    def _check_price(cls, value: Decimal, info: ValidationInfo) -> Decimal:
        minimum = _rules(info).training.price_min
        if value < minimum:
            raise PydanticCustomError(
                "price_negative",
                "Price must be at least {minimum}",
                {"minimum": minimum},
            )
        return value

    @model_validator(mode="after")
    def _check_timestamps(self) -> "Training":
        if self.updated_at < self.created_at:
            raise PydanticCustomError(
                "timestamps_out_of_order",
                "updated_at cannot be earlier than created_at",
            )
        return self

    @property
    def status_type(self) -> StatusType:
        return self.status.type
