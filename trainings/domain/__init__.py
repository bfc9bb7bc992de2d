from trainings.domain.entities import (
    CanceledStatus,
    CompletedStatus,
    DraftStatus,
    OpenStatus,
    StatusTarget,
    StatusType,
    Training,
    TrainingLevel,
    TrainingStatus,
    canceled_status,
    completed_status,
    draft_status,
    open_status,
)
from trainings.domain.factory import create_training
from trainings.domain.result import (
    DomainError,
    Failure,
    Result,
    Success,
    is_failure,
    is_success,
)
from trainings.domain.search import SearchCriteria, end_of_day, search_trainings, start_of_day
from trainings.domain.state import can_transition, cancel, update_status
from trainings.domain.validation import validate_training

__all__ = [
    # Records
    "Training",
    "TrainingLevel",
    "TrainingStatus",
    "StatusTarget",
    "StatusType",
    "DraftStatus",
    "OpenStatus",
    "CompletedStatus",
    "CanceledStatus",
    "draft_status",
    "open_status",
    "completed_status",
    "canceled_status",
    # Results
    "Result",
    "Success",
    "Failure",
    "DomainError",
    "is_success",
    "is_failure",
    # Operations
    "create_training",
    "validate_training",
    "update_status",
    "cancel",
    "can_transition",
    "search_trainings",
    "SearchCriteria",
    "start_of_day",
    "end_of_day",
]
