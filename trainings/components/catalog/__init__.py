"""Catalog component - training records, status lifecycle and search."""

from .component import CatalogComponent, run
from .models import (
    CancelTrainingInput,
    CreateTrainingInput,
    SearchOutput,
    SearchTrainingsInput,
    TrainingOutput,
    UpdateStatusInput,
)
from .ports import CatalogPorts, ClockPort, IdFactoryPort

__all__ = [
    # Entry point
    "run",
    # Component
    "CatalogComponent",
    # Input models
    "CreateTrainingInput",
    "UpdateStatusInput",
    "CancelTrainingInput",
    "SearchTrainingsInput",
    # Output models
    "TrainingOutput",
    "SearchOutput",
    # Ports
    "CatalogPorts",
    "ClockPort",
    "IdFactoryPort",
]
