"""
Catalog component - creation, status lifecycle and search of trainings.

Shell layer: wires the clock, id factory and rules into the pure domain
operations and converts their results into outputs.

Invariants:
- Every successful output carries a fully validated Training
- A refused operation never yields a partially updated training
- Same-status updates return the input training unchanged
"""

from __future__ import annotations

import logging

from trainings.domain.entities import Training
from trainings.domain.factory import create_training
from trainings.domain.result import Failure, Result
from trainings.domain.search import SearchCriteria, search_trainings
from trainings.domain.state import cancel, update_status
from trainings.rules.models import Rules, default_rules

from .models import (
    CancelTrainingInput,
    CreateTrainingInput,
    SearchOutput,
    SearchTrainingsInput,
    TrainingOutput,
    UpdateStatusInput,
)
from .ports import CatalogPorts

logger = logging.getLogger(__name__)

CatalogInput = CreateTrainingInput | UpdateStatusInput | CancelTrainingInput | SearchTrainingsInput
CatalogOutput = TrainingOutput | SearchOutput


def _to_output(result: Result[Training], operation: str) -> TrainingOutput:
    if isinstance(result, Failure):
        logger.debug("%s refused: %s", operation, result.error.code)
        return TrainingOutput(training=None, errors=[result.error], success=False)
    return TrainingOutput(training=result.value, errors=[], success=True)


class CatalogComponent:
    """Component for training records and their lifecycle."""

    def __init__(self, ports: CatalogPorts | None = None, rules: Rules | None = None) -> None:
        self._ports = ports or CatalogPorts()
        self._rules = rules or default_rules()

    def run(self, input_data: CatalogInput) -> CatalogOutput:
        """Main dispatcher - routes to appropriate handler based on input type."""
        if isinstance(input_data, CreateTrainingInput):
            return self.run_create(input_data)
        elif isinstance(input_data, UpdateStatusInput):
            return self.run_update_status(input_data)
        elif isinstance(input_data, CancelTrainingInput):
            return self.run_cancel(input_data)
        elif isinstance(input_data, SearchTrainingsInput):
            return self.run_search(input_data)
        else:
            raise TypeError(f"Unknown input type: {type(input_data)}")

    def run_create(self, input_data: CreateTrainingInput) -> TrainingOutput:
        """Create a draft training."""
        result = create_training(
            title=input_data.title,
            description=input_data.description,
            date=input_data.date,
            location=input_data.location,
            capacity=input_data.capacity,
            level=input_data.level,
            price=input_data.price,
            clock=self._ports.clock,
            ids=self._ports.ids,
            rules=self._rules,
        )
        output = _to_output(result, "create")
        if output.training:
            logger.info("Created training %s", output.training.id)
        return output

    def run_update_status(self, input_data: UpdateStatusInput) -> TrainingOutput:
        """Move a training to another status."""
        before = input_data.training
        result = update_status(before, input_data.target, self._ports.clock, self._rules)
        output = _to_output(result, "update_status")
        if output.training and output.training is not before:
            logger.info(
                "Training %s: %s -> %s",
                before.id,
                before.status.type,
                output.training.status.type,
            )
        return output

    def run_cancel(self, input_data: CancelTrainingInput) -> TrainingOutput:
        """Cancel a draft or open training."""
        result = cancel(input_data.training, input_data.reason, self._ports.clock, self._rules)
        output = _to_output(result, "cancel")
        if output.training:
            logger.info("Training %s canceled", output.training.id)
        return output

    def run_search(self, input_data: SearchTrainingsInput) -> SearchOutput:
        """Search trainings by date range."""
        criteria = SearchCriteria(start_date=input_data.start_date, end_date=input_data.end_date)
        found = search_trainings(input_data.trainings, criteria)
        return SearchOutput(trainings=found, total=len(found))


def run(
    input_data: CatalogInput,
    ports: CatalogPorts | None = None,
    rules: Rules | None = None,
) -> CatalogOutput:
    """Convenience entry point for one-off calls."""
    return CatalogComponent(ports=ports, rules=rules).run(input_data)
