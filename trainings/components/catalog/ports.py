"""
Catalog component port definitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from trainings.adapters.clock import SystemClock
from trainings.adapters.ids import UuidFactory
from trainings.ports.clock import ClockPort
from trainings.ports.ids import IdFactoryPort


@dataclass
class CatalogPorts:
    """Collaborators the catalog reads from."""

    clock: ClockPort = field(default_factory=SystemClock)
    ids: IdFactoryPort = field(default_factory=UuidFactory)


__all__ = ["CatalogPorts", "ClockPort", "IdFactoryPort"]
