"""
Ports for the collaborators the domain reads from: time and identity.
"""

from trainings.ports.clock import ClockPort
from trainings.ports.ids import IdFactoryPort

__all__ = ["ClockPort", "IdFactoryPort"]
