# src/zcalc_core/components/circuit.py
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..complex_value import Complex
from .elements import ConnectionNode, describe_element, element_impedance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositeCircuit:
    """A whole network whose root is always a series or parallel group."""
    root: ConnectionNode

    def __post_init__(self):
        if not isinstance(self.root, ConnectionNode):
            raise TypeError(
                f"CompositeCircuit root must be a ConnectionNode, got {type(self.root).__name__}"
            )

    def impedance(self, frequency_hz: float) -> Complex:
        return element_impedance(self.root, frequency_hz)

    def description(self) -> str:
        return describe_element(self.root)

    def __str__(self) -> str:
        return self.description()
