# src/zcalc_core/records/records.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from ..complex_value import Complex
from ..components.elements import (
    Capacitor, CircuitElement, Inductor, Resistor, describe_element, iter_leaves,
)
from ..constants import KIND_CAPACITOR, KIND_INDUCTOR, KIND_RESISTOR
from ..evaluator import HistoryEntry

# The classes in this module are the hand-off format for the persistence
# collaborator: a named calculation with its frequency, the rendered result and
# the flat list of components it was built from. Storing them is not done here.

_LEAF_KINDS = {
    Resistor: KIND_RESISTOR,
    Capacitor: KIND_CAPACITOR,
    Inductor: KIND_INDUCTOR,
}


@dataclass(frozen=True)
class ComponentRecord:
    """One primitive component of a recorded calculation."""
    kind: str
    value: float

    @classmethod
    def from_element(cls, element: CircuitElement) -> ComponentRecord:
        return cls(kind=_LEAF_KINDS[type(element)], value=float(element.value))


@dataclass(frozen=True)
class CalculationRecord:
    """A named, finished calculation."""
    name: str
    expression: str
    frequency_hz: float
    result: str
    components: Tuple[ComponentRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_evaluation(cls, name: str, element: CircuitElement, frequency_hz: float, result: Complex) -> CalculationRecord:
        return cls(
            name=name,
            expression=describe_element(element),
            frequency_hz=frequency_hz,
            result=str(result),
            components=tuple(ComponentRecord.from_element(leaf) for leaf in iter_leaves(element)),
        )

    @classmethod
    def from_history_entry(cls, name: str, entry: HistoryEntry) -> CalculationRecord:
        return cls.from_evaluation(name, entry.element, entry.frequency_hz, entry.result)


@dataclass(frozen=True)
class CalculationRequest:
    """One entry of a calculation file, before it is parsed and evaluated."""
    name: str
    expression: str
    frequency_hz: float
    source_file: Optional[Path] = None
