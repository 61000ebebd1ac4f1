# src/zcalc_core/components/__init__.py
import logging
logger = logging.getLogger(__name__)

from .elements import (
    CircuitElement, Resistor, Capacitor, Inductor, ConnectionNode,
    ELEMENT_TYPES, PRIMITIVE_TYPES,
    element_impedance, describe_element, iter_leaves,
)
from .circuit import CompositeCircuit
from .exceptions import InvalidCircuitError, ComputationError

logger.debug(f"Available element types: {[t.__name__ for t in ELEMENT_TYPES]}")

__all__ = [
    "CircuitElement",
    "Resistor",
    "Capacitor",
    "Inductor",
    "ConnectionNode",
    "CompositeCircuit",
    "ELEMENT_TYPES",
    "PRIMITIVE_TYPES",
    "element_impedance",
    "describe_element",
    "iter_leaves",
    "InvalidCircuitError",
    "ComputationError",
]
