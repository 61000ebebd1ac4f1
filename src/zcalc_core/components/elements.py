# src/zcalc_core/components/elements.py
"""
The circuit-element model: three primitive leaf elements (Resistor, Capacitor,
Inductor) and the composite ConnectionNode that groups children in series or in
parallel.

The set of element types is closed. `CircuitElement` is a Union of frozen
dataclasses, and both capabilities every element offers (impedance and
description) are implemented once, in `element_impedance` and
`describe_element`, by exhaustive dispatch over that Union. A value outside the
Union is rejected with a TypeError instead of being silently mishandled.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from ..complex_value import Complex, ZERO
from ..constants import TWO_PI
from .exceptions import ComputationError, InvalidCircuitError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resistor:
    """An ideal resistor; `value` is the resistance in ohm."""
    value: float

    def impedance(self, frequency_hz: float) -> Complex:
        return element_impedance(self, frequency_hz)

    def description(self) -> str:
        return describe_element(self)

    def __str__(self) -> str:
        return self.description()


@dataclass(frozen=True)
class Capacitor:
    """An ideal capacitor; `value` is the capacitance in farad."""
    value: float

    def impedance(self, frequency_hz: float) -> Complex:
        return element_impedance(self, frequency_hz)

    def description(self) -> str:
        return describe_element(self)

    def __str__(self) -> str:
        return self.description()


@dataclass(frozen=True)
class Inductor:
    """An ideal inductor; `value` is the inductance in henry."""
    value: float

    def impedance(self, frequency_hz: float) -> Complex:
        return element_impedance(self, frequency_hz)

    def description(self) -> str:
        return describe_element(self)

    def __str__(self) -> str:
        return self.description()


@dataclass(frozen=True)
class ConnectionNode:
    """
    A series or parallel group of child elements.

    `children` is an immutable tuple fixed at construction; the node owns its
    children and nothing mutates the tree afterwards. A node may be built with
    zero children (e.g. from the expression `series()`), but it cannot be
    evaluated.
    """
    series: bool
    children: Tuple[CircuitElement, ...] = ()

    def __post_init__(self):
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, ELEMENT_TYPES):
                raise TypeError(
                    f"ConnectionNode children must be circuit elements, got {type(child).__name__}"
                )
        object.__setattr__(self, 'children', children)

    @property
    def is_series(self) -> bool:
        return self.series

    @property
    def is_parallel(self) -> bool:
        return not self.series

    def impedance(self, frequency_hz: float) -> Complex:
        return element_impedance(self, frequency_hz)

    def description(self) -> str:
        return describe_element(self)

    def __str__(self) -> str:
        return self.description()


CircuitElement = Union[Resistor, Capacitor, Inductor, ConnectionNode]

PRIMITIVE_TYPES = (Resistor, Capacitor, Inductor)
ELEMENT_TYPES = PRIMITIVE_TYPES + (ConnectionNode,)


# --- Impedance ---

def _require_positive_frequency(element: CircuitElement, frequency_hz: float) -> None:
    if not frequency_hz > 0:
        raise InvalidCircuitError(
            details="frequency must be > 0",
            element=describe_element(element),
            frequency=frequency_hz,
        )


def _node_impedance(node: ConnectionNode, frequency_hz: float) -> Complex:
    if not node.children:
        raise InvalidCircuitError(
            details="Connection node contains no children",
            element=describe_element(node),
            frequency=frequency_hz,
        )
    try:
        if node.series:
            total = ZERO
            for child in node.children:
                total = total.add(element_impedance(child, frequency_hz))
            return total

        admittance = None
        for child in node.children:
            inv = element_impedance(child, frequency_hz).reciprocal()
            admittance = inv if admittance is None else admittance.add(inv)
        return admittance.reciprocal()
    except ZeroDivisionError as e:
        raise ComputationError(
            details=f"Computation error: {e}",
            element=describe_element(node),
            frequency=frequency_hz,
        ) from e


def element_impedance(element: CircuitElement, frequency_hz: float) -> Complex:
    """
    Computes the complex impedance of `element` at `frequency_hz`.

    Raises:
        InvalidCircuitError: a reactive element at a non-positive frequency, a
            zero-valued capacitor, or an empty connection node.
        ComputationError: a division by zero while combining parallel branches,
            or a capacitor whose 2*pi*f*C underflows to zero.
        TypeError: `element` is not one of the circuit-element types.
    """
    if isinstance(element, Resistor):
        return Complex(float(element.value), 0.0)

    if isinstance(element, Capacitor):
        _require_positive_frequency(element, frequency_hz)
        if element.value == 0:
            raise InvalidCircuitError(
                details="capacitance must be non-zero",
                element=describe_element(element),
                frequency=frequency_hz,
            )
        omega_c = TWO_PI * frequency_hz * element.value
        if omega_c == 0.0:
            raise ComputationError(
                details="Computation error: capacitive reactance is unbounded (2*pi*f*C underflows to zero)",
                element=describe_element(element),
                frequency=frequency_hz,
            )
        return Complex(0.0, -1.0 / omega_c)

    if isinstance(element, Inductor):
        _require_positive_frequency(element, frequency_hz)
        return Complex(0.0, TWO_PI * frequency_hz * element.value)

    if isinstance(element, ConnectionNode):
        return _node_impedance(element, frequency_hz)

    raise TypeError(f"Unsupported circuit element type: {type(element).__name__}")


# --- Description ---

def _describe_leaf(element: CircuitElement) -> str:
    if isinstance(element, Resistor):
        return f"R({float(element.value)!r})"
    if isinstance(element, Capacitor):
        return f"C({float(element.value)!r})"
    if isinstance(element, Inductor):
        return f"L({float(element.value)!r})"
    raise TypeError(f"Unsupported circuit element type: {type(element).__name__}")


def describe_element(element: CircuitElement) -> str:
    """
    The canonical textual form, e.g. `series(R(100.0), parallel(C(1e-06), L(0.01)))`.
    Values use Python's shortest round-trip float repr.

    Walks the tree with an explicit stack, so the nesting depth is not bounded
    by the interpreter's recursion limit.
    """
    parts: List[str] = []
    # Holds elements still to describe and literal text still to emit.
    stack: List[Union[CircuitElement, str]] = [element]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, ConnectionNode):
            stack.append(")")
            for i in range(len(item.children) - 1, -1, -1):
                stack.append(item.children[i])
                if i:
                    stack.append(", ")
            stack.append("series(" if item.series else "parallel(")
        else:
            parts.append(_describe_leaf(item))
    return "".join(parts)


# --- Traversal ---

def iter_leaves(element: CircuitElement) -> Iterator[CircuitElement]:
    """Yields the primitive elements of a tree in left-to-right order."""
    stack: List[CircuitElement] = [element]
    while stack:
        item = stack.pop()
        if isinstance(item, PRIMITIVE_TYPES):
            yield item
        elif isinstance(item, ConnectionNode):
            stack.extend(reversed(item.children))
        else:
            raise TypeError(f"Unsupported circuit element type: {type(item).__name__}")
