# src/zcalc_core/components/exceptions.py
"""
Defines the diagnosable exceptions raised while evaluating a circuit-element tree.
These are only ever raised after a successful parse.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class InvalidCircuitError(DiagnosableError):
    """
    The canonical exception for a circuit that cannot be evaluated: a reactive
    element driven at a non-positive frequency, or an empty connection node.
    """
    details: str
    element: Optional[str] = None
    frequency: Optional[float] = None

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        """Generates the diagnostic report for an evaluation failure."""
        return format_diagnostic_report(
            error_type="Invalid Circuit",
            details=self.details,
            suggestion="Use a frequency greater than zero for circuits containing capacitors or inductors, and give every series/parallel group at least one element.",
            context={
                'element': self.element,
                'frequency': self.frequency,
            }
        )


@dataclass()
class ComputationError(InvalidCircuitError):
    """
    An arithmetic failure (a division by zero) inside a series/parallel
    aggregation, rethrown as an InvalidCircuitError that keeps the original message.
    Also raised when a capacitor's 2*pi*f*C underflows to zero.
    """

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Impedance Computation Error",
            details=self.details,
            suggestion="A parallel branch has zero impedance, or the branch admittances cancel exactly. Check for zero-valued resistors or resonant LC pairs in parallel groups.",
            context={
                'element': self.element,
                'frequency': self.frequency,
            }
        )
