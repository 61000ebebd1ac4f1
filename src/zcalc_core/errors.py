# src/zcalc_core/errors.py
import logging
import math
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

from .units import Quantity, ureg

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class ZCalcError(Exception):
    """Base class for all custom, user-facing errors in zcalc-core."""
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can generate their own rich diagnostic report.
    Rendering collaborators (the web layer) only depend on this method, never on
    a concrete exception type.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(ZCalcError, Diagnosable):
    """
    A common, concrete base class for every error the engine raises on purpose.

    It is catchable in `except` clauses like any exception, and it declares
    `get_diagnostic_report` abstract so every subclass has to say how it is
    presented to an end user.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """
        Abstract method to generate the diagnostic report.
        Subclasses MUST implement this.
        """
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_frequency(frequency_hz: float) -> str:
    """
    Renders a frequency in Hz with the SI prefix that keeps the magnitude
    readable, e.g. 1000.0 -> '1 kHz'. Zero, negative and non-finite values are
    shown in plain Hz.
    """
    if not math.isfinite(frequency_hz) or frequency_hz <= 0:
        return f"{frequency_hz:.6g} Hz"
    compact = Quantity(frequency_hz, ureg.hertz).to_compact()
    return f"{compact:~.6g}"


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    A stateless helper to format the final multi-line report string, ensuring a
    consistent look and feel for all user-facing diagnostics.

    Args:
        error_type: The high-level category of the error (e.g., "Expression Parse Error").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: A dictionary of contextual information (user input, element, file
            path, and the frequency in Hz as a float, which is rendered here).

    Returns:
        A formatted, user-friendly diagnostic report string ready for display.
    """
    lines = [
        "\n",
        "================ zcalc-core: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if element := context.get('element'):
        lines.append(f"Element:        {element}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")
    if (frequency := context.get('frequency')) is not None:
        lines.append(f"Frequency:      {format_frequency(frequency)}")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("==========================================================================")
    return "\n".join(lines)
