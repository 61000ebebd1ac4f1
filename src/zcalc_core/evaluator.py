# src/zcalc_core/evaluator.py
"""
Evaluates circuit-element trees and keeps an ordered history of every
successful evaluation.

The history is the only shared mutable state in the engine. It is one list of
immutable `HistoryEntry` objects guarded by a single lock, so an evaluation's
element, frequency and result become visible together or not at all, and the
three per-field accessors always agree on length and order.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Tuple

from .complex_value import Complex
from .components.elements import CircuitElement, element_impedance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One successful evaluation: what was evaluated, at which frequency, and the result."""
    element: CircuitElement
    frequency_hz: float
    result: Complex


class ImpedanceModel:
    """
    The evaluation entry point used by the web and persistence collaborators.

    Instances are safe to share between threads. Every public method runs to
    completion without blocking on anything but the history lock.
    """

    def __init__(self):
        self._history: List[HistoryEntry] = []
        self._lock = threading.Lock()
        logger.debug("ImpedanceModel instance created.")

    def calculate_impedance(self, element: CircuitElement, frequency_hz: float) -> Complex:
        """
        Computes the impedance of `element` at `frequency_hz` and records it.

        On failure the error propagates and the history is left untouched.

        Raises:
            TypeError: `element` is None.
            InvalidCircuitError: the circuit cannot be evaluated at this frequency.
        """
        if element is None:
            raise TypeError("element must not be None")
        result = element_impedance(element, frequency_hz)
        logger.debug("Evaluated %s at %s Hz -> %s", element, frequency_hz, result)
        entry = HistoryEntry(element=element, frequency_hz=frequency_hz, result=result)
        with self._lock:
            self._history.append(entry)
        return result

    # --- History snapshots ---

    def _snapshot(self) -> Tuple[HistoryEntry, ...]:
        with self._lock:
            return tuple(self._history)

    def get_history_entries(self) -> Tuple[HistoryEntry, ...]:
        """A point-in-time, immutable copy of the history."""
        return self._snapshot()

    def get_history_elements(self) -> Tuple[CircuitElement, ...]:
        return tuple(e.element for e in self._snapshot())

    def get_history_frequencies(self) -> Tuple[float, ...]:
        return tuple(e.frequency_hz for e in self._snapshot())

    def get_history_results(self) -> Tuple[Complex, ...]:
        return tuple(e.result for e in self._snapshot())

    def get_history_size(self) -> int:
        with self._lock:
            return len(self._history)

    def clear_history(self) -> None:
        with self._lock:
            cleared = len(self._history)
            self._history.clear()
        logger.info(f"Cleared {cleared} history entr{'y' if cleared == 1 else 'ies'}.")
