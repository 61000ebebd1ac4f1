# src/zcalc_core/complex_value.py
"""
The immutable complex value every impedance computation produces.

`Complex` deliberately does not subclass the builtin `complex`: its equality is
exact on both fields, its reciprocal fails loudly on zero instead of returning
`inf`/`nan`, and its text form is fixed for the rendering collaborators.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .units import ureg, Quantity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Complex:
    """An immutable complex number `re + j*im`."""
    re: float
    im: float

    def add(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def multiply(self, other: Complex) -> Complex:
        r = self.re * other.re - self.im * other.im
        i = self.re * other.im + self.im * other.re
        return Complex(r, i)

    def reciprocal(self) -> Complex:
        """
        Returns 1/z.

        Raises:
            ZeroDivisionError: when both components are exactly zero.
        """
        denom = self.re * self.re + self.im * self.im
        if denom == 0.0:
            raise ZeroDivisionError("Division by zero in complex reciprocal")
        return Complex(self.re / denom, -self.im / denom)

    def magnitude(self) -> float:
        return float(np.hypot(self.re, self.im))

    @property
    def phase_deg(self) -> float:
        """Phase angle in degrees, in (-180, 180]."""
        return math.degrees(math.atan2(self.im, self.re))

    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.multiply(other)

    # --- Interop ---

    @classmethod
    def from_builtin(cls, value: complex) -> Complex:
        value = complex(value)
        return cls(value.real, value.imag)

    def to_builtin(self) -> complex:
        return complex(self.re, self.im)

    def to_quantity(self) -> Quantity:
        """The value as a pint Quantity in ohm, for unit-aware consumers."""
        return Quantity(self.to_builtin(), ureg.ohm)

    def __str__(self) -> str:
        if self.im >= 0:
            return "%.6g + %.6gj" % (self.re, self.im)
        return "%.6g - %.6gj" % (self.re, -self.im)


ZERO = Complex(0.0, 0.0)
