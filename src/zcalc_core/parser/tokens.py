# src/zcalc_core/parser/tokens.py
"""
The leaf-token grammar: a single `KIND:VALUE` component token.
"""
import logging
import re
from dataclasses import dataclass

import numpy as np

from ..constants import (
    KIND_ALIASES, KIND_CAPACITOR, KIND_INDUCTOR, KIND_RESISTOR, KIND_UNITS, VALID_KINDS,
)
from ..units import Quantity
from .exceptions import ParseError
from .issue_codes import ParseIssueCode

logger = logging.getLogger(__name__)

# A plain decimal or exponential float literal: '100', '-2.5', '.5', '1e-6', '4.7E+3'.
FLOAT_LITERAL_REGEX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def normalize_kind(raw_kind: str) -> str:
    """
    Maps a user-written kind onto 'R', 'C' or 'L'.

    Full words (resistor/capacitor/inductor) and single letters are accepted in
    any case; otherwise the first character decides. Anything else maps to ''.
    """
    kind = (raw_kind or "").strip().upper()
    if kind in KIND_ALIASES:
        return KIND_ALIASES[kind]
    if kind in VALID_KINDS:
        return kind
    if kind[:1] in VALID_KINDS:
        return kind[:1]
    return ""


@dataclass(frozen=True)
class ComponentSpec:
    """A normalized component token: `kind` is 'R', 'C', 'L', or '' when invalid."""
    kind: str
    value: float

    def __post_init__(self):
        object.__setattr__(self, 'kind', normalize_kind(self.kind))

    @property
    def is_resistor(self) -> bool:
        return self.kind == KIND_RESISTOR

    @property
    def is_capacitor(self) -> bool:
        return self.kind == KIND_CAPACITOR

    @property
    def is_inductor(self) -> bool:
        return self.kind == KIND_INDUCTOR

    @property
    def is_valid(self) -> bool:
        return self.kind in VALID_KINDS

    def to_quantity(self) -> Quantity:
        """The value with its physical unit (ohm, farad or henry)."""
        if not self.is_valid:
            raise ValueError(f"Component spec '{self}' has no valid kind, so it has no unit.")
        return Quantity(self.value, KIND_UNITS[self.kind])

    def __str__(self) -> str:
        return f"{self.kind}:{float(self.value)!r}"


def _parse_value(value_str: str, token: str) -> float:
    if not FLOAT_LITERAL_REGEX.match(value_str):
        raise ParseError.from_issue(ParseIssueCode.TOKEN_INVALID_NUMBER, token, value=value_str)
    value = float(value_str)
    if not np.isfinite(value):
        raise ParseError.from_issue(ParseIssueCode.TOKEN_INVALID_NUMBER, token, value=value_str)
    return value


def parse_component_token(token: str) -> ComponentSpec:
    """
    Parses a single `KIND:VALUE` token, e.g. 'R:100', 'capacitor: 1e-6'.

    Splits on the first ':'. Surrounding whitespace on the token and on both
    halves is ignored.

    Raises:
        ParseError: missing ':', empty kind, a value that is not a finite float
            literal, or a kind whose first letter is not R, C or L.
        TypeError: `token` is None.
    """
    if token is None:
        raise TypeError("token is None")
    s = token.strip()
    if not s:
        raise ParseError.from_issue(ParseIssueCode.TOKEN_EMPTY, token)

    raw_kind, sep, raw_value = s.partition(":")
    if not sep:
        raise ParseError.from_issue(ParseIssueCode.TOKEN_NO_SEPARATOR, s, token=s)
    raw_kind = raw_kind.strip()
    if not raw_kind:
        raise ParseError.from_issue(ParseIssueCode.TOKEN_EMPTY_KIND, s, token=s)

    value = _parse_value(raw_value.strip(), s)

    kind = normalize_kind(raw_kind)
    if not kind:
        raise ParseError.from_issue(ParseIssueCode.TOKEN_UNKNOWN_KIND, s, kind=raw_kind)

    logger.debug(f"Parsed component token '{s}' as {kind}:{value!r}")
    return ComponentSpec(kind, value)
