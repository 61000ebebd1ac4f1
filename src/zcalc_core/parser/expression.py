# src/zcalc_core/parser/expression.py
"""
Recursive-descent parser for circuit expressions.

    expr      := leafToken | group
    group     := name '(' exprList ')'
    name      := ('series' | 'parallel') anySuffix
    exprList  := expr (',' expr)*       -- split at top-level commas only
    leafToken := any text without '(' , handed to parse_component_token

The parser is the only place circuit-element trees are built. Trees are built
bottom-up, so a failure anywhere raises before any node exists.
"""
import logging
from typing import List

from ..components.circuit import CompositeCircuit
from ..components.elements import (
    Capacitor, CircuitElement, ConnectionNode, Inductor, Resistor,
)
from .exceptions import ParseError
from .issue_codes import ParseIssueCode
from .tokens import parse_component_token

logger = logging.getLogger(__name__)

SERIES_KEYWORD = "series"
PARALLEL_KEYWORD = "parallel"


def _find_matching_paren(s: str, open_pos: int) -> int:
    depth = 0
    for i in range(open_pos, len(s)):
        c = s[i]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                return i
    raise ParseError.from_issue(ParseIssueCode.GROUP_UNMATCHED_PAREN, s)


def split_top_level(s: str) -> List[str]:
    """
    Splits `s` on commas at parenthesis depth zero and trims each part.

    An empty or blank string yields no parts, which is how `series()` ends up
    with zero children. A trailing comma does not add an empty part.
    """
    if not s.strip():
        return []
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    for c in s:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        elif c == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(c)
    if current:
        parts.append("".join(current).strip())
    return parts


def _parse_leaf(s: str) -> CircuitElement:
    spec = parse_component_token(s)
    if spec.is_resistor:
        return Resistor(spec.value)
    if spec.is_capacitor:
        return Capacitor(spec.value)
    if spec.is_inductor:
        return Inductor(spec.value)
    raise ParseError.from_issue(ParseIssueCode.TOKEN_UNKNOWN_SPEC, s, token=s)


def parse(expression: str) -> CircuitElement:
    """
    Parses an expression such as 'series(R:100, parallel(C:1e-6, L:0.01), R:50)'
    into a circuit-element tree. A bare leaf token ('R:100') is also accepted.

    Raises:
        ParseError: on any grammar violation; no partial tree is returned.
        TypeError: `expression` is None.
    """
    if expression is None:
        raise TypeError("expression is None")
    s = expression.strip()
    if "(" not in s:
        return _parse_leaf(s)

    idx = s.index("(")
    name = s[:idx].strip().lower()
    close = _find_matching_paren(s, idx)
    trailing = s[close + 1:].strip()
    if trailing:
        raise ParseError.from_issue(ParseIssueCode.GROUP_TRAILING_CHARS, s, trailing=trailing)

    is_series = name.startswith(SERIES_KEYWORD)
    if not is_series and not name.startswith(PARALLEL_KEYWORD):
        raise ParseError.from_issue(ParseIssueCode.GROUP_UNKNOWN_CONNECTION, s, name=name)

    children = [parse(part) for part in split_top_level(s[idx + 1:close])]
    logger.debug(f"Parsed {'series' if is_series else 'parallel'} group with {len(children)} child(ren)")
    return ConnectionNode(series=is_series, children=tuple(children))


def parse_circuit(expression: str) -> CompositeCircuit:
    """
    Parses an expression whose root must be a series/parallel group and wraps it
    in a CompositeCircuit.

    Raises:
        ParseError: on any grammar violation.
        TypeError: the expression is a bare component token.
    """
    root = parse(expression)
    return CompositeCircuit(root)
