# src/zcalc_core/parser/__init__.py
from .tokens import ComponentSpec, normalize_kind, parse_component_token
from .expression import parse, parse_circuit, split_top_level
from .exceptions import ParseError
from .issue_codes import ParseIssueCode

__all__ = [
    # Leaf tokens
    "ComponentSpec",
    "normalize_kind",
    "parse_component_token",
    # Expressions
    "parse",
    "parse_circuit",
    "split_top_level",
    # Errors
    "ParseError",
    "ParseIssueCode",
]
