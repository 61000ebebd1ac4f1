# src/zcalc_core/parser/exceptions.py
"""
Defines the diagnosable exception for the expression grammar.

Every grammar violation, whether in a single `KIND:VALUE` token or in a nested
`series(...)`/`parallel(...)` group, surfaces as one `ParseError`. The failing
rule is identified by its `ParseIssueCode`, so callers can branch on the kind of
failure without matching message text. No partial tree is ever returned with it.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report
from .issue_codes import ParseIssueCode


@dataclass(frozen=True)
class ParseError(DiagnosableError):
    """Raised when an expression or a leaf token does not match the grammar."""
    issue: ParseIssueCode
    details: str
    user_input: Optional[str] = None

    @classmethod
    def from_issue(cls, issue: ParseIssueCode, user_input: Optional[str] = None, **kwargs) -> "ParseError":
        return cls(issue=issue, details=issue.format_message(**kwargs), user_input=user_input)

    @property
    def code(self) -> str:
        return self.issue.code

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type=f"Expression Parse Error ({self.issue.code})",
            details=self.details,
            suggestion=(
                "Components are written KIND:VALUE with KIND one of R, C, L "
                "(or resistor, capacitor, inductor), e.g. 'R:100' or 'C:1e-6'.\n"
                "Groups are written series(...) or parallel(...) with comma-separated members."
            ),
            context={'user_input': self.user_input}
        )
