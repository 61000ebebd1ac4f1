# src/zcalc_core/parser/issue_codes.py
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ParseIssueCode(Enum):
    """
    Registry of expression parse failures and their message templates.
    Each enum member's value is a tuple: (code_str, message_template_str).
    """

    # --- Leaf Token Issues (TOKEN_...) ---
    TOKEN_EMPTY = ("TOKEN_EMPTY", "token is empty")
    TOKEN_NO_SEPARATOR = ("TOKEN_NO_SEPARATOR", "Expected format T:value, got '{token}'")
    TOKEN_EMPTY_KIND = ("TOKEN_EMPTY_KIND", "Component type is missing before ':' in '{token}'")
    TOKEN_INVALID_NUMBER = ("TOKEN_INVALID_NUMBER", "Invalid numeric value: {value}")
    TOKEN_UNKNOWN_KIND = ("TOKEN_UNKNOWN_KIND", "Unknown component type: {kind}")
    TOKEN_UNKNOWN_SPEC = ("TOKEN_UNKNOWN_SPEC", "Unknown component spec: {token}")

    # --- Group Issues (GROUP_...) ---
    GROUP_UNMATCHED_PAREN = ("GROUP_UNMATCHED_PAREN", "Unmatched parenthesis in expression")
    GROUP_TRAILING_CHARS = ("GROUP_TRAILING_CHARS", "Unexpected trailing characters: '{trailing}'")
    GROUP_UNKNOWN_CONNECTION = ("GROUP_UNKNOWN_CONNECTION", "Unknown connection type: {name}")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    def format_message(self, **kwargs) -> str:
        """Formats the message template with provided keyword arguments."""
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            logger.error(f"Missing key {e} for formatting message template of {self.name} (code: {self.code}): '{self.template}'. Provided args: {kwargs}")
            return f"Error formatting message for {self.code}: Missing key {e}. Template: '{self.template}' Args: {kwargs}"
