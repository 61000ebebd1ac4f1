# src/zcalc_core/records/exceptions.py
"""
Diagnosable exceptions for loading calculation files.

`CalculationFileError` covers file-system and YAML syntax problems, and values
that cannot be interpreted (e.g. a frequency with the wrong unit).
`CalculationSchemaError` covers documents that load but do not have the
required structure.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass(frozen=True)
class CalculationFileError(DiagnosableError):
    """A calculation file could not be read, or one of its values is unusable."""
    details: str
    file_path: Path

    def __str__(self):
        return f"Error in calculation file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Calculation File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, contains valid YAML, and gives frequencies in Hz or as a frequency string such as '1 kHz'.",
            context={'source_file': self.file_path}
        )


@dataclass(frozen=True)
class CalculationSchemaError(DiagnosableError):
    """A calculation file is valid YAML but does not follow the expected layout."""
    errors: Dict[str, Any]
    file_path: Path

    def __str__(self):
        error_lines = [f"  - In field '{k}': {v}" for k, v in sorted(self.errors.items())]
        return (
            f"Calculation file schema validation failed for '{self.file_path}':\n"
            + "\n".join(error_lines)
        )

    def get_diagnostic_report(self) -> str:
        error_list_str = "\n".join(f"  - Field '{k}': {v}" for k, v in sorted(self.errors.items()))
        details = (
            "The structure of the calculation file does not conform to the required schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Calculation File Schema Error",
            details=details,
            suggestion="Each entry under 'calculations' needs a unique identifier 'name', a non-empty 'expression' and a 'frequency'.",
            context={'source_file': self.file_path}
        )
