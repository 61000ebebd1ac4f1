# src/zcalc_core/records/loader.py
import logging
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import cerberus
import pint
import yaml

from ..evaluator import ImpedanceModel
from ..parser.expression import parse
from ..units import to_hertz
from .exceptions import CalculationFileError, CalculationSchemaError
from .records import CalculationRecord, CalculationRequest

logger = logging.getLogger(__name__)

NAME_REGEX = r"^[a-zA-Z_][a-zA-Z0-9_]*$"


class CalculationFileValidator(cerberus.Validator):
    """Cerberus validator with the naming and uniqueness rules of calculation files."""

    def _validate_name_regex(self, constraint: bool, field: str, value: Any):
        """
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and isinstance(value, str) and not re.match(NAME_REGEX, value):
            self._error(
                field,
                f"Name '{value}' is invalid. Names must start with a letter or underscore, "
                "and can only contain letters, numbers, and underscores.",
            )

    def _validate_unique_elements_by_key(self, key_for_uniqueness: str, field: str, value: List[Dict]):
        """
        Validates that all dictionaries in a list have a unique value for a given key.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if not isinstance(value, list):
            return  # Let the 'type: list' rule handle this.

        seen_keys = set()
        duplicates = []
        for item in value:
            if not isinstance(item, dict):
                continue
            item_key = item.get(key_for_uniqueness)
            if item_key is not None:
                if item_key in seen_keys:
                    duplicates.append(item_key)
                else:
                    seen_keys.add(item_key)

        if duplicates:
            unique_duplicates = sorted(set(duplicates))
            self._error(field, f"Duplicate values found for key '{key_for_uniqueness}': {unique_duplicates}")


class CalculationFileParser:
    """
    Loads a YAML file of named calculations:

        calculations:
          - name: rc_filter
            expression: "series(R:100, C:1e-6)"
            frequency: "1 kHz"

    `frequency` is either a number (Hz) or a pint string with a frequency unit.
    """
    _schema = {
        "calculations": {
            "type": "list", "required": True, "minlength": 1, "unique_elements_by_key": "name",
            "schema": {
                "type": "dict",
                "schema": {
                    "name": {"type": "string", "required": True, "empty": False, "name_regex": True},
                    "expression": {"type": "string", "required": True, "empty": False},
                    "frequency": {"type": ["number", "string"], "required": True},
                },
            },
        },
    }

    def __init__(self):
        self._validator = CalculationFileValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("CalculationFileParser initialized.")

    def parse_file(self, path: Union[str, Path]) -> Tuple[CalculationRequest, ...]:
        source = Path(path).resolve()
        logger.info(f"Loading calculation file: {source}")

        content = self._load_yaml(source)
        if not self._validator.validate(content):
            raise CalculationSchemaError(self._validator.errors, source)

        requests = []
        for raw in self._validator.document["calculations"]:
            try:
                frequency_hz = to_hertz(raw["frequency"])
            except (ValueError, TypeError, ZeroDivisionError, pint.errors.PintError) as e:
                raise CalculationFileError(
                    details=f"Calculation '{raw['name']}' has an invalid frequency '{raw['frequency']}': {e}",
                    file_path=source,
                ) from e
            requests.append(CalculationRequest(
                name=raw["name"],
                expression=raw["expression"],
                frequency_hz=frequency_hz,
                source_file=source,
            ))
        logger.info(f"Loaded {len(requests)} calculation(s) from {source.name}")
        return tuple(requests)

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise CalculationFileError(details=f"Calculation file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise CalculationFileError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise CalculationFileError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise CalculationFileError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise CalculationFileError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content


def load_calculation_file(path: Union[str, Path]) -> Tuple[CalculationRequest, ...]:
    return CalculationFileParser().parse_file(path)


def run_calculations(model: ImpedanceModel, requests: Iterable[CalculationRequest]) -> List[CalculationRecord]:
    """
    Parses and evaluates each request through `model`, in order. Each success
    adds one entry to the model's history. The first failure propagates.
    """
    records = []
    for request in requests:
        element = parse(request.expression)
        result = model.calculate_impedance(element, request.frequency_hz)
        records.append(CalculationRecord.from_evaluation(request.name, element, request.frequency_hz, result))
        logger.info(f"Calculation '{request.name}': Z = {result} ohm at {request.frequency_hz} Hz")
    return records
