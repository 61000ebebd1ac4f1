# src/zcalc_core/records/__init__.py
from .records import CalculationRecord, CalculationRequest, ComponentRecord
from .loader import CalculationFileParser, load_calculation_file, run_calculations
from .exceptions import CalculationFileError, CalculationSchemaError

__all__ = [
    # Data contracts
    "CalculationRecord",
    "CalculationRequest",
    "ComponentRecord",
    # Loading and running
    "CalculationFileParser",
    "load_calculation_file",
    "run_calculations",
    # Errors
    "CalculationFileError",
    "CalculationSchemaError",
]
