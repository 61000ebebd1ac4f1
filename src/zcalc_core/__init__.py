# src/zcalc_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("zcalc-core package initialized.")

from .units import ureg, pint, Quantity
from .complex_value import Complex
from .components import (
    CircuitElement, Resistor, Capacitor, Inductor, ConnectionNode, CompositeCircuit,
    InvalidCircuitError, ComputationError,
)
from .parser import ComponentSpec, parse, parse_circuit, parse_component_token, ParseError, ParseIssueCode
from .evaluator import ImpedanceModel, HistoryEntry
from .records import (
    CalculationRecord, CalculationRequest, ComponentRecord,
    load_calculation_file, run_calculations,
    CalculationFileError, CalculationSchemaError,
)
from .errors import ZCalcError, DiagnosableError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Values
    "Complex",
    # Circuit Elements
    "CircuitElement", "Resistor", "Capacitor", "Inductor", "ConnectionNode", "CompositeCircuit",
    # Parser
    "ComponentSpec", "parse", "parse_circuit", "parse_component_token",
    # Evaluator
    "ImpedanceModel", "HistoryEntry",
    # Calculation Records
    "CalculationRecord", "CalculationRequest", "ComponentRecord",
    "load_calculation_file", "run_calculations",
    # Errors
    "ZCalcError", "DiagnosableError",
    "ParseError", "ParseIssueCode",
    "InvalidCircuitError", "ComputationError",
    "CalculationFileError", "CalculationSchemaError",
]
