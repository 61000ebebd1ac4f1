# --- src/zcalc_core/units.py ---
import pint
import logging

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.info("Pint Unit Registry initialized.")


def to_hertz(raw_value) -> float:
    """
    Converts a frequency given as a bare number (already in Hz) or as a pint
    string such as '1 kHz' into a float in Hz.

    Raises pint.DimensionalityError when the value is not a frequency, and
    other pint errors (or ZeroDivisionError for "1/0") when it cannot be parsed.
    """
    if isinstance(raw_value, (int, float)) and not isinstance(raw_value, bool):
        return float(raw_value)
    qty = Quantity(raw_value)
    if qty.dimensionless:
        return float(qty.magnitude)
    return float(qty.to(ureg.hertz).magnitude)
