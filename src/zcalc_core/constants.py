# --- src/zcalc_core/constants.py ---
import logging

import numpy as np

logger = logging.getLogger(__name__)

# --- Numerical Constants ---

#: Angular frequency factor, omega = TWO_PI * f.
TWO_PI: float = float(2 * np.pi)

# --- Component Kinds ---

#: Canonical single-letter kinds accepted by the leaf-token grammar.
KIND_RESISTOR = "R"
KIND_CAPACITOR = "C"
KIND_INDUCTOR = "L"
VALID_KINDS = (KIND_RESISTOR, KIND_CAPACITOR, KIND_INDUCTOR)

#: Full-word aliases, matched after upper-casing.
KIND_ALIASES = {
    "RESISTOR": KIND_RESISTOR,
    "CAPACITOR": KIND_CAPACITOR,
    "INDUCTOR": KIND_INDUCTOR,
}

#: Unit of a component's value, keyed by kind.
KIND_UNITS = {
    KIND_RESISTOR: "ohm",
    KIND_CAPACITOR: "farad",
    KIND_INDUCTOR: "henry",
}

logger.debug("Defined core constants: TWO_PI, VALID_KINDS, KIND_ALIASES, KIND_UNITS")
