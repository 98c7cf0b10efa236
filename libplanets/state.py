"""
Global configuration state for libplanets.

This module holds the library's process-wide settings:
- Skyfield timescale (used by the nutation models)
- Active nutation model

Settings are module-level globals with getter/setter functions. They are
read, never written, while positions are computed, so concurrent position
calculations need no locking. Change them before starting a batch.
"""

import logging
from typing import Optional

from skyfield.api import load
from skyfield.timelib import Timescale

from .constants import DEFAULT_NUTATION_MODEL, NUTATION_MODELS

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

_TS: Optional[Timescale] = None  # Timescale object
_NUTATION_MODEL: str = DEFAULT_NUTATION_MODEL  # Active nutation model


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale built from the data files bundled
        with skyfield (no download, no data directory).
    """
    global _TS
    if _TS is None:
        _TS = load.timescale(builtin=True)
    return _TS


def set_nutation_model(model: str) -> None:
    """
    Select the nutation model used for apparent positions.

    Args:
        model: One of "iau2000b" (default), "iau2000a" or "none"

    Raises:
        ValueError: If the model name is unknown
    """
    global _NUTATION_MODEL
    name = model.lower()
    if name not in NUTATION_MODELS:
        raise ValueError(
            f"Unknown nutation model: {model!r} (expected one of {NUTATION_MODELS})"
        )
    _NUTATION_MODEL = name
    logger.info("nutation model set to %s", name)


def get_nutation_model() -> str:
    """Get the active nutation model name."""
    return _NUTATION_MODEL
