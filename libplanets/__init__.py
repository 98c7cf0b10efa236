from .constants import *
from .errors import ContractViolation, LibPlanetsError
from .utils import cart, diff_angle, frac, polar, to_range
from .time_utils import centuries_to_jd, jd_to_centuries
from .planet import (
    FunctionPlanet,
    Planet,
    PolarPosition,
    Position,
    StateVector,
    apply_light_travel,
    as_body,
    geocentric,
    get_planet,
    light_travel,
    posvel,
    register_planet,
    registered_bodies,
    sun_motion,
    true_to_apparent,
    unregister_planet,
)
from .nutation import identity as identity_nutation, mean2true, nutation_angles
from .kepler import (
    PLANET_ELEMENTS,
    KeplerianPlanet,
    OrbitalElements,
    heliocentric_lbr,
    solve_kepler_equation,
    sun_position,
)
from .ephemeris import calc_position, calc_positions, calc_positions_jd
from .state import (
    get_nutation_model,
    get_timescale,
    set_nutation_model,
)


# =============================================================================
# SHORT ALIASES
# =============================================================================

true2apparent = true_to_apparent
jd2centuries = jd_to_centuries

__version__ = "0.1.0"
__license__ = "LGPL-3.0"

__all__ = [
    # Body identities
    "Body",
    "PLANETS",
    "MO", "SU", "ME", "VE", "MA", "JU", "SA", "UR", "NE", "PL",
    # Errors
    "LibPlanetsError",
    "ContractViolation",
    # Math primitives
    "frac",
    "to_range",
    "polar",
    "cart",
    "diff_angle",
    # Time functions
    "jd_to_centuries",
    "jd2centuries",
    "centuries_to_jd",
    # Geocentric reduction
    "PolarPosition",
    "StateVector",
    "Position",
    "posvel",
    "sun_motion",
    "geocentric",
    "true_to_apparent",
    "true2apparent",
    "light_travel",
    "apply_light_travel",
    # Body variants
    "Planet",
    "FunctionPlanet",
    "as_body",
    "register_planet",
    "unregister_planet",
    "get_planet",
    "registered_bodies",
    "OrbitalElements",
    "PLANET_ELEMENTS",
    "KeplerianPlanet",
    "solve_kepler_equation",
    "heliocentric_lbr",
    "sun_position",
    # Nutation
    "mean2true",
    "nutation_angles",
    "identity_nutation",
    # Multi-body
    "calc_position",
    "calc_positions",
    "calc_positions_jd",
    # Configuration
    "set_nutation_model",
    "get_nutation_model",
    "get_timescale",
]
