# Kepler's equation in degrees, fixed-point form

from __future__ import annotations

import logging
import math

from orrery.core.constants import DEG_PER_RAD, KEPLER_MAX_ITER, KEPLER_TOL_DEG
from orrery.core.frames import sin_deg

logger = logging.getLogger(__name__)


class ConvergenceFailure(RuntimeError):
    """Kepler iteration did not settle (iteration cap hit or e >= 1)."""


def wrap_to_360(angle_deg: float) -> float:
    """Wrap angle to [0, 360)."""
    wrapped = angle_deg % 360.0
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def solve_keplers_equation(
    M_deg: float,
    e: float,
    tol_deg: float = KEPLER_TOL_DEG,
    max_iter: int = KEPLER_MAX_ITER,
) -> float:
    """
    Solve Kepler's equation for elliptic orbits, entirely in degrees:
        E = M + e* sin(E),   e* = e * 180/pi
    by fixed-point iteration starting from E0 = M.

    Args:
        M_deg: Mean anomaly (deg), not required to lie in [0, 360)
        e: eccentricity (0 <= e < 1)
        tol_deg: stop once |E - E_prev| < tol_deg
        max_iter: iteration cap

    Returns:
        E_deg: Eccentric anomaly (deg), on the same turn as M_deg

    Raises:
        ConvergenceFailure: e >= 1 or no convergence within max_iter
    """
    if not math.isfinite(M_deg) or not math.isfinite(e):
        raise ValueError(f"Kepler solver needs finite inputs. Got: M={M_deg}, e={e}")
    if e < 0.0:
        raise ValueError(f"Eccentricity must be non-negative. Got: {e}")
    if e >= 1.0:
        raise ConvergenceFailure(
            f"Near-parabolic/hyperbolic orbits are not supported (e={e})."
        )
    if tol_deg <= 0:
        raise ValueError("tol_deg must be positive.")

    e_star = e * DEG_PER_RAD
    E = M_deg
    for i in range(1, max_iter + 1):
        E_prev = E
        E = M_deg + e_star * sin_deg(E_prev)
        if abs(E - E_prev) < tol_deg:
            logger.debug("Kepler converged in %d iterations (M=%.6f, e=%.6f)", i, M_deg, e)
            return E

    raise ConvergenceFailure(
        f"Kepler solver did not converge within {max_iter} iterations (M={M_deg}, e={e})."
    )
