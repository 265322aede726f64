# src/orrery/physics/orbit.py

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, List, Tuple

from orrery.core.frames import Vector3, cos_deg, norm, orbital_plane_to_ecliptic, sin_deg
from orrery.core.julian import julian_centuries_since_j2000
from orrery.core.settings import DEFAULT_SOLVER_SETTINGS, SolverSettings
from orrery.physics.elements import OrbitalElements, PropagatedElements
from orrery.physics.kepler import solve_keplers_equation, wrap_to_360


def mean_anomaly_deg(elements: PropagatedElements, normalize: bool = False) -> float:
    """M = L - (w + node), degrees. Left unwrapped unless normalize is set."""
    M = elements.mean_lon_deg - (elements.argp_deg + elements.node_deg)
    return wrap_to_360(M) if normalize else M


def orbital_plane_position(elements: PropagatedElements, E_deg: float) -> Vector3:
    """
    Position in the orbital plane, perihelion along +x:
        x_p = a (cos E - e)
        y_p = a sqrt(1 - e^2) sin E
        z_p = 0
    """
    a = elements.a_au
    e = elements.e
    xp = a * (cos_deg(E_deg) - e)
    yp = a * math.sqrt(1.0 - e * e) * sin_deg(E_deg)
    return (xp, yp, 0.0)


def position_from_elements(
    elements: PropagatedElements,
    settings: SolverSettings = DEFAULT_SOLVER_SETTINGS,
) -> Vector3:
    """
    Heliocentric ecliptic position (AU) for elements already evaluated at
    the epoch of interest.
    """
    M = mean_anomaly_deg(elements, normalize=settings.normalize_mean_anomaly)
    E = solve_keplers_equation(M, elements.e, tol_deg=settings.tolerance_deg, max_iter=settings.max_iter)
    r_orb = orbital_plane_position(elements, E)
    return orbital_plane_to_ecliptic(r_orb, elements.argp_deg, elements.inc_deg, elements.node_deg)


def position(
    epoch: datetime,
    elements: OrbitalElements,
    settings: SolverSettings = DEFAULT_SOLVER_SETTINGS,
) -> Vector3:
    """
    Heliocentric position of a body at a calendar epoch.

    Elements are propagated to the epoch (base + rate * T), Kepler's
    equation is solved for the eccentric anomaly and the orbital-plane
    position is rotated into the ecliptic frame.

    Returns:
        (x, y, z) in AU, ecliptic frame, Sun at the origin
    """
    T = julian_centuries_since_j2000(epoch)
    return position_from_elements(elements.at(T), settings)


def heliocentric_distance_au(
    epoch: datetime,
    elements: OrbitalElements,
    settings: SolverSettings = DEFAULT_SOLVER_SETTINGS,
) -> float:
    return norm(position(epoch, elements, settings))


def propagate(
    elements: OrbitalElements,
    epochs: Iterable[datetime],
    settings: SolverSettings = DEFAULT_SOLVER_SETTINGS,
) -> List[Tuple[datetime, Vector3]]:
    """
    Positions across a sequence of epochs.
    Returns list of (epoch, r_ecl).
    """
    out: List[Tuple[datetime, Vector3]] = []
    for epoch in epochs:
        out.append((epoch, position(epoch, elements, settings)))
    return out
