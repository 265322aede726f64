# src/orrery/physics/elements.py

from __future__ import annotations

import math
from dataclasses import dataclass, fields

ELEMENT_FIELDS = ("a_au", "e", "inc_deg", "mean_lon_deg", "argp_deg", "node_deg")
RATE_FIELDS = tuple(f"{name}_cy" for name in ELEMENT_FIELDS)


@dataclass(frozen=True)
class PropagatedElements:
    """
    Osculating elements evaluated at one epoch (rates already applied).

    Unlike OrbitalElements it has no rate fields (rather than zeroed ones)
    and records the T it was evaluated at.

    Units:
        a_au: semi-major axis in AU
        e: eccentricity
        inc_deg, mean_lon_deg, argp_deg, node_deg: degrees
        centuries: Julian centuries since J2000.0 the elements were evaluated at
    """
    name: str
    a_au: float
    e: float
    inc_deg: float
    mean_lon_deg: float
    argp_deg: float
    node_deg: float
    centuries: float = 0.0


@dataclass(frozen=True)
class OrbitalElements:
    """
    Keplerian elements at J2000.0 plus their secular rates per Julian century.

    Each base element is paired with a rate (the `_cy` suffix); a zero rate
    is valid. Values follow the JPL low-precision planetary ephemeris
    tables: a in AU, e dimensionless, angles in degrees.

    Units:
        a_au: semi-major axis (AU)
        e: eccentricity (0<=e<1)
        inc_deg: inclination I
        mean_lon_deg: mean longitude L
        argp_deg: argument of perihelion w
        node_deg: longitude of the ascending node
    """
    name: str
    a_au: float
    e: float
    inc_deg: float
    mean_lon_deg: float
    argp_deg: float
    node_deg: float
    a_au_cy: float = 0.0
    e_cy: float = 0.0
    inc_deg_cy: float = 0.0
    mean_lon_deg_cy: float = 0.0
    argp_deg_cy: float = 0.0
    node_deg_cy: float = 0.0

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Body name cannot be empty or whitespace.")
        for f in fields(self):
            if f.name == "name":
                continue
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite. Got: {value}")
        if self.a_au <= 0:
            raise ValueError(f"Semi-major axis must be positive. Got: {self.a_au}")
        if not (0.0 <= self.e < 1.0):
            raise ValueError(f"Only elliptic orbits are supported (0 <= e < 1). Got: {self.e}")

    def at(self, centuries: float) -> PropagatedElements:
        """Evaluate every element as base + rate * T."""
        return PropagatedElements(
            name=self.name,
            a_au=self.a_au + self.a_au_cy * centuries,
            e=self.e + self.e_cy * centuries,
            inc_deg=self.inc_deg + self.inc_deg_cy * centuries,
            mean_lon_deg=self.mean_lon_deg + self.mean_lon_deg_cy * centuries,
            argp_deg=self.argp_deg + self.argp_deg_cy * centuries,
            node_deg=self.node_deg + self.node_deg_cy * centuries,
            centuries=centuries,
        )

    def without_rates(self) -> "OrbitalElements":
        """Same base elements with all secular rates set to zero."""
        return OrbitalElements(
            name=self.name,
            a_au=self.a_au,
            e=self.e,
            inc_deg=self.inc_deg,
            mean_lon_deg=self.mean_lon_deg,
            argp_deg=self.argp_deg,
            node_deg=self.node_deg,
        )
