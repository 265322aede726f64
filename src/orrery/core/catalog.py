"""
Element catalog: read-only registry of per-body Keplerian elements.

Default values are the JPL "Keplerian Elements for Approximate Positions
of the Major Planets" (Standish & Williams, Table 1, valid 1800-2050 AD):
    element(T) = element_0 + element_dot * T
with T in Julian centuries from J2000.0.
    https://ssd.jpl.nasa.gov/planets/approx_pos.html

New bodies are added as data, either by building a catalog from
OrbitalElements values or by loading a JSON file:
    {"bodies": [{"name": "Mars", "a_au": 1.52371034, "a_au_cy": 0.00001847, ...}]}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List

from orrery.physics.elements import ELEMENT_FIELDS, RATE_FIELDS, OrbitalElements

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Malformed catalog data (missing element or rate, bad value, duplicate body)."""


class UnknownBodyError(KeyError):
    """No element set registered under the requested name."""


MERCURY = OrbitalElements(
    name="Mercury",
    a_au=0.38709927, e=0.20563593, inc_deg=7.00497902,
    mean_lon_deg=252.25032350, argp_deg=77.45779628, node_deg=48.33076593,
    a_au_cy=0.00000037, e_cy=0.00001906, inc_deg_cy=-0.00594749,
    mean_lon_deg_cy=149472.67411175, argp_deg_cy=0.16047689, node_deg_cy=-0.12534081,
)

VENUS = OrbitalElements(
    name="Venus",
    a_au=0.72333566, e=0.00677672, inc_deg=3.39467605,
    mean_lon_deg=181.97909950, argp_deg=131.60246718, node_deg=76.67984255,
    a_au_cy=0.00000390, e_cy=-0.00004107, inc_deg_cy=-0.00078890,
    mean_lon_deg_cy=58517.81538729, argp_deg_cy=0.00268329, node_deg_cy=-0.27769418,
)

# Ascending node fixed at 0 (rate 0): the ecliptic is Earth's own plane
EARTH = OrbitalElements(
    name="Earth",
    a_au=1.00000261, e=0.01671123, inc_deg=-0.00001531,
    mean_lon_deg=100.46457166, argp_deg=102.93768193, node_deg=0.0,
    a_au_cy=0.00000562, e_cy=-0.00004392, inc_deg_cy=-0.01294668,
    mean_lon_deg_cy=35999.37244981, argp_deg_cy=0.32327364, node_deg_cy=0.0,
)

MARS = OrbitalElements(
    name="Mars",
    a_au=1.52371034, e=0.09339410, inc_deg=1.84969142,
    mean_lon_deg=-4.55343205, argp_deg=-23.94362959, node_deg=49.55953891,
    a_au_cy=0.00001847, e_cy=0.00007882, inc_deg_cy=-0.00813131,
    mean_lon_deg_cy=19140.30268499, argp_deg_cy=0.44441088, node_deg_cy=-0.29257343,
)

JUPITER = OrbitalElements(
    name="Jupiter",
    a_au=5.20288700, e=0.04838624, inc_deg=1.30439695,
    mean_lon_deg=34.39644051, argp_deg=14.72847983, node_deg=100.47390909,
    a_au_cy=-0.00011607, e_cy=-0.00013253, inc_deg_cy=-0.00183714,
    mean_lon_deg_cy=3034.74612775, argp_deg_cy=0.21252668, node_deg_cy=0.20469106,
)

SATURN = OrbitalElements(
    name="Saturn",
    a_au=9.53667594, e=0.05386179, inc_deg=2.48599187,
    mean_lon_deg=49.95424423, argp_deg=92.59887831, node_deg=113.66242448,
    a_au_cy=-0.00125060, e_cy=-0.00050991, inc_deg_cy=0.00193609,
    mean_lon_deg_cy=1222.49362201, argp_deg_cy=-0.41897216, node_deg_cy=-0.28867794,
)

URANUS = OrbitalElements(
    name="Uranus",
    a_au=19.18916464, e=0.04725744, inc_deg=0.77263783,
    mean_lon_deg=313.23810451, argp_deg=170.95427630, node_deg=74.01692503,
    a_au_cy=-0.00196176, e_cy=-0.00004397, inc_deg_cy=-0.00242939,
    mean_lon_deg_cy=428.48202785, argp_deg_cy=0.40805281, node_deg_cy=0.04240589,
)

NEPTUNE = OrbitalElements(
    name="Neptune",
    a_au=30.06992276, e=0.00859048, inc_deg=1.77004347,
    mean_lon_deg=-55.12002969, argp_deg=44.96476227, node_deg=131.78422574,
    a_au_cy=0.00026291, e_cy=0.00005105, inc_deg_cy=0.00035372,
    mean_lon_deg_cy=218.45945325, argp_deg_cy=-0.32241464, node_deg_cy=-0.00508664,
)


class ElementCatalog(Mapping):
    """
    Fixed mapping body name -> OrbitalElements.
    Lookups ignore case; iteration yields names as registered.
    """

    def __init__(self, bodies: Iterable[OrbitalElements] = ()):
        by_name: Dict[str, OrbitalElements] = {}
        for elements in bodies:
            if not isinstance(elements, OrbitalElements):
                raise CatalogError(f"Expected OrbitalElements, got {type(elements).__name__}")
            key = elements.name.lower()
            if key in by_name:
                raise CatalogError(f"Duplicate body name: {elements.name}")
            by_name[key] = elements
        self._bodies = MappingProxyType(by_name)

    def __getitem__(self, name: str) -> OrbitalElements:
        try:
            return self._bodies[name.lower()]
        except KeyError:
            raise UnknownBodyError(name) from None

    def __iter__(self) -> Iterator[str]:
        return (elements.name for elements in self._bodies.values())

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._bodies

    def __repr__(self) -> str:
        return f"ElementCatalog({list(self)!r})"

    def elements_for(self, body_name: str) -> OrbitalElements:
        return self[body_name]

    def with_bodies(self, *bodies: OrbitalElements) -> "ElementCatalog":
        """New catalog with extra bodies appended (this one is left untouched)."""
        return ElementCatalog(list(self._bodies.values()) + list(bodies))

    def subset(self, names: Iterable[str]) -> "ElementCatalog":
        return ElementCatalog(self[name] for name in names)


DEFAULT_CATALOG = ElementCatalog([MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE])

# Bodies drawn by the default playback scene
INNER_PLANETS = ("Mercury", "Venus", "Earth")


def elements_for(body_name: str) -> OrbitalElements:
    """Look up a body in the default catalog."""
    return DEFAULT_CATALOG[body_name]


def elements_from_dict(entry: Dict[str, Any]) -> OrbitalElements:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry must be an object. Got: {entry!r}")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Catalog entry is missing a name: {entry!r}")

    expected = set(ELEMENT_FIELDS) | set(RATE_FIELDS) | {"name"}
    unknown = set(entry) - expected
    if unknown:
        raise CatalogError(f"{name}: unknown keys {sorted(unknown)}")
    missing = [key for key in ELEMENT_FIELDS + RATE_FIELDS if key not in entry]
    if missing:
        raise CatalogError(f"{name}: missing {missing}")

    try:
        values = {key: float(entry[key]) for key in ELEMENT_FIELDS + RATE_FIELDS}
        return OrbitalElements(name=name, **values)
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"{name}: {exc}") from exc


def elements_to_dict(elements: OrbitalElements) -> Dict[str, Any]:
    out: Dict[str, Any] = {"name": elements.name}
    for key in ELEMENT_FIELDS + RATE_FIELDS:
        out[key] = getattr(elements, key)
    return out


def load_catalog(path: str) -> ElementCatalog:
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)

    entries = data.get("bodies") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise CatalogError("Catalog file must contain a 'bodies' list.")

    bodies: List[OrbitalElements] = [elements_from_dict(entry) for entry in entries]
    catalog = ElementCatalog(bodies)
    logger.info("Loaded %d bodies from %s", len(catalog), path)
    return catalog


def dump_catalog(catalog: ElementCatalog, out_path: str) -> str:
    data = {"bodies": [elements_to_dict(catalog[name]) for name in catalog]}

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    return out_path
