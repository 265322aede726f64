from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from orrery.core.catalog import DEFAULT_CATALOG, ElementCatalog
from orrery.physics.elements import OrbitalElements


@dataclass
class Scenario:
    """
    Container for the bodies tracked in a simulation run.
    Keep this pure: just data + lookup, no stepping logic.
    """
    name: str
    bodies: Dict[str, OrbitalElements] = field(default_factory=dict)

    @classmethod
    def from_catalog(
        cls,
        name: str,
        catalog: ElementCatalog = DEFAULT_CATALOG,
        body_names: Optional[Iterable[str]] = None,
    ) -> "Scenario":
        scenario = cls(name=name)
        for body_name in (catalog if body_names is None else body_names):
            scenario.add_body(catalog[body_name])
        return scenario

    def add_body(self, elements: OrbitalElements) -> None:
        if elements.name in self.bodies:
            raise ValueError(f"Duplicate body ID: {elements.name}")
        self.bodies[elements.name] = elements

    def body_list(self) -> List[OrbitalElements]:
        return list(self.bodies.values())
