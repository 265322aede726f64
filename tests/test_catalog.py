"""
Tests for the element catalog (lookup, extension by data, JSON load/dump).
"""
import json
import pytest

from orrery.core.catalog import (
    DEFAULT_CATALOG,
    EARTH,
    INNER_PLANETS,
    CatalogError,
    ElementCatalog,
    UnknownBodyError,
    dump_catalog,
    elements_for,
    elements_to_dict,
    load_catalog,
)
from orrery.physics.elements import OrbitalElements


@pytest.fixture
def ceres():
    return OrbitalElements(
        name="Ceres",
        a_au=2.7675, e=0.0758, inc_deg=10.59,
        mean_lon_deg=153.0, argp_deg=73.6, node_deg=80.3,
    )


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestDefaultCatalog:
    def test_inner_planets_present(self):
        for name in INNER_PLANETS:
            assert name in DEFAULT_CATALOG
        assert list(DEFAULT_CATALOG)[:3] == ["Mercury", "Venus", "Earth"]
        assert len(DEFAULT_CATALOG) == 8

    def test_elements_for(self):
        assert elements_for("Earth") is EARTH
        assert DEFAULT_CATALOG.elements_for("Earth") is EARTH

    def test_lookup_ignores_case(self):
        assert elements_for("earth") is EARTH
        assert "MERCURY" in DEFAULT_CATALOG

    def test_earth_node_is_zero_by_convention(self):
        assert EARTH.node_deg == 0.0
        assert EARTH.node_deg_cy == 0.0

    def test_mercury_jpl_values(self):
        mercury = elements_for("Mercury")
        assert mercury.a_au == 0.38709927
        assert mercury.e == 0.20563593
        assert mercury.mean_lon_deg_cy == 149472.67411175

    def test_unknown_body(self):
        with pytest.raises(UnknownBodyError):
            elements_for("Vulcan")
        with pytest.raises(KeyError):
            DEFAULT_CATALOG["Vulcan"]
        assert DEFAULT_CATALOG.get("Vulcan") is None

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CATALOG["Vulcan"] = EARTH


class TestExtension:
    def test_with_bodies_returns_new_catalog(self, ceres):
        extended = DEFAULT_CATALOG.with_bodies(ceres)
        assert "Ceres" in extended
        assert "Ceres" not in DEFAULT_CATALOG
        assert len(extended) == len(DEFAULT_CATALOG) + 1

    def test_duplicate_names_rejected(self):
        with pytest.raises(CatalogError, match="Duplicate body name"):
            DEFAULT_CATALOG.with_bodies(EARTH)

    def test_duplicate_names_rejected_ignoring_case(self):
        twin = OrbitalElements(name="EARTH", a_au=1.0, e=0.0, inc_deg=0.0, mean_lon_deg=0.0, argp_deg=0.0, node_deg=0.0)
        with pytest.raises(CatalogError):
            ElementCatalog([EARTH, twin])

    def test_rejects_non_elements(self):
        with pytest.raises(CatalogError, match="Expected OrbitalElements"):
            ElementCatalog([{"name": "Earth"}])

    def test_subset(self):
        inner = DEFAULT_CATALOG.subset(INNER_PLANETS)
        assert list(inner) == ["Mercury", "Venus", "Earth"]


class TestJsonCatalog:
    def test_dump_then_load(self, tmp_path, ceres):
        path = dump_catalog(DEFAULT_CATALOG.with_bodies(ceres), str(tmp_path / "cat" / "bodies.json"))
        loaded = load_catalog(path)
        assert list(loaded) == list(DEFAULT_CATALOG) + ["Ceres"]
        assert loaded["Earth"] == EARTH
        assert loaded["Ceres"] == ceres

    def test_missing_rate(self, tmp_path):
        entry = elements_to_dict(EARTH)
        del entry["node_deg_cy"]
        path = write_json(tmp_path / "bad.json", {"bodies": [entry]})
        with pytest.raises(CatalogError, match="missing"):
            load_catalog(path)

    def test_unknown_key(self, tmp_path):
        entry = elements_to_dict(EARTH)
        entry["mass_kg"] = 5.97e24
        path = write_json(tmp_path / "bad.json", {"bodies": [entry]})
        with pytest.raises(CatalogError, match="unknown keys"):
            load_catalog(path)

    def test_missing_name(self, tmp_path):
        entry = elements_to_dict(EARTH)
        del entry["name"]
        path = write_json(tmp_path / "bad.json", {"bodies": [entry]})
        with pytest.raises(CatalogError, match="missing a name"):
            load_catalog(path)

    def test_non_numeric_value(self, tmp_path):
        entry = elements_to_dict(EARTH)
        entry["a_au"] = "one"
        path = write_json(tmp_path / "bad.json", {"bodies": [entry]})
        with pytest.raises(CatalogError, match="Earth"):
            load_catalog(path)

    def test_invalid_elements(self, tmp_path):
        entry = elements_to_dict(EARTH)
        entry["e"] = 1.2
        path = write_json(tmp_path / "bad.json", {"bodies": [entry]})
        with pytest.raises(CatalogError, match="Only elliptic orbits"):
            load_catalog(path)

    def test_bodies_list_required(self, tmp_path):
        path = write_json(tmp_path / "bad.json", {"planets": []})
        with pytest.raises(CatalogError, match="'bodies' list"):
            load_catalog(path)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)
