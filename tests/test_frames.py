"""
Tests for degree trigonometry and the orbital-plane -> ecliptic rotation.
"""
import math
import pytest

from orrery.core.frames import (
    sin_deg, cos_deg,
    orbital_plane_to_ecliptic,
    dot, sub, scale, norm,
)


class TestVectorOperations:
    def test_dot_product(self):
        a = (1.0, 2.0, 3.0)
        b = (4.0, 5.0, 6.0)
        assert dot(a, b) == 32.0

    def test_subtraction(self):
        assert sub((5.0, 7.0, 9.0), (2.0, 3.0, 4.0)) == (3.0, 4.0, 5.0)

    def test_scale(self):
        assert scale((1.0, -2.0, 0.5), 2.0) == (2.0, -4.0, 1.0)

    def test_norm(self):
        assert norm((3.0, 4.0, 0.0)) == 5.0


class TestDegreeTrig:
    def test_cardinal_angles(self):
        assert sin_deg(90.0) == 1.0
        assert cos_deg(0.0) == 1.0
        assert abs(cos_deg(90.0)) < 1e-15
        assert abs(sin_deg(180.0)) < 1e-15

    def test_matches_radian_trig(self):
        for angle in [-250.0, -30.0, 12.5, 45.0, 123.456, 300.0]:
            assert math.isclose(sin_deg(angle), math.sin(math.radians(angle)), abs_tol=1e-12)
            assert math.isclose(cos_deg(angle), math.cos(math.radians(angle)), abs_tol=1e-12)

    def test_full_turns_are_removed_exactly(self):
        # 750 = 2*360 + 30, reduction by fmod is exact
        assert sin_deg(750.0) == sin_deg(30.0)
        assert math.isclose(cos_deg(-690.0), cos_deg(30.0), abs_tol=1e-15)

    def test_large_angle_keeps_precision(self):
        # Mean longitudes grow by ~1.5e5 deg per century for Mercury
        angle = 149472.0 * 10 + 30.0
        assert math.isclose(sin_deg(angle), 0.5, abs_tol=1e-12)


class TestOrbitalPlaneToEcliptic:
    def test_identity_when_all_angles_zero(self):
        r = orbital_plane_to_ecliptic((0.7, -0.2, 0.0), 0.0, 0.0, 0.0)
        assert r == pytest.approx((0.7, -0.2, 0.0), abs=1e-15)

    def test_argument_of_perihelion_rotates_in_plane(self):
        r = orbital_plane_to_ecliptic((1.0, 0.0, 0.0), 90.0, 0.0, 0.0)
        assert r == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)

    def test_node_rotates_in_plane(self):
        r = orbital_plane_to_ecliptic((1.0, 0.0, 0.0), 0.0, 0.0, 90.0)
        assert r == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)

    def test_inclination_tilts_out_of_ecliptic(self):
        # +y_p lies along the line perpendicular to the node; I=90 sends it to +z
        r = orbital_plane_to_ecliptic((0.0, 1.0, 0.0), 0.0, 90.0, 0.0)
        assert r == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)

    def test_ignores_out_of_plane_component(self):
        a = orbital_plane_to_ecliptic((0.3, 0.4, 0.0), 10.0, 20.0, 30.0)
        b = orbital_plane_to_ecliptic((0.3, 0.4, 99.0), 10.0, 20.0, 30.0)
        assert a == b

    @pytest.mark.parametrize("argp,inc,node", [
        (77.45779628, 7.00497902, 48.33076593),
        (131.6, 3.39, 76.68),
        (-23.9, 1.85, 49.56),
        (200.0, 170.0, 300.0),
    ])
    def test_rotation_preserves_length(self, argp, inc, node):
        r_orb = (0.31, -0.12, 0.0)
        r = orbital_plane_to_ecliptic(r_orb, argp, inc, node)
        assert math.isclose(norm(r), norm(r_orb), rel_tol=1e-12)
