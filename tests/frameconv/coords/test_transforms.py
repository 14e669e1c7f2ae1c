"""Unit tests for orientation and vector frame transformations.

Test cases include:
- Left vs right multiplication of orientation quaternions
- Known headings after NED/aircraft -> ENU/base_link conversion
- Round trips, involutions and norm preservation for vectors
- Arbitrary rotation by per-sample quaternions
- ECEF <-> ENU rotation at a map origin
"""

import inspect
import unittest

import numpy as np

from frameconv.coords import transforms
from frameconv.coords.frames import FramePair, StaticTF
from frameconv.coords.rotations import (
    axis_angle_to_quat,
    euler_to_quat,
    quat_multiply,
    quaternion_get_yaw,
    rotate_vector,
)
from frameconv.coords.static_rotations import (
    AIRCRAFT_BASELINK_Q,
    NED_ENU_Q,
    RotationTable,
)
from frameconv.coords.transforms import (
    transform_frame,
    transform_frame_aircraft_baselink,
    transform_frame_aircraft_enu,
    transform_frame_aircraft_ned,
    transform_frame_baselink_aircraft,
    transform_frame_ecef_enu,
    transform_frame_enu_aircraft,
    transform_frame_enu_ecef,
    transform_frame_enu_ned,
    transform_frame_ned_aircraft,
    transform_frame_ned_enu,
    transform_orientation,
    transform_orientation_aircraft_baselink,
    transform_orientation_baselink_aircraft,
    transform_orientation_enu_ned,
    transform_orientation_ned_enu,
    transform_static_frame,
)

IDENTITY_Q = np.array([1.0, 0.0, 0.0, 0.0])


def _random_unit_quats(count: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    q = rng.normal(size=(count, 4))
    return q / np.linalg.norm(q, axis=1, keepdims=True)


def _random_vectors(count: int, seed: int = 0) -> np.ndarray:
    return np.random.default_rng(seed).uniform(-100.0, 100.0, size=(count, 3))


class TestTransformOrientation(unittest.TestCase):
    """Test cases for orientation quaternion conversion."""

    def test_identity_ned_to_enu(self) -> None:
        """Test the identity orientation maps to NED_ENU_Q."""
        q = transform_orientation(IDENTITY_Q, StaticTF.NED_TO_ENU)

        np.testing.assert_allclose(q, NED_ENU_Q, atol=1e-15)

    def test_identity_aircraft_to_baselink(self) -> None:
        """Test the identity orientation maps to AIRCRAFT_BASELINK_Q."""
        q = transform_orientation(IDENTITY_Q, StaticTF.AIRCRAFT_TO_BASELINK)

        np.testing.assert_allclose(q, AIRCRAFT_BASELINK_Q, atol=1e-15)

    def test_world_tags_left_multiply(self) -> None:
        """Test NED/ENU conversions compute NED_ENU_Q ⊗ q."""
        for q in _random_unit_quats(8):
            for tag in (StaticTF.NED_TO_ENU, StaticTF.ENU_TO_NED):
                with self.subTest(q=q, tag=tag):
                    np.testing.assert_allclose(
                        transform_orientation(q, tag),
                        quat_multiply(NED_ENU_Q, q),
                        atol=1e-15,
                    )

    def test_body_tags_right_multiply(self) -> None:
        """Test aircraft/base_link conversions compute q ⊗ AIRCRAFT_BASELINK_Q."""
        for q in _random_unit_quats(8, seed=1):
            for tag in (StaticTF.AIRCRAFT_TO_BASELINK, StaticTF.BASELINK_TO_AIRCRAFT):
                with self.subTest(q=q, tag=tag):
                    np.testing.assert_allclose(
                        transform_orientation(q, tag),
                        quat_multiply(q, AIRCRAFT_BASELINK_Q),
                        atol=1e-15,
                    )

    def test_side_matters(self) -> None:
        """Test the world conversion is not the body-side product."""
        q = euler_to_quat(0.1, 0.2, 0.3)

        self.assertFalse(
            np.allclose(
                transform_orientation(q, StaticTF.NED_TO_ENU),
                quat_multiply(q, NED_ENU_Q),
            )
        )

    def test_north_facing_vehicle(self) -> None:
        """Test a level vehicle facing North has ENU yaw π/2."""
        q_enu = transform_orientation(IDENTITY_Q, StaticTF.NED_TO_ENU)
        q_enu_baselink = transform_orientation(q_enu, StaticTF.AIRCRAFT_TO_BASELINK)

        # Nose points North, which is +y in ENU
        np.testing.assert_allclose(rotate_vector([1.0, 0.0, 0.0], q_enu), [0.0, 1.0, 0.0], atol=1e-12)
        self.assertAlmostEqual(quaternion_get_yaw(q_enu_baselink), np.pi / 2.0, places=12)

    def test_heading_maps_to_enu_yaw(self) -> None:
        """Test NED heading ψ becomes ENU yaw π/2 - ψ."""
        for heading in (0.3, 1.0, -2.0):
            with self.subTest(heading=heading):
                q_ned = euler_to_quat(0.0, 0.0, heading)

                q_enu = transform_orientation_aircraft_baselink(
                    transform_orientation_ned_enu(q_ned)
                )

                expected = np.arctan2(np.sin(np.pi / 2.0 - heading), np.cos(np.pi / 2.0 - heading))
                self.assertAlmostEqual(quaternion_get_yaw(q_enu), expected, places=12)

    def test_round_trip(self) -> None:
        """Test converting there and back recovers the rotation."""
        for q in _random_unit_quats(5, seed=2):
            with self.subTest(q=q):
                back = transform_orientation_enu_ned(transform_orientation_ned_enu(q))
                back = transform_orientation_baselink_aircraft(
                    transform_orientation_aircraft_baselink(back)
                )

                # q and -q are the same rotation
                sign = np.sign(np.dot(back, q))
                np.testing.assert_allclose(sign * back, q, atol=1e-12)

    def test_no_renormalization(self) -> None:
        """Test the norm of the input carries through unchanged."""
        q = 2.0 * euler_to_quat(0.1, 0.2, 0.3)

        for tag in StaticTF:
            with self.subTest(tag=tag):
                self.assertAlmostEqual(np.linalg.norm(transform_orientation(q, tag)), 2.0, places=12)

    def test_string_tag(self) -> None:
        """Test tags can be given by value."""
        np.testing.assert_allclose(
            transform_orientation(IDENTITY_Q, "ned_to_enu"), NED_ENU_Q, atol=1e-15
        )

    def test_unknown_tag(self) -> None:
        """Test unknown tags raise ValueError."""
        with self.assertRaises(ValueError):
            transform_orientation(IDENTITY_Q, "enu_to_ecef")  # type: ignore[arg-type]

    def test_invalid_quaternion_shape(self) -> None:
        """Test that invalid quaternion shape raises ValueError."""
        with self.assertRaises(ValueError):
            transform_orientation(np.zeros(3), StaticTF.NED_TO_ENU)


class TestTransformStaticFrame(unittest.TestCase):
    """Test cases for static vector conversion."""

    def test_ned_to_enu(self) -> None:
        """Test (north, east, down) becomes (east, north, up)."""
        v_enu = transform_static_frame([1.0, 2.0, 3.0], StaticTF.NED_TO_ENU)

        np.testing.assert_allclose(v_enu, [2.0, 1.0, -3.0], atol=1e-12)

    def test_aircraft_to_baselink_axes(self) -> None:
        """Test forward stays, right becomes -left, down becomes -up."""
        cases = [
            ([1.0, 0.0, 0.0], [1.0, 0.0, 0.0]),
            ([0.0, 1.0, 0.0], [0.0, -1.0, 0.0]),
            ([0.0, 0.0, 1.0], [0.0, 0.0, -1.0]),
        ]

        for v, expected in cases:
            with self.subTest(v=v):
                np.testing.assert_allclose(
                    transform_static_frame(v, StaticTF.AIRCRAFT_TO_BASELINK),
                    expected,
                    atol=1e-12,
                )

    def test_ned_enu_round_trip(self) -> None:
        """Test NED -> ENU -> NED recovers the input."""
        for v in _random_vectors(10):
            with self.subTest(v=v):
                v_enu = transform_static_frame(v, StaticTF.NED_TO_ENU)
                v_ned = transform_static_frame(v_enu, StaticTF.ENU_TO_NED)

                np.testing.assert_allclose(v_ned, v, atol=1e-12)

    def test_aircraft_baselink_self_inverse(self) -> None:
        """Test applying AIRCRAFT_TO_BASELINK twice recovers the input."""
        for v in _random_vectors(10, seed=1):
            with self.subTest(v=v):
                twice = transform_static_frame(
                    transform_static_frame(v, StaticTF.AIRCRAFT_TO_BASELINK),
                    StaticTF.AIRCRAFT_TO_BASELINK,
                )

                np.testing.assert_allclose(twice, v, atol=1e-12)

    def test_norm_preserved(self) -> None:
        """Test every tag preserves vector length."""
        vs = _random_vectors(20, seed=2)

        for tag in StaticTF:
            with self.subTest(tag=tag):
                result = transform_static_frame(vs, tag)

                np.testing.assert_allclose(
                    np.linalg.norm(result, axis=1), np.linalg.norm(vs, axis=1), rtol=1e-12
                )

    def test_stacked_vectors(self) -> None:
        """Test (N, 3) input converts each row."""
        vs = _random_vectors(5, seed=3)

        result = transform_static_frame(vs, StaticTF.ENU_TO_NED)

        self.assertEqual(result.shape, vs.shape)
        np.testing.assert_allclose(result[:, 0], vs[:, 1], atol=1e-12)
        np.testing.assert_allclose(result[:, 1], vs[:, 0], atol=1e-12)
        np.testing.assert_allclose(result[:, 2], -vs[:, 2], atol=1e-12)

    def test_named_wrappers(self) -> None:
        """Test named conversions match the tagged form."""
        v = np.array([3.0, -1.0, 7.0])
        wrappers = {
            StaticTF.NED_TO_ENU: transform_frame_ned_enu,
            StaticTF.ENU_TO_NED: transform_frame_enu_ned,
            StaticTF.AIRCRAFT_TO_BASELINK: transform_frame_aircraft_baselink,
            StaticTF.BASELINK_TO_AIRCRAFT: transform_frame_baselink_aircraft,
        }

        for tag, wrapper in wrappers.items():
            with self.subTest(tag=tag):
                np.testing.assert_array_equal(wrapper(v), transform_static_frame(v, tag))

    def test_custom_table(self) -> None:
        """Test an explicit rotation table replaces the static one."""
        table = RotationTable(
            {pair: IDENTITY_Q for pair in FramePair},
            {pair: np.eye(3) for pair in FramePair},
        )
        v = np.array([1.0, 2.0, 3.0])

        for tag in StaticTF:
            with self.subTest(tag=tag):
                np.testing.assert_array_equal(transform_static_frame(v, tag, table=table), v)
                np.testing.assert_array_equal(
                    transform_orientation(IDENTITY_Q, tag, table=table), IDENTITY_Q
                )

    def test_invalid_vector_shape(self) -> None:
        """Test that a non 3-D vector raises ValueError."""
        with self.assertRaises(ValueError):
            transform_static_frame([1.0, 2.0], StaticTF.NED_TO_ENU)


class TestTransformFrame(unittest.TestCase):
    """Test cases for rotation by an arbitrary quaternion."""

    def test_90_degree_yaw(self) -> None:
        """Test rotation by 90° about z."""
        q = axis_angle_to_quat([0.0, 0.0, 1.0], np.pi / 2.0)

        np.testing.assert_allclose(transform_frame([1.0, 0.0, 0.0], q), [0.0, 1.0, 0.0], atol=1e-12)

    def test_identity(self) -> None:
        """Test identity quaternion leaves vectors unchanged."""
        v = np.array([4.0, 5.0, 6.0])

        np.testing.assert_allclose(transform_frame(v, IDENTITY_Q), v, atol=1e-15)

    def test_quaternion_is_normalized(self) -> None:
        """Test a non-unit quaternion rotates without scaling."""
        q = euler_to_quat(0.4, -0.3, 1.2)
        v = np.array([1.0, 2.0, 3.0])

        result = transform_frame(v, 5.0 * q)

        np.testing.assert_allclose(result, transform_frame(v, q), atol=1e-12)
        self.assertAlmostEqual(np.linalg.norm(result), np.linalg.norm(v), places=12)

    def test_inverse_rotation(self) -> None:
        """Test rotating by q then by q* recovers the input."""
        q = euler_to_quat(0.4, -0.3, 1.2)
        q_inv = q * np.array([1.0, -1.0, -1.0, -1.0])
        v = np.array([1.0, 2.0, 3.0])

        np.testing.assert_allclose(transform_frame(transform_frame(v, q), q_inv), v, atol=1e-12)

    def test_named_wrappers(self) -> None:
        """Test direction-named wrappers rotate by the given quaternion."""
        q = euler_to_quat(0.1, 0.2, 0.3)
        v = np.array([1.0, 0.0, -1.0])
        expected = transform_frame(v, q)

        for wrapper in (
            transform_frame_aircraft_ned,
            transform_frame_ned_aircraft,
            transform_frame_aircraft_enu,
            transform_frame_enu_aircraft,
        ):
            with self.subTest(wrapper=wrapper.__name__):
                np.testing.assert_array_equal(wrapper(v, q), expected)


class TestEcefEnu(unittest.TestCase):
    """Test cases for ECEF <-> ENU vector rotation."""

    def test_equator_prime_meridian(self) -> None:
        """Test ECEF axes at 0°N 0°E map to Up, East and North."""
        origin = (0.0, 0.0, 0.0)

        np.testing.assert_allclose(transform_frame_ecef_enu([1.0, 0.0, 0.0], origin), [0.0, 0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(transform_frame_ecef_enu([0.0, 1.0, 0.0], origin), [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(transform_frame_ecef_enu([0.0, 0.0, 1.0], origin), [0.0, 1.0, 0.0], atol=1e-12)

    def test_north_pole(self) -> None:
        """Test ECEF z points Up at the North Pole."""
        v = transform_frame_ecef_enu([0.0, 0.0, 1.0], (90.0, 0.0, 0.0))

        np.testing.assert_allclose(v, [0.0, 0.0, 1.0], atol=1e-12)

    def test_altitude_ignored(self) -> None:
        """Test the map origin altitude does not change the rotation."""
        v = np.array([10.0, -20.0, 30.0])

        np.testing.assert_allclose(
            transform_frame_ecef_enu(v, (22.3, 114.2, 0.0)),
            transform_frame_ecef_enu(v, (22.3, 114.2, 5000.0)),
            atol=1e-12,
        )

    def test_round_trip(self) -> None:
        """Test ECEF -> ENU -> ECEF recovers the input."""
        origin = (37.7749, -122.4194, 16.0)

        for v in _random_vectors(5, seed=4):
            with self.subTest(v=v):
                back = transform_frame_enu_ecef(transform_frame_ecef_enu(v, origin), origin)

                np.testing.assert_allclose(back, v, atol=1e-9)


class TestPublicApi(unittest.TestCase):
    """Test cases for the exported transform functions."""

    def test_exported_functions_have_docstrings(self) -> None:
        """Test every exported function carries a docstring."""
        for name, obj in inspect.getmembers(transforms, inspect.isfunction):
            if name.startswith("_") or obj.__module__ != transforms.__name__:
                continue
            with self.subTest(name=name):
                self.assertTrue(inspect.getdoc(obj))


if __name__ == "__main__":
    unittest.main()
