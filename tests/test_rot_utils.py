import unittest

import numpy as np

from youbot_kinematics.utils.rot_utils import (
    axis_angle_to_matrix,
    matrix_to_rpy,
    rot_y,
    rot_z,
    rpy_to_matrix,
    wrap_angle,
)


class TestRotUtils(unittest.TestCase):
    def test_zero_rpy_is_identity(self):
        np.testing.assert_allclose(rpy_to_matrix(0.0, 0.0, 0.0), np.eye(3))

    def test_rpy_convention(self):
        R = rpy_to_matrix(0.3, 0.7, -1.2)
        np.testing.assert_allclose(R, rot_z(-1.2) @ rot_y(0.7) @ rot_z(0.3))
        # Pitch tilts the approach axis away from vertical
        np.testing.assert_allclose(
            rpy_to_matrix(0.0, 0.5, 0.0)[:, 2], [np.sin(0.5), 0.0, np.cos(0.5)]
        )

    def test_matrix_to_rpy(self):
        roll, pitch, yaw = matrix_to_rpy(rpy_to_matrix(0.3, 0.7, -1.2))
        self.assertAlmostEqual(roll, 0.3)
        self.assertAlmostEqual(pitch, 0.7)
        self.assertAlmostEqual(yaw, -1.2)

    def test_matrix_to_rpy_vertical_approach(self):
        roll, pitch, yaw = matrix_to_rpy(rpy_to_matrix(0.4, 0.0, 0.2))
        self.assertAlmostEqual(roll, 0.6)
        self.assertAlmostEqual(pitch, 0.0)
        self.assertEqual(yaw, 0.0)

        roll, pitch, yaw = matrix_to_rpy(rpy_to_matrix(0.4, np.pi, 0.0))
        self.assertAlmostEqual(roll, 0.4)
        self.assertAlmostEqual(pitch, np.pi)

    def test_axis_angle_normalizes_axis(self):
        np.testing.assert_allclose(
            axis_angle_to_matrix(np.array([0.0, 0.0, 2.0]), np.pi / 2),
            rot_z(np.pi / 2),
            atol=1e-12,
        )

    def test_wrap_angle(self):
        self.assertAlmostEqual(wrap_angle(3 * np.pi / 2), -np.pi / 2)
        self.assertAlmostEqual(wrap_angle(2 * np.pi + 0.5), 0.5)
        self.assertAlmostEqual(wrap_angle(-0.25), -0.25)
        self.assertAlmostEqual(abs(wrap_angle(np.pi)), np.pi)


if __name__ == "__main__":
    unittest.main()
