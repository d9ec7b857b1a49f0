import unittest

import numpy as np

from youbot_kinematics.kinematics.pose_decomposer import (
    base_heading,
    project_goal_into_arm_subspace,
)
from youbot_kinematics.types import ArmGeometry, SE3Pose
from youbot_kinematics.utils.rot_utils import rot_z


class TestPoseDecomposer(unittest.TestCase):
    def setUp(self):
        self.geometry = ArmGeometry()
        self.position = np.array([0.3, 0.1, 0.2])
        self.heading = np.arctan2(0.1, 0.3 - self.geometry.base_offset_x)

    def test_base_heading(self):
        self.assertAlmostEqual(
            base_heading(self.position, self.geometry), self.heading
        )
        self.assertAlmostEqual(base_heading(np.zeros(3), self.geometry), np.pi)

    def test_goal_in_arm_plane_is_unchanged(self):
        goal = SE3Pose.from_position_rpy(self.position, 0.3, 0.5, self.heading)
        projected = project_goal_into_arm_subspace(goal, self.geometry)

        self.assertIsNotNone(projected)
        np.testing.assert_allclose(projected.position, goal.position)
        np.testing.assert_allclose(projected.rotation, goal.rotation, atol=1e-9)

    def test_yaw_is_removed(self):
        goal = SE3Pose.from_position_rpy(self.position, 0.2, 0.6, self.heading + 0.4)
        projected = project_goal_into_arm_subspace(goal, self.geometry)

        self.assertIsNotNone(projected)
        np.testing.assert_allclose(projected.position, goal.position)

        # Approach axis lies in the arm plane
        plane_normal = rot_z(self.heading)[:, 1]
        approach = projected.rotation[:, 2]
        self.assertAlmostEqual(float(np.dot(approach, plane_normal)), 0.0, places=6)

        # It is the in-plane part of the goal's approach axis
        z_goal = goal.rotation[:, 2]
        in_plane = z_goal - np.dot(z_goal, plane_normal) * plane_normal
        in_plane /= np.linalg.norm(in_plane)
        np.testing.assert_allclose(approach, in_plane, atol=1e-6)

        # Still a rotation
        R = projected.rotation
        np.testing.assert_allclose(R.T @ R, np.eye(3), atol=1e-5)
        self.assertAlmostEqual(float(np.linalg.det(R)), 1.0, places=5)

    def test_projection_is_idempotent(self):
        goal = SE3Pose.from_position_rpy(self.position, -0.7, 1.1, self.heading - 0.9)
        once = project_goal_into_arm_subspace(goal, self.geometry)
        twice = project_goal_into_arm_subspace(once, self.geometry)
        np.testing.assert_allclose(twice.rotation, once.rotation, atol=1e-6)

    def test_approach_normal_to_arm_plane(self):
        # Heading 0, approach axis along +y
        goal = SE3Pose(
            position=np.array([0.5, 0.0, 0.2]),
            rotation=np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, -1.0, 0.0]]),
        )
        self.assertIsNone(project_goal_into_arm_subspace(goal, self.geometry))

    def test_does_not_check_reachability(self):
        goal = SE3Pose.from_position_rpy([10.0, 0.0, 10.0], 0.0, 0.0)
        projected = project_goal_into_arm_subspace(goal, self.geometry)
        self.assertIsNotNone(projected)
        np.testing.assert_allclose(projected.rotation, np.eye(3))


if __name__ == "__main__":
    unittest.main()
