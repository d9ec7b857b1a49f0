"""
Projection of goal orientations into the orientation subspace of the arm.

Joints 2-4 all rotate about the same axis, so the gripper's approach axis
always lies in the vertical plane spanned by the base Z axis and the
heading of joint 1. A goal whose approach axis leaves that plane (a yaw
relative to the heading) is rotated back into it by the smallest rotation
that does so.
"""

import numpy as np

from youbot_kinematics.config.ik_config import IKConfig
from youbot_kinematics.types import ArmGeometry, SE3Pose
from youbot_kinematics.utils.rot_utils import axis_angle_to_matrix, rot_z

# Normal of the arm plane, expressed in the heading frame
_ARM_PLANE_NORMAL = np.array([0.0, -1.0, 0.0])


def base_heading(position: np.ndarray, geometry: ArmGeometry) -> float:
    """Heading of a position about the joint 1 axis (radians)."""
    p1 = np.asarray(position, dtype=np.float64) - geometry.base_offset
    return float(np.arctan2(p1[1], p1[0]))


def project_goal_into_arm_subspace(
    goal: SE3Pose,
    geometry: ArmGeometry,
    config: IKConfig | None = None,
) -> SE3Pose | None:
    """
    Remove the yaw of a goal pose relative to the arm's heading.

    Input:
        goal: Target pose of the end effector in the arm base frame
        geometry: Arm geometry (locates the joint 1 axis)
        config: Solver tolerances (uses defaults if None)
    Output:
        SE3Pose with the goal position and the projected orientation, or None
        when the approach axis is normal to the arm plane
    """
    if config is None:
        config = IKConfig()

    heading = base_heading(goal.position, geometry)
    R_heading = rot_z(heading)

    # Orientation in the heading frame, where the arm plane is x-z
    R_local = R_heading.T @ goal.rotation
    z_t = R_local[:, 2]

    # Axis about which the goal frame is rotated
    k = np.cross(_ARM_PLANE_NORMAL, z_t)
    k_norm = np.linalg.norm(k)
    if k_norm < config.zero_threshold:
        return None
    k = k / k_norm

    # New approach direction: z_t with its out-of-plane component removed
    z_t_proj = np.cross(k, _ARM_PLANE_NORMAL)

    cos_theta = float(np.dot(z_t, z_t_proj))
    sin_theta = float(np.dot(np.cross(z_t, z_t_proj), k))
    R_proj = axis_angle_to_matrix(k, np.arctan2(sin_theta, cos_theta)) @ R_local

    R_proj[np.abs(R_proj) < config.zero_threshold] = 0.0

    return SE3Pose(position=goal.position.copy(), rotation=R_heading @ R_proj)
