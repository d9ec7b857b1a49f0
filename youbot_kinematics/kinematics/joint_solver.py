"""
Geometric solution of one redundancy branch of the arm.

The goal is solved joint by joint:
- Joint 1 points the arm plane at the goal (or away from it).
- Joints 2 and 3 place the wrist (joint 4) inside the arm plane. This is a
  planar two-link problem with an elbow-up and an elbow-down solution.
- Joint 4 completes the pitch of the gripper.
- Joint 5 sets the roll of the gripper, which is pi-symmetric.
"""

import numpy as np

from youbot_kinematics.config.ik_config import IKConfig
from youbot_kinematics.kinematics.pose_decomposer import base_heading
from youbot_kinematics.types import NUM_JOINTS, ArmGeometry, BranchSelector, SE3Pose
from youbot_kinematics.types.ik import empty_solution
from youbot_kinematics.utils.rot_utils import rot_z, wrap_angle

# Law-of-cosines arguments beyond these are snapped to a straight or folded elbow
ALMOST_PLUS_ONE = 0.9999999
ALMOST_MINUS_ONE = -0.9999999


def solve_branch(
    goal: SE3Pose,
    branch: BranchSelector,
    geometry: ArmGeometry,
    config: IKConfig | None = None,
) -> np.ndarray:
    """
    Solve the joint angles of a single redundancy branch.

    Input:
        goal: Target pose, already projected into the arm subspace
        branch: Which of the redundant solutions to compute
        geometry: Arm geometry
        config: Solver tolerances (uses defaults if None)
    Output:
        Joint angles, shape (5,), in the arm's joint convention, or an empty
        array if this branch cannot reach the goal
    """
    if config is None:
        config = IKConfig()

    l2 = geometry.upper_arm_length
    l3 = geometry.forearm_length
    d = geometry.wrist_length

    # First joint
    j1 = base_heading(goal.position, geometry)
    if branch.offset_joint_1:
        j1 = wrap_angle(j1 + np.pi)

    # Goal in the frame of joint 2, the arm plane is x-z
    R_heading = rot_z(j1)
    p2 = R_heading.T @ (goal.position - geometry.base_offset) - geometry.shoulder_offset
    R2 = R_heading.T @ goal.rotation

    # Overall pitch of joints 2-4 and roll of the gripper
    j234 = np.arctan2(R2[0, 2], R2[2, 2])
    j5 = np.arctan2(R2[1, 0], R2[1, 1])

    # Offset from the end effector back to the wrist
    x = p2[0] - d * np.sin(j234)
    z = p2[2] - d * np.cos(j234)

    # Third joint
    j3_cos = (x * x + z * z - l2 * l2 - l3 * l3) / (2.0 * l2 * l3)
    if abs(j3_cos) > 1.0 + config.domain_tolerance:
        return empty_solution()

    if j3_cos > ALMOST_PLUS_ONE:
        j3 = 0.0
    elif j3_cos < ALMOST_MINUS_ONE:
        j3 = np.pi
    else:
        j3 = np.arctan2(np.sqrt(1.0 - j3_cos * j3_cos), j3_cos)

    if branch.offset_joint_3:
        j3 = -j3

    # Second joint
    t1 = np.arctan2(z, x)
    t2 = np.arctan2(l3 * np.sin(j3), l2 + l3 * np.cos(j3))
    j2 = np.pi / 2.0 - t1 - t2

    # Fourth joint, determines the pitch of the gripper
    j4 = j234 - j2 - j3

    # Fifth joint, the gripper is symmetric under a half turn
    if branch.offset_joint_5:
        j5 += np.pi

    angles = np.array([wrap_angle(a) for a in (j1, j2, j3, j4, j5)])
    solution = geometry.to_joint_space(angles)

    if solution.shape != (NUM_JOINTS,) or not np.all(np.isfinite(solution)):
        return empty_solution()
    return solution
