"""Analytical IK example: enumerate the redundant solutions of a few goals."""

import logging

import numpy as np

from youbot_kinematics.config.arm_config import ARM_CONFIGS
from youbot_kinematics.kinematics import (
    compute_forward_kinematics,
    compute_pose_error,
    create_ik_solver,
    create_pinocchio_context,
    project_goal_into_arm_subspace,
)
from youbot_kinematics.types import SE3Pose

ARM_NAME = "youbot"

# (position, roll, pitch, yaw)
GOALS = [
    ([0.3, 0.0, 0.2], 0.0, 0.0, 0.0),
    ([0.25, 0.1, 0.05], 0.3, 2.2, 0.0),
    ([0.15, -0.15, 0.35], -0.5, 0.8, 0.4),
    ([0.6, 0.0, 0.2], 0.0, 0.0, 0.0),
]


def main():
    logging.basicConfig(level=logging.INFO)

    solver = create_ik_solver(ARM_NAME)
    fk = create_pinocchio_context(ARM_CONFIGS[ARM_NAME].geometry)

    info = solver.solver_info
    print(f"Joints: {', '.join(info.joint_names)}")
    print(f"Tip link: {solver.ee_frame}")

    for position, roll, pitch, yaw in GOALS:
        goal = SE3Pose.from_position_rpy(np.array(position), roll, pitch, yaw)
        result = solver.solve(goal)

        print(
            f"\nGoal {position} roll={roll:.2f} pitch={pitch:.2f} yaw={yaw:.2f}: "
            f"status {int(result.status)}, {len(result.solutions)} solution(s)"
        )

        # The reachable orientation is the goal with its yaw removed. Solutions
        # on the roll + pi branch differ from it by a half turn of the gripper.
        reachable = project_goal_into_arm_subspace(goal, solver.geometry)
        for q in result.solutions:
            pos_err, ori_err = compute_pose_error(
                compute_forward_kinematics(fk, q), reachable
            )
            print(
                f"  q = {np.array2string(q, precision=4)}  "
                f"pos err {pos_err:.2e} m  ori err {ori_err:.2e} rad"
            )


if __name__ == "__main__":
    main()
