"""Closed-form inverse kinematics for the 5-DOF youBot arm.

Every goal pose has up to 8 geometric solutions (joint 1 towards/away from
the goal, elbow up/down, gripper roll or roll + pi). All of them are
computed, and those inside the joint limits are returned in a fixed order.
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from youbot_kinematics.config.arm_config import ARM_CONFIGS
from youbot_kinematics.config.ik_config import IKConfig
from youbot_kinematics.kinematics.joint_solver import solve_branch
from youbot_kinematics.kinematics.limit_validator import is_solution_valid
from youbot_kinematics.kinematics.pose_decomposer import (
    project_goal_into_arm_subspace,
)
from youbot_kinematics.types import (
    ArmGeometry,
    BranchSelector,
    IKResult,
    IKStatus,
    JointLimits,
    SE3Pose,
    SolverInfo,
)

logger = logging.getLogger(__name__)

_DEFAULT_JOINT_NAMES = tuple(f"arm_joint_{i}" for i in range(1, 6))
_DEFAULT_LINK_NAMES = ("arm_link_5",)


@runtime_checkable
class IKSolverBase(Protocol):
    """Protocol for IK solver backends."""

    @property
    def solver_info(self) -> SolverInfo:
        ...

    def solve(
        self,
        target_pose: SE3Pose,
        seed: np.ndarray | None = None,
        config: IKConfig | None = None,
    ) -> IKResult:
        ...


class AnalyticalIKSolver:
    """Geometric IK solver enumerating all redundant solutions of the arm."""

    def __init__(
        self,
        min_angles: Sequence[float],
        max_angles: Sequence[float],
        geometry: ArmGeometry | None = None,
        config: IKConfig | None = None,
        joint_names: Sequence[str] | None = None,
        link_names: Sequence[str] | None = None,
    ) -> None:
        self._limits = JointLimits(
            min_angles=tuple(min_angles), max_angles=tuple(max_angles)
        )
        self._geometry = geometry if geometry is not None else ArmGeometry()
        self._config = config if config is not None else IKConfig()
        self._solver_info = SolverInfo(
            joint_names=tuple(joint_names or _DEFAULT_JOINT_NAMES),
            link_names=tuple(link_names or _DEFAULT_LINK_NAMES),
            limits=self._limits,
        )

    @property
    def solver_info(self) -> SolverInfo:
        """Joint names, link names and joint limits of this solver."""
        return self._solver_info

    @property
    def geometry(self) -> ArmGeometry:
        return self._geometry

    @property
    def base_frame(self) -> str:
        return "arm_link_0"

    @property
    def ee_frame(self) -> str:
        return self._solver_info.link_names[-1]

    @property
    def num_joints(self) -> int:
        return len(self._solver_info.joint_names)

    @property
    def joint_limits(self) -> tuple[np.ndarray, np.ndarray]:
        """Joint limits as (lower_bounds, upper_bounds) arrays."""
        return self._limits.lower, self._limits.upper

    def solve(
        self,
        target_pose: SE3Pose,
        seed: np.ndarray | None = None,
        config: IKConfig | None = None,
    ) -> IKResult:
        """Solve IK for every redundancy branch.

        Input:
            target_pose: Desired end-effector pose. Only position, roll and
                pitch are reachable, yaw is absorbed by joint 1
            seed: Current joint configuration. Accepted for interface
                compatibility, the closed-form solution does not use it
            config: Override default tolerances for this solve
        Output:
            IKResult with every limit-valid solution in branch order
        """
        cfg = config if config is not None else self._config

        solutions: list[np.ndarray] = []
        for branch in BranchSelector.all():
            projected = project_goal_into_arm_subspace(
                target_pose, self._geometry, cfg
            )
            if projected is None:
                logger.debug("%s: goal orientation cannot be projected", branch)
                continue

            solution = solve_branch(projected, branch, self._geometry, cfg)
            if solution.size == 0:
                logger.debug("%s: goal out of reach", branch)
                continue

            if not is_solution_valid(solution, self._limits):
                logger.debug("%s: solution %s violates joint limits", branch, solution)
                continue

            solution.setflags(write=False)
            solutions.append(solution)

        if not solutions:
            logger.debug("No IK solution for goal position %s", target_pose.position)
            return IKResult(status=IKStatus.NO_SOLUTION)

        logger.debug(
            "Found %d IK solution(s) for goal position %s",
            len(solutions),
            target_pose.position,
        )
        return IKResult(status=IKStatus.SUCCESS, solutions=tuple(solutions))

    def cart_to_jnt(
        self, seed: np.ndarray | None, goal: SE3Pose
    ) -> tuple[int, list[np.ndarray]]:
        """Status-code form of solve: (0 or negative code, list of solutions)."""
        return self.solve(goal, seed).as_status_and_list()


def create_ik_solver(
    arm_name: str = "youbot",
    min_angles: Sequence[float] | None = None,
    max_angles: Sequence[float] | None = None,
    config: IKConfig | None = None,
) -> AnalyticalIKSolver:
    """Factory function to create an analytical IK solver for a named arm.

    Input:
        arm_name: Name of the arm (e.g. "youbot", "youbot_upright")
        min_angles: Override the arm's minimum joint limits
        max_angles: Override the arm's maximum joint limits
        config: IK configuration (uses defaults if None)
    Output:
        AnalyticalIKSolver instance

    Examples:
        create_ik_solver("youbot")
        create_ik_solver("youbot_upright", [-1.0] * 5, [1.0] * 5)
    """
    if arm_name not in ARM_CONFIGS:
        available = ", ".join(sorted(ARM_CONFIGS.keys()))
        raise ValueError(f"Unknown arm '{arm_name}'. Available arms: {available}")

    arm = ARM_CONFIGS[arm_name]
    return AnalyticalIKSolver(
        min_angles=arm.limits.min_angles if min_angles is None else min_angles,
        max_angles=arm.limits.max_angles if max_angles is None else max_angles,
        geometry=arm.geometry,
        config=config,
        joint_names=arm.joint_names,
        link_names=arm.link_names,
    )
