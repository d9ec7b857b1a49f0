# Analytical solver (primary IK interface)
from .analytical_ik_solver import AnalyticalIKSolver, IKSolverBase, create_ik_solver
from .joint_solver import ALMOST_MINUS_ONE, ALMOST_PLUS_ONE, solve_branch
from .limit_validator import is_solution_valid
from .pose_decomposer import project_goal_into_arm_subspace

# Pinocchio FK (verification of IK solutions)
from .pinocchio_fk import (
    PinocchioContext,
    compute_forward_kinematics,
    compute_pose_error,
    create_pinocchio_context,
)

__all__ = [
    "AnalyticalIKSolver",
    "IKSolverBase",
    "create_ik_solver",
    "ALMOST_MINUS_ONE",
    "ALMOST_PLUS_ONE",
    "solve_branch",
    "is_solution_valid",
    "project_goal_into_arm_subspace",
    "PinocchioContext",
    "create_pinocchio_context",
    "compute_forward_kinematics",
    "compute_pose_error",
]
