from .arm import ArmConfig, ArmGeometry
from .geometry import SE3Pose
from .ik import (
    NUM_JOINTS,
    BranchSelector,
    IKResult,
    IKStatus,
    JointLimits,
    SolverInfo,
)

__all__ = [
    # Geometry
    "SE3Pose",
    # IK
    "NUM_JOINTS",
    "BranchSelector",
    "IKResult",
    "IKStatus",
    "JointLimits",
    "SolverInfo",
    # Arm
    "ArmConfig",
    "ArmGeometry",
]
