from dataclasses import dataclass
from enum import IntEnum
from itertools import product
from typing import Iterator

import numpy as np

NUM_JOINTS = 5


class IKStatus(IntEnum):
    """Status code of an IK solve. Negative values are failures."""

    SUCCESS = 0
    NO_SOLUTION = -1


@dataclass(frozen=True)
class BranchSelector:
    """Selects one of the redundant solutions for the same goal pose.

    offset_joint_1: Point joint 1 away from the goal instead of towards it.
    offset_joint_3: Mirror the elbow (elbow-up vs elbow-down).
    offset_joint_5: Turn the gripper by pi about its approach axis.
    """

    offset_joint_1: bool = False
    offset_joint_3: bool = False
    offset_joint_5: bool = False

    @classmethod
    def all(cls) -> Iterator["BranchSelector"]:
        """All 8 branches, joint-1 flag outermost and joint-5 flag innermost."""
        for j1, j3, j5 in product((False, True), repeat=3):
            yield cls(offset_joint_1=j1, offset_joint_3=j3, offset_joint_5=j5)


@dataclass(frozen=True)
class JointLimits:
    """Inclusive per-joint position limits in radians."""

    min_angles: tuple[float, ...]
    max_angles: tuple[float, ...]

    def __post_init__(self):
        min_angles = tuple(float(a) for a in self.min_angles)
        max_angles = tuple(float(a) for a in self.max_angles)
        if len(min_angles) != NUM_JOINTS or len(max_angles) != NUM_JOINTS:
            raise ValueError(
                f"Expected {NUM_JOINTS} limits, "
                f"got min={len(min_angles)}, max={len(max_angles)}"
            )
        if not all(np.isfinite(min_angles)) or not all(np.isfinite(max_angles)):
            raise ValueError("Joint limits must be finite")
        for i, (lo, hi) in enumerate(zip(min_angles, max_angles)):
            if lo > hi:
                raise ValueError(
                    f"Joint {i + 1}: min limit {lo} is greater than max limit {hi}"
                )
        object.__setattr__(self, "min_angles", min_angles)
        object.__setattr__(self, "max_angles", max_angles)

    @classmethod
    def symmetric(cls, bound: float = np.pi) -> "JointLimits":
        """Limits of [-bound, bound] on every joint."""
        return cls(
            min_angles=(-bound,) * NUM_JOINTS, max_angles=(bound,) * NUM_JOINTS
        )

    @property
    def lower(self) -> np.ndarray:
        return np.array(self.min_angles)

    @property
    def upper(self) -> np.ndarray:
        return np.array(self.max_angles)


@dataclass(frozen=True)
class SolverInfo:
    """Static description of the joints and links an IK solver handles."""

    joint_names: tuple[str, ...]
    link_names: tuple[str, ...]
    limits: JointLimits

    def __post_init__(self):
        object.__setattr__(self, "joint_names", tuple(self.joint_names))
        object.__setattr__(self, "link_names", tuple(self.link_names))
        if len(self.joint_names) != NUM_JOINTS:
            raise ValueError(
                f"Expected {NUM_JOINTS} joint names, got {len(self.joint_names)}"
            )


@dataclass(frozen=True)
class IKResult:
    """Result of an IK solve: every limit-valid branch solution, in branch order."""

    status: IKStatus
    solutions: tuple[np.ndarray, ...] = ()

    @property
    def success(self) -> bool:
        return self.status == IKStatus.SUCCESS

    def as_status_and_list(self) -> tuple[int, list[np.ndarray]]:
        """Plain (status code, solution list) form."""
        return int(self.status), list(self.solutions)


def empty_solution() -> np.ndarray:
    """The 'no solution for this branch' sentinel."""
    return np.empty(0, dtype=np.float64)
