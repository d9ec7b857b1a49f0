from dataclasses import dataclass

import numpy as np

from youbot_kinematics.types.ik import NUM_JOINTS, JointLimits


@dataclass(frozen=True)
class ArmGeometry:
    """Physical constants of the 5-DOF arm.

    Geometric joint angles are measured with the arm pointing straight up.
    The joint-space value reported for joint i is
    joint_offsets[i] + joint_directions[i] * angle.
    """

    base_offset_x: float = 0.024  # Arm base to joint 1 axis (meters)
    base_offset_z: float = 0.096
    shoulder_offset_x: float = 0.033  # Joint 1 to joint 2 (meters)
    shoulder_offset_z: float = 0.019
    upper_arm_length: float = 0.155  # Joint 2 to joint 3 (L2)
    forearm_length: float = 0.135  # Joint 3 to joint 4 (L3)
    wrist_length: float = 0.13  # Joint 4 to tool point (d)
    joint_offsets: tuple[float, ...] = (0.0,) * NUM_JOINTS
    joint_directions: tuple[float, ...] = (1.0,) * NUM_JOINTS

    def __post_init__(self):
        if self.upper_arm_length <= 0 or self.forearm_length <= 0:
            raise ValueError("Link lengths must be > 0")
        if self.wrist_length < 0:
            raise ValueError("wrist_length must be >= 0")
        if len(self.joint_offsets) != NUM_JOINTS:
            raise ValueError(
                f"Expected {NUM_JOINTS} joint offsets, got {len(self.joint_offsets)}"
            )
        if len(self.joint_directions) != NUM_JOINTS:
            raise ValueError(
                f"Expected {NUM_JOINTS} joint directions, "
                f"got {len(self.joint_directions)}"
            )
        if any(d not in (1.0, -1.0) for d in self.joint_directions):
            raise ValueError("Joint directions must be +1 or -1")
        object.__setattr__(
            self, "joint_offsets", tuple(float(o) for o in self.joint_offsets)
        )
        object.__setattr__(
            self, "joint_directions", tuple(float(d) for d in self.joint_directions)
        )

    @property
    def base_offset(self) -> np.ndarray:
        return np.array([self.base_offset_x, 0.0, self.base_offset_z])

    @property
    def shoulder_offset(self) -> np.ndarray:
        return np.array([self.shoulder_offset_x, 0.0, self.shoulder_offset_z])

    def to_joint_space(self, angles: np.ndarray) -> np.ndarray:
        """Map geometric angles onto the arm's joint-space convention."""
        return np.asarray(self.joint_offsets) + np.asarray(
            self.joint_directions
        ) * np.asarray(angles, dtype=np.float64)

    def to_geometric(self, joint_positions: np.ndarray) -> np.ndarray:
        """Inverse of to_joint_space."""
        return (
            np.asarray(joint_positions, dtype=np.float64)
            - np.asarray(self.joint_offsets)
        ) * np.asarray(self.joint_directions)


@dataclass(frozen=True)
class ArmConfig:
    """Named arm: geometry, joint/link names and default joint limits."""

    geometry: ArmGeometry
    joint_names: tuple[str, ...]
    link_names: tuple[str, ...]
    limits: JointLimits
