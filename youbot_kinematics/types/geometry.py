from dataclasses import dataclass

import numpy as np

from youbot_kinematics.utils.rot_utils import matrix_to_rpy, rpy_to_matrix


@dataclass
class SE3Pose:
    """
    Represents a 6D pose in SE(3) - position and orientation.
    Orientation is stored as a 3x3 rotation matrix.
    """

    position: np.ndarray  # (3,) xyz
    rotation: np.ndarray  # (3, 3) rotation matrix

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.rotation = np.asarray(self.rotation, dtype=np.float64)
        if self.position.shape != (3,):
            raise ValueError(f"Position must be shape (3,), got {self.position.shape}")
        if self.rotation.shape != (3, 3):
            raise ValueError(
                f"Rotation must be shape (3, 3), got {self.rotation.shape}"
            )

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "SE3Pose":
        """Create SE3Pose from 4x4 homogeneous transformation matrix."""
        matrix = np.asarray(matrix)
        if matrix.shape != (4, 4):
            raise ValueError(f"Matrix must be shape (4, 4), got {matrix.shape}")
        return cls(position=matrix[:3, 3], rotation=matrix[:3, :3])

    @classmethod
    def from_position_rpy(
        cls, position: np.ndarray, roll: float, pitch: float, yaw: float = 0.0
    ) -> "SE3Pose":
        """Create SE3Pose from position and the arm's roll-pitch-yaw angles."""
        position = np.asarray(position)
        rotation = rpy_to_matrix(roll, pitch, yaw)
        return cls(position=position, rotation=rotation)

    def to_matrix(self) -> np.ndarray:
        """Convert to 4x4 homogeneous transformation matrix."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation
        matrix[:3, 3] = self.position
        return matrix

    def to_rpy(self) -> tuple[float, float, float]:
        """Convert rotation to the arm's roll-pitch-yaw angles."""
        return matrix_to_rpy(self.rotation)
