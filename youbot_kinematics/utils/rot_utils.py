"""Rotation utility functions for the arm's orientation conventions."""

import numpy as np


def rot_y(angle: float) -> np.ndarray:
    """
    Elementary rotation about the Y axis.

    Input:
        angle: Rotation angle in radians
    Output:
        rotation matrix, shape (3, 3)
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rot_z(angle: float) -> np.ndarray:
    """
    Elementary rotation about the Z axis.

    Input:
        angle: Rotation angle in radians
    Output:
        rotation matrix, shape (3, 3)
    """
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def rpy_to_matrix(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """
    Convert the arm's roll-pitch-yaw to a rotation matrix.

    The arm convention is R = Rz(yaw) @ Ry(pitch) @ Rz(roll): yaw turns the
    approach (Z) axis about the base, pitch tilts it away from vertical and
    roll spins the gripper about it.

    Input:
        roll: Rotation about the approach axis (radians)
        pitch: Tilt of the approach axis from the base Z axis (radians)
        yaw: Heading of the approach axis about the base Z axis (radians)
    Output:
        rotation matrix, shape (3, 3)
    """
    return rot_z(yaw) @ rot_y(pitch) @ rot_z(roll)


def matrix_to_rpy(rot: np.ndarray) -> tuple[float, float, float]:
    """
    Convert rotation matrix to the arm's roll-pitch-yaw.

    Pitch is returned in [0, pi]. When the approach axis is vertical only
    roll + yaw (or roll - yaw) is defined, so yaw is reported as 0.

    Input:
        rot: Rotation matrix, shape (3, 3)
    Output:
        (roll, pitch, yaw) in radians
    """
    rot = np.asarray(rot, dtype=np.float64)

    sin_pitch = np.hypot(rot[0, 2], rot[1, 2])
    pitch = float(np.arctan2(sin_pitch, rot[2, 2]))

    if sin_pitch > 1e-10:
        yaw = float(np.arctan2(rot[1, 2], rot[0, 2]))
        roll = float(np.arctan2(rot[2, 1], -rot[2, 0]))
    else:
        # Gimbal lock
        yaw = 0.0
        roll = float(np.arctan2(rot[1, 0], rot[1, 1]))

    return roll, pitch, yaw


def axis_angle_to_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Convert axis-angle representation to rotation matrix (Rodrigues formula).

    Input:
        axis: Rotation axis, shape (3,), normalized here
        angle: Rotation angle in radians
    Output:
        rotation matrix, shape (3, 3)
    """
    axis = np.asarray(axis, dtype=np.float64)
    axis = axis / np.linalg.norm(axis)

    K = np.array(
        [[0, -axis[2], axis[1]], [axis[2], 0, -axis[0]], [-axis[1], axis[0], 0]]
    )

    return np.eye(3) + np.sin(angle) * K + (1 - np.cos(angle)) * (K @ K)


def wrap_angle(angle: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    return float(np.arctan2(np.sin(angle), np.cos(angle)))
