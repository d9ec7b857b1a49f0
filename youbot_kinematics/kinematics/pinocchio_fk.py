"""
Pinocchio-based forward kinematics of the arm.

Used to verify IK solutions. The analytical solver itself does not need it.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any

import numpy as np
from scipy.spatial.transform import Rotation

from youbot_kinematics.types import NUM_JOINTS, ArmGeometry, SE3Pose

pin = importlib.import_module("pinocchio")


@dataclass
class PinocchioContext:
    """Context holding Pinocchio model and data for FK computations."""

    model: Any
    data: Any
    geometry: ArmGeometry
    joint_names: list[str]
    joint_ids: list[int]


def create_pinocchio_context(
    geometry: ArmGeometry | None = None,
    joint_names: list[str] | None = None,
) -> PinocchioContext:
    """
    Build a Pinocchio model of the arm from its geometry.

    Input:
        geometry: Arm geometry (youBot defaults if None)
        joint_names: Names given to the 5 joints
    Output:
        PinocchioContext containing model and data for FK computations
    """
    if geometry is None:
        geometry = ArmGeometry()
    if joint_names is None:
        joint_names = [f"arm_joint_{i}" for i in range(1, NUM_JOINTS + 1)]
    if len(joint_names) != NUM_JOINTS:
        raise ValueError(f"Expected {NUM_JOINTS} joint names, got {len(joint_names)}")

    # Joint axes and placements relative to the parent joint, arm pointing up
    chain = [
        (pin.JointModelRZ(), geometry.base_offset),
        (pin.JointModelRY(), geometry.shoulder_offset),
        (pin.JointModelRY(), np.array([0.0, 0.0, geometry.upper_arm_length])),
        (pin.JointModelRY(), np.array([0.0, 0.0, geometry.forearm_length])),
        (pin.JointModelRZ(), np.array([0.0, 0.0, geometry.wrist_length])),
    ]

    model = pin.Model()
    joint_ids = []
    parent_id = 0
    for name, (joint_model, translation) in zip(joint_names, chain):
        placement = pin.SE3(np.eye(3), np.asarray(translation, dtype=np.float64))
        parent_id = model.addJoint(parent_id, joint_model, placement, name)
        joint_ids.append(parent_id)

    return PinocchioContext(
        model=model,
        data=model.createData(),
        geometry=geometry,
        joint_names=list(joint_names),
        joint_ids=joint_ids,
    )


def compute_forward_kinematics(
    context: PinocchioContext,
    joint_positions: np.ndarray,
) -> SE3Pose:
    """
    Compute forward kinematics for the end effector.

    Input:
        context: Pinocchio context with model and data
        joint_positions: Joint positions in the arm's joint convention, shape (5,)
    Output:
        SE3Pose of the tool point
    """
    q = _to_pinocchio_config(context, joint_positions)
    pin.forwardKinematics(context.model, context.data, q)

    oMi = context.data.oMi[context.joint_ids[-1]]

    return SE3Pose(
        position=np.array(oMi.translation),
        rotation=np.array(oMi.rotation),
    )


def compute_pose_error(achieved: SE3Pose, target: SE3Pose) -> tuple[float, float]:
    """
    Position and orientation distance between two poses.

    Input:
        achieved: Pose reached, e.g. from forward kinematics
        target: Desired pose
    Output:
        (position error in meters, orientation error in radians)
    """
    pos_err = float(np.linalg.norm(achieved.position - target.position))
    R_err = achieved.rotation.T @ target.rotation
    ori_err = float(np.linalg.norm(Rotation.from_matrix(R_err).as_rotvec()))
    return pos_err, ori_err


# --- Internal helper functions ---


def _to_pinocchio_config(
    context: PinocchioContext, joint_positions: np.ndarray
) -> np.ndarray:
    """Convert joint positions to the geometric Pinocchio configuration."""
    joint_positions = np.asarray(joint_positions, dtype=np.float64)
    if joint_positions.shape != (NUM_JOINTS,):
        raise ValueError(
            f"Expected {NUM_JOINTS} joint positions, got shape {joint_positions.shape}"
        )
    q = pin.neutral(context.model)
    angles = context.geometry.to_geometric(joint_positions)
    for i, jid in enumerate(context.joint_ids):
        idx = context.model.joints[jid].idx_q
        q[idx] = angles[i]
    return q
