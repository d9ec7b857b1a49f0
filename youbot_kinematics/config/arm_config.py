import numpy as np

from youbot_kinematics.types.arm import ArmConfig, ArmGeometry
from youbot_kinematics.types.ik import JointLimits

YOUBOT_JOINT_NAMES = (
    "arm_joint_1",
    "arm_joint_2",
    "arm_joint_3",
    "arm_joint_4",
    "arm_joint_5",
)

YOUBOT_LINK_NAMES = ("arm_link_5",)

# Joint angles of the candle (straight up) pose in the youBot joint convention
YOUBOT_CANDLE_OFFSETS = (
    np.deg2rad(169.0),
    np.deg2rad(65.0),
    np.deg2rad(-146.0),
    np.deg2rad(102.5),
    np.deg2rad(167.5),
)

YOUBOT_MIN_ANGLES = (0.0100692, 0.0100692, -5.0265482, 0.0221239, 0.1106190)
YOUBOT_MAX_ANGLES = (5.8401400, 2.6179900, -0.0157080, 3.4292000, 5.6415900)

ARM_CONFIGS: dict[str, ArmConfig] = {
    "youbot": ArmConfig(
        geometry=ArmGeometry(
            joint_offsets=YOUBOT_CANDLE_OFFSETS,
            joint_directions=(-1.0, 1.0, 1.0, 1.0, -1.0),
        ),
        joint_names=YOUBOT_JOINT_NAMES,
        link_names=YOUBOT_LINK_NAMES,
        limits=JointLimits(min_angles=YOUBOT_MIN_ANGLES, max_angles=YOUBOT_MAX_ANGLES),
    ),
    "youbot_upright": ArmConfig(
        geometry=ArmGeometry(),
        joint_names=YOUBOT_JOINT_NAMES,
        link_names=YOUBOT_LINK_NAMES,
        limits=JointLimits.symmetric(np.pi),
    ),
}
