"""Build script for the youBot analytical IK package.

Pinocchio is installed from PyPI as ``pin`` and only needed for forward
kinematics (verification of IK solutions).
"""

from setuptools import find_packages, setup

setup(
    name="youbot-kinematics",
    version="0.1.0",
    description="Closed-form inverse kinematics for the 5-DOF KUKA youBot arm",
    packages=find_packages(include=["youbot_kinematics", "youbot_kinematics.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "scipy",
        "pin",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
