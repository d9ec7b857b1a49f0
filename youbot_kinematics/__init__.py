"""Closed-form inverse kinematics for the 5-DOF KUKA youBot arm."""

__version__ = "0.1.0"
