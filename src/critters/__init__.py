"""Procedurally animated creatures driven by inverse-kinematics joint chains."""

__version__ = "0.1.0"
