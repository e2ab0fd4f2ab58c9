"""
Swerve Drive Kinematics Library
===============================

This library computes inverse kinematics for a four-wheel independent
steering ("swerve") drive base: a body-frame velocity command in, a wheel
speed and steering angle for each of the four modules out. It includes the
planar vector helpers the transform is built on, a JSON geometry
configuration, and a small command-line tool.
"""

# Import the constants module and alias it as 'const' for patterned access
from . import constants as const

from .geometry import (
    Point2D,
    add,
    subtract,
    magnitude,
    rotate,
    direction,
    full_angle,
    quadrant_angle,
    vector_angle,
)

from .drive import (
    SwerveDriveController,
    WheelModule,
    WheelTarget,
    DriveTargets,
)

from .config import DriveGeometryConfig, load_config, save_config

from .exceptions import (
    SwerveDriveError,
    KinematicsError,
    ConfigurationError,
)

__version__ = "0.1.0"

__all__ = [
    "const",

    # Vector primitives
    "Point2D",
    "add",
    "subtract",
    "magnitude",
    "rotate",
    "direction",
    "full_angle",
    "quadrant_angle",
    "vector_angle",

    # Drive kinematics
    "SwerveDriveController",
    "WheelModule",
    "WheelTarget",
    "DriveTargets",

    # Configuration
    "DriveGeometryConfig",
    "load_config",
    "save_config",

    # Exceptions
    "SwerveDriveError",
    "KinematicsError",
    "ConfigurationError",
]
