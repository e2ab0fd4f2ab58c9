# swerve_drive/swerve_drive/constants.py
"""
Constants for the swerve_drive library.
Includes wheel module role names, angle constants and the default
geometry/configuration values used by the controller, config loader and CLI.
"""
import math

# Wheel module roles, in the order results are reported
FRONT_LEFT = "front_left"
FRONT_RIGHT = "front_right"
REAR_LEFT = "rear_left"
REAR_RIGHT = "rear_right"

MODULE_ROLES = (FRONT_LEFT, FRONT_RIGHT, REAR_LEFT, REAR_RIGHT)

MODULE_LABELS = {
    FRONT_LEFT: "Front Left",
    FRONT_RIGHT: "Front Right",
    REAR_LEFT: "Rear Left",
    REAR_RIGHT: "Rear Right",
}

# Angles (radians)
HALF_PI = math.pi / 2.0

# Initial module output before the first compute(): stopped, facing body +x
INITIAL_SPEED = 0.0
INITIAL_STEER_ANGLE = 0.0

# Default track geometry (meters), front-back and left-right wheel spacing
DEFAULT_DIST_FRONT_BACK = 1.0
DEFAULT_DIST_LEFT_RIGHT = 0.6

# Configuration
DEFAULT_CONFIG_NAME = "default"
DEFAULT_CONFIG_DESCRIPTION = "Default swerve drive geometry"
CONFIG_REQUIRED_KEYS = ("dist_front_back", "dist_left_right")

# Logging (same format as the command-line tools use)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
