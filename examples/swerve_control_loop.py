"""
Example: Driving a Swerve Base from a Periodic Control Loop.

This script demonstrates how to use `SwerveDriveController` the way a
motor-control loop would. It shows:
1. Loading (or creating) the drive geometry configuration.
2. Creating the controller once.
3. Calling `compute` every cycle with a body velocity command.
4. Reading the four wheel module targets back through the accessors.
5. Guarding against non-finite outputs before they reach the hardware.

Run it directly: `python examples/swerve_control_loop.py`
"""
import logging
import math
import time

from swerve_drive import (
    DriveGeometryConfig,
    SwerveDriveController,
    const,
    exceptions,
    load_config,
)

# --- Configuration ---
LOG_LEVEL = logging.INFO

# Optional JSON geometry profile; the defaults below are used if it is missing
CONFIG_PATH = "robot_geometry.json"

# Robot dimensions (meters)
DIST_FRONT_BACK = 0.60
DIST_LEFT_RIGHT = 0.50

# Control loop
LOOP_PERIOD_S = 0.02
OMEGA_EPSILON = 1e-6  # Commands below this are treated as "no rotation"

# (x_vec, y_vec, omega) commands to step through, one per cycle
COMMANDS = [
    (0.0, 0.0, 0.0),   # stopped
    (0.0, 1.0, 0.0),   # forward
    (1.0, 0.0, 0.0),   # strafe right
    (0.0, 0.0, 1.0),   # spin clockwise in place
    (0.5, 1.0, 0.5),   # arc forward-right
    (0.0, 1.0, -0.8),  # arc forward-left
]

# --- Logging Setup ---
logging.basicConfig(
    level=LOG_LEVEL,
    format=const.LOG_FORMAT,
    datefmt=const.LOG_DATE_FORMAT,
)
logger = logging.getLogger("SwerveControlLoopExample")


def load_geometry() -> DriveGeometryConfig:
    try:
        return load_config(CONFIG_PATH)
    except exceptions.ConfigurationError as e:
        logger.warning(f"Using built-in geometry: {e}")
        return DriveGeometryConfig(
            dist_front_back=DIST_FRONT_BACK,
            dist_left_right=DIST_LEFT_RIGHT,
            name="example",
        )


def send_to_hardware(role: str, speed: float, steer_angle: float):
    """Stand-in for the motor drivers."""
    logger.info(
        f"  {const.MODULE_LABELS[role]:<11} speed={speed:7.3f}  "
        f"steer={math.degrees(steer_angle):+8.2f} deg"
    )


def main():
    controller = SwerveDriveController.from_config(load_geometry())

    for x_vec, y_vec, omega in COMMANDS:
        cycle_start = time.monotonic()

        # Sensor noise rarely gives an exact zero; snap it so the
        # pure-translation branch is taken.
        if abs(omega) < OMEGA_EPSILON:
            omega = 0.0

        controller.compute(x_vec, y_vec, omega)
        logger.info(f"Command x={x_vec} y={y_vec} omega={omega}:")

        for role in const.MODULE_ROLES:
            speed, steer_angle = controller.get_target(role)
            if not (math.isfinite(speed) and math.isfinite(steer_angle)):
                logger.error(f"  {role}: non-finite target, holding previous command")
                continue
            send_to_hardware(role, speed, steer_angle)

        elapsed = time.monotonic() - cycle_start
        time.sleep(max(0.0, LOOP_PERIOD_S - elapsed))


if __name__ == "__main__":
    main()
