"""
Swerve Drive Kinematics Module.

This module provides the inverse kinematics for a four-wheel independent
steering ("swerve") drive base. Given a body-frame velocity command it
computes, for each of the four wheel modules, the wheel speed and steering
angle the drive hardware should be commanded to.

Body frame conventions:
    - origin at the geometric center of the four modules
    - x positive to the right, y positive forward
    - omega positive clockwise
    - steering angles in radians, measured from the body +x axis

The controller is a pure transform: `compute` depends only on its arguments
and the module positions fixed at construction. It performs no I/O and holds
no locks; callers sharing a controller across threads must synchronize
`compute` and the accessor reads themselves.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, TYPE_CHECKING

from .constants import (
    FRONT_LEFT,
    FRONT_RIGHT,
    HALF_PI,
    INITIAL_SPEED,
    INITIAL_STEER_ANGLE,
    MODULE_ROLES,
    REAR_LEFT,
    REAR_RIGHT,
)
from .exceptions import KinematicsError
from .geometry import (
    ORIGIN,
    Point2D,
    full_angle,
    magnitude,
    quadrant_angle,
    rotate,
    scale,
    vector_angle,
)

if TYPE_CHECKING:
    from .config import DriveGeometryConfig

logger = logging.getLogger(__name__)


class WheelTarget(NamedTuple):
    """Target output for one wheel module: (speed, steer_angle)."""
    speed: float
    steer_angle: float


@dataclass(frozen=True)
class DriveTargets:
    """
    Immutable result of one `SwerveDriveController.compute` call.

    Attributes:
        front_left: Target for the front-left module.
        front_right: Target for the front-right module.
        rear_left: Target for the rear-left module.
        rear_right: Target for the rear-right module.
    """
    front_left: WheelTarget
    front_right: WheelTarget
    rear_left: WheelTarget
    rear_right: WheelTarget

    def as_dict(self) -> Dict[str, WheelTarget]:
        """Returns the four targets keyed by module role, in reporting order."""
        return {role: getattr(self, role) for role in MODULE_ROLES}

    @classmethod
    def uniform(cls, target: WheelTarget) -> "DriveTargets":
        """Builds a result where every module receives the same target."""
        return cls(target, target, target, target)


@dataclass
class WheelModule:
    """
    One swerve module: a fixed mounting position plus its latest output.

    Attributes:
        role: Module role name (see `constants.MODULE_ROLES`).
        position: Body-frame mounting position. Never changes.
        steer_angle: Most recently computed steering angle (radians).
        speed: Most recently computed wheel speed, in the units of the
               velocity command.
    """
    role: str
    position: Point2D
    steer_angle: float = INITIAL_STEER_ANGLE
    speed: float = INITIAL_SPEED

    @property
    def target(self) -> WheelTarget:
        return WheelTarget(self.speed, self.steer_angle)

    def apply(self, target: WheelTarget) -> None:
        self.speed = target.speed
        self.steer_angle = target.steer_angle


class SwerveDriveController:
    """
    Inverse kinematics for a rectangular four-module swerve drive.

    The four modules sit at the corners of a rectangle centered on the body
    origin:

        front-left  = (-lr/2, +fb/2)    front-right = (+lr/2, +fb/2)
        rear-left   = (-lr/2, -fb/2)    rear-right  = (+lr/2, -fb/2)

    Attributes:
        dist_front_back (float): Distance between front and rear module rows.
        dist_left_right (float): Distance between left and right module columns.
        modules (Dict[str, WheelModule]): The four modules keyed by role.
    """

    def __init__(self, dist_front_back: float, dist_left_right: float):
        """
        Initializes the controller and derives the four module positions.

        Args:
            dist_front_back: Front-to-back wheel spacing, in the same linear
                             unit as later velocity commands (e.g. meters).
            dist_left_right: Left-to-right wheel spacing, same unit.

        Non-positive distances are accepted and produce a degenerate or
        mirrored geometry; a warning is logged.
        """
        self.dist_front_back: float = dist_front_back
        self.dist_left_right: float = dist_left_right

        if dist_front_back <= 0 or dist_left_right <= 0:
            logger.warning(
                f"Non-positive drive geometry (front_back={dist_front_back}, "
                f"left_right={dist_left_right}); module layout will be degenerate or mirrored."
            )

        half_fb = dist_front_back / 2.0
        half_lr = dist_left_right / 2.0

        self.modules: Dict[str, WheelModule] = {
            FRONT_LEFT: WheelModule(FRONT_LEFT, Point2D(-half_lr, half_fb)),
            FRONT_RIGHT: WheelModule(FRONT_RIGHT, Point2D(half_lr, half_fb)),
            REAR_LEFT: WheelModule(REAR_LEFT, Point2D(-half_lr, -half_fb)),
            REAR_RIGHT: WheelModule(REAR_RIGHT, Point2D(half_lr, -half_fb)),
        }
        self._last_targets: Optional[DriveTargets] = None

        logger.info(
            f"Initialized {self.__class__.__name__}: front_back={dist_front_back}, "
            f"left_right={dist_left_right}"
        )

    @classmethod
    def from_config(cls, config: "DriveGeometryConfig") -> "SwerveDriveController":
        """Creates a controller from a `DriveGeometryConfig`."""
        logger.info(f"Creating controller from configuration '{config.name}'")
        return cls(config.dist_front_back, config.dist_left_right)

    @property
    def last_targets(self) -> Optional[DriveTargets]:
        """The result of the most recent `compute`, or None before the first call."""
        return self._last_targets

    def compute(self, x_vec: float, y_vec: float, omega: float) -> DriveTargets:
        """
        Computes wheel speeds and steering angles for a body velocity command.

        Args:
            x_vec: Body-frame velocity to the right.
            y_vec: Body-frame velocity forward.
            omega: Rotation rate in radians per time unit, clockwise positive.

        Returns:
            The new `DriveTargets`. The same values are written into the
            four `WheelModule` records for the accessor methods.

        Never raises. Near-degenerate inputs (x_vec == 0 with omega != 0,
        or a tiny but non-zero omega) may produce inf/NaN outputs, which the
        caller is expected to guard against.
        """
        if omega == 0.0:
            targets = self._compute_translation(x_vec, y_vec)
        else:
            targets = self._compute_rotation(x_vec, y_vec, omega)

        for role, target in targets.as_dict().items():
            self.modules[role].apply(target)
        self._last_targets = targets
        return targets

    def _compute_translation(self, x_vec: float, y_vec: float) -> DriveTargets:
        # No rotation: every module points the same way at the same speed.
        command = Point2D(x_vec, y_vec)
        speed = magnitude(command)
        steer_angle = full_angle(command) if speed != 0.0 else INITIAL_STEER_ANGLE

        logger.debug(
            f"Translation: command=({x_vec}, {y_vec}) -> speed={speed}, steer={steer_angle}"
        )
        return DriveTargets.uniform(WheelTarget(speed, steer_angle))

    def _compute_rotation(self, x_vec: float, y_vec: float, omega: float) -> DriveTargets:
        omega_abs = abs(omega)
        omega_dir = omega / omega_abs
        center = self.rotation_center(x_vec, y_vec, omega)

        # Radius vectors rotated a quarter turn against the spin give the
        # tangential velocity direction of each module about the ICR.
        rotate_rad = HALF_PI * -omega_dir

        targets = {}
        for role, module in self.modules.items():
            to_center = module.position - center
            tangential = scale(rotate(to_center, rotate_rad), omega_abs)
            targets[role] = WheelTarget(magnitude(tangential), vector_angle(tangential))

        logger.debug(
            f"Rotation: command=({x_vec}, {y_vec}, omega={omega}), "
            f"ICR=({center.x}, {center.y})"
        )
        return DriveTargets(**targets)

    @staticmethod
    def rotation_center(x_vec: float, y_vec: float, omega: float) -> Point2D:
        """
        Locates the instantaneous center of rotation (ICR) in the body frame.

        The ICR lies perpendicular to the translational direction at a
        distance of `|v| / |omega|`, on the side given by the sign of omega.
        A zero translational speed puts it at the body origin (spin in place).

        Args:
            x_vec: Body-frame velocity to the right.
            y_vec: Body-frame velocity forward.
            omega: Non-zero rotation rate, clockwise positive.

        Returns:
            The ICR position as a Point2D.
        """
        omega_abs = abs(omega)
        vel = magnitude(Point2D(x_vec, y_vec))
        rotation_radius = vel / omega_abs
        if rotation_radius == 0.0:
            return ORIGIN

        direction = quadrant_angle(Point2D(x_vec, y_vec))
        omega_dir = omega / omega_abs
        return Point2D(
            rotation_radius * math.cos(direction - HALF_PI) * omega_dir,
            rotation_radius * math.sin(direction - HALF_PI) * omega_dir,
        )

    def get_target(self, role: str) -> WheelTarget:
        """
        Returns the latest (speed, steer_angle) for the module named `role`.

        Raises:
            KinematicsError: If `role` is not one of `constants.MODULE_ROLES`.
        """
        try:
            return self.modules[role].target
        except KeyError as e:
            raise KinematicsError(
                f"Unknown wheel module role. Expected one of {list(MODULE_ROLES)}.",
                module_role=role,
            ) from e

    def get_front_left_target(self) -> WheelTarget:
        """Latest (speed, steer_angle) of the front-left module."""
        return self.modules[FRONT_LEFT].target

    def get_front_right_target(self) -> WheelTarget:
        """Latest (speed, steer_angle) of the front-right module."""
        return self.modules[FRONT_RIGHT].target

    def get_rear_left_target(self) -> WheelTarget:
        """Latest (speed, steer_angle) of the rear-left module."""
        return self.modules[REAR_LEFT].target

    def get_rear_right_target(self) -> WheelTarget:
        """Latest (speed, steer_angle) of the rear-right module."""
        return self.modules[REAR_RIGHT].target

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(dist_front_back={self.dist_front_back}, "
            f"dist_left_right={self.dist_left_right})"
        )
