"""
Command-Line Interface for the swerve_drive library.
Uses 'click' for argument parsing and 'rich' for the result table.

Computes one set of wheel module targets for a body velocity command, e.g.:

    swerve-drive --front-back 1.0 --left-right 0.6 0.0 1.0 0.5
    swerve-drive --config robot.json --json -1.0 0.5 0
"""
import json
import logging
import math
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import DriveGeometryConfig, load_config
from .constants import (
    DEFAULT_DIST_FRONT_BACK,
    DEFAULT_DIST_LEFT_RIGHT,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    MODULE_LABELS,
)
from .drive import DriveTargets, SwerveDriveController
from .exceptions import ConfigurationError

logger = logging.getLogger("SwerveDriveCLI")


def _resolve_geometry(
    config_path: Optional[str],
    front_back: Optional[float],
    left_right: Optional[float],
) -> DriveGeometryConfig:
    """Builds the geometry from a config file, letting explicit flags override it."""
    if config_path is not None:
        config = load_config(config_path)
    else:
        config = DriveGeometryConfig()
    if front_back is not None:
        config.dist_front_back = front_back
    if left_right is not None:
        config.dist_left_right = left_right
    return config


def _targets_table(controller: SwerveDriveController, targets: DriveTargets) -> Table:
    table = Table(title="Swerve Drive Targets", show_header=True, header_style="bold magenta")
    table.add_column("Module", style="cyan")
    table.add_column("Position", justify="right")
    table.add_column("Speed", justify="right")
    table.add_column("Steer (rad)", justify="right")
    table.add_column("Steer (deg)", justify="right")

    for role, target in targets.as_dict().items():
        position = controller.modules[role].position
        table.add_row(
            MODULE_LABELS[role],
            f"({position.x:+.3f}, {position.y:+.3f})",
            f"{target.speed:.4f}",
            f"{target.steer_angle:+.4f}",
            f"{math.degrees(target.steer_angle):+.2f}",
        )
    return table


def _targets_json(controller: SwerveDriveController, targets: DriveTargets) -> str:
    payload = {
        "geometry": {
            "dist_front_back": controller.dist_front_back,
            "dist_left_right": controller.dist_left_right,
        },
        "targets": {
            role: {"speed": target.speed, "steer_angle": target.steer_angle}
            for role, target in targets.as_dict().items()
        },
    }
    return json.dumps(payload, indent=2)


@click.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--front-back",
    type=float,
    default=None,
    help=f"Front-to-back wheel spacing. [default: {DEFAULT_DIST_FRONT_BACK}]",
)
@click.option(
    "--left-right",
    type=float,
    default=None,
    help=f"Left-to-right wheel spacing. [default: {DEFAULT_DIST_LEFT_RIGHT}]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON geometry configuration file. Explicit spacing flags override it.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level.",
    show_default=True,
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Print the targets as JSON instead of a table.",
)
@click.argument("x_vec", type=float)
@click.argument("y_vec", type=float)
@click.argument("omega", type=float)
def main(front_back, left_right, config_path, log_level, json_output, x_vec, y_vec, omega):
    """
    Computes wheel targets for body velocity X_VEC (right), Y_VEC (forward)
    and rotation rate OMEGA (rad per time unit, clockwise positive).
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    try:
        geometry = _resolve_geometry(config_path, front_back, left_right)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    controller = SwerveDriveController.from_config(geometry)
    targets = controller.compute(x_vec, y_vec, omega)
    logger.info(f"Computed targets for command ({x_vec}, {y_vec}, {omega})")

    if json_output:
        click.echo(_targets_json(controller, targets))
    else:
        Console().print(_targets_table(controller, targets))


if __name__ == "__main__":
    main()
