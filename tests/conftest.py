"""
Shared test fixtures for the swerve_drive test suite.

Most tests use the rectangular reference geometry of a 1.0 front-back by
0.6 left-right base, which puts the modules at (+/-0.3, +/-0.5).
"""

import pytest

from swerve_drive import SwerveDriveController, const


FRONT_BACK = 1.0
LEFT_RIGHT = 0.6


@pytest.fixture
def controller() -> SwerveDriveController:
    """A controller with the reference 1.0 x 0.6 geometry."""
    return SwerveDriveController(FRONT_BACK, LEFT_RIGHT)


@pytest.fixture
def square_controller() -> SwerveDriveController:
    """A controller with a square 1.0 x 1.0 geometry."""
    return SwerveDriveController(1.0, 1.0)


@pytest.fixture
def all_roles():
    return list(const.MODULE_ROLES)
