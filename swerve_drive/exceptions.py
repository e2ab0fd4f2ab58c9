# swerve_drive/swerve_drive/exceptions.py
"""
Custom exceptions for the swerve_drive library.

The kinematic transform itself never raises; these exceptions are used at the
configuration and lookup seams around it.
"""


class SwerveDriveError(Exception):
    """Base exception class for all swerve_drive library errors."""
    def __init__(self, message, *args, module_role=None):
        super().__init__(message, *args)
        self.message = message
        self.module_role = module_role

    def __str__(self):
        base_message = super().__str__()
        if self.module_role is not None:
            return f"{base_message} (Module: {self.module_role})"
        return base_message


class KinematicsError(SwerveDriveError):
    """Errors related to kinematic lookups, e.g. an unknown wheel module role."""



class ConfigurationError(SwerveDriveError):
    """Errors related to drive geometry configuration."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path

    def __str__(self):
        base_msg = super().__str__()
        if self.path is not None:
            return f"{base_msg} - File: {self.path}"
        return base_msg
