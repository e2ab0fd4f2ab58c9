# swerve_drive/swerve_drive/main.py
"""
Main entry point for the swerve-drive command-line tool.
This simply calls the CLI's main function.
"""
from .cli import main as cli_main


def main():
    """Runs the command-line interface."""
    cli_main()


if __name__ == "__main__":
    main()
