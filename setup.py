# swerve_drive/setup.py
import re

import os
from setuptools import find_packages
from setuptools import setup


def get_version_from_init():
    """Reads the __version__ string from swerve_drive/__init__.py."""
    init_py_path = os.path.join(
        os.path.dirname(__file__), "swerve_drive", "__init__.py"
    )
    try:
        with open(init_py_path, "r", encoding="utf-8") as f:
            version_file_content = f.read()
        version_match = re.search(
            r"^__version__\s*=\s*['\"]([^'\"]*)['\"]",
            version_file_content,
            re.M,
        )
        if version_match:
            return version_match.group(1)
        raise RuntimeError(
            f"Unable to find __version__ string in {init_py_path}."
        )
    except FileNotFoundError:
        raise RuntimeError(
            f"{init_py_path} not found. Ensure you are in the correct directory."
        )


try:
    with open("README.md", "r", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = (
        "Inverse kinematics for four-wheel independent-steering (swerve) drive bases."
    )


setup(
    name="swerve-drive",
    version=get_version_from_init(),
    description="Inverse kinematics for four-wheel independent-steering (swerve) drive bases.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where=".", include=["swerve_drive", "swerve_drive.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Scientific/Engineering",
    ],
    python_requires=">=3.8",
    install_requires=[
        "click>=7.0",  # For the CLI
        "rich>=10.0.0",  # For the CLI result table
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-mock>=3.0",
            "flake8>=3.9",
            "black>=21.0",
            "mypy>=0.900",
            "pylint>=2.0",
        ],
        "test": [
            "pytest>=6.0",
            "pytest-mock>=3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "swerve-drive=swerve_drive.main:main",
        ],
    },
    keywords="swerve drive kinematics robotics mobile-robot steering",
)
