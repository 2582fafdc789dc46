"""Version management for the billing provisioner.

Provides version information using importlib.metadata with fallback to pyproject.toml.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

# src/api/infrastructure/version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def get_version() -> str:
    """Get the application version.

    Tries installed package metadata first, then pyproject.toml for
    source checkouts.

    Returns:
        Version string (e.g., "0.1.0")
    """
    try:
        return version("billing-provisioner")
    except PackageNotFoundError:
        with open(_PYPROJECT, "rb") as f:
            pyproject_data = tomllib.load(f)

        return pyproject_data["project"]["version"]


__version__ = get_version()
