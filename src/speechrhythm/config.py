"""
Configuration & Path Management
===============================
Central registry for file paths and the default model constants.

Exports:
    ASSETS_PATH (str): Absolute path to the bundled assets directory.
    DEFAULT_PRESETS_PATH (str): Absolute path to the scenario presets file.
    DEFAULT_ALPHA, DEFAULT_BETA, DEFAULT_T0, DEFAULT_W0: Default constants.
    DEFAULT_RESETTING_METHOD (str): Default resetting-length policy.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from speechrhythm.errors import InvalidParameterError

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to a resource shipped inside the package.
    """
    # config.py is in src/speechrhythm/
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_PRESETS_PATH: str = os.path.join(ASSETS_PATH, "presets.json")

DEFAULT_ALPHA: float = 0.4
DEFAULT_BETA: float = 1.1
DEFAULT_T0: float = 0.165  # s
DEFAULT_W0: float = 0.78
DEFAULT_RESETTING_METHOD: str = "fixed"

PRESET_KEYS = ("groups", "catalexis", "units", "amplitudes")


def load_presets(path: Optional[str] = None) -> dict[str, dict[str, Any]]:
    """
    Load the named simulation scenarios from a JSON file.

    Args:
        path: Preset file, defaults to the bundled presets.

    Returns:
        Mapping of preset name to its settings.
    """
    path = path or DEFAULT_PRESETS_PATH
    if not os.path.exists(path):
        raise FileNotFoundError(f"Preset file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidParameterError("presets", path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise InvalidParameterError("presets", path, "top level must be an object")

    for name, preset in data.items():
        if not isinstance(preset, dict):
            raise InvalidParameterError(name, preset, "preset must be an object")
        missing = [key for key in PRESET_KEYS if key not in preset]
        if missing:
            raise InvalidParameterError(name, preset, f"missing keys {missing}")

    logger.debug(f"Loaded {len(data)} presets from {path}")
    return data
