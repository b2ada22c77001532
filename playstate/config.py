"""File locations and environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "playstate"
PLAYER_DATA_FILENAME = "playerdata.json"


def data_dir() -> Path:
    """Directory holding the player data file. Override with PLAYSTATE_DATA_DIR."""
    override = os.environ.get("PLAYSTATE_DATA_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / f".{APP_NAME}"


def player_data_file() -> Path:
    return data_dir() / PLAYER_DATA_FILENAME


def levels_file() -> Path:
    """Level catalogue YAML. Override with PLAYSTATE_LEVELS_FILE."""
    override = os.environ.get("PLAYSTATE_LEVELS_FILE")
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent / "data" / "levels.yaml"


def log_level() -> str:
    return os.environ.get("PLAYSTATE_LOG_LEVEL", "INFO").upper()
