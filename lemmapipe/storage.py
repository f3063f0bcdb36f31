"""
Per-user storage for lemmapipe.

Dictionaries and settings live in a single lemmapipe home directory:
  ~/.lemmapipe/  (default)
    ├── config.json
    ├── en.lmm
    └── ...

The home directory can be configured via:
  - Environment variable: LEMMAPIPE_HOME
  - Environment variable: XDG_DATA_HOME (uses $XDG_DATA_HOME/lemmapipe)
  - Default: ~/.lemmapipe/

Relative dictionary paths are resolved against the home directory. The first time
that happens the dictionaries bundled with the package are copied there; absolute
paths (production, containers) never touch the home directory.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

BUNDLED_DICTS_DIR = Path(__file__).parent / "dicts"
DEBUG_ENV_VARS = ("LEMMAPIPE_DEBUG", "DEBUG")


def debug_enabled() -> bool:
    """True when one of the debug environment variables is set."""
    return any(name in os.environ for name in DEBUG_ENV_VARS)


def get_lemmapipe_home() -> Path:
    """
    Get the lemmapipe home directory (not created).

    Checks in order:
    1. LEMMAPIPE_HOME environment variable
    2. XDG_DATA_HOME environment variable (if set)
    3. ~/.lemmapipe/ (falls back to /tmp/lemmapipe-{username} if home() fails)
    """
    if "LEMMAPIPE_HOME" in os.environ:
        return Path(os.environ["LEMMAPIPE_HOME"]).expanduser()
    if "XDG_DATA_HOME" in os.environ:
        return Path(os.environ["XDG_DATA_HOME"]) / "lemmapipe"
    try:
        return Path.home() / ".lemmapipe"
    except (RuntimeError, KeyError):
        # Path.home() failed (e.g., system user without home directory)
        try:
            import getpass
            return Path(f"/tmp/lemmapipe-{getpass.getuser()}")
        except Exception:
            return Path("/tmp/lemmapipe")


def install_dictionaries(source: Path = BUNDLED_DICTS_DIR) -> Path:
    """
    Copy the bundled dictionaries into the lemmapipe home directory once.

    Dictionaries already present in the home directory are never overwritten.

    Returns:
        Path to the lemmapipe home directory
    """
    home = get_lemmapipe_home()
    missing = [item for item in sorted(source.glob("*.lmm")) if not (home / item.name).exists()]
    if not missing:
        return home
    if debug_enabled():
        logger.info("Default lemmapipe dictionaries are going to be installed to: %s", home)
    home.mkdir(parents=True, exist_ok=True)
    for item in missing:
        shutil.copy2(item, home / item.name)
    return home


def resolve_dictionary_path(path: Union[str, Path]) -> Path:
    """Return an absolute dictionary path, installing the bundled dictionaries for relative ones."""
    path = Path(path).expanduser()
    if path.is_absolute():
        return path
    return install_dictionaries() / path


def get_config_file() -> Path:
    """Get the path to the lemmapipe configuration file."""
    return get_lemmapipe_home() / "config.json"


def read_config() -> dict:
    """
    Read the lemmapipe configuration file.

    Returns:
        Dictionary with configuration values (empty dict if file doesn't exist)
    """
    config_file = get_config_file()
    if not config_file.exists():
        return {}
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", config_file, exc)
        return {}
    return data if isinstance(data, dict) else {}


def write_config(config: dict) -> None:
    """
    Merge values into the lemmapipe config file.

    Args:
        config: Dictionary with configuration values
    """
    config_file = get_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    existing_config = read_config()
    existing_config.update(config)
    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(existing_config, f, indent=2, ensure_ascii=False)


def get_default_dictionary() -> str:
    return read_config().get("default_dictionary", "en.lmm")


def get_default_language() -> str:
    return read_config().get("default_language", "en-US")


def get_default_tagset() -> Optional[str]:
    return read_config().get("default_tagset")


def get_default_stemmer_backend() -> str:
    return read_config().get("default_stemmer_backend", "snowball")


def get_default_speller_backend() -> str:
    return read_config().get("default_speller_backend", "hunspell")
