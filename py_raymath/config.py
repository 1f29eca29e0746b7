"""Discovery and parsing of ``.pyrm.toml`` configuration files."""
import os
import sys

from typing_extensions import Any, Dict, Optional

from py_raymath.logger import logger

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

__all__ = ('CONFIG_FILENAMES', 'find_pyrm_toml', 'read_pyrm_toml')

CONFIG_FILENAMES = ('.pyrm.toml', 'pyrm.toml')


def find_pyrm_toml(start_dir: Optional[str] = None) -> Optional[str]:
    """Search for .pyrm.toml or pyrm.toml starting from the specified directory.

    Args:
        start_dir: The directory to start searching from. Default is the current working directory.

    Returns:
        The absolute path to the config file if found in ``start_dir`` or one of its parents, otherwise None.
    """
    current_dir = os.path.abspath(start_dir if start_dir is not None else os.getcwd())
    while True:
        for name in CONFIG_FILENAMES:
            candidate = os.path.join(current_dir, name)
            if os.path.exists(candidate):
                return os.path.abspath(candidate)

        # Move to the parent directory
        parent_dir = os.path.dirname(current_dir)

        # If we have reached the root directory, stop searching
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def read_pyrm_toml(filepath: str, suppress_warnings: bool = False) -> Dict[str, Any]:
    """Parse a config file and return its ``[pyrm]`` table (empty when missing).

    Raises:
        OSError: If the file cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    logger.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")
    with open(filepath, "rb") as fp:
        _config = tomllib.load(fp)

    _pyrm = _config.get('pyrm')
    if not _pyrm:
        if not suppress_warnings:
            logger.warning(f"Config {filepath} has no `pyrm` section")
        return {}
    return _pyrm
