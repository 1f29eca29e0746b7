"""Fixed-dimension matrix, homogeneous geometry and PPM canvas kernel."""

import importlib.metadata

__version__ = importlib.metadata.version("py_raymath")

# Standard library imports
import os

# Third-party imports
from typing_extensions import Any, Dict, Optional

# Local imports
from .config import find_pyrm_toml, read_pyrm_toml
from .logger import logger as log
from .settings import Settings


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> Dict[str, Any]:
    """Load configuration from a .pyrm.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyrm.toml or pyrm.toml
            from the current directory upwards, then next to the package.
        suppress_warnings: If True, suppress warning messages

    Returns:
        The ``[pyrm]`` table of the loaded file, empty if no file was found.
    """
    if filepath is None:
        if (filepath := find_pyrm_toml()) is None:
            filepath = find_pyrm_toml(os.path.dirname(__file__))

    _pyrm: Dict[str, Any] = {}
    if filepath is not None:
        _pyrm = read_pyrm_toml(filepath, suppress_warnings)
        if (storage_cutoff := _pyrm.get('storage_cutoff')) is not None:
            Settings.set_storage_cutoff(storage_cutoff)
        elif _pyrm and not suppress_warnings:
            log.warning("Config has no `pyrm.storage_cutoff` value")

    log.debug("Settings load success")
    return _pyrm


def _basic_config(filename: Optional[str] = None,
                  storage_cutoff: Optional[int] = None,
                  suppress_warnings: bool = False) -> Dict[str, Any]:
    """Load settings from file or from explicit values.

    Args:
        filename: Configuration file path
        storage_cutoff: Element count from which matrices use indirect storage
        suppress_warnings: If True, suppress warning messages

    Returns:
        The ``[pyrm]`` table of the loaded file, empty when settings were given explicitly.

    Raises:
        ValueError: If both filename and storage_cutoff are provided
    """
    if filename and storage_cutoff is not None:
        raise ValueError("Can't use storage_cutoff and config file at same time")
    if storage_cutoff is not None:
        Settings.set_storage_cutoff(storage_cutoff)
        return {}
    # trying to load definitions from pyrm.toml
    return _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .canvas import Canvas, wrap_ppm_line, PPM_MAGIC, PPM_MAX_LINE_WIDTH, PPM_WRAP_COLUMN
from .color import Color, MAX_COLOR_VALUE
from .exceptions import OutOfBoundsError, MatrixIndexError, CanvasIndexError, ShapeError
from .interval import Interval, EMPTY, UNIVERSE
from .launch import (Projectile, Environment, LaunchConfig, LaunchConfigDict,
                     create_launch_config, tick, simulate, run)
from .logger import logger, enable_file_logging, disable_file_logging
from .matrix import Matrix, MatrixCell, InlineStorage, IndirectStorage, EQUALITY_EPSILON
from .ray import Ray
from .settings import DEFAULT_STORAGE_CUTOFF
from .vector import Vector, Point

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    # Skip imported modules and typing helpers
    "os", "importlib", "Any", "Dict", "Optional", "log",
    # Skip submodules
    "canvas", "color", "config", "exceptions", "helpers", "interval", "launch",
    "matrix", "ray", "settings", "vector",
    # Skip private/internal symbols
    "_load_config", "_basic_config",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
