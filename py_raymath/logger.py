"""Diagnostics for py_raymath.

Everything the library reports goes through the ``py_raymath`` logger:

- DEBUG: a matrix allocated with indirect storage, the config file found and
  loaded, a canvas encoded (size and wrapped row count) or written to disk, a
  launch simulation started and landed.
- WARNING: the storage cutoff changed, a config file without a ``[pyrm]`` table
  or without ``storage_cutoff``, an unknown ``[pyrm.launch]`` key, a simulation
  stopped by its tick limit.

The logger level defaults to INFO, so DEBUG records appear only after lowering it,
as ``pyrm --debug`` does. ``enable_file_logging`` adds a file handler that keeps
whatever passes the logger level, with a timestamp and the emitting module:

```python
import logging
from py_raymath import Matrix, logger, enable_file_logging, disable_file_logging

logger.setLevel(logging.DEBUG)
enable_file_logging("raymath_debug.log")
Matrix(200, 200)   # logs the indirect storage allocation
disable_file_logging()
```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
           )

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_raymath')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Any previously enabled file handler is closed and replaced. The file is opened
    in append mode, so existing content is preserved.

    Args:
        filename: Name of the log file to create. Relative paths resolve against
            the current working directory.
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(module)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Disable file logging and close the file handle.

    Safe to call when file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
