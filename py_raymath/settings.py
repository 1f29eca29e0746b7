"""Global settings of the py_raymath library"""
from typing_extensions import Final

from py_raymath.logger import logger

__all__ = ('Settings', 'DEFAULT_STORAGE_CUTOFF')

DEFAULT_STORAGE_CUTOFF: Final[int] = 128 * 128


class Settings:  # pylint: disable=too-few-public-methods
    """Global settings class of the py_raymath library"""

    _STORAGE_CUTOFF: int = DEFAULT_STORAGE_CUTOFF

    @classmethod
    def set_storage_cutoff(cls, value: int) -> None:
        """
        _STORAGE_CUTOFF setter
        :param value: element count from which new matrices use indirect storage
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("storage cutoff has to be a type of 'int'")
        if value <= 0:
            raise ValueError(f"storage cutoff has to be positive, got {value}")

        if value != cls._STORAGE_CUTOFF:
            logger.warning("Settings._STORAGE_CUTOFF: change this property "
                           "only if you know what you are doing; "
                           "matrices created before the change keep their storage")
        cls._STORAGE_CUTOFF = value

    @classmethod
    def get_storage_cutoff(cls) -> int:
        return cls._STORAGE_CUTOFF

    @classmethod
    def restore_defaults(cls) -> None:
        cls._STORAGE_CUTOFF = DEFAULT_STORAGE_CUTOFF
