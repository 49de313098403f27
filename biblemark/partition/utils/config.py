"""
This module contains variables that can permitted to be tweaked by the system environment. For
example, the translation requested from the source site or how hard a fetch is retried. Constants
do NOT belong in this module. Constants are values that are names for fixed parts of the source or
target markup (e.g., the `<PI1>` indent tag or the `woj` class) and should not be altered without
making a code change. Constants should go into `./constants.py`
"""

import os
from dataclasses import dataclass

from biblemark.logger import DEFAULT_LOG_LEVEL


@dataclass
class ENVConfig:
    """class for configuring enviorment parameters"""

    def _get_string(self, var: str, default_value: str = "") -> str:
        """attempt to get the value of var from the os environment; if not present return the
        default_value"""
        return os.environ.get(var, default_value)

    def _get_int(self, var: str, default_value: int) -> int:
        if value := self._get_string(var):
            return int(value)
        return default_value

    def _get_float(self, var: str, default_value: float) -> float:
        if value := self._get_string(var):
            return float(value)
        return default_value

    @property
    def BIBLEMARK_VERSION(self) -> str:
        """translation code requested from the source site when none is given explicitly"""
        return self._get_string("BIBLEMARK_VERSION", "NIV")

    @property
    def BIBLEMARK_BASE_URL(self) -> str:
        """passage endpoint of the source site"""
        return self._get_string("BIBLEMARK_BASE_URL", "https://www.biblegateway.com/passage/")

    @property
    def BIBLEMARK_FETCH_TIMEOUT(self) -> float:
        """seconds to wait on a single request for a chapter page"""
        return self._get_float("BIBLEMARK_FETCH_TIMEOUT", 30.0)

    @property
    def BIBLEMARK_FETCH_MAX_TRIES(self) -> int:
        """number of attempts made to retrieve a chapter page before giving up

        A value of 2 means a failed request is retried once.
        """
        return self._get_int("BIBLEMARK_FETCH_MAX_TRIES", 2)

    @property
    def BIBLEMARK_COPYRIGHT_BOOK(self) -> str:
        """book of the reference chapter the copyright notice is read from"""
        return self._get_string("BIBLEMARK_COPYRIGHT_BOOK", "Genesis")

    @property
    def BIBLEMARK_COPYRIGHT_CHAPTER(self) -> int:
        """chapter number of the reference chapter the copyright notice is read from"""
        return self._get_int("BIBLEMARK_COPYRIGHT_CHAPTER", 1)

    @property
    def LOG_LEVEL(self) -> str:
        """log level used by the command line when `--verbose` is not given"""
        return self._get_string("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper() or DEFAULT_LOG_LEVEL


env_config = ENVConfig()
