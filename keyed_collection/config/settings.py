from __future__ import annotations

import logging
import warnings
from typing import Optional

from .env import Environment

PREFIX = "KEYED_COLLECTION_"

LOG_FORMATS = ("laravel", "json")


class Settings:
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "laravel"
    
    # Integer keys are appended (not overwritten) by recursive merges
    MERGE_APPEND_INT_KEYS: bool = True
    
    def __init__(self, environment: Optional[Environment] = None, strict: bool = True) -> None:
        """Read settings from the environment.
        
        With ``strict`` an invalid value raises ``ValueError``; otherwise a
        warning is issued and the default is kept.
        """
        environment = environment or Environment()
        self.strict = strict
        
        level = str(environment.get(f"{PREFIX}LOG_LEVEL", self.LOG_LEVEL)).upper()
        if isinstance(logging.getLevelName(level), int):
            self.LOG_LEVEL = level
        else:
            self._invalid(f"Unknown log level `{level}`.")
        
        log_format = str(environment.get(f"{PREFIX}LOG_FORMAT", self.LOG_FORMAT)).lower()
        if log_format in LOG_FORMATS:
            self.LOG_FORMAT = log_format
        else:
            self._invalid(
                f"Unknown log format `{log_format}`. "
                f"Allowed formats are `{', '.join(LOG_FORMATS)}`."
            )
        
        self.MERGE_APPEND_INT_KEYS = environment.get_bool(
            f"{PREFIX}MERGE_APPEND_INT_KEYS", self.MERGE_APPEND_INT_KEYS
        )
    
    def _invalid(self, message: str) -> None:
        if self.strict:
            raise ValueError(message)
        warnings.warn(f"{message} Using the default.", RuntimeWarning, stacklevel=3)
    
    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> Settings:
        """Build settings from the environment, loading ``env_file`` first if given."""
        return cls(Environment(env_file))
    
    @property
    def log_level_number(self) -> int:
        return int(logging.getLevelName(self.LOG_LEVEL))


# Read at import: os.environ only, never a .env file
settings = Settings(strict=False)
