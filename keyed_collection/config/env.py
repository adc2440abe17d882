from __future__ import annotations

import os
from typing import Any, Optional
from pathlib import Path


class Environment:
    """Environment reader, optionally seeded from a .env file.

    Without an ``env_file`` only ``os.environ`` is read and nothing is
    written to it.
    """
    
    def __init__(self, env_file: Optional[str] = None) -> None:
        self.env_file = env_file
        self.loaded = False
        if env_file is not None:
            self._load_env_file()
    
    def _find_env_file(self) -> Optional[Path]:
        """Look for the env file in the working directory and its parents."""
        assert self.env_file is not None
        env_path = Path(self.env_file)
        if env_path.is_absolute():
            return env_path if env_path.exists() else None
        
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            candidate = parent / self.env_file
            if candidate.exists():
                return candidate
        return None
    
    def _load_env_file(self) -> None:
        """Load environment variables from .env file."""
        if self.loaded:
            return
        
        env_path = self._find_env_file()
        self.loaded = True
        if env_path is None:
            return
        
        with open(env_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#') or '=' not in line:
                    continue
                
                key, value = line.split('=', 1)
                key = key.strip()
                value = value.strip()
                
                # Remove quotes if present
                if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
                    value = value[1:-1]
                
                # Only set if not already in environment
                if key not in os.environ:
                    os.environ[key] = value
    
    def get(self, key: str, default: Any = None) -> Any:
        """Get environment variable with optional default."""
        return os.getenv(key, default)
    
    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get environment variable as boolean."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ('true', '1', 'yes', 'on')
