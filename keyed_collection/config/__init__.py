from __future__ import annotations

from .env import Environment
from .settings import Settings, settings

__all__ = [
    'Environment',
    'Settings',
    'settings',
]
