from __future__ import annotations

import os

# Board dimensions are fixed for the lifetime of a board.
ROWS = 3
COLS = 4

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    """Reads a boolean toggle from the environment (1/true/yes/on)."""
    return os.getenv(name, default).strip().lower() in _TRUTHY
