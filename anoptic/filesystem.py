"""Locations of the game's executable and of its per-user data."""

import functools
import sys
from pathlib import Path

USER_SUBDIR = Path("Documents", "My Games", "AnoTestGame")
"""Per-user data directory, relative to the user's home directory."""


@functools.lru_cache(maxsize=None)
def _resolve_game_path() -> str:
    script = sys.argv[0] if sys.argv else ""
    if script:
        candidate = Path(script).resolve()
        if candidate.is_file():
            return str(candidate)
    return str(Path(sys.executable).resolve())


def game_path() -> str:
    """Return the absolute path of the running program.

    The path is worked out on the first call and cached afterwards.
    """
    return _resolve_game_path()


def user_path() -> str:
    """Return the directory for user profiles, saves, settings and logs."""
    return str(Path.home() / USER_SUBDIR)