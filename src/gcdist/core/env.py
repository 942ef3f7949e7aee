"""
`.env` loading for local diagnostics knobs.

Developers keep settings such as `GCDIST_LOG_LEVEL=DEBUG` or `GCDIST_TRACE=1` in a `.env`
file instead of exporting them. `GCDIST_ENV_FILE` names the file explicitly; otherwise
python-dotenv searches upwards from the working directory.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@lru_cache
def load_dotenv_if_present() -> Path | None:
    """Load `.env` once if present; returns the loaded env path (or None).

    Variables already set in the process environment always win.
    """
    explicit = os.getenv("GCDIST_ENV_FILE")
    if explicit:
        env_path = Path(explicit).expanduser().resolve()
    else:
        found = find_dotenv(usecwd=True)
        # An empty result would make `load_dotenv` search again from this module's frame.
        if not found:
            return None
        env_path = Path(found)

    if not env_path.is_file():
        return None
    load_dotenv(dotenv_path=env_path, override=False)
    return env_path
