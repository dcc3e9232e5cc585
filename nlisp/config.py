from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PROMPT = "user> "
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> str:
    return _from_env("NLISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    # The prompt keeps its trailing space, so it is not stripped
    return os.environ.get("NLISP_PROMPT") or DEFAULT_PROMPT


def get_prelude_path() -> Optional[Path]:
    raw = _from_env("NLISP_PRELUDE_PATH")
    return Path(raw) if raw else None


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the interpreter.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to NLISP_LOG_LEVEL, then WARNING.

    Logs go to stderr so they never mix with program output on stdout.
    """
    name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, name, logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("nlisp").setLevel(numeric_level)
    logging.getLogger(__name__).debug("Logging initialized at %s level", name)
