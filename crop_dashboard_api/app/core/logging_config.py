"""
Logging setup for the dashboard server.

Everything the server reports goes through the root logger: store
open/close messages from ``core.db``, query failures from the
endpoints (the detail the clients never see) and the price diagnostics
of ``CropService``.  ``run.py`` starts Uvicorn with ``log_config=None``
so that its access and error logs propagate here too and share one
format.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger from ``LOG_LEVEL`` and ``LOG_FILE``.

    Only the first call has an effect: ``create_app`` may run several
    times in one process (tests build an app per case) and must not
    stack handlers.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; ``DEBUG`` turns on the raw
        per-region price dumps of the dashboard.  Unknown names fall
        back to ``INFO``.
    logfile : Optional[str]
        Optional file receiving the same records as the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(_resolve_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
