"""
Process-wide logging for the catalog service.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE``.  Every record goes to stderr; when a log file is
configured the same lines are appended to it as well.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Return the stderr handler plus a file handler when ``logfile`` is set.

    Missing parent directories of ``logfile`` are created.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the catalog handlers to the root logger.

    ``level`` is a level name in any case; an unrecognised name means
    ``INFO``.  A root logger that already has handlers is left alone.
    """
    root = logging.getLogger()
    if root.handlers:
        # uvicorn, pytest or an earlier create_app() got there first
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in build_handlers(logfile):
        root.addHandler(handler)
