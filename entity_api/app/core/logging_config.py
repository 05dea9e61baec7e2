"""
Logging configuration for the application.

Two streams are configured:

* the root logger, used by every module through
  ``logging.getLogger(__name__)``, with a console handler and an
  optional file handler;
* the access log (``entity_api.access``), written by the request
  logger middleware once per completed request.  It has its own
  compact format and does not propagate to the root logger, so each
  request line is emitted exactly once.  When the access log is on,
  uvicorn's own access log is silenced because it reports the same
  requests.

Both are configured at most once per process, even when ``create_app``
is called many times (as the test suite does).
"""

import logging
from pathlib import Path
from typing import List, Optional

ACCESS_LOGGER_NAME = "entity_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ACCESS_LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(formatter: logging.Formatter, logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the root logger and the access log.

    Parameters
    ----------
    level : str
        Logging level name for the root logger (e.g. ``"DEBUG"``,
        ``"INFO"``).  Case insensitive; unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        Path to a file that receives both streams.  If omitted, logs
        only go to the console.
    access_log : bool
        Whether the one‑line‑per‑request access log is emitted.
    """
    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        for handler in _handlers(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT), logfile):
            root.addHandler(handler)

    access = logging.getLogger(ACCESS_LOGGER_NAME)
    if access.handlers:
        return
    access.propagate = False
    if not access_log:
        access.setLevel(logging.WARNING)
        return
    access.setLevel(logging.INFO)
    for handler in _handlers(logging.Formatter(fmt=ACCESS_LOG_FORMAT, datefmt=DATE_FORMAT), logfile):
        access.addHandler(handler)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
