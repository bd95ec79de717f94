"""
Logging setup for the Book API.

``create_app`` calls ``setup_logging`` with ``Settings.log_level`` and
``Settings.log_file`` (``LOG_LEVEL`` / ``LOG_FILE``).  Records from the
repository, the service and the startup hooks all go through the root
logger, e.g.::

    2026-10-19 12:00:00 [INFO] book_api.app.services.book_service: Created book 3
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``level`` to the root logger and install the Book API handlers.

    The level is updated on every call.  Handlers are installed only the
    first time (when the root logger has none), because ``create_app`` runs
    once for the module level app and again for each app the tests build.
    With ``logfile`` set, the file's parent directory is created if needed.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
