"""
Logging setup for the API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Every
module logs through ``logging.getLogger(__name__)``, so records show
which layer (repository, service, endpoint) produced them.  The
MongoDB driver is kept at WARNING because its debug output drowns the
application's own messages.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("pymongo", "motor")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``.  Unknown names
        fall back to INFO.
    logfile : Optional[str]
        File to append records to in addition to the console.
    quiet : Iterable[str]
        Logger names capped at WARNING regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        # uvicorn or an earlier create_app call has already set up handlers
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
