"""
Logging setup for the Employee Directory API.

``setup_logging`` is called once by ``create_app`` with ``LOG_LEVEL``
and ``LOG_FILE`` from the settings.  Records from the store (seeding
progress, created/updated/deleted employee ids) and from the request
layer share one format and go to the console and, when ``LOG_FILE`` is
set, to a file as well.

Faker logs every locale and provider lookup at DEBUG while the store is
seeded, so its logger is held at WARNING even when the service itself
runs at DEBUG.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("faker", "faker.factory")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Does nothing if the root logger already has handlers, which is the
    case when tests build several apps in one process.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to append log records to, in addition to the console.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
