"""Logging setup for the waiter HTTP API.

create_app calls configure_logging with WAITER_LOG_LEVEL, so both
``waiter serve`` and an external uvicorn process log the same way. The CLI
menu and order commands report through click instead. Records go
to stdout as one pipe-separated line each. uvicorn access lines and the
multipart parser are held at WARNING so batch uploads stay quiet. Request
bodies and uploaded menu files are never logged, only their filenames.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the HTTP service.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
