"""
Logging setup for the job listing API.

Modules log through ``logging.getLogger(__name__)``; this only wires the
root handler once at startup.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Send all records at ``level`` and above to stdout."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # uvicorn --reload imports the app twice
    for handler in root.handlers:
        if getattr(handler, "_job_api_handler", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler._job_api_handler = True
    root.addHandler(handler)
