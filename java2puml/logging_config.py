import logging
import sys
from typing import Optional

DEFAULT_FORMAT = '%(levelname)s:%(name)s:%(message)s'


def configure_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    """
    Send log records to stderr, keeping stdout for user-facing output.
    Safe to call more than once: an existing root handler is reused.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
