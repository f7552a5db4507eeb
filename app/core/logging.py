# File: app/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once for the API process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
