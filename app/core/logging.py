"""
Logging setup.

Modules create their own loggers with ``logging.getLogger(__name__)``;
this only installs the root handler once at start-up.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.  Calling it again only updates the level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
