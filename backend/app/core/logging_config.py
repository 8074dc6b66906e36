"""Logging setup for the training enrollment API."""

import logging

from backend.app.core.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    """Configure the root logger once, using the level from settings."""
    settings = get_settings()
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(settings.log_level)
        return
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
