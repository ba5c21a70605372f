"""Logger setup for the za_identity package."""

from __future__ import annotations

import logging

from za_identity.core.config import AppSettings

ROOT_LOGGER_NAME = "za_identity"


def configure_logging(settings: AppSettings | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Repeated calls update the level and formatter but never stack handlers.
    """
    if settings is None:
        settings = AppSettings()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    formatter = logging.Formatter(fmt=settings.logging.format)

    handler = next(
        (h for h in logger.handlers if getattr(h, "_za_identity", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._za_identity = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    handler.setFormatter(formatter)
    logger.setLevel(settings.logging.level.upper())
    return logger
