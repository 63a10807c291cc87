from __future__ import annotations

import logging
from typing import Optional

import colorlog

from app.core.config import settings

LOG_FORMAT = "%(log_color)s%(asctime)s %(levelname)-8s%(reset)s %(name)s: %(message)s"


def configure_logging(level_name: Optional[str] = None) -> None:
    """Attach a colored stderr handler to the root logger, unless something else already did."""
    level = getattr(logging, (level_name or settings.log_level).strip().upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)

    # uvicorn / pytest may already own the root handlers
    if root.handlers:
        return

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
