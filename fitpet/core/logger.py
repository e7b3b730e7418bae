"""Loguru sinks for FitPet.

Domain services tag their messages (``[COMPLETE]``, ``[SCHEDULE]``,
``[PET]``, ``[STATS]``); both sinks keep the tag at the start of the
message so logs can be grepped per flow.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from fitpet.core.settings import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZ} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(settings: Settings) -> None:
    """Replace loguru's default sink with FitPet's console and file sinks.

    The file sink is only added when ``FITPET_LOG_FILE`` is set; it rotates
    and prunes according to ``FITPET_LOG_ROTATION`` / ``FITPET_LOG_RETENTION``.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.log_level, colorize=True)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=settings.log_level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
            backtrace=True,
            diagnose=False,
        )
        logger.info(f"Writing logs to {log_path} (rotation={settings.log_rotation}, retention={settings.log_retention})")

    logger.info(f"Console logging at {settings.log_level}")
