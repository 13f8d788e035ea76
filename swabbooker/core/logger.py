"""Console and file logging with Loguru."""

import logging
import sys
from pathlib import Path
from types import FrameType
from typing import Optional, Union

from loguru import logger

__all__ = ["setup_logging", "InterceptHandler"]

# Plain progress output for the interactive session
_CONSOLE_FORMAT = "<level>{message}</level>"

# Request/response echo needs the source location
_DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Redirect standard logging records (aiohttp, asyncio) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level: Union[str, int] = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame: Optional[FrameType] = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Setup Loguru logging for the interactive client.

    Args:
        debug: Echo every request and response (DEBUG level, detailed format)
        log_file: Optional path of a rotating log file
    """
    # Remove default handler
    logger.remove()

    level = "DEBUG" if debug else "INFO"

    # Progress messages are cyan, like the rest of the conversation
    logger.level("INFO", color="<cyan>")

    logger.add(
        sys.stdout,
        format=_DEBUG_FORMAT if debug else _CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=_FILE_FORMAT,
            level=level,
            rotation="10 MB",
            retention="30 days",
        )

    # Intercept all standard logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.root.setLevel(getattr(logging, level))

    logger.debug(f"Logging initialized (level={level}, file={log_file})")
