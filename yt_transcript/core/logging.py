"""
Logging configuration using Loguru.
"""
import logging
import sys
from typing import Any, Optional

from loguru import logger


class InterceptHandler(logging.Handler):
    """Handler that intercepts standard logging and redirects to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging with Loguru.

    This function:
    1. Intercepts standard library logging (youtube-transcript-api, requests)
    2. Ensures every record carries a ``video_id`` extra
    3. Adds a console sink and, when ``log_file`` is set, a rotating file sink

    Args:
        level: Minimum level for all sinks.
        log_file: Optional path of the rotating log file.
    """
    logging.root.handlers = []
    logging.basicConfig(handlers=[InterceptHandler()], level=0)

    for logger_name in ("youtube_transcript_api", "urllib3", "requests"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    logger.remove()

    def add_video_id(record: dict[str, Any]) -> None:
        record["extra"].setdefault("video_id", "-")

    logger.configure(patcher=add_video_id)

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<magenta>{extra[video_id]}</magenta> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
    )

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            enqueue=True,
            level=level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                "{extra[video_id]} | {name}:{function}:{line} - {message}"
            ),
        )
