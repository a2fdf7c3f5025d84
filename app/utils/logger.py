"""
Logging configuration

Console output at LOG_LEVEL, plus daily-rotated files under LOG_DIR: one
with everything from INFO up and one with errors only (dataset load
failures, 5xx responses).
"""
from loguru import logger
from pathlib import Path
import sys
from app.config import get_settings

settings = get_settings()

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logger():
    """Configure logger with appropriate settings"""
    logger.remove()  # Remove default handler

    logger.add(
        sys.stdout,
        colorize=True,
        format=CONSOLE_FORMAT,
        level=settings.log_level
    )

    log_dir = Path(settings.log_dir)

    logger.add(
        str(log_dir / "fra_dss_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention=f"{settings.log_retention_days} days",
        compression="zip",
        level="INFO"
    )

    logger.add(
        str(log_dir / "errors_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention=f"{settings.error_log_retention_days} days",
        level="ERROR"
    )

    return logger


# Initialize logger
log = setup_logger()
