"""Logging configuration using Loguru."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{line} - {message}"

# Records logged without get_logger() still carry a module name
logger.configure(extra={"module": "sysmlview"})


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str = "logs",
    file_rotation: str = "10 MB",
    file_retention: str = "7 days",
    compression: str = "zip",
    serialize: bool = True,
) -> None:
    """
    Configure the sysmlview log sinks.

    Materialization is a library call, so only the stderr sink is on by
    default; the rotating file sink is opt-in.

    Args:
        level: Minimum level for every sink
        log_to_file: Add a rotating file sink under log_dir
        log_dir: Directory of the file sink (created if missing)
        file_rotation: Size or interval after which the log file rotates
        file_retention: How long rotated files are kept
        compression: Archive format for rotated files
        serialize: Write file records as JSON
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if not log_to_file:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_path / "sysmlview_{time:YYYY-MM-DD}.log",
        level=level,
        format=FILE_FORMAT,
        rotation=file_rotation,
        retention=file_retention,
        compression=compression,
        serialize=serialize,
        enqueue=True,
    )


def get_logger(name: str):
    """Logger bound to a sysmlview module name, e.g. 'sysmlview.services.materializer'."""
    return logger.bind(module=name)
