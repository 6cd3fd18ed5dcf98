"""
Logging setup for expectations.

Everything under the "expectations" logger namespace goes to a rotating
debug.log inside the chosen directory; only warnings and above reach the
console unless asked otherwise. Tree resolutions and votes are logged at
DEBUG, completed steps and realized moves at INFO.

Usage:
    from expectations.logging_config import setup_logging
    setup_logging("logs")
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path


ROOT_LOGGER_NAME = "expectations"
LOG_FILE_NAME = "debug.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # bytes per file
BACKUP_COUNT = 5

FILE_FORMAT = (
    "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-40s | "
    "%(funcName)-22s | %(message)s"
)
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)-8s | %(name)-30s | %(message)s"

_banner_written = False


def _build_file_handler(log_path: Path, level: int) -> logging.Handler:
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_SIZE,
        backupCount=BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def _build_console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    return handler


def setup_logging(
    log_dir: Path | str,
    log_level: int = logging.DEBUG,
    console_level: int = logging.WARNING,
) -> Path:
    """
    Install the file and console handlers on the expectations logger.

    Safe to call again: handlers from a previous call are closed and replaced.

    Args:
        log_dir: Directory for debug.log (created if missing)
        log_level: Threshold for the log file
        console_level: Threshold for stderr

    Returns:
        Path to the log file
    """
    global _banner_written

    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    log_path = directory / LOG_FILE_NAME

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.addHandler(_build_file_handler(log_path, log_level))
    package_logger.addHandler(_build_console_handler(console_level))

    if not _banner_written:
        package_logger.info(
            f"Logging started {datetime.now().isoformat()} | file={log_path.absolute()}"
        )
        _banner_written = True

    return log_path


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the expectations namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# =============================================================================
# Structured records
# =============================================================================


def _join(*parts: object) -> str:
    return " | ".join(str(part) for part in parts if part not in (None, ""))


def log_step(
    logger: logging.Logger,
    step: int,
    phase: str,
    details: str | None = None,
) -> None:
    """Record a step-level event."""
    logger.debug(_join(f"STEP {step:05d}", phase, details))


def log_phase(
    logger: logging.Logger,
    step: int,
    phase_name: str,
    status: str,
    duration_ms: float | None = None,
    details: str | None = None,
) -> None:
    """Record a phase starting, completing or failing."""
    duration = f"{duration_ms:.2f}ms" if duration_ms is not None else None
    logger.debug(_join(f"STEP {step:05d}", "PHASE", phase_name, status, duration, details))


def log_move(
    logger: logging.Logger,
    step: int,
    stage: str,
    move: object,
    details: str | None = None,
) -> None:
    """Record a move at selection or realization."""
    logger.info(_join(f"STEP {step:05d}", "MOVE", stage, move, details))


def log_resolution(
    logger: logging.Logger,
    node_id: str,
    resolution: str,
    details: str | None = None,
) -> None:
    """Record an arrangement node leaving PENDING."""
    logger.debug(_join("NODE", node_id, resolution, details))


def log_vote(
    logger: logging.Logger,
    agent_id: str,
    implication: str | None,
    details: str | None = None,
) -> None:
    """Record the outcome of a social rule vote."""
    logger.debug(_join("VOTE", f"agent={agent_id}", implication, details))
