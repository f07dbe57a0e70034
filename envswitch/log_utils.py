import logging
import os
import sys
from pathlib import Path
from typing import Optional

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LOGGER_NAME = "envswitch"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def setup_logging(log_level=logging.INFO, log_filename="envswitch.log"):
    """Configure the ``envswitch`` logger for CLI use.

    Info, success and warning records go to stdout and errors go to stderr.
    When ``$ENVSWITCH_RUN_LOG_DIR`` is set, a timestamped copy of the run is
    also written to ``log_filename`` inside that directory.
    """
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    if logger.hasHandlers():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(console_formatter)
    stdout_handler.addFilter(_MaxLevelFilter(logging.ERROR))
    logger.addHandler(stdout_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(console_formatter)
    stderr_handler.setLevel(logging.ERROR)
    logger.addHandler(stderr_handler)

    try:
        log_dir = get_run_log_dir()
        if log_dir is not None:
            file_handler = logging.FileHandler(log_dir / log_filename, mode="a")
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
    except OSError as e:
        # Unwritable or non-directory log location: keep console output only.
        logger.warning(
            f"Could not create log file {log_filename}: {e}. Logging to console only."
        )

    return logger


def get_run_log_dir() -> Optional[Path]:
    """
    Return the directory for run logs, or None when file logging is disabled.
    File logging is opt-in through the ENVSWITCH_RUN_LOG_DIR environment variable.
    Raises OSError when the directory cannot be created.
    """
    configured = os.getenv("ENVSWITCH_RUN_LOG_DIR")
    if not configured:
        return None
    log_dir = Path(configured)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir
