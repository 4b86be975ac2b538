"""Logging configuration for SoundBind."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


def setup_logger(
    verbose: bool = False,
    save_to_file: bool = False,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set level to DEBUG, otherwise INFO
        save_to_file: If True, also log to a timestamped file
        log_dir: Directory for log files (defaults to "logs")

    Returns:
        Configured root logger
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Clear any existing handlers
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )
    simple_formatter = logging.Formatter("%(message)s")

    # Console only shows our own records; library chatter (httpx) goes to file
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    console_handler.addFilter(lambda record: record.name.startswith("soundbind"))

    logger.addHandler(console_handler)

    if save_to_file:
        try:
            directory = Path(log_dir or "logs")
            directory.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = directory / f"soundbind_{timestamp}.log"

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_formatter)
            logger.addHandler(file_handler)

            logger.debug(f"Logging to file: {log_file}")
        except OSError as e:
            logger.error(f"Failed to create file handler: {e}")

    return logger
