"""Logging configuration for codex-term."""

import logging
import sys
from pathlib import Path

# Log file location
LOG_DIR = Path.home() / ".cache" / "codex-term"
LOG_FILE = LOG_DIR / "codex-term.log"

# Create logger
logger = logging.getLogger("codex-term")


def setup_logging(verbose: bool = False, log_to_file: bool = True) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, log DEBUG level to console
        log_to_file: If True, also log to file
    """
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Console handler - the CLI reports errors itself, so only warnings by default
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console_handler)

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized")


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Optional name for the logger (will be prefixed with app name)

    Returns:
        A logger instance
    """
    if name:
        return logging.getLogger(f"codex-term.{name}")
    return logger
