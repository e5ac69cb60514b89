"""
Centralized logging setup for png_secret.
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from png_secret import config


def resolve_log_level(verbose: bool = False, silent: bool = False) -> int:
    """
    Pick the root log level from the CLI flags.

    Args:
        verbose: Enable debug output
        silent: Only show warnings and errors

    Returns:
        A logging level constant
    """
    if verbose:
        return logging.DEBUG
    if silent:
        return logging.WARNING
    level = logging.getLevelName(config.LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(
    verbose: bool = False,
    silent: bool = False,
    log_dir: Optional[Union[str, Path]] = None
) -> Optional[Path]:
    """
    Set up logging configuration for the CLI.

    Args:
        verbose: Whether to enable verbose logging
        silent: Whether to suppress informational output
        log_dir: Directory for log files (default: config.LOG_DIR, no file if unset)

    Returns:
        Path of the log file, or None when logging only to the console
    """
    level = resolve_log_level(verbose, silent)

    # Clear any existing handlers to avoid duplicate logs
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
    handlers = [console_handler]

    log_file = None
    log_dir = log_dir or config.LOG_DIR
    if log_dir:
        log_dir_path = Path(log_dir)
        log_dir_path.mkdir(parents=True, exist_ok=True)

        # Create log filename with timestamp
        timestamp = datetime.now().strftime("%Y-%m-%d")
        log_file = log_dir_path / f"png_secret_{timestamp}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers)

    # Explicitly set the level to make sure it takes effect
    root_logger.setLevel(level)

    # Pillow logs every plugin it probes at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)

    if log_file:
        logging.debug(f"Logging to file: {log_file}")

    return log_file
