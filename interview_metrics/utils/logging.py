"""
Logging utilities for the interview metrics tools.

Everything goes to the log file at DEBUG; the console only shows records at
or above the configured level, on stderr, so reports printed to stdout are
never interleaved with log lines.
"""
import os
import sys
import logging
from typing import Union

FILE_FORMAT = '%(asctime)s %(levelname)s %(name)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s [%(name)s] %(message)s'


def _resolve_level(level: Union[int, str]) -> int:
    """Accept a numeric level or a name such as 'info'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(log_file_path: str, console_level: Union[int, str] = logging.WARNING) -> str:
    """
    Route all records to a log file and warnings and above to stderr.

    Calling it again replaces the handlers of the previous call, so each CLI
    run starts a fresh log file.

    Args:
        log_file_path: Full path to the log file; missing directories are created
        console_level: Minimum level echoed to the console, as a number or name

    Returns:
        Path to the log file
    """
    console_level = _resolve_level(console_level)

    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger("setup").debug(
        f"Logging to {log_file_path}, console level {logging.getLevelName(console_level)}"
    )
    return log_file_path
