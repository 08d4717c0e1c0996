"""Structured logging for AutoSwitcher."""
import logging
import sys
from pathlib import Path
from typing import Optional

from switcher.shared.errors import ErrorCode


def setup_logger(
    name: str = "switcher",
    level: int = logging.INFO,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Set up the application logger.
    
    Args:
        name: Logger name
        level: Logging level
        log_file: Optional file path for file handler
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def log_switch_event(
    logger: logging.Logger,
    surface: str,
    event: str,
    index: Optional[int] = None,
    switch_count: Optional[int] = None,
    interval_ms: Optional[int] = None,
    error_code: Optional[ErrorCode] = None,
    message: Optional[str] = None
):
    """
    Log a structured switcher event.
    
    Args:
        logger: Logger instance
        surface: Name of the display surface
        event: Lifecycle event (initialize/advance/schedule/stop)
        index: Current view index (optional)
        switch_count: Number of switches made so far (optional)
        interval_ms: Scheduled delay in milliseconds (optional)
        error_code: Error code if something went wrong (optional)
        message: Additional message (optional)
    """
    parts = [
        f"surface={surface}",
        f"event={event}",
    ]

    if index is not None:
        parts.append(f"index={index}")
    if switch_count is not None:
        parts.append(f"switches={switch_count}")
    if interval_ms is not None:
        parts.append(f"interval={interval_ms}ms")
    if error_code:
        parts.append(f"error={error_code.name}")
    if message:
        parts.append(f"msg={message}")

    log_msg = " | ".join(parts)

    if error_code:
        logger.error(log_msg)
    elif event == "stop":
        logger.info(log_msg)
    else:
        logger.debug(log_msg)
