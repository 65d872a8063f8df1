"""
Structured logging helpers for consistent log formatting.

Provides utilities for structured, clean logging without excessive decorative separators.
"""
import logging
from datetime import datetime


def log_section_start(logger: logging.Logger, section_name: str) -> None:
    """
    Log the start of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being started
    """
    logger.info(f"Starting: {section_name}")


def log_section_end(logger: logging.Logger, section_name: str) -> None:
    """
    Log the end of a processing section.

    Args:
        logger: Logger instance
        section_name: Name of the section being ended
    """
    logger.info(f"Completed: {section_name}")


def log_request(logger: logging.Logger, time: datetime, url: str) -> None:
    """Log the lookup target and the page that holds it."""
    logger.info(f"Looking up {time.isoformat()} in {url}")


def log_parse_summary(logger: logging.Logger, rows_count: int, layout: str) -> None:
    """
    Log parse summary.

    Args:
        logger: Logger instance
        rows_count: Number of playlist rows found
        layout: Name of the playlist layout parsed
    """
    logger.info(f"Parse summary - Layout: {layout}, Rows: {rows_count}")
