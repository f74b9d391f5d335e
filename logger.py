"""Centralized logger configuration.

Usage:
    from logger import get_logger
    log = get_logger(__name__)
"""
import logging
import os

DEFAULT_LEVEL = os.getenv("GRIDSHEET_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = DEFAULT_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
