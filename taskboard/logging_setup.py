"""Logging configuration for the API server process."""

import logging


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging for the server process.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
