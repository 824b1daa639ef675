"""Logging setup for command line runs."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # langgraph's internals are noisy at debug level
    logging.getLogger("langgraph").setLevel(logging.WARNING)
