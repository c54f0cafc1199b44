"""
Main entry point for the EasyDict application.

This module configures logging and hands control to the command-line interface.
"""

from loguru import logger

from easydict.cli import cli
from easydict.utils.logging_config import setup_logging


def main():
    """Initialize logging and run the CLI."""
    setup_logging()
    logger.debug("Starting EasyDict CLI")
    cli(obj={})


if __name__ == "__main__":
    main()
