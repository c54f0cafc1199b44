"""
Logging setup for EasyDict.

Lookup results are printed on stdout, so the console sink writes to stderr
and stays at WARNING unless EASYDICT_DEBUG is set. Records emitted by the
easydict package are also kept in a rotating file under the data directory;
records from third-party libraries are left out of that file.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from easydict.config import LOG_CONFIG

DEFAULT_COMPONENT = "easydict"

CONSOLE_FORMAT = (
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{extra[component]} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def setup_logging(
    log_file: Optional[str] = LOG_CONFIG["log_file"],
    verbose: bool = False
) -> None:
    """
    Replace loguru's default sink with the EasyDict console and file sinks.

    Args:
        log_file: Rotating log file; None disables file logging
        verbose: Show DEBUG records on the console regardless of LOG_CONFIG
    """
    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else LOG_CONFIG["console_level"],
        colorize=True,
        backtrace=False,
        diagnose=False
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=FILE_FORMAT,
            level=LOG_CONFIG["file_level"],
            filter="easydict",
            rotation=LOG_CONFIG["rotation"],
            retention=LOG_CONFIG["retention"],
            compression="gz",
            encoding="utf-8",
            diagnose=False
        )

    logger.debug(f"Logging initialized (file: {log_file or 'disabled'})")


def component_logger(component: str):
    """Logger whose records are tagged with an EasyDict component such as `cli`."""
    return logger.bind(component=component)
