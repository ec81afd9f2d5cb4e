"""
Logging configuration for the fourbar project.

Every project logger lives under the `fourbar_tools` namespace. The solver
logs one DEBUG record per driving angle, so its logger gets a level of its
own: a debug run of the pipeline stays readable unless the sweep itself is
being traced.

Usage:
    from configs.logging_config import setup_logging, get_logger

    setup_logging(level=logging.DEBUG, solver_level=logging.INFO)
    logger = get_logger(__name__)
    logger.info("Simulating case_4")
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from configs.paths import LOG_FILE

ROOT_LOGGER_NAME = 'fourbar_tools'
SOLVER_LOGGER_NAME = f'{ROOT_LOGGER_NAME}.solver'

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_logging_configured = False


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | str | None = None,
    console: bool = True,
    solver_level: int | None = None,
) -> None:
    """
    Configure the fourbar_tools loggers once per process.

    Args:
        level: Level of the fourbar_tools namespace (default: INFO)
        log_file: Path to log file (default: fourbar.log in project root)
        console: Whether to also log to stdout (default: True)
        solver_level: Level of the per-step solver logger; defaults to
                      `level`. Set it to INFO to keep DEBUG output of the
                      other modules without one line per driving angle.
    """
    global _logging_configured

    if _logging_configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Handlers pass everything; the logger levels decide
    root_logger.addHandler(_handler(
        logging.FileHandler(log_file or LOG_FILE, mode='a', encoding='utf-8'),
        logging.DEBUG,
    ))
    if console:
        root_logger.addHandler(_handler(logging.StreamHandler(sys.stdout), logging.DEBUG))

    logging.getLogger(SOLVER_LOGGER_NAME).setLevel(level if solver_level is None else solver_level)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Logger under the fourbar_tools namespace for a module or script name.

    Sets up logging with the defaults if that has not happened yet.

    Example:
        >>> get_logger('demo').name
        'fourbar_tools.demo'
        >>> get_logger('fourbar_tools.solver').name
        'fourbar_tools.solver'
    """
    if not _logging_configured:
        setup_logging()

    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')
