"""Logging adapter wrapping a stdlib logger as a DiagnosticLogger."""

from __future__ import annotations

import logging

from ..config import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class LoggingSink:
    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def info(self, msg: str, *args) -> None:
        self._logger.info(msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._logger.debug(msg, *args)


def configure_logging(level: str | int | None = None) -> None:
    """Install a basic stderr handler using the runtime log level."""
    logging.basicConfig(level=level if level is not None else config.log_level(), format=LOG_FORMAT)
