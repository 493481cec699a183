"""Settings file store.

Reads, validates and writes a ``Config`` as JSON. Each call touches the
filesystem directly; nothing is cached and nothing is locked, so concurrent
writers to the same path race and the last one wins. Writes are not atomic.
"""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

from ..adapters.home_dir import PlatformHomeDir
from ..adapters.logging_sink import LoggingSink
from ..config import config
from .config_model import Config
from .errors import DecodeError, EncodeError, SettingsError, SettingsIOError
from .ports import DiagnosticLogger, HomeDirResolver

FILE_MODE = 0o644
_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


class ConfigStore:
    """Reads and writes settings files."""

    def __init__(
        self,
        logger: DiagnosticLogger | None = None,
        home_dir: HomeDirResolver | None = None,
    ):
        self._logger = logger if logger is not None else LoggingSink(logging.getLogger(__name__))
        self._home_dir = home_dir if home_dir is not None else PlatformHomeDir()

    def read(self, path: str) -> Config:
        """Read, decode and validate the settings file at ``path``.

        ``path`` is tried relative to the working directory first, then
        under the user's home directory. Only the second failure is
        reported.

        Raises:
            SettingsIOError: neither location could be opened or read.
            DecodeError: the content is not a valid settings document.
            InvalidPortError: the decoded port is zero.
        """
        data = self._read_bytes(path)

        try:
            settings = Config.from_json(data)
        except (TypeError, ValueError, RecursionError) as e:
            raise DecodeError(path, str(e)) from e

        if settings.debug:
            self._logger.info("Successfully parsed settings file: %s", path)

        settings.validate()
        return settings

    def write(self, path: str, settings: Config) -> None:
        """Write ``settings`` to ``path``, creating or truncating it.

        Raises:
            EncodeError: ``settings`` cannot be encoded.
            SettingsIOError: the file could not be written.
        """
        if not isinstance(settings, Config):
            raise EncodeError(f"expected Config, got {type(settings).__name__}")
        data = settings.to_json()

        try:
            fd = os.open(path, _WRITE_FLAGS, FILE_MODE)
            with open(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            raise SettingsIOError(path, e.strerror or str(e)) from e

    def is_corrupted(self, path: str) -> bool:
        """Return True unless ``path`` reads back as a valid Config.

        A zero port and every other read failure count as corrupted.
        """
        try:
            settings = self.read(path)
        except SettingsError:
            return True
        return settings is None

    def _open(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except OSError:
            # primary error is dropped; only the home directory attempt is reported
            pass

        try:
            fallback = f"{self._home_dir.home()}/{path}"
        except OSError as e:
            raise SettingsIOError(path, str(e)) from e

        self._logger.debug("Settings file %s not found, trying %s", path, fallback)
        try:
            return open(fallback, "rb")
        except OSError as e:
            raise SettingsIOError(fallback, e.strerror or str(e)) from e

    def _read_bytes(self, path: str) -> bytes:
        f = self._open(path)
        try:
            with f:
                return f.read()
        except OSError as e:
            raise SettingsIOError(f.name, e.strerror or str(e)) from e


_default_store: ConfigStore | None = None


def _store() -> ConfigStore:
    global _default_store
    if _default_store is None:
        _default_store = ConfigStore()
    return _default_store


def read(path: str | None = None) -> Config:
    return _store().read(path if path is not None else config.SETTINGS_FILE)


def write(path: str | None, settings: Config) -> None:
    _store().write(path if path is not None else config.SETTINGS_FILE, settings)


def is_corrupted(path: str | None = None) -> bool:
    return _store().is_corrupted(path if path is not None else config.SETTINGS_FILE)
