"""jsonsettings - Load, validate and persist JSON settings files"""

__version__ = "1.0.0"
__description__ = "Load, validate and persist JSON settings files"

from .adapters.logging_sink import configure_logging
from .core.config_model import Config
from .core.errors import (
    DecodeError,
    EncodeError,
    ErrorKind,
    InvalidPortError,
    SettingsError,
    SettingsIOError,
    ValidationError,
)
from .core.store import ConfigStore, is_corrupted, read, write

__all__ = [
    "Config",
    "ConfigStore",
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "InvalidPortError",
    "SettingsError",
    "SettingsIOError",
    "ValidationError",
    "configure_logging",
    "is_corrupted",
    "read",
    "write",
    "__version__",
]
