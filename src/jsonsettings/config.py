"""Runtime configuration for jsonsettings"""
import os

from dotenv import load_dotenv

load_dotenv()


class RuntimeConfig:
    """Process-level knobs; never overrides values stored in a settings file"""

    # Default settings file used by the module-level helpers
    SETTINGS_FILE = os.getenv("SETTINGS_FILE", "settings.json")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def log_level(cls) -> str:
        return "DEBUG" if cls.DEBUG else cls.LOG_LEVEL


config = RuntimeConfig()
