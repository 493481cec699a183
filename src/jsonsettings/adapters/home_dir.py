"""Home directory adapter."""

from __future__ import annotations

import os


class PlatformHomeDir:
    def home(self) -> str:
        home = os.path.expanduser("~")
        # expanduser returns the input unchanged when the home is unknown
        if home == "~" or not home:
            raise OSError("cannot determine user home directory")
        return home
