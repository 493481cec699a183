"""Settings record and its JSON mapping."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .errors import EncodeError, InvalidPortError

# Largest value of an unsigned 64-bit port field
MAX_PORT_VALUE = 2**64 - 1

# JSON key -> attribute name
_FIELDS = {
    "port": "port",
    "debug": "debug",
}


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON constant {name}")


def _match_field(key: str) -> str | None:
    field = _FIELDS.get(key)
    if field is not None:
        return field
    folded = key.casefold()
    for json_key, attr in _FIELDS.items():
        if json_key.casefold() == folded:
            return attr
    return None


def _check_port(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"port must be an unsigned 64-bit integer, got {value!r}")
    if not 0 <= value <= MAX_PORT_VALUE:
        raise TypeError(f"port must be an unsigned 64-bit integer, got {value!r}")
    return value


def _check_debug(value) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"debug must be a boolean, got {value!r}")
    return value


_CHECKS = {
    "port": _check_port,
    "debug": _check_debug,
}


@dataclass
class Config:
    """Settings stored in a settings file."""

    port: int = 0
    debug: bool = False

    @classmethod
    def from_json(cls, data: bytes | str) -> "Config":
        """Decode a JSON document into a Config.

        Unknown keys are ignored and missing keys keep their defaults. Key
        matching prefers an exact name and falls back to a case-insensitive
        one; the last matching key in the document wins. A ``null`` document
        or value leaves the defaults in place.

        Bytes are read as UTF-8 only; invalid sequences become U+FFFD and a
        leading byte order mark is rejected.

        Raises:
            ValueError: malformed JSON (``json.JSONDecodeError``).
            RecursionError: the document nests too deeply.
            TypeError: the document is not an object, or a value has the
                wrong type.
        """
        if isinstance(data, bytes):
            data = data.decode("utf-8", "replace")
        document = json.loads(data, parse_constant=_reject_constant)
        result = cls()
        if document is None:
            return result
        if not isinstance(document, dict):
            raise TypeError(f"expected a JSON object, got {type(document).__name__}")

        for key, value in document.items():
            attr = _match_field(key)
            if attr is None or value is None:
                continue
            setattr(result, attr, _CHECKS[attr](value))
        return result

    def to_json(self) -> bytes:
        """Encode as a compact JSON object; raises EncodeError on bad field types."""
        try:
            payload = {
                json_key: _CHECKS[attr](getattr(self, attr)) for json_key, attr in _FIELDS.items()
            }
            return json.dumps(payload, separators=(",", ":"), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodeError(str(e)) from e

    def validate(self) -> None:
        """Raise InvalidPortError when the port is zero."""
        if self.port == 0:
            raise InvalidPortError()
