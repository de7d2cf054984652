"""JSON values and the configuration wrapper built on them."""

from __future__ import annotations

import json
from typing import Any, Union

from qorcore.errors import PARSE_ERROR, QorError

JsonValue = Union[None, bool, int, float, str, list, dict]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def parse_json(text: str) -> JsonValue:
    """Parse a JSON document; raises ``QorError`` with ``PARSE_ERROR`` on bad input."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise QorError(PARSE_ERROR, f"JSON parse error: {exc}") from exc


def dump_json(value: JsonValue) -> str:
    """Generate compact JSON text; non-finite numbers are rejected."""
    return json.dumps(value, allow_nan=False, ensure_ascii=False, separators=(",", ":"))


class Config:
    """A configuration tree held as a JSON value."""

    __slots__ = ("_value",)

    def __init__(self, value: JsonValue = None) -> None:
        self._value = value

    @classmethod
    def from_json(cls, text: str) -> Config:
        """Create a configuration by parsing JSON text."""
        return cls(parse_json(text))

    def get(self) -> JsonValue:
        """The whole configuration value."""
        return self._value

    def __getitem__(self, key: str | int) -> JsonValue:
        if isinstance(key, str) and not isinstance(self._value, dict):
            raise TypeError("configuration value is not an object")
        if isinstance(key, int) and not isinstance(self._value, list):
            raise TypeError("configuration value is not an array")
        return self._value[key]

    def __repr__(self) -> str:
        return f"Config({self._value!r})"