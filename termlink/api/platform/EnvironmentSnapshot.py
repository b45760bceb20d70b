"""Immutable copy of environment values."""

import os
from collections.abc import Mapping
from types import MappingProxyType


class EnvironmentSnapshot:
    """Environment values captured once per session.

    Empty strings are reported as missing.
    """

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = MappingProxyType(dict(values or {}))

    @classmethod
    def from_os(cls) -> "EnvironmentSnapshot":
        return cls(os.environ)

    def get(self, name: str) -> str | None:
        value = self._values.get(name)
        return value or None

    def __repr__(self) -> str:
        return f"EnvironmentSnapshot({len(self._values)} values)"
