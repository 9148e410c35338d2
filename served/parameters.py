"""Named parameters captured from a request path or query string."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class Parameters:
    """A string-to-string collection where missing keys read as ``""``."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str:
        """Return the value stored under ``key``, or an empty string."""
        return self._values.get(key, "")

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._values[key] = value

    def __getitem__(self, key: str) -> str:
        return self._values.get(key, "")

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[str, str]]:
        """Iterate over ``(key, value)`` pairs."""
        return iter(self._values.items())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Parameters):
            return self._values == other._values
        if isinstance(other, Mapping):
            return self._values == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Parameters({self._values!r})"