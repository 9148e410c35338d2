"""Matchers for single segments of a registered handler path."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from served.parameters import Parameters


class SegmentMatcher(ABC):
    """One segment of a handler path, used to match request path segments."""

    @abstractmethod
    def check_match(self, path_segment: str) -> bool:
        """Return whether ``path_segment`` matches this segment."""

    @abstractmethod
    def get_param(self, params: Parameters, path_segment: str) -> None:
        """Store any REST parameter captured from ``path_segment`` in ``params``."""


class EmptyMatcher(SegmentMatcher):
    """Matches any segment; used where a path ends with ``/``."""

    def check_match(self, path_segment: str) -> bool:
        return True

    def get_param(self, params: Parameters, path_segment: str) -> None:
        return None

    def __repr__(self) -> str:
        return "EmptyMatcher()"


class StaticMatcher(SegmentMatcher):
    """Matches only an exact copy of a fixed segment."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def check_match(self, path_segment: str) -> bool:
        return path_segment == self.pattern

    def get_param(self, params: Parameters, path_segment: str) -> None:
        return None

    def __repr__(self) -> str:
        return f"StaticMatcher({self.pattern!r})"


class VariableMatcher(SegmentMatcher):
    """Matches any non-empty segment and captures it as a named parameter."""

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name

    def check_match(self, path_segment: str) -> bool:
        # "/base/path/" must not match "/base/path/{variable}".
        return bool(path_segment)

    def get_param(self, params: Parameters, path_segment: str) -> None:
        if self.variable_name:
            params[self.variable_name] = path_segment

    def __repr__(self) -> str:
        return f"VariableMatcher({self.variable_name!r})"


class RegexMatcher(SegmentMatcher):
    """Matches a segment that satisfies a regular expression in full.

    An invalid expression raises :class:`re.error` at construction.
    """

    def __init__(self, variable_name: str, regex: str) -> None:
        self.variable_name = variable_name
        self.regex = re.compile(regex)

    def check_match(self, path_segment: str) -> bool:
        return self.regex.fullmatch(path_segment) is not None

    def get_param(self, params: Parameters, path_segment: str) -> None:
        if self.variable_name:
            params[self.variable_name] = path_segment

    def __repr__(self) -> str:
        return f"RegexMatcher({self.variable_name!r}, {self.regex.pattern!r})"


def compile_to_matcher(path_segment: str) -> SegmentMatcher:
    """Compile one segment of a handler path into a matcher.

    ``""`` gives an :class:`EmptyMatcher`, ``{name}`` a :class:`VariableMatcher`,
    ``{name:regex}`` a :class:`RegexMatcher` and anything else a
    :class:`StaticMatcher`.
    """
    if not path_segment:
        return EmptyMatcher()
    if path_segment.startswith("{") and path_segment.endswith("}"):
        inner = path_segment[1:-1]
        name, colon, regex = inner.partition(":")
        if not colon:
            return VariableMatcher(inner)
        return RegexMatcher(name, regex)
    return StaticMatcher(path_segment)