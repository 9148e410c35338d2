"""Per-endpoint registry of request handlers keyed by HTTP method."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any

Handler = Callable[[Any, Any], None]
EndpointList = MutableMapping[str, tuple[str, list[str]]]

# Order in which supported methods are listed for an endpoint.
_METHOD_ORDER = (
    "GET",
    "POST",
    "HEAD",
    "PUT",
    "DELETE",
    "OPTIONS",
    "TRACE",
    "CONNECT",
    "BREW",
    "PATCH",
)


def _method_key(method: str) -> tuple[int, str]:
    try:
        return (_METHOD_ORDER.index(method), method)
    except ValueError:
        return (len(_METHOD_ORDER), method)


class MethodsHandler:
    """The handlers registered for one endpoint, one per HTTP method.

    Registration methods return the handler itself so calls can be chained.
    """

    def __init__(self, path: str, info: str = "") -> None:
        self.path = path
        self.info = info
        self._handlers: dict[str, Handler] = {}

    def get(self, handler: Handler) -> MethodsHandler:
        """Register a handler for GET."""
        return self.method("GET", handler)

    def post(self, handler: Handler) -> MethodsHandler:
        """Register a handler for POST."""
        return self.method("POST", handler)

    def head(self, handler: Handler) -> MethodsHandler:
        """Register a handler for HEAD."""
        return self.method("HEAD", handler)

    def put(self, handler: Handler) -> MethodsHandler:
        """Register a handler for PUT."""
        return self.method("PUT", handler)

    def delete(self, handler: Handler) -> MethodsHandler:
        """Register a handler for DELETE."""
        return self.method("DELETE", handler)

    def method(self, method: str, handler: Handler) -> MethodsHandler:
        """Register a handler for any HTTP method, replacing an earlier one."""
        self._handlers[method.upper()] = handler
        return self

    def method_supported(self, method: str) -> bool:
        """Return whether a handler is registered for ``method``."""
        return method.upper() in self._handlers

    def __getitem__(self, method: str) -> Handler:
        """Return the handler for ``method``; raise KeyError if there is none."""
        return self._handlers[method.upper()]

    def methods(self) -> list[str]:
        """Return the supported method names in their canonical order."""
        return sorted(self._handlers, key=_method_key)

    def propagate_endpoint(self, endpoints: EndpointList) -> None:
        """Record this endpoint's summary and supported methods in ``endpoints``."""
        endpoints[self.path] = (self.info, self.methods())

    def __repr__(self) -> str:
        return f"MethodsHandler({self.path!r}, {self.info!r}, methods={self.methods()!r})"