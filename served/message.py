"""HTTP request and response objects passed to handlers."""

from __future__ import annotations

from dataclasses import dataclass, field

from served.parameters import Parameters


@dataclass
class Request:
    """A parsed HTTP request.

    ``url`` holds the request target (path, optional query and fragment).
    Header names are case-insensitive.
    """

    method: str = "GET"
    url: str = ""
    http_version: str = ""
    source: str = ""
    body: str = ""
    params: Parameters = field(default_factory=Parameters)
    query: Parameters = field(default_factory=Parameters)
    _headers: dict[str, str] = field(default_factory=dict, repr=False)

    def clear(self) -> None:
        """Reset method, URL, version, source and body to their defaults."""
        self.method = "GET"
        self.url = ""
        self.http_version = ""
        self.source = ""
        self.body = ""

    def set_header(self, header: str, value: str) -> None:
        """Set a header; the name is stored in lower case."""
        self._headers[header.lower()] = value

    def header(self, header: str) -> str:
        """Return a header value, or an empty string if it is not set."""
        return self._headers.get(header.lower(), "")

    def path(self) -> str:
        """Return the path part of the URL, without query or fragment."""
        return self.url.split("#", 1)[0].split("?", 1)[0]


@dataclass
class Response:
    """An HTTP response under construction by a handler."""

    status: int = 200
    body: str = ""
    _headers: dict[str, tuple[str, str]] = field(default_factory=dict, repr=False)

    def set_header(self, header: str, value: str) -> None:
        """Set a header, replacing any value under the same name in any case."""
        self._headers[header.lower()] = (header, value)

    def header(self, header: str) -> str:
        """Return a header value, or an empty string if it is not set."""
        entry = self._headers.get(header.lower())
        return entry[1] if entry else ""

    @property
    def headers(self) -> dict[str, str]:
        """The headers as set, keyed by the name first given."""
        return dict(self._headers.values())

    def write(self, text: object) -> Response:
        """Append ``text`` to the body and return the response for chaining."""
        self.body += str(text)
        return self

    def body_size(self) -> int:
        """Return the size of the body in bytes."""
        return len(self.body.encode("utf-8"))