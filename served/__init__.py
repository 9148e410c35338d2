"""Building blocks for HTTP request routing: parameters, request and response objects, path segment matchers, per-method handler registries and an access log plugin."""

__version__ = "0.1.0"