# served

`served` provides the parts you need to route HTTP requests to handlers:

- `served.parameters.Parameters` is a string-to-string collection for REST and
  query parameters. A missing key reads as `""`.
- `served.message.Request` and `served.message.Response` are the request and
  response objects passed to handlers.
- `served.matchers` turns each segment of a path pattern into a matcher.
- `served.methods_handler.MethodsHandler` holds the handlers for one endpoint,
  one per HTTP method.
- `served.plugins` has an access log plugin.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Path segment matchers

`compile_to_matcher(segment)` compiles one segment of a path pattern:

| Segment            | Matcher           | Matches                                   |
|--------------------|-------------------|-------------------------------------------|
| `""`               | `EmptyMatcher`    | anything                                  |
| `customers`        | `StaticMatcher`   | exactly `customers`                       |
| `{id}`             | `VariableMatcher` | any non-empty segment, stored as `id`     |
| `{number:[0-9]+}`  | `RegexMatcher`    | a segment the whole regex matches         |
| `{:[0-9]+}`        | `RegexMatcher`    | the same check, but no parameter is stored |

Each matcher has `check_match(segment)`. It also has
`get_param(params, segment)`, which stores the captured value in a
`Parameters` object. If a regular expression is invalid, `re.error` is
raised when the matcher is built.

```python
from served.matchers import compile_to_matcher
from served.parameters import Parameters

pattern = [compile_to_matcher(s) for s in ["users", "{id:[0-9]+}"]]
segments = ["users", "42"]

params = Parameters()
if all(m.check_match(s) for m, s in zip(pattern, segments)):
    for m, s in zip(pattern, segments):
        m.get_param(params, s)

print(params["id"])      # "42"
print(params["missing"]) # ""
```

## Requests and responses

```python
from served.message import Request, Response

req = Request(method="GET", url="/users/42?verbose=1#top")
req.set_header("Content-Type", "text/plain")
req.header("content-type")   # "text/plain" (header names are case-insensitive)
req.path()                   # "/users/42"

res = Response()
res.write("id: ").write(42)  # write() returns the response, so calls chain
res.set_header("Content-Type", "text/plain")
res.status, res.body, res.body_size()   # (200, "id: 42", 6)
```

`Request.clear()` resets the method, URL, HTTP version, source and body to
their defaults.

## Method handlers

```python
from served.methods_handler import MethodsHandler

h = MethodsHandler("/users/{id}", "A single user")
h.get(lambda res, req: res.write("read")).put(lambda res, req: res.write("update"))

h.method_supported("GET")     # True
h.method_supported("DELETE")  # False
h["GET"](res, req)            # calls the GET handler; KeyError if none

endpoints = {}
h.propagate_endpoint(endpoints)
endpoints["/users/{id}"]      # ("A single user", ["GET", "PUT"])
```

`get`, `post`, `head`, `put` and `delete` register handlers for those
methods. `method(name, handler)` registers a handler for any method. If you
register a method again, the new handler replaces the old one. `methods()`
lists the supported methods in a fixed order (GET, POST, HEAD, PUT, DELETE,
OPTIONS, TRACE, CONNECT, BREW, PATCH, then any others).

## Access log

`served.plugins.access_log(res, req)` prints one line per request in Apache
common-log style. `format_access_log(res, req, now)` returns the same line for
a given `datetime`:

```
127.0.0.1 - - [05/Mar/2024:10:15:00 -0000] "GET /users/42 HTTP/1.1" 200 6
```

If the request has no source, `-` is printed in its place.

## What this package does not do

The package has no router that holds a list of patterns, picks the first one a
request matches, and calls the handler. You combine the matchers and
`MethodsHandler` objects yourself. It also does not define the errors a router
would return for "not found" or "method not allowed".

There is no HTTP server either. Nothing here listens on a socket, parses HTTP
from the wire, or writes responses out.