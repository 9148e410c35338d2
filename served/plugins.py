"""Ready-made plugins for a multiplexer."""

from __future__ import annotations

from datetime import datetime

from served.message import Request, Response


def format_access_log(res: Response, req: Request, now: datetime) -> str:
    """Return an access log line for a handled request at time ``now``."""
    source = req.source or "-"
    stamp = now.strftime("%d/%b/%Y:%H:%M:%S")
    return (
        f"{source} - - [{stamp} -0000]"
        f' "{req.method} {req.path()} {req.http_version}"'
        f" {res.status} {res.body_size()}"
    )


def access_log(res: Response, req: Request) -> None:
    """Print an access log line for a handled request; use as an after-plugin."""
    print(format_access_log(res, req, datetime.now()), flush=True)