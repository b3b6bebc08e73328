# infrastructure/http/starlette_request_adapter.py
from __future__ import annotations

from urllib.parse import quote

from starlette.requests import Request

from domain.inbound_request import InboundRequest
from domain.url_path import escape_path

_SECURE_SCHEMES = {"https", "wss"}
# ASCII bytes of the raw path pass through; only non-ASCII bytes get escaped.
_ASCII = "".join(chr(code) for code in range(0x80))


def _request_target(request: Request) -> str:
    scope = request.scope
    raw_path = scope.get("raw_path")
    if raw_path:
        path = quote(raw_path, safe=_ASCII)
    else:
        path = escape_path(scope.get("root_path", "") + scope.get("path", ""))

    query_string = scope.get("query_string", b"").decode("latin-1")
    if query_string:
        return f"{path}?{query_string}"
    return path


def _request_host(request: Request) -> str:
    host = request.headers.get("host")
    if host:
        return host
    server = request.scope.get("server")
    if not server:
        return ""
    server_host, server_port = server
    if server_port is None:
        return server_host
    return f"{server_host}:{server_port}"


def to_inbound_request(request: Request) -> InboundRequest:
    """Snapshot the metadata of a Starlette/FastAPI request."""
    # First value wins for repeated headers.
    headers = {key: request.headers.get(key) for key in request.headers.keys()}
    return InboundRequest(
        request_target=_request_target(request),
        host=_request_host(request),
        tls=request.scope.get("scheme") in _SECURE_SCHEMES,
        headers=headers,
    )
