# domain/inbound_request.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from domain.forwarded_headers import ForwardedHeaders


@dataclass(frozen=True)
class InboundRequest:
    """
    Metadata of an already-received HTTP request.

    request_target is the raw path and query as sent on the request line
    (e.g. "/some/path?test=123"), without scheme or host.
    """
    request_target: str
    host: str
    tls: bool = False
    headers: Mapping[str, str] = field(default_factory=dict)

    def forwarded(self) -> ForwardedHeaders:
        return ForwardedHeaders.from_headers(self.headers)
