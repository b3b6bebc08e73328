# domain/forwarded_headers.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

X_FORWARDED_HOST = "X-Forwarded-Host"
X_FORWARDED_PROTO = "X-Forwarded-Proto"
# Prepended to the request path when path prefixes are enabled.
X_FORWARDED_PATH_PREFIX = "X-Forwarded-Path-Prefix"


def get_header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup. Returns "" when the header is missing."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return ""


@dataclass(frozen=True)
class ForwardedHeaders:
    host: Optional[str] = None
    proto: Optional[str] = None
    path_prefix: Optional[str] = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "ForwardedHeaders":
        return cls(
            host=get_header(headers, X_FORWARDED_HOST) or None,
            proto=get_header(headers, X_FORWARDED_PROTO) or None,
            path_prefix=get_header(headers, X_FORWARDED_PATH_PREFIX) or None,
        )
