# domain/request_target.py
from __future__ import annotations

import re
from typing import Tuple
from urllib.parse import urlsplit

from domain.exceptions import ParseError
from domain.url_path import normalize_escaped_path

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_request_target(request_target: str) -> Tuple[str, str]:
    """
    Split a raw request target into (escaped path, raw query).

    Origin-form ("/a/b?x=1") and absolute-form ("http://h/a/b?x=1") targets
    are accepted; only their path and query are kept. The fragment, if any,
    is dropped. The path keeps its percent-escapes as sent; only characters
    that may not appear raw in a path are escaped. The query is returned
    verbatim.

    Raises:
        ParseError: the target is not a syntactically valid URL reference
    """
    if _CONTROL_CHARS.search(request_target):
        raise ParseError(request_target, "invalid control character in URL")

    try:
        parts = urlsplit(request_target)
        # Validates the port of absolute-form targets.
        parts.port
    except ValueError as exc:
        raise ParseError(request_target, str(exc)) from exc

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise ParseError(request_target, "first path segment in URL cannot contain colon")

    bad_escape = _BAD_ESCAPE.search(parts.path)
    if bad_escape:
        escape = parts.path[bad_escape.start():bad_escape.start() + 3]
        raise ParseError(request_target, f"invalid URL escape {escape!r}")

    return normalize_escaped_path(parts.path), parts.query
