# domain/url_path.py
"""
Lexical slash-separated path handling.

Nothing here touches the filesystem and nothing is percent-decoded. Paths
are handled in their escaped form, so "%2F" stays part of a segment and
"%2E%2E" is never treated as "..".
"""
from __future__ import annotations

from urllib.parse import quote

# Left as-is when escaping literal path text (besides the unreserved set).
_LITERAL_SAFE = "/:@$&+,;="
# Left as-is in an already-escaped path: sub-delims, "%" and brackets.
_ESCAPED_SAFE = "/:@!$&'()*+,;=[]%"


def clean_path(path: str) -> str:
    """
    Return the shortest path equivalent to `path`.

    - repeated slashes collapse into one
    - "." elements are dropped
    - ".." removes the preceding element; on a rooted path it never goes above "/"
    - a trailing slash is dropped, except for the root itself
    - the empty path becomes "."
    """
    if path == "":
        return "."

    rooted = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part == "" or part == ".":
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(part)

    cleaned = "/".join(parts)
    if rooted:
        return "/" + cleaned
    return cleaned or "."


def join_path(*elements: str) -> str:
    """
    Join elements with "/" and clean the result.

    Leading empty elements are ignored; if every element is empty the result is "".
    """
    for index, element in enumerate(elements):
        if element != "":
            return clean_path("/".join(elements[index:]))
    return ""


def root_path(path: str) -> str:
    """Clean `path` and anchor it at "/"."""
    return clean_path("/" + path)


def escape_path(text: str) -> str:
    """Percent-encode literal path text. "/" stays a separator, "%" becomes "%25"."""
    return quote(text, safe=_LITERAL_SAFE)


def normalize_escaped_path(path: str) -> str:
    """
    Escape characters that may not appear raw in a URL path.

    Existing escapes are kept exactly as written, including "%2F" and
    escapes of bytes that are not valid UTF-8.
    """
    return quote(path, safe=_ESCAPED_SAFE)
