# domain/resolved_base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.query import QueryParams, encode_query
from domain.url_path import escape_path, join_path, normalize_escaped_path, root_path


@dataclass(frozen=True)
class ResolvedBase:
    """
    Externally visible URL of the request being handled.

    `path` is held in escaped form, exactly as the client sent it apart from
    cleaning, so "%2F" inside a segment stays "%2F". `raw_query` is kept
    verbatim. Segments and pathnames passed to the methods are literal text
    and get percent-encoded before use.

    Every method builds its result from local values, so the instance
    stays as it was constructed no matter which URLs are derived from it.
    """
    scheme: str
    host: str
    path: str
    raw_query: str = ""

    @property
    def original_path(self) -> str:
        return self.path

    def current(self) -> str:
        """Absolute URL of the request, including its query."""
        return self._build(self.path, self.raw_query)

    def scheme_and_host(self) -> str:
        """Origin only, e.g. "https://api.example.dev"."""
        return self._build("", "")

    def join_path(self, segment: str) -> str:
        """
        Append `segment` to the current path. The original query is kept.

        "" and "." leave the path unchanged, ".." moves up one level.
        """
        return self._build(join_path(self.path, escape_path(segment)), self.raw_query)

    def join_path_with_query(self, segment: str, query: Optional[QueryParams]) -> str:
        """Like join_path, but the query is replaced by `query`."""
        return self._build(join_path(self.path, escape_path(segment)), encode_query(query))

    def set_path(self, pathname: str) -> str:
        """Replace the whole path with `pathname` and drop the query."""
        return self._build(root_path(escape_path(pathname)), "")

    def set_path_with_query(self, pathname: str, query: Optional[QueryParams]) -> str:
        return self._build(root_path(escape_path(pathname)), encode_query(query))

    def _build(self, path: str, query: str) -> str:
        url = f"{self.scheme}://{self.host}"
        if path:
            if not path.startswith("/"):
                url += "/"
            url += normalize_escaped_path(path)
        if query:
            url += "?" + query
        return url
