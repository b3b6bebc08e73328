# application/services/url_resolver.py
from __future__ import annotations

from typing import Optional

from application.ports.logger import LoggerPort, NullLogger
from application.resolver_config import ResolverConfig
from domain.exceptions import ParseError
from domain.inbound_request import InboundRequest
from domain.request_target import parse_request_target
from domain.resolved_base import ResolvedBase
from domain.url_path import join_path, normalize_escaped_path, root_path


class RequestUrlResolver:
    """
    Builds the externally visible base URL of a request behind a reverse proxy.

    Forwarding headers are trusted as given: whoever sets them (normally the
    proxy in front of this service) is expected to send well-formed values.
    """

    def __init__(self, config: ResolverConfig, logger: Optional[LoggerPort] = None) -> None:
        self._config = config
        self._logger = logger or NullLogger()

    def resolve(self, request: InboundRequest) -> ResolvedBase:
        """
        Args:
            request: metadata of the received request

        Returns:
            ResolvedBase for the request

        Raises:
            ParseError: request.request_target is not a valid URL reference
        """
        try:
            path, raw_query = parse_request_target(request.request_target)
        except ParseError as exc:
            self._logger.error(
                "url.parse_failed",
                request_target=request.request_target,
                reason=exc.reason,
            )
            raise

        forwarded = request.forwarded()
        host = forwarded.host or request.host
        if forwarded.proto:
            scheme = forwarded.proto
        else:
            scheme = "https" if request.tls else "http"

        path = root_path(path)
        if self._config.enable_path_prefix:
            prefix = normalize_escaped_path(forwarded.path_prefix or "")
            path = root_path(join_path(prefix, path))

        base = ResolvedBase(scheme=scheme, host=host, path=path, raw_query=raw_query)
        self._logger.debug(
            "url.resolved",
            scheme=scheme,
            host=host,
            path=path,
            forwarded_host=forwarded.host is not None,
            forwarded_proto=forwarded.proto is not None,
            path_prefix=forwarded.path_prefix if self._config.enable_path_prefix else None,
        )
        return base


def resolve(request: InboundRequest, config: Optional[ResolverConfig] = None) -> ResolvedBase:
    return RequestUrlResolver(config or ResolverConfig()).resolve(request)
