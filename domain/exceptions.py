# domain/exceptions.py
from __future__ import annotations


class UrlHelperError(Exception):
    """Base class for errors raised by this project."""


class ParseError(UrlHelperError):
    def __init__(self, request_target: str, reason: str) -> None:
        super().__init__(f"Invalid request target {request_target!r}: {reason}")
        self.request_target = request_target
        self.reason = reason


class ConfigError(UrlHelperError):
    pass
