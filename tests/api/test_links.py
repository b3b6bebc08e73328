from __future__ import annotations

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from api import main
from application.resolver_config import ResolverConfig
from application.services.url_resolver import RequestUrlResolver


def _request(raw_path: bytes = b"/some/path", query_string: bytes = b"test=123", headers=None) -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "path": raw_path.decode("latin-1"),
        "raw_path": raw_path,
        "root_path": "",
        "query_string": query_string,
        "headers": [(b"host", b"1.2.3.4")] + (headers or []),
        "server": ("127.0.0.1", 8000),
    })


def test_read_root() -> None:
    assert main.read_root() == {"status": "ok", "service": "forwarded-url-helper"}


def test_read_links_without_forwarding_headers() -> None:
    # Arrange
    base = main.get_resolved_base(_request())

    # Act
    response = main.read_links(page=1, base=base)

    # Assert
    assert response.current == "http://1.2.3.4/some/path?test=123"
    assert response.origin == "http://1.2.3.4"
    assert response.parent == "http://1.2.3.4/some?test=123"
    assert response.root == "http://1.2.3.4/"
    assert response.next == "http://1.2.3.4/some/path?page=2"


def test_read_links_behind_proxy_with_prefix(monkeypatch) -> None:
    # Arrange
    monkeypatch.setattr(main, "RESOLVER", RequestUrlResolver(ResolverConfig(enable_path_prefix=True)))
    request = _request(headers=[
        (b"x-forwarded-host", b"api.example.dev"),
        (b"x-forwarded-proto", b"https"),
        (b"x-forwarded-path-prefix", b"/prefix"),
    ])

    # Act
    response = main.read_links(page=3, base=main.get_resolved_base(request))

    # Assert
    assert response.current == "https://api.example.dev/prefix/some/path?test=123"
    assert response.origin == "https://api.example.dev"
    assert response.root == "https://api.example.dev/"
    assert response.next == "https://api.example.dev/prefix/some/path?page=4"


def test_invalid_request_target_returns_400() -> None:
    with pytest.raises(HTTPException) as exc_info:
        main.get_resolved_base(_request(raw_path=b"/bad%zz"))

    assert exc_info.value.status_code == 400
    assert "/bad%zz" in exc_info.value.detail


def test_read_links_keeps_encoded_path() -> None:
    # Arrange
    base = main.get_resolved_base(_request(raw_path=b"/files/a%2F..%2Fsecret", query_string=b""))

    # Act
    response = main.read_links(page=1, base=base)

    # Assert
    assert response.current == "http://1.2.3.4/files/a%2F..%2Fsecret"
    assert response.parent == "http://1.2.3.4/files"
