"""Fluent construction of validated HTTP request descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

_SCHEME_TAIL = frozenset("0123456789+-.")


@dataclass
class HTTPRequest:
    """Everything needed to issue one HTTP request, including retry policy."""

    method: str = ""
    url: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    retries: int = 0
    backoff: float = 0.0
    timeout: float = 0.0


def _split_scheme(raw: str) -> tuple[str, str]:
    for i, ch in enumerate(raw):
        if ch.isascii() and ch.isalpha():
            continue
        if ch in _SCHEME_TAIL:
            if i == 0:
                return "", raw
            continue
        if ch == ":":
            if i == 0:
                raise ValueError("missing protocol scheme")
            return raw[:i], raw[i + 1:]
        return "", raw
    return "", raw


def _valid_optional_port(port: str) -> bool:
    if not port:
        return True
    return port[0] == ":" and all(c in "0123456789" for c in port[1:])


def _validate_host(host: str) -> None:
    if host.startswith("["):
        end = host.rfind("]")
        if end < 0:
            raise ValueError("missing ']' in host")
        port = host[end + 1:]
        if not _valid_optional_port(port):
            raise ValueError(f"invalid port {port!r} after host")
        return
    colon = host.rfind(":")
    if colon != -1:
        port = host[colon:]
        if not _valid_optional_port(port):
            raise ValueError(f"invalid port {port!r} after host")


def _validate_request_uri(raw: str) -> None:
    """Accept an absolute URI or an absolute path, as a request line would."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise ValueError("invalid control character in URL")
    if not raw:
        raise ValueError("empty url")
    if raw == "*":
        return
    scheme, rest = _split_scheme(raw)
    if rest.endswith("?") and rest.count("?") == 1:
        rest = rest[:-1]
    else:
        rest = rest.partition("?")[0]
    if not rest.startswith("/"):
        if scheme:
            return
        raise ValueError("invalid URI for request")
    if scheme and rest.startswith("//"):
        authority = rest[2:].partition("/")[0]
        _validate_host(authority.rpartition("@")[2])


class RequestBuilder:
    """Builds an :class:`HTTPRequest` step by step, validating each step."""

    def __init__(self) -> None:
        self._request = HTTPRequest()

    def method(self, method: str) -> RequestBuilder:
        if not method:
            raise ValueError("method cannot be empty")
        self._request.method = method
        return self

    def url(self, url: str) -> RequestBuilder:
        _validate_request_uri(url)
        self._request.url = url
        return self

    def header(self, key: str, value: str) -> RequestBuilder:
        self._request.headers[key] = value
        return self

    def query_param(self, key: str, value: str) -> RequestBuilder:
        self._request.query_params[key] = value
        return self

    def body(self, body: bytes) -> RequestBuilder:
        self._request.body = bytes(body)
        return self

    def retries(self, count: int, backoff: float) -> RequestBuilder:
        if count < 0:
            raise ValueError("retries cannot be negative")
        self._request.retries = count
        self._request.backoff = backoff
        return self

    def timeout(self, timeout: float) -> RequestBuilder:
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self._request.timeout = timeout
        return self

    def build(self) -> HTTPRequest:
        return replace(
            self._request,
            headers=dict(self._request.headers),
            query_params=dict(self._request.query_params),
        )