from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Protocol, Tuple, Union

from urllib3 import HTTPHeaderDict


DEFAULT_METHOD = "GET"

HeaderPairs = Tuple[Tuple[str, str], ...]
HeadersLike = Union[Mapping[str, str], Iterable[Tuple[str, str]], HTTPHeaderDict, None]


def normalize_headers(headers: HeadersLike) -> HeaderPairs:
    """Fold any header container into lower-cased (name, value) pairs.

    Pairs are sorted by name; values of a repeated header keep their order.
    """
    if not headers:
        return ()
    folded = headers if isinstance(headers, HTTPHeaderDict) else HTTPHeaderDict(headers)
    pairs = [(name.lower(), value) for name, value in folded.iteritems()]
    return tuple(sorted(pairs, key=lambda pair: pair[0]))


def _to_bytes(value: Any, name: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")


def _lookup(headers: HeaderPairs, name: str, default: Optional[str]) -> Optional[str]:
    name = name.lower()
    for key, value in headers:
        if key == name:
            return value
    return default


@dataclass(frozen=True)
class Request:
    url: str
    method: str = DEFAULT_METHOD
    headers: HeaderPairs = field(default=())
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", (self.method or DEFAULT_METHOD).upper())
        object.__setattr__(self, "headers", normalize_headers(self.headers))
        object.__setattr__(self, "body", _to_bytes(self.body if self.body is not None else b"", "body"))

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return _lookup(self.headers, name, default)


@dataclass(frozen=True)
class Response:
    """Response metadata; the payload lives on NetworkResult."""

    status: int
    reason: str = ""
    headers: HeaderPairs = field(default=())
    url: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", normalize_headers(self.headers))

    @property
    def ok(self) -> bool:
        return self.status < 400

    @property
    def content_type(self) -> str:
        return self.header("Content-Type", "") or ""

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return _lookup(self.headers, name, default)


@dataclass(frozen=True, eq=False, repr=False)
class NetworkResult:
    """The body, request and response of one completed exchange.

    Compared by value: two results are equal when their bodies are
    byte-equal and their request and response descriptors compare equal.
    """

    body: bytes
    request: Request
    response: Response

    def __post_init__(self) -> None:
        for name in ("body", "request", "response"):
            if getattr(self, name) is None:
                raise TypeError(f"NetworkResult.{name} is required")
        if not isinstance(self.request, Request):
            raise TypeError(f"request must be a Request, got {type(self.request).__name__}")
        if not isinstance(self.response, Response):
            raise TypeError(f"response must be a Response, got {type(self.response).__name__}")
        object.__setattr__(self, "body", _to_bytes(self.body, "body"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkResult):
            return NotImplemented
        return (
            self.body == other.body
            and self.request == other.request
            and self.response == other.response
        )

    def __hash__(self) -> int:
        return hash((self.body, self.request, self.response))

    def __repr__(self) -> str:
        return (
            f"NetworkResult(request={self.request.method} {self.request.url}, "
            f"status={self.response.status}, body={len(self.body)} bytes)"
        )


class NetworkClientProtocol(Protocol):
    def fetch(self, request: Request) -> Optional[NetworkResult]: ...
