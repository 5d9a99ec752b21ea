import io
import logging

from urllib3 import HTTPResponse

from netresult.net import describe_response, to_network_result
from netresult.types import NetworkResult, Request, Response


def make_response(body: bytes = b"OK", status: int = 200, reason: str = "OK", url: str | None = "https://example.com/health"):
    return HTTPResponse(
        body=io.BytesIO(body),
        headers={"Content-Type": "text/plain", "X-Request-Id": "abc"},
        status=status,
        reason=reason,
        request_url=url,
        preload_content=True,
    )


def test_describe_response():
    resp = describe_response(make_response())
    assert resp == Response(
        status=200,
        reason="OK",
        headers=[("content-type", "text/plain"), ("x-request-id", "abc")],
        url="https://example.com/health",
    )


def test_describe_response_explicit_url_wins():
    resp = describe_response(make_response(), url="https://example.com/final")
    assert resp.url == "https://example.com/final"


def test_to_network_result_from_equal_exchanges_are_equal():
    req = Request(url="https://example.com/health")
    r1 = to_network_result(req, make_response())
    r2 = to_network_result(Request(url="https://example.com/health"), make_response())
    assert isinstance(r1, NetworkResult)
    assert r1.body == b"OK"
    assert r1.request is req
    assert r1 == r2


def test_to_network_result_status_difference():
    req = Request(url="https://example.com/health")
    assert to_network_result(req, make_response()) != to_network_result(
        req, make_response(status=500, reason="Internal Server Error")
    )


def test_to_network_result_falls_back_to_request_url():
    req = Request(url="https://example.com/health")
    result = to_network_result(req, make_response(url=None))
    assert result.response.url == "https://example.com/health"


def test_to_network_result_empty_body(caplog):
    req = Request(url="https://example.com/empty", method="HEAD")
    with caplog.at_level(logging.DEBUG):
        result = to_network_result(req, make_response(body=b"", status=204, reason="No Content"))
    assert result.body == b""
    assert result.response.status == 204
    assert "HEAD https://example.com/empty -> 204 (0 bytes)" in caplog.text
