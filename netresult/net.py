import logging
from typing import Optional

from urllib3 import BaseHTTPResponse

from .types import NetworkResult, Request, Response


def describe_response(response: BaseHTTPResponse, url: Optional[str] = None) -> Response:
    final_url = url or response.url or ""
    return Response(
        status=response.status,
        reason=response.reason or "",
        headers=response.headers,
        url=final_url,
    )


def to_network_result(request: Request, response: BaseHTTPResponse) -> NetworkResult:
    """Bundle a completed urllib3 exchange. The response must already be read."""
    described = describe_response(response, url=response.url or request.url)
    body = response.data or b""
    logging.debug(
        "Result: %s %s -> %d (%d bytes)",
        request.method,
        request.url,
        described.status,
        len(body),
    )
    return NetworkResult(body=body, request=request, response=described)
