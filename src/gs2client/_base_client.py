"""Shared client logic: config resolution, signed headers, response classification."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from typing import Any, NoReturn

import httpx
from pydantic import BaseModel

from gs2client import __version__
from gs2client.exceptions import (
    BadGatewayError,
    BadRequestError,
    ConflictError,
    Gs2Error,
    InternalServerError,
    MissingBodyError,
    NotFoundError,
    QuotaExceedError,
    RequestTimeoutError,
    ServiceUnavailableError,
    UnauthorizedError,
)
from gs2client.models import Gs2BasicRequest, RequestOptions
from gs2client.signer import Signer, current_timestamp
from gs2client.types import HttpMethod, Region

ENV_REGION = "GS2_REGION"
DEFAULT_REGION = Region.AP_NORTHEAST_1
ENDPOINT_HOST = "https://{service}.{region}.gs2io.com"
DEFAULT_TIMEOUT = 60.0

HEADER_CLIENT_ID = "X-GS2-CLIENT-ID"
HEADER_TIMESTAMP = "X-GS2-REQUEST-TIMESTAMP"
HEADER_SIGN = "X-GS2-REQUEST-SIGN"

logger = logging.getLogger("gs2client")

_STATUS_ERRORS: dict[int, type[Gs2Error]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    402: QuotaExceedError,
    404: NotFoundError,
    409: ConflictError,
    500: InternalServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: RequestTimeoutError,
}

_BODY_METHODS = {HttpMethod.POST, HttpMethod.PUT}

Body = Mapping[str, Any] | BaseModel


def resolve_region(region: str | Region | None) -> str:
    """Resolve the region from the explicit argument or environment variable.

    Priority: explicit argument > GS2_REGION env var > ap-northeast-1.
    """
    if region is None:
        region = os.environ.get(ENV_REGION) or DEFAULT_REGION
    if isinstance(region, Region):
        return region.value
    return region


def build_host(service: str, region: str) -> str:
    return ENDPOINT_HOST.replace("{region}", region).replace("{service}", service)


def build_headers(
    signer: Signer,
    module: str,
    function: str,
    *,
    options: RequestOptions,
    request: Gs2BasicRequest | None = None,
) -> dict[str, str]:
    """Build the headers for one call, signed with a freshly captured timestamp.

    Caller headers come first, request metadata next, and the signing
    headers last so they can never be overridden.
    """
    timestamp = current_timestamp()
    headers = {"User-Agent": f"gs2-client-python/{__version__}"}
    headers.update(options.headers)
    if request is not None:
        headers.update(request.extra_headers())
    headers[HEADER_CLIENT_ID] = signer.client_id
    headers[HEADER_TIMESTAMP] = str(timestamp)
    headers[HEADER_SIGN] = signer.sign(module, function, timestamp)
    return headers


def serialize_body(body: Body) -> dict[str, Any]:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(body)


def build_request_kwargs(
    method: HttpMethod,
    *,
    signer: Signer,
    region: str,
    module: str,
    function: str,
    service: str,
    path: str,
    body: Body | None,
    query: Mapping[str, Any] | None,
    options: RequestOptions,
    request: Gs2BasicRequest | None,
) -> dict[str, Any]:
    """Assemble the keyword arguments for ``httpx.Client.request``.

    Raises MissingBodyError for a POST or PUT without a body, before any
    network I/O happens.
    """
    if method in _BODY_METHODS and body is None:
        raise MissingBodyError()
    kwargs: dict[str, Any] = {
        "method": method.value,
        "url": build_host(service, region) + path,
        "headers": build_headers(
            signer, module, function, options=options, request=request
        ),
        "params": dict(query) if query else None,
        "timeout": options.timeout if options.timeout is not None else DEFAULT_TIMEOUT,
    }
    if method in _BODY_METHODS:
        kwargs["json"] = serialize_body(body)
    logger.debug(
        "%s %s [%s:%s]", kwargs["method"], kwargs["url"], module, function
    )
    return kwargs


def transport_failure(exc: httpx.RequestError) -> InternalServerError:
    """Wrap a failure that produced no response at all."""
    logger.warning("Request failed without a response: %s", exc)
    return InternalServerError({"message": str(exc)})


def decode_error_payload(text: str) -> Any:
    """Decode the error details from an error response body.

    The server wraps the details as JSON text inside the ``message`` field of
    a JSON envelope, so the payload is decoded twice.
    """
    try:
        return json.loads(json.loads(text)["message"])
    except (ValueError, KeyError, TypeError):
        logger.warning("Failed to decode error response payload: %r", text[:200])
        return {"message": text}


def map_error_response(status_code: int, text: str) -> NoReturn:
    """Map an HTTP error response to the appropriate exception.

    Always raises; the NoReturn type hint makes this explicit.
    """
    error_type = _STATUS_ERRORS.get(status_code)
    if error_type is None:
        raise InternalServerError(
            {"message": f"[{status_code}] unknown error"}, status_code=status_code
        )
    raise error_type(decode_error_payload(text))


def handle_response(response: httpx.Response) -> dict[str, Any]:
    """Return the decoded body of a 200 response, raise for anything else."""
    if response.status_code == 200:
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            logger.warning(
                "Success response is not a JSON object: %r", response.text[:200]
            )
            raise InternalServerError({"message": response.text}, status_code=200)
        return data
    map_error_response(response.status_code, response.text)
