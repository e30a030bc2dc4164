"""Asynchronous GS2 API client."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from gs2client._base_client import (
    Body,
    build_request_kwargs,
    handle_response,
    resolve_region,
    transport_failure,
)
from gs2client.credentials import Gs2Credentials, resolve_credentials
from gs2client.models import Gs2BasicRequest, RequestOptions
from gs2client.signer import Signer
from gs2client.types import HttpMethod, Region


class AsyncGs2Client:
    """Asynchronous client that signs and dispatches calls to GS2 services."""

    def __init__(
        self,
        *,
        credentials: Gs2Credentials | None = None,
        region: str | Region | None = None,
        options: RequestOptions | None = None,
    ) -> None:
        self._signer = Signer(resolve_credentials(credentials))
        self.region = resolve_region(region)
        self._options = options or RequestOptions()
        self._http = httpx.AsyncClient(follow_redirects=True)

    async def request(
        self,
        method: HttpMethod,
        module: str,
        function: str,
        service: str,
        path: str,
        *,
        body: Body | None = None,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        request: Gs2BasicRequest | None = None,
    ) -> dict[str, Any]:
        kwargs = build_request_kwargs(
            HttpMethod(method),
            signer=self._signer,
            region=self.region,
            module=module,
            function=function,
            service=service,
            path=path,
            body=body,
            query=query,
            options=self._options.merged_with(options),
            request=request,
        )
        try:
            response = await self._http.request(**kwargs)
        except httpx.RequestError as e:
            raise transport_failure(e) from e
        return handle_response(response)

    async def get(
        self,
        module: str,
        function: str,
        service: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        request: Gs2BasicRequest | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            HttpMethod.GET, module, function, service, path,
            query=query, options=options, request=request,
        )

    async def post(
        self,
        module: str,
        function: str,
        service: str,
        path: str,
        body: Body | None,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        request: Gs2BasicRequest | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            HttpMethod.POST, module, function, service, path,
            body=body, query=query, options=options, request=request,
        )

    async def put(
        self,
        module: str,
        function: str,
        service: str,
        path: str,
        body: Body | None,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        request: Gs2BasicRequest | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            HttpMethod.PUT, module, function, service, path,
            body=body, query=query, options=options, request=request,
        )

    async def delete(
        self,
        module: str,
        function: str,
        service: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
        request: Gs2BasicRequest | None = None,
    ) -> dict[str, Any]:
        return await self.request(
            HttpMethod.DELETE, module, function, service, path,
            query=query, options=options, request=request,
        )

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> AsyncGs2Client:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
