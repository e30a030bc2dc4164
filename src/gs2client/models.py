"""Pydantic models for GS2 transport options and request metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Gs2Model(BaseModel):
    """Base model with camelCase alias support."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RequestOptions(Gs2Model):
    """Transport options applied to a single call or to every call of a client."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    timeout: float | None = Field(default=None, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)

    def merged_with(self, override: RequestOptions | None) -> RequestOptions:
        """Return these options with ``override`` layered on top."""
        if override is None:
            return self
        return RequestOptions(
            timeout=override.timeout if override.timeout is not None else self.timeout,
            headers={**self.headers, **override.headers},
        )


class Gs2BasicRequest(Gs2Model):
    """Per-call metadata sent alongside a request.

    The signing headers are always computed by the client; ``request_id``
    lets the caller tag a call so it can be traced on the server side.
    """

    request_id: str | None = None

    def extra_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.request_id is not None:
            headers["X-GS2-REQUEST-ID"] = self.request_id
        return headers


class Gs2UserRequest(Gs2BasicRequest):
    """Request issued on behalf of a logged-in game user."""

    access_token: str | None = None

    def extra_headers(self) -> dict[str, str]:
        headers = super().extra_headers()
        if self.access_token is not None:
            headers["X-GS2-ACCESS-TOKEN"] = self.access_token
        return headers
