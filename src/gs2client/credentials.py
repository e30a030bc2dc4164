"""Client credentials and their resolution from the environment."""

from __future__ import annotations

import base64
import binascii
import os

from pydantic import ConfigDict, SecretStr, field_validator
from pydantic.alias_generators import to_camel

from gs2client.exceptions import UnauthorizedError
from gs2client.models import Gs2Model

ENV_CLIENT_ID = "GS2_CLIENT_ID"
ENV_CLIENT_SECRET = "GS2_CLIENT_SECRET"


class Gs2Credentials(Gs2Model):
    """Client id and base64-encoded client secret issued by GS2."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    client_id: str
    client_secret: SecretStr

    @field_validator("client_secret")
    @classmethod
    def _secret_is_base64(cls, value: SecretStr) -> SecretStr:
        try:
            base64.b64decode(value.get_secret_value(), validate=True)
        except binascii.Error as e:
            raise ValueError("client_secret must be base64 encoded") from e
        return value

    @property
    def secret_bytes(self) -> bytes:
        """The decoded HMAC key."""
        return base64.b64decode(self.client_secret.get_secret_value())


def resolve_credentials(credentials: Gs2Credentials | None) -> Gs2Credentials:
    """Resolve credentials from the explicit argument or environment variables.

    Priority: explicit argument > GS2_CLIENT_ID / GS2_CLIENT_SECRET.
    Raises UnauthorizedError if neither is available.
    """
    if credentials is not None:
        return credentials
    client_id = os.environ.get(ENV_CLIENT_ID, "").strip()
    client_secret = os.environ.get(ENV_CLIENT_SECRET, "").strip()
    if client_id and client_secret:
        return Gs2Credentials(client_id=client_id, client_secret=client_secret)
    msg = (
        f"No credentials provided. Pass credentials= or set "
        f"{ENV_CLIENT_ID} and {ENV_CLIENT_SECRET} environment variables."
    )
    raise UnauthorizedError({"message": msg})
