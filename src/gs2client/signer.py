"""Request signing."""

from __future__ import annotations

import base64
import hashlib
import hmac
import time

from gs2client.credentials import Gs2Credentials


def current_timestamp() -> int:
    """Unix time in whole seconds."""
    return int(time.time())


def create_sign(client_secret: str, module: str, function: str, timestamp: int) -> str:
    """Sign ``module:function:timestamp`` with the base64-encoded secret.

    The result is the base64 rendering of the raw HMAC-SHA256 digest, keyed
    by the decoded secret. The server recomputes the same value from the
    X-GS2-* headers, so this must stay byte-for-byte stable.
    """
    message = f"{module}:{function}:{timestamp}".encode()
    key = base64.b64decode(client_secret)
    digest = hmac.new(key, message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


class Signer:
    """Signs operations with a fixed set of credentials."""

    def __init__(self, credentials: Gs2Credentials) -> None:
        self._credentials = credentials

    @property
    def client_id(self) -> str:
        return self._credentials.client_id

    def sign(self, module: str, function: str, timestamp: int) -> str:
        return create_sign(
            self._credentials.client_secret.get_secret_value(),
            module,
            function,
            timestamp,
        )
