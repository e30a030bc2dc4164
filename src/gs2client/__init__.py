"""gs2client - Python SDK core for Game Server Services."""

__version__ = "0.1.0"

from gs2client.async_client import AsyncGs2Client
from gs2client.client import Gs2Client
from gs2client.credentials import Gs2Credentials, resolve_credentials
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
from gs2client.models import Gs2BasicRequest, Gs2Model, Gs2UserRequest, RequestOptions
from gs2client.signer import Signer, create_sign
from gs2client.types import HttpMethod, Region

__all__ = [
    # Version
    "__version__",
    # Clients
    "Gs2Client",
    "AsyncGs2Client",
    # Credentials and signing
    "Gs2Credentials",
    "resolve_credentials",
    "Signer",
    "create_sign",
    # Models
    "Gs2Model",
    "Gs2BasicRequest",
    "Gs2UserRequest",
    "RequestOptions",
    # Enums
    "HttpMethod",
    "Region",
    # Exceptions
    "Gs2Error",
    "BadRequestError",
    "UnauthorizedError",
    "QuotaExceedError",
    "NotFoundError",
    "ConflictError",
    "InternalServerError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "RequestTimeoutError",
    "MissingBodyError",
]
