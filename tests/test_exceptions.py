import pytest

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


def test_base_error():
    e = Gs2Error([{"component": "name", "message": "required"}])
    assert e.errors == [{"component": "name", "message": "required"}]
    assert e.status_code is None
    assert str(e) == '[{"component":"name","message":"required"}]'


def test_str_is_json_of_payload():
    e = BadRequestError({"a": "b"})
    assert str(e) == '{"a":"b"}'
    assert e.args == ('{"a":"b"}',)


@pytest.mark.parametrize(
    ("error_type", "status_code"),
    [
        (BadRequestError, 400),
        (UnauthorizedError, 401),
        (QuotaExceedError, 402),
        (NotFoundError, 404),
        (ConflictError, 409),
        (InternalServerError, 500),
        (BadGatewayError, 502),
        (ServiceUnavailableError, 503),
        (RequestTimeoutError, 504),
    ],
)
def test_status_codes(error_type, status_code):
    e = error_type({"message": "x"})
    assert e.status_code == status_code
    assert isinstance(e, Gs2Error)


def test_status_code_override():
    e = InternalServerError({"message": "[418] unknown error"}, status_code=418)
    assert e.status_code == 418


def test_missing_body_error():
    e = MissingBodyError()
    assert e.status_code is None
    assert e.errors == {"message": "request body is required"}
    assert isinstance(e, Gs2Error)


def test_none_payload_renders_null():
    assert str(NotFoundError(None)) == "null"
