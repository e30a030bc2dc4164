import pydantic
import pytest

from gs2client.models import Gs2BasicRequest, Gs2UserRequest, RequestOptions


class TestRequestOptions:
    def test_defaults(self):
        options = RequestOptions()
        assert options.timeout is None
        assert options.headers == {}

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(pydantic.ValidationError):
            RequestOptions(timeout=0)

    def test_merge_none_returns_self(self):
        options = RequestOptions(timeout=5)
        assert options.merged_with(None) is options

    def test_override_wins(self):
        base = RequestOptions(timeout=5, headers={"X-A": "1", "X-B": "1"})
        merged = base.merged_with(RequestOptions(timeout=10, headers={"X-B": "2"}))
        assert merged.timeout == 10
        assert merged.headers == {"X-A": "1", "X-B": "2"}

    def test_override_without_timeout_keeps_base(self):
        base = RequestOptions(timeout=5)
        merged = base.merged_with(RequestOptions(headers={"X-C": "3"}))
        assert merged.timeout == 5
        assert merged.headers == {"X-C": "3"}


class TestRequestMetadata:
    def test_basic_request_without_id(self):
        assert Gs2BasicRequest().extra_headers() == {}

    def test_basic_request_id(self):
        request = Gs2BasicRequest(request_id="req-1")
        assert request.extra_headers() == {"X-GS2-REQUEST-ID": "req-1"}

    def test_user_request(self):
        request = Gs2UserRequest(request_id="req-1", access_token="token-1")
        assert request.extra_headers() == {
            "X-GS2-REQUEST-ID": "req-1",
            "X-GS2-ACCESS-TOKEN": "token-1",
        }

    def test_user_request_from_camel_case(self):
        request = Gs2UserRequest.model_validate({"accessToken": "token-1"})
        assert request.extra_headers() == {"X-GS2-ACCESS-TOKEN": "token-1"}
