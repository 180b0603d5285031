"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

from sheetgen_client.kernel.errors import BaseError, RequestError


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_str_is_the_message(self) -> None:
        assert str(BaseError("prompt too short")) == "prompt too short"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code")
        assert err.to_dict() == {"code": "my_code", "message": "m"}

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]


class TestRequestError:
    def test_is_base_error(self) -> None:
        err = RequestError("boom")
        assert isinstance(err, BaseError)
        assert err.code == "request_error"

    def test_timeout_message(self) -> None:
        assert RequestError.timeout().message == "Request timeout"

    def test_http_status_message(self) -> None:
        assert RequestError.http_status(500).message == "HTTP Error: 500"

    def test_repr(self) -> None:
        assert repr(RequestError("x")) == "RequestError(code='request_error', message='x')"
