"""Tests for response decoding helpers."""

from __future__ import annotations

import httpx
import pytest

from restnest.transport.response import error_message, extract_response_data


def _make_response(status_code: int = 200, **kwargs: object) -> httpx.Response:
    """Build an httpx.Response bound to a dummy request."""
    return httpx.Response(
        status_code=status_code,
        request=httpx.Request("GET", "https://api.example.com/test"),
        **kwargs,
    )


class TestExtractResponseData:
    def test_json_object(self) -> None:
        assert extract_response_data(_make_response(json={"id": 1})) == {"id": 1}

    def test_json_list(self) -> None:
        assert extract_response_data(_make_response(json=[1, 2])) == [1, 2]

    def test_text_fallback(self) -> None:
        assert extract_response_data(_make_response(text="<html>hi</html>")) == "<html>hi</html>"

    def test_empty_body(self) -> None:
        assert extract_response_data(_make_response(204, content=b"")) is None


class TestErrorMessage:
    @pytest.mark.parametrize("key", ["message", "error", "detail"])
    def test_detail_keys(self, key: str) -> None:
        response = _make_response(400)
        assert error_message(response, {key: "bad input"}) == "HTTP 400: bad input"

    def test_text_truncated(self) -> None:
        response = _make_response(500)
        assert error_message(response, "x" * 300) == f"HTTP 500: {'x' * 200}"

    def test_no_detail(self) -> None:
        assert error_message(_make_response(404), None) == "HTTP 404"

    def test_dict_without_detail(self) -> None:
        assert error_message(_make_response(409), {"code": 7}) == "HTTP 409"

    def test_other_payload(self) -> None:
        assert error_message(_make_response(422), [1, 2]) == "HTTP 422: [1, 2]"
