from clixmcp.errors import (
    ApiError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
    format_error_for_user,
)


def test_api_error_without_status() -> None:
    assert format_error_for_user(ApiError("Request timeout after 15s")) == "[API Error]\n\nRequest timeout after 15s"


def test_api_error_auth_hint() -> None:
    for status in (401, 403):
        message = format_error_for_user(ApiError("Forbidden", status_code=status))
        assert f"Status Code: {status}" in message
        assert "Tip: Check your credentials and permissions." in message


def test_api_error_rate_limit_hint() -> None:
    message = format_error_for_user(ApiError("Too many requests", status_code=429))
    assert "Tip: You may be rate limited." in message


def test_api_error_other_status_has_no_tip() -> None:
    message = format_error_for_user(ApiError("Server error", status_code=500))
    assert message == "[API Error]\n\nServer error\n\nStatus Code: 500"


def test_other_categories() -> None:
    assert format_error_for_user(ValidationError("bad query")) == "[Validation Error]\n\nbad query"
    assert format_error_for_user(ConfigurationError("no key")) == "[Configuration Error]\n\nno key"
    assert format_error_for_user(NotFoundError("Tool 'x'")) == "[Not Found]\n\nTool 'x' not found"
    assert format_error_for_user(RuntimeError("boom")) == "[Error]\n\nboom"
    assert format_error_for_user("weird") == "[Unknown Error]\n\nweird"
