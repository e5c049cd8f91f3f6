from fastapi import Header

from fx_mock_api.errors import AuthMissingError


def is_authorized(api_key: str | None, api_secret: str | None) -> bool:
    # presence only; values are never checked
    return bool(api_key) and bool(api_secret)


def require_credentials(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    x_api_secret: str | None = Header(default=None, alias="x-api-secret"),
) -> None:
    if not is_authorized(x_api_key, x_api_secret):
        raise AuthMissingError()
