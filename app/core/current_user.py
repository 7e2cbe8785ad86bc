from typing import Any

from fastapi import Request

from app.core.config import TOKEN_COOKIE_NAME
from app.core.errors import Unauthorized
from app.core.security import decode_access_token


def verify_token(request: Request) -> dict[str, Any]:
    """
    Reject the request with 401 unless it carries a valid token cookie.

    Decoded claims are attached to ``request.state.user`` and returned.
    """
    token = request.cookies.get(TOKEN_COOKIE_NAME)
    if not token:
        raise Unauthorized()

    claims = decode_access_token(token, request.app.state.settings.ACCESS_TOKEN_SECRET)
    request.state.user = claims
    return claims
