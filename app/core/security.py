import json
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi import Response
from jwt import api_jws

from app.core.config import ACCESS_TOKEN_EXPIRE, ALGORITHM, TOKEN_COOKIE_NAME
from app.core.errors import Unauthorized

# Only signature and expiry gate a token; other registered claims are the caller's business.
DECODE_OPTIONS = {
    "require": ["exp"],
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


def create_access_token(
    data: dict[str, Any],
    secret: str,
    expires_delta: timedelta = ACCESS_TOKEN_EXPIRE,
) -> str:
    """
    Sign an arbitrary claims payload. Any caller-supplied ``exp`` is replaced.

    Claims are serialized here and signed as a raw JWS so values such as a
    numeric ``iss`` are signed as given instead of being type-checked.
    """
    to_encode = dict(data)
    to_encode["exp"] = int((datetime.now(timezone.utc) + expires_delta).timestamp())
    payload = json.dumps(to_encode, separators=(",", ":")).encode("utf-8")
    return api_jws.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict[str, Any]:
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM], options=DECODE_OPTIONS)
    except jwt.InvalidTokenError:
        raise Unauthorized()


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=True,
        samesite="none",
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(
        TOKEN_COOKIE_NAME,
        httponly=True,
        secure=True,
        samesite="none",
    )
