import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from app.core.current_user import verify_token
from app.core.security import clear_token_cookie, create_access_token, set_token_cookie
from app.schemas.results import Success

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/jwt", response_model=Success)
def issue_token(
    request: Request,
    response: Response,
    claims: dict[str, Any] = Body(...),
):
    logger.info("log: info %s %s", request.method, request.url.path)
    token = create_access_token(claims, request.app.state.settings.ACCESS_TOKEN_SECRET)
    set_token_cookie(response, token)
    return Success()


@router.post("/logout", response_model=Success)
def logout(response: Response, user: dict[str, Any] | None = Body(default=None)):
    logger.info("logging out %s", user)
    clear_token_cookie(response)
    return Success()


@router.get("/me", responses={401: {"description": "Missing or invalid token"}})
def me(claims: dict[str, Any] = Depends(verify_token)):
    return claims
