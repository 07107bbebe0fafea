"""Social sign-in routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from userhub.adapter.error import ProviderError
from userhub.application.usecase.auth import SignInUseCase
from userhub.application.usecase.auth.sign_in import SignInResponse
from userhub.domain.error import (
    AccountConflictError,
    AccountValidationError,
    MalformedProfileError,
)
from userhub.interface.error import to_http_exception

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class GoogleSignInRequest(BaseModel):
    """Authorization code obtained by the frontend from Google."""

    code: str


class FacebookSignInRequest(BaseModel):
    """User access token obtained by the frontend from Facebook."""

    access_token: str


@router.post("/google", response_model=SignInResponse)
async def sign_in_with_google(
    request: GoogleSignInRequest,
    sign_in_use_case: FromDishka[SignInUseCase],
) -> SignInResponse:
    """Sign in (or sign up) with Google.

    Example:
        POST /auth/google
        {"code": "4/0AX4XfWh..."}

        Response:
        {
            "account": {"account_id": "...", "email": "jane@gmail.com", ...},
            "match": "found_by_email",
            "created": false
        }
    """
    try:
        return await sign_in_use_case.sign_in_with_google(request.code)
    except (
        ProviderError,
        MalformedProfileError,
        AccountValidationError,
        AccountConflictError,
    ) as e:
        raise to_http_exception(e) from e


@router.post("/facebook", response_model=SignInResponse)
async def sign_in_with_facebook(
    request: FacebookSignInRequest,
    sign_in_use_case: FromDishka[SignInUseCase],
) -> SignInResponse:
    """Sign in (or sign up) with Facebook."""
    try:
        return await sign_in_use_case.sign_in_with_facebook(request.access_token)
    except (
        ProviderError,
        MalformedProfileError,
        AccountValidationError,
        AccountConflictError,
    ) as e:
        raise to_http_exception(e) from e
