"""Account routes."""

import asyncio
import mimetypes
import tempfile
from pathlib import Path
from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, HTTPException, Request, status

from userhub.application.usecase.account import (
    GetAccountUseCase,
    UpdateAccountAvatarUseCase,
    UpdateAccountUseCase,
)
from userhub.application.usecase.account.get_account import GetAccountRequest
from userhub.application.usecase.account.response import AccountResponse
from userhub.application.usecase.account.update_account import UpdateAccountRequest
from userhub.application.usecase.account.update_account_avatar import (
    UpdateAccountAvatarRequest,
)
from userhub.domain.error import (
    AccountConflictError,
    AccountValidationError,
    NotFoundError,
)
from userhub.interface.error import to_http_exception

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)


def _write_upload(content: bytes, suffix: str) -> Path:
    with tempfile.NamedTemporaryFile(
        delete=False, prefix="upload-", suffix=suffix
    ) as tmp:
        tmp.write(content)
        return Path(tmp.name)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: UUID,
    get_account_use_case: FromDishka[GetAccountUseCase],
) -> AccountResponse:
    """Get an account by ID."""
    try:
        return await get_account_use_case.execute(
            GetAccountRequest(account_id=str(account_id))
        )
    except NotFoundError as e:
        raise to_http_exception(e) from e


@router.patch("/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: UUID,
    update_account_use_case: FromDishka[UpdateAccountUseCase],
    changes: dict[str, Any] = Body(...),
) -> AccountResponse:
    """Update an account's first name, last name or email.

    Any other key in the body is ignored.

    Example:
        PATCH /accounts/123e4567-e89b-12d3-a456-426614174000
        {"first_name": "Jane", "role": "admin"}

        Error response (422):
        {"detail": {"code": "first_name_required", "message": "..."}}
    """
    try:
        return await update_account_use_case.execute(
            UpdateAccountRequest(account_id=str(account_id), changes=changes)
        )
    except (AccountValidationError, NotFoundError, AccountConflictError) as e:
        raise to_http_exception(e) from e


@router.put("/{account_id}/avatar", response_model=AccountResponse)
async def update_account_avatar(
    account_id: UUID,
    request: Request,
    update_account_avatar_use_case: FromDishka[UpdateAccountAvatarUseCase],
) -> AccountResponse:
    """Replace an account's avatar with the raw image in the request body."""
    content_type = request.headers.get("content-type", "").split(";")[0].strip()
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Avatar body must be an image",
        )

    content = await request.body()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Avatar body is empty"
        )

    suffix = mimetypes.guess_extension(content_type) or ".img"
    image_path = await asyncio.to_thread(_write_upload, content, suffix)
    try:
        return await update_account_avatar_use_case.execute(
            UpdateAccountAvatarRequest(
                account_id=str(account_id), image_path=image_path
            )
        )
    except NotFoundError as e:
        raise to_http_exception(e) from e
    finally:
        image_path.unlink(missing_ok=True)
