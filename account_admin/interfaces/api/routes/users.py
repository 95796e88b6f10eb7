"""Routes for administering user accounts."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from account_admin.application.use_cases.users import (
    MissingUsernameError,
    UserNotFoundError,
    delete_user_by_username as delete_user_by_username_uc,
)
from account_admin.domain.entities import User
from account_admin.infrastructure.database import get_db
from account_admin.interfaces.api.dependencies import (
    authorization,
    get_current_active_user,
)
from account_admin.interfaces.api.schemas import (
    DeletionErrorResponse,
    MessageResponse,
    UserDeletionRequest,
    UserRead,
)

router = APIRouter(tags=["users"])
logger = logging.getLogger(__name__)

DELETE_FAILED_MESSAGE = "An error occurred while deleting the user."


def _message(status_code: int, message: str, **extra: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


@router.get("/users/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    """Return the authenticated account."""

    return UserRead.model_validate(current_user)


def _username_from_payload(payload: Any) -> str | None:
    """Pull ``username`` out of a decoded body; anything unusable counts as absent."""

    if not isinstance(payload, dict):
        return None
    username = payload.get("username")
    if isinstance(username, str):
        return username
    if isinstance(username, (int, float)) and not isinstance(username, bool) and username:
        # Numbers are looked up by their JSON text, so 123 becomes "123".
        return json.dumps(username)
    return None


async def read_username(request: Request) -> str | None:
    """Read the username from a JSON body without rejecting malformed input."""

    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type != "application/json" and not media_type.endswith("+json"):
        return None
    raw = await request.body()
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.info("Ignoring malformed JSON body on delete-user request")
        return None
    return _username_from_payload(payload)


@router.post(
    "/auth/delete/user",
    response_model=MessageResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": DeletionErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": UserDeletionRequest.model_json_schema()}
            },
        }
    },
)
def delete_user_by_username(
    current_user: User = Depends(authorization()),
    username: str | None = Depends(read_username),
    db: Session = Depends(get_db),
):
    """Delete the account named in the request body."""

    try:
        deleted = delete_user_by_username_uc(db, username)
    except MissingUsernameError as exc:
        return _message(status.HTTP_400_BAD_REQUEST, str(exc))
    except UserNotFoundError as exc:
        logger.info(
            "User %s requested deletion of unknown user %s",
            current_user.username,
            username,
        )
        return _message(status.HTTP_404_NOT_FOUND, str(exc))
    except Exception as exc:  # noqa: BLE001 - every failure maps to a 500 body
        logger.exception("Deleting user %s failed", username)
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR, DELETE_FAILED_MESSAGE, error=str(exc)
        )

    logger.info("User %s deleted account %s", current_user.username, deleted)
    return MessageResponse(message=f"User {deleted} deleted successfully.")
