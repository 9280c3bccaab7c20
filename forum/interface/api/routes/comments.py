"""Comment routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_scheme, require_actor

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIResponse(BaseModel):
    """API response for a created comment."""

    added_comment: AddCommentResponse


@router.post(
    "/{thread_id}/comments",
    response_model=AddCommentAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(...),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AddCommentAPIResponse:
    """Comment on a thread.

    Requires authentication.

    Raises:
        HTTPException: 400 on an invalid payload, 404 if the thread does not exist
    """
    actor = require_actor(jwt_service, credentials, "comment")

    try:
        result = await add_comment_use_case.execute(
            AddCommentRequest(
                thread_id=thread_id,
                payload=payload,
                owner=actor.user_id,
                username=actor.username,
            )
        )
    except ValidationError as e:
        logfire.warn("Comment rejected", thread_id=thread_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Comment creation failed - thread not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return AddCommentAPIResponse(added_comment=result)


@router.delete(
    "/{thread_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the comment owner can delete it.

    Raises:
        HTTPException: 403 if the actor is not the owner, 404 if the thread or
            comment does not exist or the comment is already deleted
    """
    actor = require_actor(jwt_service, credentials, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                thread_id=thread_id, comment_id=comment_id, owner=actor.user_id
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment deletion failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        logfire.warn("Unauthorized comment deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
