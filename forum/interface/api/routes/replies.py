"""Reply routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyResponse,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyResponse,
    DeleteReplyUseCase,
)
from forum.domain.error import ForbiddenError, NotFoundError, ValidationError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_scheme, require_actor

router = APIRouter(prefix="/threads", tags=["replies"], route_class=DishkaRoute)


class AddReplyAPIResponse(BaseModel):
    """API response for a created reply."""

    added_reply: AddReplyResponse


@router.post(
    "/{thread_id}/comments/{comment_id}/replies",
    response_model=AddReplyAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(...),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AddReplyAPIResponse:
    """Reply to a comment.

    Requires authentication.

    Raises:
        HTTPException: 400 on an invalid payload, 404 if the comment is not a
            live comment of the thread
    """
    actor = require_actor(jwt_service, credentials, "reply")

    try:
        result = await add_reply_use_case.execute(
            AddReplyRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                payload=payload,
                owner=actor.user_id,
                username=actor.username,
            )
        )
    except ValidationError as e:
        logfire.warn("Reply rejected", comment_id=comment_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        logfire.warn("Reply creation failed - comment not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return AddReplyAPIResponse(added_reply=result)


@router.delete(
    "/{thread_id}/comments/{comment_id}/replies/{reply_id}",
    response_model=DeleteReplyResponse,
)
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteReplyResponse:
    """Soft-delete a reply.

    Only the reply owner can delete it.

    Raises:
        HTTPException: 403 if the actor is not the owner, 404 if the comment or
            reply does not exist or the reply is already deleted
    """
    actor = require_actor(jwt_service, credentials, "delete replies")

    try:
        return await delete_reply_use_case.execute(
            DeleteReplyRequest(
                thread_id=thread_id,
                comment_id=comment_id,
                reply_id=reply_id,
                owner=actor.user_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Reply deletion failed - not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        logfire.warn("Unauthorized reply deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this reply",
        )
