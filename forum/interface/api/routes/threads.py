"""Thread routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from forum.application.usecase.thread import (
    AddThreadRequest,
    AddThreadResponse,
    AddThreadUseCase,
    GetThreadDetailRequest,
    GetThreadDetailResponse,
    GetThreadDetailUseCase,
)
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.service import JWTService
from forum.interface.api.auth import bearer_scheme, require_actor

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class AddThreadAPIResponse(BaseModel):
    """API response for a created thread."""

    added_thread: AddThreadResponse


@router.post(
    "",
    response_model=AddThreadAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    jwt_service: FromDishka[JWTService],
    payload: dict[str, Any] = Body(...),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AddThreadAPIResponse:
    """Create a thread.

    Requires authentication. The body must carry string ``title`` and
    ``body`` properties.

    Raises:
        HTTPException: 400 on an invalid payload
    """
    actor = require_actor(jwt_service, credentials, "create threads")

    try:
        result = await add_thread_use_case.execute(
            AddThreadRequest(
                payload=payload, owner=actor.user_id, username=actor.username
            )
        )
    except ValidationError as e:
        logfire.warn("Thread creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return AddThreadAPIResponse(added_thread=result)


@router.get("/{thread_id}", response_model=GetThreadDetailResponse)
async def get_thread_detail(
    thread_id: str,
    get_thread_detail_use_case: FromDishka[GetThreadDetailUseCase],
) -> GetThreadDetailResponse:
    """Get a thread with its comments and their replies.

    Deleted comments and replies are listed with masked content.

    Raises:
        HTTPException: 404 if the thread does not exist
    """
    try:
        return await get_thread_detail_use_case.execute(
            GetThreadDetailRequest(thread_id=thread_id)
        )
    except NotFoundError as e:
        logfire.warn("Thread not found", thread_id=thread_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
