"""Add thread use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import NewThread
from forum.domain.service import ThreadService


class AddThreadRequest(BaseModel):
    """Add thread request."""

    payload: dict[str, Any]  # Raw request body, validated by NewThread
    owner: str  # User ID from authenticated user
    username: str  # Display name from authenticated user


class AddThreadResponse(BaseModel):
    """Add thread response."""

    id: str
    title: str
    owner: str


class AddThreadUseCase(BaseUseCase):
    """Use case for starting a new thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddThreadRequest) -> AddThreadResponse:
        """Execute add thread flow.

        Args:
            request: Add thread request

        Returns:
            Created thread

        Raises:
            ValidationError: If title or body is missing or not a string
        """
        new_thread = NewThread.create(
            request.payload, owner=request.owner, username=request.username
        )
        added = await self.thread_service.add_thread(new_thread)

        return AddThreadResponse(id=added.id, title=added.title, owner=added.owner)
