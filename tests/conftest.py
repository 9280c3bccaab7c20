"""Test configuration and fixtures."""

from datetime import UTC, datetime, timedelta
from typing import Any

import logfire

# Keep test telemetry on the console
logfire.configure(send_to_logfire=False, console=False)

BASE_DATE = datetime(2021, 8, 8, 7, 19, 9, tzinfo=UTC)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base date."""
    return BASE_DATE + timedelta(minutes=minutes)


def thread_row(thread_id: str = "thread-123", **overrides: Any) -> dict[str, Any]:
    """Stored thread row for seeding in-memory repositories."""
    return {
        "id": thread_id,
        "title": "sebuah thread",
        "body": "sebuah body thread",
        "owner": "user-123",
        "username": "dicoding",
        "date": at(0),
        **overrides,
    }


def comment_row(
    comment_id: str = "comment-123",
    thread_id: str = "thread-123",
    **overrides: Any,
) -> dict[str, Any]:
    """Stored comment row for seeding in-memory repositories."""
    return {
        "id": comment_id,
        "thread_id": thread_id,
        "owner": "user-123",
        "username": "dicoding",
        "content": "sebuah comment",
        "date": at(1),
        "is_delete": False,
        **overrides,
    }


def reply_row(
    reply_id: str = "reply-123",
    comment_id: str = "comment-123",
    **overrides: Any,
) -> dict[str, Any]:
    """Stored reply row for seeding in-memory repositories."""
    return {
        "id": reply_id,
        "comment_id": comment_id,
        "owner": "user-123",
        "username": "dicoding",
        "content": "sebuah balasan",
        "date": at(2),
        "is_delete": False,
        **overrides,
    }
