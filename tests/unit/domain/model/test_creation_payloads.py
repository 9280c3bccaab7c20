"""Unit tests for creation payloads and results."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from forum.domain.error import ValidationError, ValidationErrorKind
from forum.domain.model import (
    AddedThread,
    DetailThread,
    NewComment,
    NewReply,
    NewThread,
)
from tests.conftest import at


class TestNewThread:
    def test_create_from_body_and_actor(self):
        new_thread = NewThread.create(
            {"title": "sebuah thread", "body": "sebuah body"},
            owner="user-123",
            username="dicoding",
        )

        assert new_thread.title == "sebuah thread"
        assert new_thread.owner == "user-123"

    def test_actor_overrides_body(self):
        """Owner fields come from the actor, never from the request body."""
        new_thread = NewThread.create(
            {"title": "t", "body": "b", "owner": "user-evil"},
            owner="user-123",
            username="dicoding",
        )

        assert new_thread.owner == "user-123"

    def test_missing_title(self):
        with pytest.raises(ValidationError) as exc_info:
            NewThread.create({"body": "b"}, owner="user-123", username="dicoding")

        assert str(exc_info.value) == "NEW_THREAD.MISSING_PROPERTY"

    def test_numeric_title(self):
        with pytest.raises(ValidationError) as exc_info:
            NewThread.create(
                {"title": 123, "body": "b"}, owner="user-123", username="dicoding"
            )

        assert exc_info.value.kind == ValidationErrorKind.INVALID_TYPE


class TestNewComment:
    def test_missing_content(self):
        with pytest.raises(ValidationError) as exc_info:
            NewComment.create(
                {}, thread_id="thread-123", owner="user-123", username="dicoding"
            )

        assert str(exc_info.value) == "NEW_COMMENT.MISSING_PROPERTY"

    def test_list_content(self):
        with pytest.raises(ValidationError) as exc_info:
            NewComment.create(
                {"content": ["a"]},
                thread_id="thread-123",
                owner="user-123",
                username="dicoding",
            )

        assert str(exc_info.value) == "NEW_COMMENT.INVALID_TYPE"


class TestBlankProperties:
    """Empty strings and nulls count as absent in creation payloads."""

    @pytest.mark.parametrize("blank", ["", None])
    def test_comment_content(self, blank):
        with pytest.raises(ValidationError) as exc_info:
            NewComment.create(
                {"content": blank},
                thread_id="thread-123",
                owner="user-123",
                username="dicoding",
            )

        assert str(exc_info.value) == "NEW_COMMENT.MISSING_PROPERTY"

    @pytest.mark.parametrize("field", ["title", "body"])
    @pytest.mark.parametrize("blank", ["", None])
    def test_thread_text(self, field, blank):
        payload = {"title": "sebuah thread", "body": "sebuah body", field: blank}

        with pytest.raises(ValidationError) as exc_info:
            NewThread.create(payload, owner="user-123", username="dicoding")

        assert exc_info.value.kind == ValidationErrorKind.MISSING_PROPERTY

    @pytest.mark.parametrize("blank", ["", None])
    def test_reply_content(self, blank):
        with pytest.raises(ValidationError) as exc_info:
            NewReply.create(
                {"content": blank},
                thread_id="thread-123",
                comment_id="comment-123",
                owner="user-123",
                username="dicoding",
            )

        assert str(exc_info.value) == "NEW_REPLY.MISSING_PROPERTY"

    def test_blank_wins_over_invalid_type(self):
        with pytest.raises(ValidationError) as exc_info:
            NewThread.create(
                {"title": "", "body": 123}, owner="user-123", username="dicoding"
            )

        assert exc_info.value.kind == ValidationErrorKind.MISSING_PROPERTY


class TestNewReply:
    def test_create(self):
        new_reply = NewReply.create(
            {"content": "sebuah balasan"},
            thread_id="thread-123",
            comment_id="comment-123",
            owner="user-123",
            username="dicoding",
        )

        assert new_reply.comment_id == "comment-123"
        assert new_reply.content == "sebuah balasan"

    def test_boolean_content(self):
        with pytest.raises(ValidationError) as exc_info:
            NewReply.create(
                {"content": True},
                thread_id="thread-123",
                comment_id="comment-123",
                owner="user-123",
                username="dicoding",
            )

        assert str(exc_info.value) == "NEW_REPLY.INVALID_TYPE"


class TestAddedThread:
    def test_models_are_immutable(self):
        added = AddedThread(id="thread-123", title="t", owner="user-123")

        with pytest.raises(PydanticValidationError):
            added.title = "changed"


class TestDetailThread:
    def test_comments_default_to_empty_list(self):
        thread = DetailThread.create(
            {
                "id": "thread-123",
                "title": "sebuah thread",
                "body": "sebuah body",
                "date": at(0),
                "username": "dicoding",
            }
        )

        assert thread.comments == []

    def test_missing_body(self):
        with pytest.raises(ValidationError) as exc_info:
            DetailThread.create(
                {
                    "id": "thread-123",
                    "title": "t",
                    "date": at(0),
                    "username": "dicoding",
                }
            )

        assert str(exc_info.value) == "DETAIL_THREAD.MISSING_PROPERTY"
