"""Blog and user schema validation at the API boundary.

Invariants:
    - CommentCreate accepts the browser's "userId" key and the snake_case name
    - Empty titles, contents, and comment bodies are rejected
    - UserResponse drops the password even when the source object has one
"""

from types import SimpleNamespace
from uuid import uuid4

import pytest
from pydantic import ValidationError

from blogapp.schemas.blog import CommentCreate, PostCreate
from blogapp.schemas.user import UserCreate, UserResponse


def test_comment_create_accepts_camel_case_user_id():
    user_id = uuid4()
    body = CommentCreate.model_validate({"content": "hi", "userId": str(user_id)})
    assert body.user_id == user_id


def test_comment_create_accepts_field_name():
    user_id = uuid4()
    body = CommentCreate(content="hi", user_id=user_id)
    assert body.user_id == user_id


def test_comment_create_rejects_empty_content():
    with pytest.raises(ValidationError):
        CommentCreate.model_validate({"content": "", "userId": str(uuid4())})


def test_post_create_rejects_malformed_author():
    with pytest.raises(ValidationError):
        PostCreate(title="T", content="C", author="not-a-uuid")


def test_post_create_rejects_empty_title():
    with pytest.raises(ValidationError):
        PostCreate(title="", content="C", author=uuid4())


def test_user_create_requires_all_fields():
    with pytest.raises(ValidationError):
        UserCreate(name="Alice", username="alice")


def test_user_response_omits_password():
    user = SimpleNamespace(id=uuid4(), name="Alice", username="alice", password="pw")
    dumped = UserResponse.model_validate(user).model_dump()
    assert set(dumped) == {"id", "name", "username"}
