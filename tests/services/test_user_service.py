"""UserService — login matching and name resolution without HTTP."""

from uuid import uuid4

import pytest

from blogapp.core.errors import AuthenticationError
from blogapp.services.user_service import UserService


async def test_login_matches_username_and_password(test_db):
    service = UserService(test_db)
    created = await service.create_user("Alice", "alice", "secret")
    user = await service.login("alice", "secret")
    assert user.id == created.id


async def test_login_is_case_sensitive_on_password(test_db):
    service = UserService(test_db)
    await service.create_user("Alice", "alice", "secret")
    with pytest.raises(AuthenticationError):
        await service.login("alice", "SECRET")


async def test_resolve_names_skips_unknown_ids(test_db):
    service = UserService(test_db)
    alice = await service.create_user("Alice", "alice", "pw")
    names = await service.resolve_names({alice.id, uuid4()})
    assert names == {alice.id: "Alice"}


async def test_resolve_names_with_no_ids(test_db):
    assert await UserService(test_db).resolve_names(set()) == {}
