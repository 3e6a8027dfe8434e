"""User Service — registration, lookup, and credential check over the users table.

Invariants:
    - get_user raises ResourceNotFoundError for unknown ids (never returns None)
    - login raises AuthenticationError for unknown usernames and wrong passwords alike
    - No session or token is issued; callers hold the returned user id themselves

Design Decisions:
    - Plain string equality for passwords (stored as given)
    - Duplicate usernames allowed; login takes the earliest registered match
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.core.errors import AuthenticationError, ResourceNotFoundError
from blogapp.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    """CRUD and login operations for users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_users(self) -> list[User]:
        result = await self.db.execute(
            select(User).order_by(User.created_at, User.id),
        )
        return list(result.scalars().all())

    async def get_user(self, user_id: UUID) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            logger.warning("User not found", extra={"user_id": user_id})
            raise ResourceNotFoundError("User", str(user_id))
        return user

    async def create_user(self, name: str, username: str, password: str) -> User:
        user = User(name=name, username=username, password=password)
        self.db.add(user)
        await self.db.commit()
        logger.info(f"User '{username}' registered", extra={"user_id": user.id})
        return user

    async def login(self, username: str, password: str) -> User:
        """Return the user whose username and password both match."""
        result = await self.db.execute(
            select(User)
            .where(User.username == username)
            .order_by(User.created_at, User.id)
        )
        for user in result.scalars():
            if user.password == password:
                logger.info(f"User '{username}' logged in", extra={"user_id": user.id})
                return user
        logger.warning(f"Login failed for '{username}'")
        raise AuthenticationError()

    async def resolve_names(self, user_ids: set[UUID]) -> dict[UUID, str]:
        """Multi-get display names; ids with no user are simply absent."""
        if not user_ids:
            return {}
        result = await self.db.execute(
            select(User.id, User.name).where(User.id.in_(user_ids)),
        )
        return {row.id: row.name for row in result}
