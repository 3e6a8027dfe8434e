"""User Routes — /users resource: list, fetch, register, login.

Invariants:
    - Malformed ids are rejected by UUID path typing (400 via validation handler)
    - Login failure is a 401 envelope, never a 500
    - Passwords never appear in any response
    - /users and /users/ serve the same list and create operations
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogapp.infrastructure.database import get_db
from blogapp.schemas.user import LoginRequest, UserCreate, UserResponse
from blogapp.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse], include_in_schema=False)
@router.get("/", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List every registered user."""
    users = await UserService(db).list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED, include_in_schema=False,
)
@router.post(
    "/", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user."""
    user = await UserService(db).create_user(
        body.name, body.username, body.password,
    )
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Check credentials and return the matching user."""
    user = await UserService(db).login(body.username, body.password)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).get_user(user_id)
    return UserResponse.model_validate(user)
