"""User Routes — create and fetch-by-id over the injected UserRepository.

Invariants:
    - Empty id/name rejected (400) before the repository is called
    - DuplicateKeyError → 409, StorageError → 500 via the global handler
    - Not-found is a normal branch: 404 envelope without a user field
    - Driver error text never reaches the response body
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from light_api.api.dependencies import get_user_repository
from light_api.core.errors import DuplicateKeyError
from light_api.core.repository_protocols import UserRepository
from light_api.core.validate_user import check_required_fields
from light_api.schemas.user import User, UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
):
    """Register a new user."""
    check_required_fields(body.id, body.name)
    user = User(id=body.id, name=body.name, email=body.email)
    try:
        await repo.create(user)
    except DuplicateKeyError:
        logger.warning(
            f"Rejected duplicate user {user.id!r}", extra={"user_id": user.id},
        )
        raise
    logger.info(f"Created user {user.id!r}", extra={"user_id": user.id})
    return UserResponse(message="User created successfully", user=user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, repo: UserRepository = Depends(get_user_repository),
):
    """Fetch a user by id."""
    user = await repo.find_by_id(user_id)
    if user is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=UserResponse(
                message=f"User with ID '{user_id}' was not found",
            ).model_dump(exclude_none=True),
        )
    return UserResponse(message="User retrieved successfully", user=user)
