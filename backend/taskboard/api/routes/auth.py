"""Auth Routes: register, login and current-user lookup.

Invariants:
    - Registration rejects a known email with 409 before hashing anything
    - Login failures (unknown email, wrong password) share one 401 message
    - Responses never include the password hash

Design Decisions:
    - Plain def handlers: bcrypt and store IO block, so they run in the
      threadpool instead of on the event loop
"""

import logging
import uuid

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_user_repository, require_user_id
from taskboard.core.errors import (
    ConflictError, ResourceNotFoundError, UnauthenticatedError,
)
from taskboard.core.records import public_user
from taskboard.infrastructure.security import CredentialService, get_credential_service
from taskboard.schemas.auth import (
    AuthResponse, LoginRequest, RegisterRequest, UserResponse,
)
from taskboard.services.user_repository import UserRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post(
    "/register", response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    users: UserRepository = Depends(get_user_repository),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Create a user and return it with a fresh token."""
    if users.find_by_email(body.email) is not None:
        raise ConflictError("User with this email already exists")
    user = users.create({
        "id": str(uuid.uuid4()),
        "name": body.name,
        "email": body.email,
        "password": credentials.hash_password(body.password),
    })
    logger.info("User registered", extra={"user_id": user["id"]})
    return {"user": public_user(user), "token": credentials.issue_token(user["id"])}


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repository),
    credentials: CredentialService = Depends(get_credential_service),
):
    user = users.find_by_email(body.email)
    if user is None:
        raise UnauthenticatedError(INVALID_CREDENTIALS)
    if not credentials.verify_password(body.password, user.get("password", "")):
        raise UnauthenticatedError(INVALID_CREDENTIALS)
    return {"user": public_user(user), "token": credentials.issue_token(user["id"])}


@router.get("/me", response_model=UserResponse)
def me(
    user_id: str = Depends(require_user_id),
    users: UserRepository = Depends(get_user_repository),
):
    """The authenticated user. 404 when the token outlived its user."""
    user = users.find_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return public_user(user)
