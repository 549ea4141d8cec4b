"""Auth API routes — register, login, logout, current user."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from planner.config import get_settings
from planner.infrastructure.database import get_db
from planner.application.services.auth_service import (
    authenticate_user,
    end_session,
    register_user,
    session_ttl,
    start_session,
    update_profile,
)
from planner.application.services.category_service import provision_default_categories
from planner.domain.models.user import User
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileUpdate,
    RegisterRequest,
    UserRead,
)
from planner.infrastructure.session_store import SQLAlchemySessionStore
from planner.interfaces.api.deps import get_current_user, session_cookie
from planner.interfaces.deps import get_category_repository, get_session_store

settings = get_settings()

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Session = Depends(get_db),
    categories: CategoryRepository = Depends(get_category_repository),
):
    user = register_user(db, body)
    provision_default_categories(categories, user.id)
    return AuthResponse(message="User created successfully", user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    store: SQLAlchemySessionStore = Depends(get_session_store),
    categories: CategoryRepository = Depends(get_category_repository),
):
    user = authenticate_user(db, body.email, body.password)
    _, cookie_value = start_session(store, user)

    # Accounts created before provisioning existed get their defaults on first login
    provision_default_categories(categories, user.id)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=cookie_value,
        max_age=int(session_ttl().total_seconds()),
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return AuthResponse(message="Login successful", user=UserRead.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(session_cookie),
    store: SQLAlchemySessionStore = Depends(get_session_store),
):
    end_session(store, token)
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return MessageResponse(message="Logout successful")


@router.get("/auth/user", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)


@router.patch("/auth/user", response_model=UserRead)
def update_me(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserRead.model_validate(update_profile(db, user, body))
