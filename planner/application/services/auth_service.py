"""Auth service — password hashing, registration and cookie-bound sessions."""

from datetime import timedelta
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from planner.config import get_session_secret, get_settings
from planner.core.exceptions import ConflictException, UnauthorizedException
from planner.domain.models.session import UserSession
from planner.domain.models.user import User
from planner.domain.schemas.auth import ProfileUpdate, RegisterRequest
from planner.infrastructure.database import utcnow
from planner.infrastructure.session_store import SQLAlchemySessionStore

settings = get_settings()
logger = structlog.get_logger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

INVALID_CREDENTIALS = "Invalid email or password"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def register_user(db: Session, body: RegisterRequest) -> User:
    """Create a user; raises ConflictException if the email is taken."""
    if get_user_by_email(db, body.email):
        raise ConflictException("User with this email already exists")

    user = User(
        email=body.email,
        password_hash=hash_password(body.password),
        first_name=body.first_name,
        last_name=body.last_name,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise ConflictException("User with this email already exists")
    db.refresh(user)

    logger.info("User registered", user_id=user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """Return the user for valid credentials.

    Unknown email and wrong password raise the same error, and an unknown
    email still pays for one hash verification.
    """
    user = get_user_by_email(db, email)
    if user is None:
        pwd_context.dummy_verify()
        logger.info("Login failed")
        raise UnauthorizedException(INVALID_CREDENTIALS)

    if not verify_password(password, user.password_hash):
        logger.info("Login failed")
        raise UnauthorizedException(INVALID_CREDENTIALS)

    return user


def update_profile(db: Session, user: User, body: ProfileUpdate) -> User:
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(user, field, value)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


# --- Sessions ---

def session_ttl() -> timedelta:
    return timedelta(days=settings.SESSION_TTL_DAYS)


def encode_session_cookie(user_session: UserSession) -> str:
    """Sign the opaque session id so a tampered cookie never reaches the store."""
    return jwt.encode(
        {"sid": user_session.id, "exp": user_session.expires_at},
        get_session_secret(),
        algorithm=settings.SESSION_ALGORITHM,
    )


def decode_session_cookie(token: str) -> Optional[str]:
    try:
        payload = jwt.decode(token, get_session_secret(), algorithms=[settings.SESSION_ALGORITHM])
    except JWTError:
        return None
    return payload.get("sid")


def start_session(store: SQLAlchemySessionStore, user: User) -> tuple[UserSession, str]:
    """Create a fixed-lifetime session and its signed cookie value."""
    user_session = store.create(user.id, utcnow() + session_ttl())
    logger.info("Session started", user_id=user.id)
    return user_session, encode_session_cookie(user_session)


def resolve_session(db: Session, store: SQLAlchemySessionStore, token: Optional[str]) -> User:
    """Return the user behind a cookie value or raise UnauthorizedException."""
    if not token:
        raise UnauthorizedException()

    session_id = decode_session_cookie(token)
    if session_id is None:
        raise UnauthorizedException()

    user_session = store.get_active(session_id)
    if user_session is None:
        raise UnauthorizedException()

    user = get_user_by_id(db, user_session.user_id)
    if user is None:
        raise UnauthorizedException()
    return user


def end_session(store: SQLAlchemySessionStore, token: Optional[str]) -> None:
    if not token:
        return
    session_id = decode_session_cookie(token)
    if session_id and store.delete(session_id):
        logger.info("Session ended")
