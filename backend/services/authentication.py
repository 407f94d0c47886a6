"""
Authentication service.

Checks credentials against stored user accounts and registers new ones.
Passwords are compared as stored; there is no hashing or session handling.
"""
import logging
from enum import Enum
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from domain.models import Role, User
from repositories import UsersRepository

logger = logging.getLogger(__name__)


class AuthOutcome(str, Enum):
    """Result of an authentication attempt."""
    AUTHENTICATED = "authenticated"
    UNKNOWN_USER = "unknown_user"
    WRONG_PASSWORD = "wrong_password"


def authenticate(
    users_repo: UsersRepository, session: Session, email: str, password: str
) -> Tuple[AuthOutcome, Optional[User]]:
    """
    Look up a user by email and compare passwords.

    Returns:
        The outcome and, when authenticated, the stored user
    """
    user = users_repo.get_by_email(session, email)
    if user is None:
        logger.info("No user registered with email %s", email)
        return AuthOutcome.UNKNOWN_USER, None
    if user.password != password:
        logger.info("Wrong password for user %s", email)
        return AuthOutcome.WRONG_PASSWORD, None
    logger.info("User %s authenticated", email)
    return AuthOutcome.AUTHENTICATED, user


def register(
    users_repo: UsersRepository, session: Session, email: str, password: str
) -> Optional[User]:
    """Create a guest account, or return None if the email is already taken."""
    if users_repo.get_by_email(session, email) is not None:
        logger.info("User %s already registered", email)
        return None
    user = users_repo.create(session, User(email=email, password=password, role=Role.GUEST))
    logger.info("User %s registered with id %s", email, user.id)
    return user
