from __future__ import annotations

from loguru import logger

from fitpet.core.errors import ConflictError, NotFoundError
from fitpet.domain.models import NewUser, User
from fitpet.storage.base import Storage


def create_user(storage: Storage, new_user: NewUser) -> User:
    """Create a user with a unique username.

    Raises:
        ConflictError: If the username is taken
    """
    if storage.get_user_by_username(new_user.username) is not None:
        raise ConflictError("Username already exists")
    user = storage.create_user(new_user)
    logger.info(f"Created user_id={user.id} username={user.username!r}")
    return user


def get_user(storage: Storage, user_id: int) -> User:
    user = storage.get_user(user_id)
    if user is None:
        raise NotFoundError("user", user_id)
    return user
