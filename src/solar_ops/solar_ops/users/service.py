from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from werkzeug.security import generate_password_hash

from ..common.schemas import parse_payload
from ..core.exceptions import ConflictError
from .model import User
from .repository import UserRepository
from .schema import UserCreate


class UserService:
    """Use case: manage login accounts."""

    def __init__(self, users: UserRepository):
        self._users = users
        self._lock = threading.Lock()

    def create_user(self, payload: Mapping[str, Any]) -> User:
        data = parse_payload(UserCreate, payload, message="Invalid user data")
        password_hash = generate_password_hash(data["password"])

        with self._lock:
            if self._users.get_by_username(data["username"]):
                raise ConflictError("Username already exists")
            return self._users.create({"username": data["username"], "password_hash": password_hash})

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return self._users.get_by_username(username)
