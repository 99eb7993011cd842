from __future__ import annotations

from typing import Optional

from ..storage.memory import InMemoryRepository
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(InMemoryRepository[User], UserRepository):
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        return self.find_first(lambda u: u.username == username)
