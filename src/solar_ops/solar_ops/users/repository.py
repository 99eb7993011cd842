from __future__ import annotations

from typing import Optional, Protocol

from ..storage.repository import Repository
from .model import User


class UserRepository(Repository[User], Protocol):
    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError
