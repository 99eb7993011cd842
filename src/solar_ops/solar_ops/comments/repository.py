from __future__ import annotations

from typing import Protocol

from ..storage.repository import Repository
from .model import Comment


class CommentRepository(Repository[Comment], Protocol):
    """Append-only feed; ``list_all`` is newest first."""
