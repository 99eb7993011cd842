from __future__ import annotations

from ..storage.memory import InMemoryRepository
from .model import Comment
from .repository import CommentRepository


class InMemoryCommentRepository(InMemoryRepository[Comment], CommentRepository):
    model = Comment
    recent_first = True
