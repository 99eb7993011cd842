from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.schemas import parse_payload
from .model import Comment
from .repository import CommentRepository
from .schema import CommentCreate


class CommentService:
    """Comments are append-only: no update or delete use case."""

    def __init__(self, comments: CommentRepository):
        self._comments = comments

    def list_all(self) -> Sequence[Comment]:
        return self._comments.list_all()

    def get(self, comment_id: str) -> Optional[Comment]:
        return self._comments.get_by_id(comment_id)

    def create(self, payload: Mapping[str, Any]) -> Comment:
        data = parse_payload(CommentCreate, payload, message="Invalid comment data")
        return self._comments.create(data)
