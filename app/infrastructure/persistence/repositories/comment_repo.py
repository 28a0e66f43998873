"""Comment repository. Implements ICommentWriter for the add_comment action."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.comment import Comment
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.sanitization import strip_html


class CommentRepository(BaseRepository[Comment]):
    """Comment repository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Comment)

    async def add_comment(
        self,
        task_id: str,
        content: str,
        *,
        created_by: str | None = None,
        mentioned_users: list[str] | None = None,
    ) -> Comment:
        """Create a comment on the task with HTML stripped from the content.

        Runs in its own SAVEPOINT: a failed insert rolls back only itself and
        leaves the surrounding workflow transaction usable.
        """
        comment = Comment(
            task_id=task_id,
            content=strip_html(content),
            mentioned_users=list(mentioned_users or []),
            created_by=created_by,
        )
        async with self.db.begin_nested():
            return await self.create(comment)

    async def get_by_task(self, task_id: str, limit: int = 100) -> list[Comment]:
        result = await self.db.execute(
            select(Comment)
            .where(Comment.task_id == task_id)
            .order_by(Comment.created_at.asc())
            .limit(limit)
        )
        return list(result.scalars().all())
