"""CommentRepository.add_comment: sanitized content written inside a SAVEPOINT."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from app.infrastructure.persistence.repositories import CommentRepository


def _session() -> tuple[MagicMock, MagicMock]:
    savepoint = MagicMock()
    savepoint.__aenter__ = AsyncMock(return_value=None)
    savepoint.__aexit__ = AsyncMock(return_value=False)
    db = MagicMock()
    db.flush = AsyncMock()
    db.refresh = AsyncMock()
    db.begin_nested = MagicMock(return_value=savepoint)
    return db, savepoint


async def test_add_comment_runs_in_savepoint() -> None:
    db, savepoint = _session()

    comment = await CommentRepository(db).add_comment(
        "task1", "<b>Escalated</b>", created_by="owner@x.io"
    )

    db.begin_nested.assert_called_once_with()
    savepoint.__aenter__.assert_awaited_once()
    savepoint.__aexit__.assert_awaited_once_with(None, None, None)
    db.add.assert_called_once_with(comment)
    assert comment.content == "Escalated"
    assert comment.created_by == "owner@x.io"


async def test_failed_insert_leaves_savepoint_with_error() -> None:
    """The savepoint sees the error (and rolls back); the caller still gets it."""
    db, savepoint = _session()
    db.flush = AsyncMock(
        side_effect=IntegrityError("INSERT INTO comment", {}, Exception("fk violation"))
    )

    with pytest.raises(IntegrityError):
        await CommentRepository(db).add_comment("missing-task", "hi")

    exc_type = savepoint.__aexit__.await_args.args[0]
    assert exc_type is IntegrityError
