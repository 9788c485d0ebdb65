# mealdb_bridge/core/batch_context.py
from __future__ import annotations

import contextvars
import uuid
from contextlib import contextmanager
from typing import Iterator

batch_id_ctx = contextvars.ContextVar("batch_id", default=None)


def get_batch_id() -> str | None:
    return batch_id_ctx.get()


def set_batch_id(value: str | None) -> None:
    batch_id_ctx.set(value)


@contextmanager
def batch_scope(batch_id: str | None = None) -> Iterator[str]:
    """
    Tag everything logged inside the block with one batch id.
    Without an explicit id an enclosing batch keeps its id, otherwise a new
    one is generated. The previous id is restored on exit.
    """
    value = batch_id or get_batch_id() or uuid.uuid4().hex[:12]
    token = batch_id_ctx.set(value)
    try:
        yield value
    finally:
        batch_id_ctx.reset(token)
