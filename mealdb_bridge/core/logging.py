# mealdb_bridge/core/logging.py
from __future__ import annotations

import logging
import os
import sys
from pythonjsonlogger import jsonlogger

from mealdb_bridge.core.batch_context import get_batch_id


class BatchContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "batch_id", None):
            record.batch_id = get_batch_id()
        return True


def setup_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(batch_id)s %(meal_id)s %(tier)s %(duration_ms)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(BatchContextFilter())

    root.handlers = [handler]

    # httpx logs every request at INFO; keep it to warnings
    logging.getLogger("httpx").setLevel(logging.WARNING)
