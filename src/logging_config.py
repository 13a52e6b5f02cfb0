import json
import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any, Iterator

load_id_ctx: ContextVar[str | None] = ContextVar("load_id", default=None)

# Optional fields callers attach through logging's `extra=`.
EXTRA_FIELDS = ("provider", "load_state", "rate_count")


class LoadCycleFormatter(logging.Formatter):
    """One JSON object per line, tagged with the current load cycle."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        load_id = load_id_ctx.get()
        if load_id:
            entry["load_id"] = load_id
        for name in EXTRA_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def init_logging(debug: bool = False) -> None:
    # Streamlit re-executes the script on every interaction, so this must be safe to repeat.
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LoadCycleFormatter())
    root.addHandler(handler)


@contextmanager
def load_cycle_context() -> Iterator[str]:
    load_id = uuid.uuid4().hex[:12]
    token = load_id_ctx.set(load_id)
    try:
        yield load_id
    finally:
        load_id_ctx.reset(token)
