"""Request-scoped metadata added to every log record."""
from __future__ import annotations

import contextvars
import logging


_fields: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "log_context", default={}
)


class LogContext:
    """Bind key/value pairs that prefix records logged in the current context."""

    def bind(self, **values: object) -> contextvars.Token:
        merged = {**_fields.get(), **{k: v for k, v in values.items() if v is not None}}
        return _fields.set(merged)

    def reset(self, token: contextvars.Token) -> None:
        """Restore the fields that were bound before the matching :meth:`bind`."""

        _fields.reset(token)


class ContextFilter(logging.Filter):
    """Render the bound fields into ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Queued records were already rendered on the emitting thread.
        if not hasattr(record, "context"):
            fields = _fields.get()
            record.context = "".join(f"{k}={v} " for k, v in fields.items())
        return True


log_context = LogContext()
