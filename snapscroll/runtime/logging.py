"""Logging setup for the snapscroll command line and embedding hosts."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from snapscroll.api.logging import SnapLoggingConfig

_QUEUE_LISTENER: QueueListener | None = None
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def record_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the ``extra=`` fields attached to a record."""
    return {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; snap trace fields land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: SnapLoggingConfig) -> None:
    """Replace root handlers with console output plus an optional queued log file."""
    shutdown_logging()

    handlers: list[logging.Handler] = [_with_formatter(logging.StreamHandler(), config.console_format)]
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _with_formatter(
                logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True),
                config.file_format,
            )
        )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    global _QUEUE_LISTENER
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def setup_logging(config: SnapLoggingConfig) -> bool:
    """Configure logging unless the embedding host already installed handlers.

    Returns whether the configuration was applied.
    """
    if logging.getLogger().handlers:
        return False
    configure_logging(config)
    return True


def shutdown_logging() -> None:
    """Flush and stop the queued file listener, if one is running."""
    global _QUEUE_LISTENER
    if _QUEUE_LISTENER is None:
        return
    _QUEUE_LISTENER.stop()
    for handler in _QUEUE_LISTENER.handlers:
        handler.close()
    _QUEUE_LISTENER = None


def _with_formatter(handler: logging.Handler, kind: str) -> logging.Handler:
    if kind.strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    return handler
