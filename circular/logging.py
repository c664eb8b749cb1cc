"""Circular package logging setup."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from circular.config import CircularConfig, load_circular_config

PACKAGE_LOGGER_NAME = "circular"
_QUEUE_LISTENER: QueueListener | None = None
_QUEUE_HANDLER: QueueHandler | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _record_fields(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in vars(record).items() if k not in _STANDARD_RECORD_FIELDS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` values land under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = _record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


_FORMATTERS: dict[str, type[logging.Formatter]] = {"json": JsonFormatter}


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.INFO)


def configure_circular_logging(config: CircularConfig) -> None:
    """Install console and optional file handlers on the package logger.

    The package logger stops propagating so records are not emitted twice
    when the embedding application has its own root handlers.
    """
    global _QUEUE_LISTENER, _QUEUE_HANDLER

    shutdown_circular_logging()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    handlers[0].setFormatter(_build_formatter(config.log_format))
    if config.log_file:
        file_path = Path(config.log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_build_formatter(config.log_file_format))
        handlers.append(file_handler)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(resolve_log_level(config.log_level))
    logger.propagate = False

    if config.log_file is None:
        logger.addHandler(handlers[0])
        return

    # File writes happen off the caller's thread.
    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    _QUEUE_HANDLER = QueueHandler(log_queue)
    logger.addHandler(_QUEUE_HANDLER)
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_circular_logging() -> None:
    """Flush and stop file logging, detaching its queue from the package logger."""
    global _QUEUE_LISTENER, _QUEUE_HANDLER
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if _QUEUE_HANDLER is not None:
        logger.removeHandler(_QUEUE_HANDLER)
        _QUEUE_HANDLER = None
        if not logger.handlers:
            logger.propagate = True
    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        for handler in _QUEUE_LISTENER.handlers:
            handler.close()
        _QUEUE_LISTENER = None


def setup_circular_logging() -> None:
    """Configure package logging from env if no handlers are present."""
    if logging.getLogger(PACKAGE_LOGGER_NAME).handlers:
        return
    configure_circular_logging(load_circular_config())


def get_circular_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name == PACKAGE_LOGGER_NAME or name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def _build_formatter(kind: str) -> logging.Formatter:
    factory = _FORMATTERS.get(kind.strip().lower())
    return factory() if factory is not None else logging.Formatter(_TEXT_FORMAT)
