"""Fixed-length circular sequences with a wrapping cursor."""

from circular.circular_vec import CircularVec, Slot
from circular.config import CircularConfig, load_circular_config
from circular.errors import EmptySourceError, IndexOutOfRangeError
from circular.logging import (
    JsonFormatter,
    configure_circular_logging,
    get_circular_logger,
    resolve_log_level,
    setup_circular_logging,
    shutdown_circular_logging,
)

__all__ = [
    "CircularConfig",
    "CircularVec",
    "EmptySourceError",
    "IndexOutOfRangeError",
    "JsonFormatter",
    "Slot",
    "configure_circular_logging",
    "get_circular_logger",
    "load_circular_config",
    "resolve_log_level",
    "setup_circular_logging",
    "shutdown_circular_logging",
]
