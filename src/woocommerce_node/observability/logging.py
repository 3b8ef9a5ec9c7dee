"""Structured JSON logging with node and item correlation."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any

from woocommerce_node.observability.context import get_current_item

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(node)s#%(item_index)s] %(message)s"

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")

# Extra fields bound by LogContext; task-local so concurrent items do not mix
_log_extra: ContextVar[dict[str, Any] | None] = ContextVar("log_extra", default=None)


class StructuredLogFormatter(logging.Formatter):
    """
    One JSON object per record.

    Records emitted while an item is being processed carry the node name,
    item index, resource and operation; fields bound with LogContext are
    nested under "extra".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        item = get_current_item()
        if item is not None:
            entry["node"] = item.node_name
            entry["item_index"] = item.item_index
            for key in ("resource", "operation"):
                value = getattr(item, key)
                if value:
                    entry[key] = value

        entry["location"] = f"{record.pathname}:{record.lineno} in {record.funcName}"

        extra = getattr(record, "extra", None) or _log_extra.get()
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ItemContextFilter(logging.Filter):
    """Fills %(node)s and %(item_index)s for the plain-text format."""

    def filter(self, record: logging.LogRecord) -> bool:
        item = get_current_item()
        record.node = item.node_name if item else "-"
        record.item_index = item.item_index if item else "-"
        return True


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    module_levels: dict[str, str] | None = None,
) -> None:
    """
    Route all logging to stderr, as JSON or plain text.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.

    Args:
        level: Root log level name.
        json_format: Emit StructuredLogFormatter JSON instead of text lines.
        module_levels: Overrides per logger name, e.g. {"woocommerce_node.node": "DEBUG"}.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(ItemContextFilter())
    handler.setFormatter(
        StructuredLogFormatter() if json_format else logging.Formatter(TEXT_FORMAT)
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    for name, module_level in (module_levels or {}).items():
        logging.getLogger(name).setLevel(module_level.upper())

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, json={json_format}")


class LogContext:
    """
    Bind extra fields to every record logged inside the block.

    Usage:
        with LogContext(endpoint="/orders", page=2):
            logger.info("Fetching page")
    """

    def __init__(self, **fields: Any) -> None:
        self.fields = fields
        self._token = None

    def __enter__(self) -> "LogContext":
        merged = {**(_log_extra.get() or {}), **self.fields}
        self._token = _log_extra.set(merged)
        return self

    def __exit__(self, *args: Any) -> None:
        if self._token is not None:
            _log_extra.reset(self._token)
            self._token = None
