"""
Logging setup for the job board.

setup_logging() installs one stdout handler on the root logger, either as
human-readable lines or as one JSON object per line. get_logger() returns a
BoardLogger that tags messages with the request id and component, both as
a text prefix and as record attributes picked up by the JSON formatter.

Usage:
    setup_logging(settings.log_level, settings.log_format)

    log = get_logger(__name__, request_id=g.request_id, component="apply")
    log.info("Apply by email: job=1")
    # -> [req:3f2a9c1e] [apply] Apply by email: job=1
"""

import json
import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

SIMPLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Record attributes copied into JSON lines when set
CONTEXT_FIELDS = ("request_id", "component")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped by json.dumps."""

    def format(self, record: logging.LogRecord) -> str:
        data: Dict[str, Any] = {
            "time": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value:
                data[field] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


class BoardLogger(logging.LoggerAdapter):
    """
    Logger adapter carrying request context.

    Messages get a "[req:xxxxxxxx] [component]" prefix for plain-text logs;
    the same values travel on the record as `request_id` and `component`.
    """

    def __init__(
        self,
        name: str,
        request_id: Optional[str] = None,
        component: Optional[str] = None,
    ):
        super().__init__(
            logging.getLogger(name),
            {"request_id": request_id, "component": component},
        )
        tags = []
        if request_id:
            tags.append(f"[req:{request_id[:8]}]")
        if component:
            tags.append(f"[{component}]")
        self.prefix = f"{' '.join(tags)} " if tags else ""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return f"{self.prefix}{msg}", kwargs


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name; unknown names fall back to INFO
        format: "simple" for text lines, "json" for JSON lines
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)


def get_logger(
    name: str,
    request_id: Optional[str] = None,
    component: Optional[str] = None,
) -> BoardLogger:
    return BoardLogger(name, request_id, component)
