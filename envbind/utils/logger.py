import json
import logging
import sys
import time
from typing import Any

_RESERVED = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime", "taskName"}


def _extras(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = _extras(record)
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text formatter; structured extras are appended as key=value."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if extras:
            line += " | " + " ".join(f"{k}={v!r}" for k, v in extras.items())
        return line


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or "envbind")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    include_uvicorn: bool = True,
) -> None:
    """Configures root logging with a single stdout handler."""
    level_str = (level or "INFO").upper()
    fmt_str = (fmt or "plain").lower()
    use_utc = True if utc is None else utc

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))
    root.addHandler(handler)

    if include_uvicorn:
        for lname in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            lg = logging.getLogger(lname)
            lg.handlers = []
            lg.propagate = True
            lg.setLevel(getattr(logging, level_str, logging.INFO))

    get_logger("envbind.boot").info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
