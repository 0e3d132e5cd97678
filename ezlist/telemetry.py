"""Structured telemetry logging helpers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .log import logger


def _json_safe(value: Any) -> Any:
    """Coerce *value* into something :func:`json.dumps` accepts."""

    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Mapping):
        return {str(k): _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return repr(value)


def log_event(
    event: str,
    payload: Mapping[str, Any] | None = None,
    *,
    level: int = logging.INFO,
) -> None:
    """Log an event to the ezlist logger.

    Parameters
    ----------
    event:
        The event type, e.g. ``"STALE_COORDINATE"``.
    payload:
        Structured data associated with the event.
    level:
        Logging level used for the emitted record. Defaults to ``logging.INFO``.
    """

    data: dict[str, Any] = {"event": event}
    data["payload"] = _json_safe(dict(payload)) if payload else {}
    logger.log(level, event, extra={"json": data})
