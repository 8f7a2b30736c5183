"""Diagnostic events emitted by the session and the read/write operations.

The core never prints or formats anything itself; it hands a
:class:`DiagnosticEvent` to the sink it was constructed with.  The default
sink, :func:`log_event`, forwards events to :mod:`logging`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class EventKind(Enum):
    CONNECT = "connect"
    COMMAND_ERROR = "command_error"
    VALIDATION_ERROR = "validation_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class DiagnosticEvent:
    """One diagnostic from the core.

    Attributes:
        kind: What happened.
        message: Human-readable summary.
        host: Device the event relates to.
        details: Extra context (command, offending value, exception, ...).
    """

    kind: EventKind
    message: str
    host: str = ""
    details: dict[str, Any] = field(default_factory=dict)


EventSink = Callable[[DiagnosticEvent], None]

_LEVELS: dict[EventKind, int] = {
    EventKind.CONNECT: logging.INFO,
    EventKind.COMMAND_ERROR: logging.ERROR,
    EventKind.VALIDATION_ERROR: logging.ERROR,
    EventKind.PARSE_ERROR: logging.ERROR,
}


def log_event(event: DiagnosticEvent) -> None:
    """Default sink: write *event* to the module logger."""
    logger.log(_LEVELS[event.kind], "[%s] %s", event.host or "-", event.message)
