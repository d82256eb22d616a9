"""Failure reporting for the traversal and content engines.

The engines never raise for filesystem conditions. Instead they hand an
ExplorerEvent to an injected EventReporter so operators can still see what
went wrong without the engine knowing how events are consumed.
"""

import logging
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import Literal
from typing import Protocol

EventKind = Literal["traversal_failed", "stat_failed", "read_failed"]


@dataclass(frozen=True)
class ExplorerEvent:
    """A recoverable failure observed by the engine.

    Attributes:
        kind: What failed
        path: Path the failure relates to
        error: Exception class and message (never file contents)
        timestamp: When the failure was observed
    """

    kind: EventKind
    path: str
    error: str
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_exception(cls, kind: EventKind, path: str, exc: BaseException) -> "ExplorerEvent":
        return cls(kind=kind, path=path, error=f"{type(exc).__name__}: {exc}")


class EventReporter(Protocol):
    """Receives engine events."""

    def report(self, event: ExplorerEvent) -> None: ...


class LoggingEventReporter:
    """Report events through the logging module at WARNING level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def report(self, event: ExplorerEvent) -> None:
        self.logger.warning(f"{event.kind} at {event.path}: {event.error}")


class RecordingEventReporter:
    """Keep events in memory, optionally forwarding them to another reporter."""

    def __init__(self, forward: EventReporter | None = None) -> None:
        self.events: list[ExplorerEvent] = []
        self.forward = forward

    def report(self, event: ExplorerEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            self.forward.report(event)

    def of_kind(self, kind: EventKind) -> list[ExplorerEvent]:
        return [event for event in self.events if event.kind == kind]
