"""Nav collector — the recording interface stages write through.

Stages take an optional collector and call its ``record_*`` methods as
they process events.  The collector timestamps each record and appends it
to an ``EventLog``.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from menuflow.observability.events import (
    EventDropped,
    GateToggled,
    HighlightChanged,
    SelectionMade,
    StageClosed,
    now_ns,
)
from menuflow.observability.log import EventLog


class NavCollector:
    """Event collector shared by the stages of one pipeline.

    Args:
        log: The EventLog to store records in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Coordinator events -----

    def record_highlight(
        self,
        stage: str,
        event: object,
        *,
        prior: int | None,
        current: int | None,
    ) -> None:
        """Record a highlighter transition."""
        self._log.append(
            HighlightChanged(
                stage=stage,
                event=repr(event),
                prior=prior,
                current=current,
                timestamp_ns=now_ns(),
            )
        )

    def record_selection(
        self,
        stage: str,
        index: int,
        *,
        previous: int | None,
        item: object,
    ) -> None:
        """Record a selection."""
        self._log.append(
            SelectionMade(
                stage=stage,
                index=index,
                previous=previous,
                item=repr(item),
                timestamp_ns=now_ns(),
            )
        )

    # ----- Stream events -----

    def record_toggle(self, stage: str, *, open: bool) -> None:  # noqa: A002
        """Record a gate picking up a new control value."""
        self._log.append(GateToggled(stage=stage, open=open, timestamp_ns=now_ns()))

    def record_drop(self, stage: str, event: object, *, reason: str) -> None:
        """Record an event consumed without being forwarded."""
        self._log.append(
            EventDropped(
                stage=stage,
                event=repr(event),
                reason=reason,  # type: ignore[arg-type]
                timestamp_ns=now_ns(),
            )
        )

    def record_closed(self, stage: str, *, processed: int) -> None:
        """Record a stage ending after its input closed."""
        self._log.append(
            StageClosed(stage=stage, processed=processed, timestamp_ns=now_ns())
        )
