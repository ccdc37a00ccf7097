from __future__ import annotations

from typing import Protocol, runtime_checkable

from verbose_slack.domain.logging import LogMessage


# Run diagnostics (run_started, event_rendered, event_rejected, run_finished).
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
