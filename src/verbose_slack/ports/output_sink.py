from __future__ import annotations

from typing import Protocol, runtime_checkable


# Destination for rendered Slack webhook payloads.
@runtime_checkable
class OutputSink(Protocol):
    def write_line(self, line: str) -> None:
        """Append one compact webhook JSON body; the sink adds the newline."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Publish everything written so far. Safe to call more than once."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
