from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from verbose_slack.usecases.messages import RawLine


# Source of serialized log events, one per RawLine.
@runtime_checkable
class InputSource(Protocol):
    def read(self) -> Iterable[RawLine]:
        """Yield one RawLine per event in file order, skipping blank lines.

        line_no is the 1-based physical line so rejections point at the right place.
        """
        raise NotImplementedError("InputSource is a port; use a concrete adapter.")
