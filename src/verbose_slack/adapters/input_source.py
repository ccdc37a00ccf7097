from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from verbose_slack.ports.input_source import InputSource
from verbose_slack.usecases.messages import RawLine


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # Compact NDJSON event file; one event per non-blank line.
    path: Path
    encoding: str = "utf-8"

    def read(self) -> Iterable[RawLine]:
        with self.path.open("r", encoding=self.encoding) as handle:
            for line_no, line in enumerate(handle, start=1):
                text = line.rstrip("\r\n")
                # Blank separator lines are not events; line numbers still count them.
                if not text.strip():
                    continue
                yield RawLine(line_no=line_no, raw_text=text)
