from __future__ import annotations

import json
from pathlib import Path

from verbose_slack.domain.logging import LogMessage
from verbose_slack.ports.log_sink import LogSink
from verbose_slack.usecases.config_models import LoggingConfig


class StdoutLogSink(LogSink):
    # Prints each record as one compact JSON line.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False))

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends to an existing file.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(_log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class NullLogSink(LogSink):
    def emit(self, message: LogMessage) -> None:
        return None

    def close(self) -> None:
        return None


def build_log_sink(config: LoggingConfig) -> LogSink:
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    if config.sink == "none":
        return NullLogSink()
    return StdoutLogSink()


def _log_to_dict(message: LogMessage) -> dict[str, object]:
    return {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
