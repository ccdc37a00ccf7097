from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from verbose_slack.adapters.input_source import FileInputSource
from verbose_slack.adapters.log_sinks import build_log_sink
from verbose_slack.adapters.output_sink import FileOutputSink
from verbose_slack.config.loader import load_config
from verbose_slack.domain.logging import LogMessage
from verbose_slack.ports.input_source import InputSource
from verbose_slack.ports.log_sink import LogSink
from verbose_slack.ports.output_sink import OutputSink
from verbose_slack.usecases.config_models import AppConfig
from verbose_slack.usecases.messages import RejectedLine
from verbose_slack.usecases.steps import ParseLogEvent, RenderSlackPayload

EXIT_OK = 0
EXIT_REJECTED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render compact JSON log events into Slack webhook payloads"
    )
    parser.add_argument("--config", required=True, help="Path to YAML config")
    parser.add_argument("--input", required=True, help="Path to input NDJSON event file")
    parser.add_argument("--output", help="Override output file path")
    parser.add_argument("--username", help="Override sender display name")
    parser.add_argument("--icon-emoji", help="Override sender icon emoji")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config values.
    if getattr(args, "output", None) is not None:
        config.output.file_path = args.output
    if getattr(args, "username", None) is not None:
        config.renderer.username = args.username
    if getattr(args, "icon_emoji", None) is not None:
        config.renderer.icon_emoji = args.icon_emoji


def render_events(
    config: AppConfig, source: InputSource, sink: OutputSink, log: LogSink
) -> tuple[int, int]:
    """Parse, render and write every input line; return (rendered, rejected)."""
    parse = ParseLogEvent(max_depth=config.renderer.max_depth)
    render = RenderSlackPayload(
        config.renderer.build_renderer(),
        username=config.renderer.username,
        icon_emoji=config.renderer.icon_emoji,
    )
    rendered = rejected = 0
    for raw in source.read():
        for parsed in parse(raw, ctx=None):
            outputs = [parsed] if isinstance(parsed, RejectedLine) else render(parsed, ctx=None)
            for out in outputs:
                if isinstance(out, RejectedLine):
                    rejected += 1
                    log.emit(
                        LogMessage(
                            level="warning",
                            message="event_rejected",
                            fields={
                                "line_no": out.line_no,
                                "reason": out.reason.value,
                                "detail": out.detail,
                            },
                        )
                    )
                    continue
                sink.write_line(out.json_text)
                rendered += 1
                log.emit(
                    LogMessage(
                        level="debug",
                        message="event_rendered",
                        fields={
                            "line_no": out.line_no,
                            "level": parsed.event.level.value,
                            "attachments": out.attachments,
                        },
                    )
                )
    return rendered, rejected


def run(argv: Sequence[str] | None = None) -> int:
    # Thin orchestration wrapper; rendering logic lives in usecases.
    args = parse_args(argv)
    config = load_config(Path(args.config))
    apply_overrides(config, args)

    log = build_log_sink(config.logging)
    source = FileInputSource(Path(args.input))
    sink = FileOutputSink(
        Path(config.output.file_path), atomic_replace=config.output.atomic_replace
    )
    log.emit(
        LogMessage(
            level="info",
            message="run_started",
            fields={"input": args.input, "output": config.output.file_path},
        )
    )
    try:
        rendered, rejected = render_events(config, source, sink, log)
    finally:
        sink.close()

    log.emit(
        LogMessage(
            level="info",
            message="run_finished",
            fields={"rendered": rendered, "rejected": rejected},
        )
    )
    log.close()
    return EXIT_REJECTED if rejected else EXIT_OK
