from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from verbose_slack.domain.formatting import FormatOptions
from verbose_slack.domain.values import DEFAULT_MAX_DEPTH
from verbose_slack.usecases.render import SlackVerboseRenderer

# Config models map YAML sections to typed structures.


class FormattingConfig(BaseModel):
    # Scalar formatting hints applied to every rendered value.
    model_config = ConfigDict(extra="forbid")
    quote_strings: bool = True
    number_format: str | None = None
    datetime_format: str | None = None

    def to_options(self) -> FormatOptions:
        return FormatOptions(
            quote_strings=self.quote_strings,
            number_format=self.number_format,
            datetime_format=self.datetime_format,
        )


class RendererConfig(BaseModel):
    # Sender identity is optional; empty strings are treated as absent.
    model_config = ConfigDict(extra="forbid")
    username: str | None = None
    icon_emoji: str | None = None
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    field_separator: str = "\n"
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)

    def build_renderer(self) -> SlackVerboseRenderer:
        return SlackVerboseRenderer(
            options=self.formatting.to_options(),
            max_depth=self.max_depth,
            separator=self.field_separator,
        )


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    # Both "file" and "file_path" are accepted and normalized to file_path.
    file_path: str = Field(validation_alias=AliasChoices("file_path", "file"))
    # Write to "<file>.tmp" and rename on close so readers never see a partial file.
    atomic_replace: bool = False


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "stdout"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    output: OutputConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
