from .domain import ExceptionInfo, LogEvent, LogEventLevel, SlackPayload
from .usecases import SlackVerboseRenderer

__all__ = ["ExceptionInfo", "LogEvent", "LogEventLevel", "SlackPayload", "SlackVerboseRenderer"]
