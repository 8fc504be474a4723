"""Best-time aggregation for game-server admin logs."""

from besttimes.log_parser import (
    ChatEvent,
    LoadingEvent,
    TimeEvent,
    parse_line,
    read_log_lines,
)
from besttimes.aggregator import AggregationState, TrackResult, aggregate_events, aggregate_lines
from besttimes.report import build_report, format_duration, format_report, report_to_dict

__version__ = "0.1.0"

__all__ = [
    "AggregationState",
    "ChatEvent",
    "LoadingEvent",
    "TimeEvent",
    "TrackResult",
    "aggregate_events",
    "aggregate_lines",
    "build_report",
    "format_duration",
    "format_report",
    "parse_line",
    "read_log_lines",
    "report_to_dict",
]
