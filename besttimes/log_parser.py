import re
import datetime
from dataclasses import dataclass
from typing import Optional, Union

from besttimes.config import LOG_ENCODING

# ---------- Event Types ----------
@dataclass(frozen=True)
class ChatEvent:
    timestamp: datetime.datetime
    from_id: str
    to_id: str
    message: str


@dataclass(frozen=True)
class TimeEvent:
    timestamp: datetime.datetime
    from_id: str
    nick: str
    elapsed_ms: int


@dataclass(frozen=True)
class LoadingEvent:
    timestamp: datetime.datetime
    track: str


Event = Union[ChatEvent, TimeEvent, LoadingEvent]

# ---------- Parsing Patterns ----------
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

LINE_PATTERN = re.compile(r'^\[(\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2})\] (<chat>|<time>|Loading)(?: (.*))?$')
# Chat payload stops at the first ")]" so messages may contain brackets
CHAT_BODY = re.compile(r'^\[(\S+) \((.*?)\)\](?: (.*))?$')
# Time payload is greedy; the anchored duration pins where it ends
TIME_BODY = re.compile(r'^\[(\S+) \((.*)\)\] (\d+:\d{2}\.\d{2})\s*$')
DURATION_PATTERN = re.compile(r'^(\d+):(\d{2})\.(\d{2})$')


def parse_timestamp(text):
    """Parse a 'YYYY/MM/DD HH:MM:SS' stamp as UTC, or None if it is not a real date."""
    try:
        parsed = datetime.datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError:
        return None
    return parsed.replace(tzinfo=datetime.timezone.utc)


def parse_duration(text):
    """
    Convert a race time 'M:SS.CC' (minutes, seconds, hundredths) to milliseconds.
    Returns None when the text is not in that shape.
    """
    m = DURATION_PATTERN.match(text.strip())
    if not m:
        return None
    minutes, seconds, hundredths = (int(g) for g in m.groups())
    return 10 * hundredths + 1000 * (60 * minutes + seconds)


def parse_line(line: str) -> Optional[Event]:
    """
    Turn one admin-log line into an event.

    Lines that do not match a known format return None; they are expected
    noise (server messages, truncated writes) and never raise.
    """
    m = LINE_PATTERN.match(line.rstrip("\r\n"))
    if not m:
        return None

    stamp, tag, rest = m.group(1), m.group(2), m.group(3) or ""
    timestamp = parse_timestamp(stamp)
    if timestamp is None:
        return None

    if tag == "Loading":
        return LoadingEvent(timestamp=timestamp, track=rest)

    if tag == "<chat>":
        body = CHAT_BODY.match(rest)
        if not body:
            return None
        return ChatEvent(
            timestamp=timestamp,
            from_id=body.group(1),
            to_id=body.group(2),
            message=body.group(3) or "",
        )

    body = TIME_BODY.match(rest)
    if not body:
        return None
    elapsed_ms = parse_duration(body.group(3))
    if elapsed_ms is None:
        return None
    return TimeEvent(timestamp=timestamp, from_id=body.group(1), nick=body.group(2), elapsed_ms=elapsed_ms)


# ---------- Line Source ----------
def read_log_lines(log_file):
    """
    Lazily yield the lines of an admin log.

    Undecodable bytes are replaced rather than raised. A missing or unreadable
    file raises OSError as soon as iteration starts.
    """
    with open(log_file, "r", encoding=LOG_ENCODING, errors="replace") as fh:
        for line in fh:
            yield line.rstrip("\r\n")
