import logging
from functools import reduce

from besttimes.config import INITIAL_TRACK
from besttimes.log_parser import ChatEvent, LoadingEvent, TimeEvent, parse_line


class TrackResult:
    """Best time per nick on a single track."""

    def __init__(self):
        self.best_times = {}
        self.attempts = {}

    def update_player(self, nick, elapsed_ms):
        """Record one finish; only a faster time replaces the stored best."""
        best = self.best_times.get(nick)
        self.best_times[nick] = elapsed_ms if best is None else min(best, elapsed_ms)
        self.attempts[nick] = self.attempts.get(nick, 0) + 1

    def ranking(self):
        """Players sorted by best time, ties broken by nick."""
        return sorted(self.best_times.items(), key=lambda item: (item[1], item[0]))


class AggregationState:
    """
    Folds admin-log events, in file order, into per-track best times.

    A time always belongs to the track set by the most recent Loading line,
    or to the initial track when no Loading line has been seen yet.
    """

    def __init__(self, initial_track=INITIAL_TRACK):
        self.current_track = initial_track
        self.results = {}

        # Bookkeeping only, never consulted for best times
        self.lines_read = 0
        self.lines_skipped = 0
        self.events_applied = 0
        self.track_switches = 0

    def add_event(self, event):
        """Apply one event and return self so the state can drive reduce()."""
        if isinstance(event, ChatEvent):
            pass
        elif isinstance(event, LoadingEvent):
            logging.info(f"Switch track to {event.track}")
            self.current_track = event.track
            self.track_switches += 1
        elif isinstance(event, TimeEvent):
            track_result = self.results.get(self.current_track)
            if track_result is None:
                track_result = self.results[self.current_track] = TrackResult()
            track_result.update_player(event.nick, event.elapsed_ms)
        else:
            raise TypeError(f"Unsupported event type: {type(event).__name__}")
        self.events_applied += 1
        return self

    def add_line(self, line):
        """Parse and apply one raw log line. Unparseable lines only bump the skip counter."""
        self.lines_read += 1
        event = parse_line(line)
        if event is None:
            self.lines_skipped += 1
            logging.debug(f"Skipping unparseable line {self.lines_read}: {line.rstrip()!r}")
            return self
        return self.add_event(event)

    def best_time(self, track, nick):
        track_result = self.results.get(track)
        if track_result is None:
            return None
        return track_result.best_times.get(nick)

    def tracks(self):
        return sorted(self.results)


def aggregate_events(events, initial_track=INITIAL_TRACK):
    """Left-to-right fold of already parsed events."""
    return reduce(AggregationState.add_event, events, AggregationState(initial_track))


def aggregate_lines(lines, initial_track=INITIAL_TRACK):
    """Parse and fold raw log lines in a single pass."""
    state = AggregationState(initial_track)
    for line in lines:
        state.add_line(line)
    logging.info(
        f"Processed {state.lines_read} lines: {state.events_applied} events, "
        f"{state.lines_skipped} skipped, {len(state.results)} tracks"
    )
    return state
