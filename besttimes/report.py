import sys
import json

from colorama import Fore, Style

from besttimes.config import JSON_INDENT


def print_colored(text, color=Fore.WHITE, style=Style.NORMAL, end="\n", stream=None, enabled=True):
    """Print text wrapped in colorama codes, or plain when coloring is off."""
    stream = stream or sys.stdout
    if enabled:
        print(f"{style}{color}{text}{Style.RESET_ALL}", end=end, file=stream)
    else:
        print(text, end=end, file=stream)


def format_duration(ms):
    """Render integer milliseconds as H:MM:SS.mmm without losing precision."""
    if ms < 0:
        raise ValueError(f"Duration must be non-negative, got {ms}")
    seconds, millis = divmod(ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def build_report(state):
    """Tracks sorted by name, each with (nick, best_ms) sorted by time then nick."""
    return [(track, state.results[track].ranking()) for track in state.tracks()]


def format_report(state):
    lines = []
    for track, ranking in build_report(state):
        lines.append(f"Track {track}")
        for nick, best_ms in ranking:
            lines.append(f"  nick {nick} : {format_duration(best_ms)}")
    return lines


def print_report(state, stream=None, color=True):
    """Write the text report; the fastest player on each track is highlighted."""
    for track, ranking in build_report(state):
        print_colored(f"Track {track}", Fore.CYAN, Style.BRIGHT, stream=stream, enabled=color)
        for i, (nick, best_ms) in enumerate(ranking):
            row_color = Fore.YELLOW if i == 0 else Fore.WHITE
            print_colored(f"  nick {nick} : {format_duration(best_ms)}", row_color, stream=stream, enabled=color)


def report_to_dict(state):
    tracks = []
    for track, ranking in build_report(state):
        attempts = state.results[track].attempts
        tracks.append({
            "track": track,
            "players": [
                {
                    "rank": rank,
                    "nick": nick,
                    "bestMs": best_ms,
                    "bestTime": format_duration(best_ms),
                    "attempts": attempts.get(nick, 0)
                }
                for rank, (nick, best_ms) in enumerate(ranking, 1)
            ]
        })
    return {
        "tracks": tracks,
        "summary": {
            "linesRead": state.lines_read,
            "linesSkipped": state.lines_skipped,
            "eventsApplied": state.events_applied,
            "trackSwitches": state.track_switches,
            "finalTrack": state.current_track
        }
    }


def print_json_report(state, stream=None):
    stream = stream or sys.stdout
    json.dump(report_to_dict(state), stream, indent=JSON_INDENT, ensure_ascii=False)
    stream.write("\n")
