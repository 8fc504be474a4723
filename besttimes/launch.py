import sys
import logging
import argparse  # To handle command-line arguments

from colorama import init, Fore, Style

from besttimes.config import (
    DEFAULT_LOG_FILE,
    DEFAULT_REPORT_FORMAT,
    INITIAL_TRACK,
    LOG_FORMAT,
    LOG_LEVEL,
    REPORT_FORMATS,
    validate_config,
)
from besttimes.log_parser import read_log_lines
from besttimes.aggregator import aggregate_lines
from besttimes.report import print_colored, print_json_report, print_report


def print_status_header(log_file, color=True):
    """Print a short header on stderr so stdout only carries the report."""
    print_colored(f"{'='*60}", Fore.BLUE, stream=sys.stderr, enabled=color)
    print_colored("ADMIN LOG BEST TIMES", Fore.CYAN, Style.BRIGHT, stream=sys.stderr, enabled=color)
    print_colored(f"Log file: {log_file}", Fore.WHITE, Style.DIM, stream=sys.stderr, enabled=color)
    print_colored(f"{'='*60}", Fore.BLUE, stream=sys.stderr, enabled=color)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="besttimes",
        description="Report each player's best time per track from a game-server admin log."
    )
    parser.add_argument("log_file", nargs="?", default=str(DEFAULT_LOG_FILE),
                        help=f"Admin log to read (default: {DEFAULT_LOG_FILE.name})")
    parser.add_argument("--format", choices=REPORT_FORMATS, default=DEFAULT_REPORT_FORMAT,
                        help="Report format written to stdout")
    parser.add_argument("--initial-track", default=INITIAL_TRACK,
                        help="Track name for times recorded before the first Loading line")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped lines and other debug detail")
    return parser


def setup_logging(verbose=False):
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def main(argv=None):
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    # Each stream is colored only when it is a terminal itself
    out_color = not args.no_color and sys.stdout.isatty()
    err_color = not args.no_color and sys.stderr.isatty()
    if out_color or err_color:
        init(autoreset=True)

    issues = validate_config(args.log_file)
    if issues:
        for issue in issues:
            logging.error(issue)
            print_colored(f"Error: {issue}", Fore.RED, stream=sys.stderr, enabled=err_color)
        return 1

    if args.format == "text":
        print_status_header(args.log_file, color=err_color)

    try:
        state = aggregate_lines(read_log_lines(args.log_file), initial_track=args.initial_track)
    except OSError as e:
        logging.error(f"Could not read admin log {args.log_file}: {e}")
        print_colored(f"Error: could not read {args.log_file}: {e}", Fore.RED, stream=sys.stderr, enabled=err_color)
        return 1

    if state.lines_skipped:
        logging.info(f"Skipped {state.lines_skipped} of {state.lines_read} lines that did not parse")

    if args.format == "json":
        print_json_report(state)
    else:
        print_report(state, color=out_color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
