"""Main module for the clockifish package."""
import sys
import argparse
import logging
from datetime import datetime
from typing import List, Optional

from .api.client import ClockifyClient
from .api.errors import ClockifyError
from .config import Credentials, load_environment, get_version
from .reports.aggregator import week_window, month_window
from .reports.report_generator import ReportGenerator
from .utils.format_utils import format_datetime, format_duration
from .utils.file_utils import write_markdown

NO_TIMER_MESSAGE = "No timer is currently running"
NO_TIMER_SENTINEL = "No timer running"


# --- CLI Logic ---
def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Argument parser
    """
    parser = argparse.ArgumentParser(
        description="A CLI for interacting with the Clockify API.",
        epilog="""
Examples:
    # Start a timer with a description on a project
  clockifish timer start -d "Writing docs" -p 5f1c0a...
    ---
    # Print only the running timer's ID (exits 1 if none is running)
  clockifish timer status id
    ---
    # Hours tracked this week, as a bare number
  clockifish report week --raw
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="clockifish"
    )
    parser.add_argument('--version', action='version', version=get_version())
    parser.add_argument('--env-file', help='Load environment variables from this dotenv file (default: ./clockifish.env if present)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log API requests to stderr')
    commands = parser.add_subparsers(dest='command', metavar='command')

    timer = commands.add_parser('timer', help='Manage timers in Clockify')
    timer_commands = timer.add_subparsers(dest='timer_command', metavar='action')
    timer_commands.required = True

    start = timer_commands.add_parser('start', help='Start a new timer')
    start.add_argument('-d', '--description', help='Description for the time entry')
    start.add_argument('-p', '--project', help='Project ID to associate with this timer')
    start.set_defaults(handler=timer_start)

    stop = timer_commands.add_parser('stop', help='Stop the currently running timer')
    stop.set_defaults(handler=timer_stop)

    status = timer_commands.add_parser('status', help='Check the status of the current timer')
    status.add_argument('field', nargs='?', choices=['id'], help="Print only the timer ID (exit 1 if no timer is running)")
    status.set_defaults(handler=timer_status)

    report = commands.add_parser('report', help='Show tracked hours for this week and month')
    report.add_argument('period', nargs='?', choices=['week', 'month'], help='Only report this period')
    report.add_argument('--raw', action='store_true', help='Print only the hour total with two decimals')
    report.add_argument('--md', help='Also write the report as markdown to the given file path')
    report.add_argument('--overwrite', action='store_true', help='Overwrite the markdown file instead of appending')
    report.set_defaults(handler=report_hours)
    return parser


def timer_start(client: ClockifyClient, args: argparse.Namespace) -> int:
    """Start a new timer."""
    entry = client.start_timer(description=args.description, project_id=args.project)
    print("✓ Timer started successfully")
    print(f"ID: {entry.id}")
    if entry.description:
        print(f"Description: {entry.description}")
    print(f"Started at: {format_datetime(entry.interval.start)}")
    return 0


def timer_stop(client: ClockifyClient, args: argparse.Namespace) -> int:
    """Stop the running timer, if there is one."""
    current = client.get_current_timer()
    if current is None:
        print(NO_TIMER_MESSAGE)
        return 0

    stopped = client.stop_timer(current.user_id, current.workspace_id)
    print("✓ Timer stopped successfully")
    print(f"ID: {stopped.id}")
    if stopped.description:
        print(f"Description: {stopped.description}")
    print(f"Duration: {format_duration(stopped.duration())}")
    return 0


def timer_status(client: ClockifyClient, args: argparse.Namespace) -> int:
    """Show the running timer.

    With ``id`` only the bare ID is printed, and a missing timer is reported
    with a non-zero exit code so shell scripts can test for it.
    """
    current = client.get_current_timer()
    if args.field == 'id':
        if current is None:
            print(NO_TIMER_SENTINEL)
            return 1
        print(current.id)
        return 0

    if current is None:
        print(NO_TIMER_MESSAGE)
        return 0
    print("⏱  Timer is running")
    print(f"ID: {current.id}")
    if current.description:
        print(f"Description: {current.description}")
    print(f"Started at: {format_datetime(current.interval.start)}")
    print(f"Duration: {format_duration(current.duration())}")
    return 0


def report_hours(client: ClockifyClient, args: argparse.Namespace, now: Optional[datetime] = None) -> int:
    """Report hours for the current week and/or month."""
    now = now or datetime.now()
    windows = []
    if args.period in (None, 'week'):
        windows.append(week_window(now))
    if args.period in (None, 'month'):
        windows.append(month_window(now))

    # Queries use the exclusive end of each window
    reports = [ReportGenerator(w, client.get_time_entries(w.start, w.end)) for w in windows]

    if args.raw:
        for report in reports:
            print(report.raw())
    elif len(reports) == 1:
        print(reports[0].summary())
    else:
        print(ReportGenerator.table(reports))

    if args.md:
        content = f"\n### Hours as of {format_datetime(now)}\n\n{ReportGenerator.table(reports)}\n"
        write_markdown(args.md, content, "Clockify hours", args.overwrite)
        print(f"[SUCCESS] Markdown output written to '{args.md}'")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return

    try:
        load_environment(args.env_file)
        client = ClockifyClient(Credentials.from_env())
        exit_code = args.handler(client, args)
    except ClockifyError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)
    except KeyError as e:
        print(f"[ERROR] Unexpected API response, missing field {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, TypeError, OSError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
