"""Main module for mobtimer."""

import argparse
import logging
import os
import sys
from pathlib import Path

from mobtimer.config.paths import get_paths
from mobtimer.start.request import SessionStartRequest


def setup_logging() -> None:
    """Configure logging to file for debugging."""
    paths = get_paths()
    paths.workspace_config.mkdir(parents=True, exist_ok=True)
    log_file = paths.debug_log

    # Set level from env var, default to INFO
    level = os.environ.get("MOBTIMER_LOG_LEVEL", "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_file, mode="w"),
        ],
    )
    logging.info("mobtimer starting, logging to %s", log_file)


def _positive_int(value: str) -> int:
    try:
        minutes = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid minutes: {value!r}") from None
    if minutes <= 0:
        raise argparse.ArgumentTypeError(f"minutes must be positive: {value!r}")
    return minutes


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="mobtimer - start a mob programming session"
    )
    parser.add_argument(
        "--workdir",
        "-w",
        type=Path,
        help="Working directory for the session (default: current directory)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    start_parser = subparsers.add_parser(
        "start",
        help="Show the session start dialog (default)",
    )
    start_parser.add_argument(
        "--minutes",
        "-m",
        type=_positive_int,
        help="Timer minutes to pre-fill (default: from settings)",
    )

    return parser.parse_args(argv)


def describe_request(request: SessionStartRequest) -> str:
    """One-line summary of a confirmed session start."""
    sound = "on" if request.timer_sound else "off"
    share = "on" if request.start_with_share else "off"
    return (
        f"Starting mob session: {request.timer_minutes} min timer "
        f"(sound {sound}, share {share})"
    )


def cmd_start(args: argparse.Namespace) -> int:
    """Launch the start dialog."""
    from mobtimer.tui.app import MobApp

    app = MobApp(timer_minutes=getattr(args, "minutes", None))
    request = app.run()
    if request is None:
        logging.info("No session started")
        print("Mob session start cancelled", file=sys.stderr)
        return 1
    print(describe_request(request))
    return 0


def main() -> None:
    """Entry point for the mobtimer application."""
    args = parse_args()

    # Change to workdir if specified (before logging setup)
    if args.workdir:
        workdir = args.workdir.resolve()
        workdir.mkdir(parents=True, exist_ok=True)
        os.chdir(workdir)

    setup_logging()
    logging.info("Working directory: %s", Path.cwd())

    sys.exit(cmd_start(args))


if __name__ == "__main__":
    main()
