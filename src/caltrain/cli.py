"""
Caltrain status - command line application
Reads a saved Caltrain real-time status page and prints the trains on it,
or the ones close enough to departure to alert about.
"""

import argparse
import logging
import sys
from datetime import datetime, time
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from caltrain.alerts import format_alert, watchers_from_config
from caltrain.config import safe_load_config
from caltrain.constants import DEBUG_MODE, LOG_FORMAT
from caltrain.display import print_alerts, print_snapshot
from caltrain.exceptions import CaltrainError
from caltrain.extractor import extract_status
from caltrain.models import Direction, TrainType, WatchConfig

logger = logging.getLogger(__name__)


def parse_train_types(value: str) -> List[TrainType]:
    """Parse a comma separated list such as 'Local,BabyBullet'."""
    try:
        return [TrainType.from_name(name) for name in value.split(",") if name.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_direction(value: str) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid direction {value!r}, expected Northbound or Southbound")


def parse_time_of_day(value: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid time {value!r}, expected HH:MM")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="caltrain-status", description="Caltrain real-time status")
    parser.add_argument("--config", type=Path, help="Watch configuration file (default: config/config.json)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Show the trains listed on a status page")
    show.add_argument("page", help="Saved status page, or - to read from stdin")
    show.add_argument("--json", action="store_true", help="Print the snapshot as JSON")

    due = subparsers.add_parser("due", help="List trains close enough to departure to alert about")
    due.add_argument("page", help="Saved status page, or - to read from stdin")
    due.add_argument("-d", "--direction", type=parse_direction, help="Northbound or Southbound")
    due.add_argument("-t", "--types", type=parse_train_types, help="Train types to alert for, e.g. Local,Limited,BabyBullet")
    due.add_argument("-n", "--notify-at", type=int, nargs="+", help="Minutes before departure to alert")
    due.add_argument("--after", type=parse_time_of_day, help="Only alert after this time of day (HH:MM)")
    return parser


def read_page(page: str) -> bytes:
    if page == "-":
        return sys.stdin.buffer.read()
    return Path(page).read_bytes()


def resolve_config(args: argparse.Namespace) -> WatchConfig:
    """Config file values, overridden by any flags given on the command line."""
    config_data = safe_load_config(args.config).model_dump()
    overrides = {
        "direction": args.direction,
        "train_types": args.types,
        "notify_at": args.notify_at,
        "notify_after": args.after,
    }
    config_data.update({key: value for key, value in overrides.items() if value is not None})
    return WatchConfig(**config_data)


def run_show(args: argparse.Namespace) -> None:
    status = extract_status(read_page(args.page))
    if args.json:
        print(status.model_dump_json(indent=2))
    else:
        print_snapshot(status)


def run_due(args: argparse.Namespace, now: Optional[datetime] = None) -> None:
    now = now or datetime.now()
    config = resolve_config(args)
    status = extract_status(read_page(args.page))

    alerts = []
    seen = set()
    for watcher in watchers_from_config(config):
        for train in watcher.due_trains(status, now):
            if train.id not in seen:
                seen.add(train.id)
                alerts.append(format_alert(train, now))
    print_alerts(alerts)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_MODE else logging.INFO,
        format=LOG_FORMAT,
    )
    args = build_parser().parse_args(argv)

    try:
        if args.command == "show":
            run_show(args)
        else:
            run_due(args)
    except OSError as e:
        logger.error(f"Could not read status page: {str(e)}")
        print(f"❌ Error: {str(e)}", file=sys.stderr)
        return 1
    except (CaltrainError, RuntimeError, ValidationError) as e:
        logger.error(f"Error reading Caltrain status: {str(e)}")
        print(f"❌ Error: {str(e)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
