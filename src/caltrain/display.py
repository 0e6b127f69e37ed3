from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from caltrain.constants import NO_COUNTDOWN_MINUTES
from caltrain.models import Direction, IncomingTrain, StatusSnapshot


def format_minutes(minutes: int) -> str:
    """Minutes column text; the no-countdown sentinel shows as a dash."""
    if minutes == NO_COUNTDOWN_MINUTES:
        return "-"
    return f"{minutes} min"


def render_direction(direction: Direction, trains: List[IncomingTrain]) -> Table:
    table = Table(title=direction.value)
    table.add_column("Train", justify="right")
    table.add_column("Type")
    table.add_column("Departs", justify="right")

    for train in trains:
        table.add_row(str(train.id), train.train_type.label, format_minutes(train.minutes_till_departure))

    if not trains:
        table.caption = "No trains"
    return table


def render_snapshot(status: StatusSnapshot) -> List[Table]:
    """One table per direction, northbound first."""
    return [
        render_direction(direction, list(status.trains(direction)))
        for direction in (Direction.NORTHBOUND, Direction.SOUTHBOUND)
    ]


def print_snapshot(status: StatusSnapshot, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"Caltrain status at {datetime.now().strftime('%I:%M %p')}")
    for table in render_snapshot(status):
        console.print(table)


def print_alerts(alerts: List[str], console: Optional[Console] = None) -> None:
    console = console or Console()
    if not alerts:
        console.print("No trains due")
        return
    for alert in alerts:
        console.print(alert)
