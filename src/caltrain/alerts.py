import logging
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional, Set

from caltrain.models import Direction, IncomingTrain, StatusSnapshot, TrainType, WatchConfig

logger = logging.getLogger(__name__)


class ArrivalWatcher:
    """Picks the trains that should trigger an alert for one threshold.

    A train is alerted once: its id is remembered until it drops off the
    board for the watched direction.
    """

    def __init__(
        self,
        train_types: Iterable[TrainType],
        notify_at: int,
        direction: Direction,
        notify_after: Optional[time] = None,
    ):
        self.train_types = set(train_types)
        self.notify_at = notify_at
        self.direction = direction
        self.notify_after = notify_after
        self.trains_notified: Set[int] = set()

    def due_trains(self, status: StatusSnapshot, now: Optional[datetime] = None) -> List[IncomingTrain]:
        """Return trains newly within ``notify_at`` minutes, in board order."""
        now = now or datetime.now()
        if self.notify_after is not None and now.time() < self.notify_after:
            logger.debug(f"Before {self.notify_after}, not checking for alerts")
            return []

        incoming_trains = status.trains(self.direction)
        due = [
            train
            for train in incoming_trains
            if train.train_type in self.train_types
            and train.minutes_till_departure <= self.notify_at
            and train.id not in self.trains_notified
        ]

        on_board = {train.id for train in incoming_trains}
        self.trains_notified = {train.id for train in due} | (self.trains_notified & on_board)

        if due:
            logger.info(f"{len(due)} {self.direction.value} train(s) within {self.notify_at} minutes")
        return due


def format_alert(train: IncomingTrain, now: Optional[datetime] = None) -> str:
    """Alert text, e.g. 'Baby Bullet train 802 is departing in 6 minutes at 9:41PM!'"""
    now = now or datetime.now()
    departs = now + timedelta(minutes=train.minutes_till_departure)
    return (
        f"{train.train_type.label} train {train.id} is departing in "
        f"{train.minutes_till_departure} minutes at {departs.strftime('%-I:%M%p')}!"
    )


def watchers_from_config(config: WatchConfig) -> List[ArrivalWatcher]:
    """One watcher per notify_at threshold."""
    return [
        ArrivalWatcher(config.train_types, minutes, config.direction, config.notify_after)
        for minutes in config.notify_at
    ]
