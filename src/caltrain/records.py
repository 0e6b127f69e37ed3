import re
from typing import Pattern

from caltrain.constants import MAX_U16, NO_COUNTDOWN_MINUTES
from caltrain.exceptions import InvalidArrivalTimeError, InvalidTrainIdError
from caltrain.models import IncomingTrain, TrainType

# Shared by every extraction; compiled once and never mutated
NUMERIC: Pattern = re.compile(r"[0-9]+")
TRAIN_ID_PATTERN: Pattern = re.compile(r"\+?[0-9]+")


def parse_train_id(text: str) -> int:
    """Parse the id cell as an unsigned 16-bit number."""
    if not TRAIN_ID_PATTERN.fullmatch(text):
        raise InvalidTrainIdError(text)
    value = int(text)
    if value > MAX_U16:
        raise InvalidTrainIdError(text)
    return value


def parse_minutes(text: str) -> int:
    """Return the first run of digits in an arrival label.

    Labels without any digits ("Departed", "On Time") map to
    NO_COUNTDOWN_MINUTES rather than failing.
    """
    match = NUMERIC.search(text)
    if match is None:
        return NO_COUNTDOWN_MINUTES
    value = int(match.group())
    if value > MAX_U16:
        raise InvalidArrivalTimeError(text)
    return value


def make_incoming_train(train_id: str, train_type: str, arrival_time: str) -> IncomingTrain:
    """Build a train record from the three captured cells of a row."""
    return IncomingTrain(
        id=parse_train_id(train_id),
        train_type=TrainType.from_label(train_type),
        minutes_till_departure=parse_minutes(arrival_time),
    )
