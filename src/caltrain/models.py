from datetime import time
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from caltrain.constants import MAX_U16
from caltrain.exceptions import UnknownTrainTypeError


class TrainType(str, Enum):
    """Service pattern of a train, as named on the status page."""

    LOCAL = "Local"
    LIMITED = "Limited"
    BABY_BULLET = "BabyBullet"

    @property
    def label(self) -> str:
        """Human readable name, as printed on the page."""
        if self is TrainType.BABY_BULLET:
            return "Baby Bullet"
        return self.value

    @classmethod
    def from_label(cls, text: str) -> "TrainType":
        """Classify a type cell by substring, checking Local, Limited, Baby Bullet in that order."""
        for train_type in (cls.LOCAL, cls.LIMITED, cls.BABY_BULLET):
            if train_type.label in text:
                return train_type
        raise UnknownTrainTypeError(text)

    @classmethod
    def from_name(cls, name: str) -> "TrainType":
        """Parse a serialized name such as ``BabyBullet`` (used by config and CLI)."""
        try:
            return cls(name.strip())
        except ValueError:
            raise ValueError(f"Unknown train type name: {name!r}")


class Direction(str, Enum):
    NORTHBOUND = "Northbound"
    SOUTHBOUND = "Southbound"


class IncomingTrain(BaseModel):
    """A train listed on the status page"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, le=MAX_U16)
    train_type: TrainType
    minutes_till_departure: int = Field(ge=0, le=MAX_U16)


class StatusSnapshot(BaseModel):
    """Trains on the board at one point in time, in page order"""
    model_config = ConfigDict(frozen=True)

    northbound: Tuple[IncomingTrain, ...] = ()
    southbound: Tuple[IncomingTrain, ...] = ()

    def trains(self, direction: Direction) -> Tuple[IncomingTrain, ...]:
        if direction is Direction.NORTHBOUND:
            return self.northbound
        return self.southbound


class WatchConfig(BaseModel):
    """Configuration model for arrival alerts"""
    direction: Direction = Direction.NORTHBOUND
    train_types: List[TrainType] = Field(default_factory=lambda: list(TrainType))
    notify_at: List[int] = Field(default_factory=lambda: [10])
    notify_after: Optional[time] = None

    @field_validator("train_types")
    @classmethod
    def validate_train_types(cls, v):
        """Require at least one train type, dropping duplicates"""
        if not v:
            raise ValueError("At least one train type is required")
        return list(dict.fromkeys(v))

    @field_validator("notify_at")
    @classmethod
    def validate_notify_at(cls, v):
        """Validate alert thresholds"""
        if not v:
            raise ValueError("At least one notify_at value is required")
        for minutes in v:
            if minutes < 0 or minutes > MAX_U16:
                raise ValueError(f"notify_at out of range: {minutes}")
        return v
