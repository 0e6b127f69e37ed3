from datetime import time

import pytest
from pydantic import ValidationError

from caltrain.models import Direction, IncomingTrain, StatusSnapshot, TrainType, WatchConfig


def test_train_type_labels():
    assert TrainType.LOCAL.label == "Local"
    assert TrainType.LIMITED.label == "Limited"
    assert TrainType.BABY_BULLET.label == "Baby Bullet"


def test_train_type_from_name():
    assert TrainType.from_name("BabyBullet") is TrainType.BABY_BULLET
    assert TrainType.from_name(" Local ") is TrainType.LOCAL
    with pytest.raises(ValueError):
        TrainType.from_name("Baby Bullet")


def test_incoming_train_range():
    with pytest.raises(ValidationError):
        IncomingTrain(id=65536, train_type=TrainType.LOCAL, minutes_till_departure=1)
    with pytest.raises(ValidationError):
        IncomingTrain(id=1, train_type=TrainType.LOCAL, minutes_till_departure=-1)


def test_snapshot_is_immutable():
    status = StatusSnapshot(
        northbound=[IncomingTrain(id=429, train_type=TrainType.LOCAL, minutes_till_departure=59)]
    )
    assert isinstance(status.northbound, tuple)
    with pytest.raises(ValidationError):
        status.northbound = ()
    with pytest.raises(ValidationError):
        status.northbound[0].id = 1


def test_snapshot_json_uses_type_names():
    status = StatusSnapshot(
        southbound=[IncomingTrain(id=802, train_type=TrainType.BABY_BULLET, minutes_till_departure=6)]
    )
    data = status.model_dump(mode="json")
    assert data == {
        "northbound": [],
        "southbound": [{"id": 802, "train_type": "BabyBullet", "minutes_till_departure": 6}],
    }


def test_watch_config_defaults():
    config = WatchConfig()
    assert config.direction is Direction.NORTHBOUND
    assert config.train_types == [TrainType.LOCAL, TrainType.LIMITED, TrainType.BABY_BULLET]
    assert config.notify_at == [10]
    assert config.notify_after is None


def test_watch_config_from_json_values():
    config = WatchConfig(
        direction="Southbound",
        train_types=["BabyBullet", "BabyBullet", "Local"],
        notify_at=[5, 15],
        notify_after="16:30:00",
    )
    assert config.direction is Direction.SOUTHBOUND
    assert config.train_types == [TrainType.BABY_BULLET, TrainType.LOCAL]
    assert config.notify_after == time(16, 30)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"train_types": []},
        {"train_types": ["Express"]},
        {"notify_at": []},
        {"notify_at": [70000]},
        {"direction": "Eastbound"},
    ],
)
def test_watch_config_validation(kwargs):
    with pytest.raises(ValidationError):
        WatchConfig(**kwargs)
