import pytest

from uniwar.constants import (
    MAXPL,
    Device,
    DeviceInfo,
    ErrorKind,
    Side,
    UniwarError,
    device_info,
    error_message,
    fleet_names,
)


def test_error_message_text():
    assert error_message(ErrorKind.CROWDED) == "Universe too crowded"
    assert error_message(ErrorKind.NONE) == ""


def test_error_message_accepts_int():
    assert error_message(11) == error_message(ErrorKind.BAD_SHIP)


def test_error_message_unknown_kind():
    with pytest.raises(ValueError):
        error_message(999)


def test_device_info_phasers():
    assert device_info(Device.PHASER) == DeviceInfo("phasers", 30000, 65)


def test_device_thresholds_increase_to_100():
    thresholds = [device_info(dev).threshold for dev in Device]
    assert thresholds == sorted(set(thresholds))
    assert thresholds[-1] == 100


def test_fleet_sides_partition_roster():
    feds = fleet_names(Side.FEDERATION)
    emps = fleet_names(Side.EMPIRE)
    both = fleet_names(Side.FEDERATION | Side.EMPIRE)
    assert len(both) == MAXPL
    assert set(feds) | set(emps) == set(both)
    assert not set(feds) & set(emps)
    assert feds[0] == "Excalibur"
    assert emps[0] == "Buzzard"


def test_fleet_names_neutral_rejected():
    with pytest.raises(ValueError):
        fleet_names(Side.NEUTRAL)


def test_uniwar_error_message_and_kind():
    err = UniwarError(ErrorKind.BAD_SHIP, "tell: ")
    assert str(err) == "tell: Bad ship name"
    assert err.kind is ErrorKind.BAD_SHIP
    assert err.detail == "tell: "