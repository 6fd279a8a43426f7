"""Tests for Maxspeed and SpeedParams."""

import math

import pytest
from pydantic import ValidationError

from core.maxspeed import Maxspeed, Units, to_kmph
from core.params import SpeedParams


def test_default_maxspeed_is_unknown() -> None:
    """Test a default maxspeed carries no limit in either direction."""
    maxspeed = Maxspeed()
    assert not maxspeed.is_valid()
    assert maxspeed.get_speed_kmph(forward=True) is None
    assert maxspeed.get_speed_kmph(forward=False) is None


def test_backward_defaults_to_forward() -> None:
    """Test an unspecified backward limit equals the forward one."""
    maxspeed = Maxspeed(forward=90)
    assert maxspeed.get_speed_kmph(forward=True) == 90.0
    assert maxspeed.get_speed_kmph(forward=False) == 90.0
    assert not maxspeed.is_bidirectional()


def test_backward_limit_used_for_backward_direction() -> None:
    """Test asymmetric limits resolve per direction."""
    maxspeed = Maxspeed(forward=90, backward=70)
    assert maxspeed.get_speed_kmph(forward=True) == 90.0
    assert maxspeed.get_speed_kmph(forward=False) == 70.0
    assert maxspeed.is_bidirectional()


def test_backward_without_forward_is_no_limit() -> None:
    """Test an unknown forward limit means no limit even if backward is set."""
    maxspeed = Maxspeed(backward=70)
    assert not maxspeed.is_valid()
    assert maxspeed.get_speed_kmph(forward=False) is None


def test_imperial_conversion_rounds_to_whole_kmph() -> None:
    """Test mph values are converted to whole km/h."""
    maxspeed = Maxspeed(units=Units.IMPERIAL, forward=50, backward=30)
    assert maxspeed.get_speed_in_units(forward=True) == 50.0
    assert maxspeed.get_speed_kmph(forward=True) == 80.0  # 80.47
    assert maxspeed.get_speed_kmph(forward=False) == 48.0  # 48.28
    assert to_kmph(60, Units.METRIC) == 60.0


@pytest.mark.parametrize("value", [0, -30, "fast", math.inf, math.nan, True, [60]])
def test_malformed_values_are_treated_as_unknown(value: object) -> None:
    """Test malformed limits never raise and mean no limit."""
    maxspeed = Maxspeed(forward=value, backward=value)
    assert maxspeed.forward is None
    assert maxspeed.backward is None
    assert maxspeed.get_speed_kmph(forward=True) is None


def test_maxspeed_is_immutable() -> None:
    """Test maxspeed values cannot be changed after construction."""
    maxspeed = Maxspeed(forward=60)
    with pytest.raises(ValidationError):
        maxspeed.forward = 80  # type: ignore[misc]


def test_speed_params_defaults() -> None:
    """Test default params are forward, out of city and without a limit."""
    params = SpeedParams()
    assert params.forward is True
    assert params.in_city is False
    assert not params.maxspeed.is_valid()


def test_speed_params_are_immutable() -> None:
    """Test params are frozen per query."""
    params = SpeedParams(forward=False, in_city=True, maxspeed=Maxspeed(forward=50))
    with pytest.raises(ValidationError):
        params.in_city = False  # type: ignore[misc]
    assert params.maxspeed.get_speed_kmph(params.forward) == 50.0
