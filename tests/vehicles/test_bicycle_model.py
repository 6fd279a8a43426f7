"""Tests for the bicycle model."""

import pytest

from core.maxspeed import Maxspeed
from core.params import SpeedParams
from core.speed import SpeedKMpH
from vehicles.bicycle import create_bicycle_model
from vehicles.model import VehicleModel
from world.classificator import InMemoryClassificator
from world.feature import RoadFeature


@pytest.fixture
def classificator() -> InMemoryClassificator:
    return InMemoryClassificator()


@pytest.fixture
def model(classificator: InMemoryClassificator) -> VehicleModel:
    return create_bicycle_model(classificator)


def test_bicycle_one_way_rules(model: VehicleModel, classificator: InMemoryClassificator) -> None:
    """Test bicycle-specific direction tags override the general one-way tag."""
    residential = classificator.get_type_by_name("highway-residential")
    oneway = classificator.get_type_by_name("hwtag-oneway")
    onedir = classificator.get_type_by_name("hwtag-onedir_bicycle")
    bidir = classificator.get_type_by_name("hwtag-bidir_bicycle")

    assert not model.is_one_way(RoadFeature(types=(residential,)))
    assert model.is_one_way(RoadFeature(types=(residential, oneway)))
    assert not model.is_one_way(RoadFeature(types=(residential, oneway, bidir)))
    assert model.is_one_way(RoadFeature(types=(residential, onedir)))


def test_bicycle_city_factor(model: VehicleModel, classificator: InMemoryClassificator) -> None:
    """Test primary roads are slower for bikes inside cities."""
    primary = [classificator.get_type_by_name("highway-primary")]
    in_city = model.resolve_speed(primary, SpeedParams(in_city=True))
    out_city = model.resolve_speed(primary, SpeedParams(in_city=False))
    assert in_city.weight == pytest.approx(6.4)
    assert in_city.eta == pytest.approx(16.2)
    assert out_city == SpeedKMpH(8.0, 18.0)


def test_bicycle_ignores_maxspeed(
    model: VehicleModel, classificator: InMemoryClassificator
) -> None:
    """Test posted limits do not apply to bikes."""
    cycleway = [classificator.get_type_by_name("highway-cycleway")]
    params = SpeedParams(maxspeed=Maxspeed(forward=10))
    assert model.resolve_speed(cycleway, params) == SpeedKMpH(20.0, 18.0)


def test_bridleway_not_routable_but_has_speed(
    model: VehicleModel, classificator: InMemoryClassificator
) -> None:
    """Test a known but non-routable category still resolves a speed."""
    bridleway = [classificator.get_type_by_name("highway-bridleway")]
    assert not model.is_road(bridleway)
    assert model.resolve_speed(bridleway, SpeedParams()) == SpeedKMpH(6.0, 6.0)
    assert model.is_road([*bridleway, classificator.get_type_by_name("hwtag-yesbicycle")])


def test_bicycle_trunk_forbids_pass_through(
    model: VehicleModel, classificator: InMemoryClassificator
) -> None:
    """Test bikes may use trunk roads only at the start or end of a route."""
    trunk = [classificator.get_type_by_name("highway-trunk")]
    assert model.is_road(trunk)
    assert not model.has_pass_through_tag(trunk)
