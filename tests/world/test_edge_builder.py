"""Tests for edge construction from road features."""

import math

import pytest

from core.maxspeed import Maxspeed
from core.speed import SpeedKMpH
from core.types import HighwayType, NodeID, VehicleType
from vehicles.factory import VehicleModelFactory
from world.classificator import InMemoryClassificator
from world.feature import RoadFeature
from world.graph.builder import EdgeBuilder
from world.graph.edge import Edge, travel_time_s


@pytest.fixture
def classificator() -> InMemoryClassificator:
    return InMemoryClassificator()


@pytest.fixture
def factory(classificator: InMemoryClassificator) -> VehicleModelFactory:
    return VehicleModelFactory(classificator)


def feature(classificator: InMemoryClassificator, *names: str, **kwargs) -> RoadFeature:
    return RoadFeature(types=tuple(classificator.get_type_by_name(n) for n in names), **kwargs)


class TestEdgeBuilder:
    def test_two_way_road(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test a two-way road yields forward and backward edges."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        edges = builder.build(
            feature(classificator, "highway-primary"), NodeID(1), NodeID(2), 500.0
        )

        assert [e.id for e in edges] == [0, 1]
        assert (edges[0].from_node, edges[0].to_node, edges[0].forward) == (1, 2, True)
        assert (edges[1].from_node, edges[1].to_node, edges[1].forward) == (2, 1, False)
        assert all(e.highway_type == HighwayType.HIGHWAY_PRIMARY for e in edges)

    def test_one_way_road(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test a one-way road yields only the forward edge."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        edges = builder.build(
            feature(classificator, "highway-primary", "hwtag-oneway"), NodeID(1), NodeID(2), 500.0
        )
        assert len(edges) == 1
        assert edges[0].forward

    def test_edge_ids_keep_increasing(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test ids are unique across build calls."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        road = feature(classificator, "highway-residential")
        first = builder.build(road, NodeID(1), NodeID(2), 10.0)
        second = builder.build(road, NodeID(2), NodeID(3), 10.0)
        assert [e.id for e in first + second] == [0, 1, 2, 3]

    def test_not_a_road(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test features the vehicle cannot use produce no edges."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        footway = feature(classificator, "highway-footway")
        assert builder.build(footway, NodeID(1), NodeID(2), 5.0) == []

    def test_pedestrian_ignores_one_way(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test walkers get both directions on a one-way street."""
        builder = EdgeBuilder(factory, VehicleType.PEDESTRIAN)
        edges = builder.build(
            feature(classificator, "highway-residential", "hwtag-oneway"),
            NodeID(1),
            NodeID(2),
            50.0,
        )
        assert len(edges) == 2

    def test_country_model_used(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test the feature's country selects the model."""
        builder = EdgeBuilder(factory, VehicleType.PEDESTRIAN)
        names = ("highway-trunk",)
        assert builder.build(feature(classificator, *names), NodeID(1), NodeID(2), 10.0) == []
        edges = builder.build(
            feature(classificator, *names, country="Belarus"), NodeID(1), NodeID(2), 10.0
        )
        assert len(edges) == 2

    def test_directional_maxspeed(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test each direction is limited by its own posted limit."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        road = feature(
            classificator, "highway-primary", maxspeed=Maxspeed(forward=90, backward=70)
        )
        forward, backward = builder.build(road, NodeID(1), NodeID(2), 1000.0)
        assert forward.speed == SpeedKMpH(85.0, 80.0)
        assert backward.speed == SpeedKMpH(70.0, 70.0)

    def test_negative_length(
        self, factory: VehicleModelFactory, classificator: InMemoryClassificator
    ) -> None:
        """Test negative segment lengths are rejected."""
        builder = EdgeBuilder(factory, VehicleType.CAR)
        with pytest.raises(ValueError, match="non-negative"):
            builder.build(feature(classificator, "highway-primary"), NodeID(1), NodeID(2), -1.0)


class TestEdgeTimes:
    def test_travel_time(self) -> None:
        """Test 1 km at 36 km/h takes 100 seconds."""
        assert travel_time_s(1000.0, 36.0) == pytest.approx(100.0)

    def test_zero_speed_is_impassable(self) -> None:
        """Test zero speed gives an infinite travel time."""
        assert travel_time_s(1000.0, 0.0) == math.inf

    def test_weight_and_eta(self) -> None:
        """Test edge costs use the matching speed component."""
        edge = Edge(
            id=0,
            from_node=1,
            to_node=2,
            length_m=1000.0,
            highway_type=HighwayType.HIGHWAY_PRIMARY,
            speed=SpeedKMpH(36.0, 72.0),
            is_pass_through_allowed=True,
            forward=True,
        )
        assert edge.weight_s == pytest.approx(100.0)
        assert edge.eta_s == pytest.approx(50.0)
