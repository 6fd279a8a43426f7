"""Assigns resolved speeds to directed graph edges."""

from core.types import EdgeID, NodeID, VehicleType
from vehicles.factory import VehicleModelFactory
from vehicles.model import VehicleModel
from world.feature import RoadFeature
from world.graph.edge import Edge


class EdgeBuilder:
    """Turns road features into directed edges for one vehicle class.

    One-way legality is enforced here: the model only reports it.
    """

    def __init__(self, factory: VehicleModelFactory, vehicle_type: VehicleType) -> None:
        self.factory = factory
        self.vehicle_type = vehicle_type
        self._next_id = 0

    def _model_for(self, feature: RoadFeature) -> VehicleModel:
        if feature.country:
            return self.factory.get_vehicle_model_for_country(self.vehicle_type, feature.country)
        return self.factory.get_vehicle_model(self.vehicle_type)

    def _make_edge(
        self,
        model: VehicleModel,
        feature: RoadFeature,
        from_node: NodeID,
        to_node: NodeID,
        length_m: float,
        forward: bool,
    ) -> Edge:
        edge = Edge(
            id=EdgeID(self._next_id),
            from_node=from_node,
            to_node=to_node,
            length_m=length_m,
            highway_type=model.resolve_highway_type(feature.types),
            speed=model.get_speed(feature, feature.speed_params(forward=forward)),
            is_pass_through_allowed=model.is_pass_through_allowed(feature),
            forward=forward,
        )
        self._next_id += 1
        return edge

    def build(
        self, feature: RoadFeature, start: NodeID, end: NodeID, length_m: float
    ) -> list[Edge]:
        """Create edges for a segment from ``start`` to ``end``.

        Args:
            feature: Classified road feature
            start: Node at the start of the feature geometry
            end: Node at the end of the feature geometry
            length_m: Segment length in meters

        Returns:
            Empty list if the vehicle class cannot use the feature, otherwise
            the forward edge followed by the backward edge unless one-way.
        """
        if length_m < 0:
            raise ValueError("length_m must be non-negative")

        model = self._model_for(feature)
        if not model.is_road(feature.types):
            return []

        edges = [self._make_edge(model, feature, start, end, length_m, forward=True)]
        if not model.is_one_way(feature):
            edges.append(self._make_edge(model, feature, end, start, length_m, forward=False))
        return edges
