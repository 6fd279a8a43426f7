from enum import Enum
from typing import NewType

# IDs
EdgeID = NewType("EdgeID", int)
NodeID = NewType("NodeID", int)
TagID = NewType("TagID", int)  # Opaque classification type id

# Classification path, e.g. ("highway", "secondary", "bridge")
TagPath = tuple[str, ...]

PATH_SEPARATOR = "-"


def path_from_name(name: str) -> TagPath:
    """Split a readable classification name like "highway-secondary" into a path."""
    return tuple(name.split(PATH_SEPARATOR))


class VehicleType(str, Enum):
    """Vehicle classes that have their own speed model."""

    CAR = "car"
    PEDESTRIAN = "pedestrian"
    BICYCLE = "bicycle"


class HighwayType(str, Enum):
    """Road categories used as speed table keys.

    Values are readable classification names; ``path`` gives the tuple form.
    """

    HIGHWAY_MOTORWAY = "highway-motorway"
    HIGHWAY_MOTORWAY_LINK = "highway-motorway_link"
    HIGHWAY_TRUNK = "highway-trunk"
    HIGHWAY_TRUNK_LINK = "highway-trunk_link"
    HIGHWAY_PRIMARY = "highway-primary"
    HIGHWAY_PRIMARY_LINK = "highway-primary_link"
    HIGHWAY_SECONDARY = "highway-secondary"
    HIGHWAY_SECONDARY_LINK = "highway-secondary_link"
    HIGHWAY_TERTIARY = "highway-tertiary"
    HIGHWAY_TERTIARY_LINK = "highway-tertiary_link"
    HIGHWAY_UNCLASSIFIED = "highway-unclassified"
    HIGHWAY_ROAD = "highway-road"
    HIGHWAY_RESIDENTIAL = "highway-residential"
    HIGHWAY_LIVING_STREET = "highway-living_street"
    HIGHWAY_SERVICE = "highway-service"
    HIGHWAY_TRACK = "highway-track"
    HIGHWAY_PATH = "highway-path"
    HIGHWAY_FOOTWAY = "highway-footway"
    HIGHWAY_CYCLEWAY = "highway-cycleway"
    HIGHWAY_BRIDLEWAY = "highway-bridleway"
    HIGHWAY_PEDESTRIAN = "highway-pedestrian"
    HIGHWAY_STEPS = "highway-steps"
    MAN_MADE_PIER = "man_made-pier"
    RAILWAY_RAIL_MOTOR_VEHICLE = "railway-rail-motor_vehicle"
    ROUTE_FERRY = "route-ferry"
    ROUTE_SHUTTLE_TRAIN = "route-shuttle_train"

    @property
    def path(self) -> TagPath:
        return path_from_name(self.value)
