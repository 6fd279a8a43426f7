"""Pedestrian speed tables and traits.

Walking is always allowed in both directions and posted limits do not apply,
so only the category, the city context and the surface shape the speed.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedKMpH
from core.types import HighwayType, TagID, TagPath, VehicleType
from vehicles.model import MaxspeedMode, VehicleModel
from vehicles.tables import HighwayBasedInfo, LimitEntry, SurfaceEntry
from world.classificator import Classificator

H = HighwayType

PEDESTRIAN_OFFROAD_SPEED = SpeedKMpH(weight=3.0, eta=3.0)

# Busy roads are walkable but less pleasant, so they get a lower weight speed.
PEDESTRIAN_SPEEDS: dict[HighwayType, InOutCitySpeedKMpH] = {
    H.HIGHWAY_TRUNK: InOutCitySpeedKMpH.same(SpeedKMpH(1.0, 5.0)),
    H.HIGHWAY_TRUNK_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(1.0, 5.0)),
    H.HIGHWAY_PRIMARY: InOutCitySpeedKMpH.same(SpeedKMpH(2.0, 5.0)),
    H.HIGHWAY_PRIMARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(2.0, 5.0)),
    H.HIGHWAY_SECONDARY: InOutCitySpeedKMpH.same(SpeedKMpH(3.0, 5.0)),
    H.HIGHWAY_SECONDARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(3.0, 5.0)),
    H.HIGHWAY_TERTIARY: InOutCitySpeedKMpH.same(SpeedKMpH(4.0, 5.0)),
    H.HIGHWAY_TERTIARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(4.0, 5.0)),
    H.HIGHWAY_UNCLASSIFIED: InOutCitySpeedKMpH.same(SpeedKMpH(4.5, 5.0)),
    H.HIGHWAY_ROAD: InOutCitySpeedKMpH.same(SpeedKMpH(4.0, 5.0)),
    H.HIGHWAY_RESIDENTIAL: InOutCitySpeedKMpH.same(SpeedKMpH(4.5, 5.0)),
    H.HIGHWAY_LIVING_STREET: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_SERVICE: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_TRACK: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_PATH: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_FOOTWAY: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_PEDESTRIAN: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.HIGHWAY_CYCLEWAY: InOutCitySpeedKMpH.same(SpeedKMpH(4.0, 5.0)),
    H.HIGHWAY_BRIDLEWAY: InOutCitySpeedKMpH.same(SpeedKMpH(4.0, 5.0)),
    H.HIGHWAY_STEPS: InOutCitySpeedKMpH.uniform(3.0, 3.0),
    H.MAN_MADE_PIER: InOutCitySpeedKMpH.uniform(5.0, 5.0),
    H.ROUTE_FERRY: InOutCitySpeedKMpH.uniform(10.0, 10.0),
}

PEDESTRIAN_FACTORS: dict[HighwayType, InOutCityFactor] = {
    hw_type: InOutCityFactor.uniform(1.0) for hw_type in PEDESTRIAN_SPEEDS
}

PEDESTRIAN_HIGHWAY_INFO = HighwayBasedInfo(speeds=PEDESTRIAN_SPEEDS, factors=PEDESTRIAN_FACTORS)

PEDESTRIAN_LIMITS_NO_TRUNK: tuple[LimitEntry, ...] = (
    LimitEntry(H.HIGHWAY_PRIMARY),
    LimitEntry(H.HIGHWAY_PRIMARY_LINK),
    LimitEntry(H.HIGHWAY_SECONDARY),
    LimitEntry(H.HIGHWAY_SECONDARY_LINK),
    LimitEntry(H.HIGHWAY_TERTIARY),
    LimitEntry(H.HIGHWAY_TERTIARY_LINK),
    LimitEntry(H.HIGHWAY_UNCLASSIFIED),
    LimitEntry(H.HIGHWAY_ROAD),
    LimitEntry(H.HIGHWAY_RESIDENTIAL),
    LimitEntry(H.HIGHWAY_LIVING_STREET),
    LimitEntry(H.HIGHWAY_SERVICE),
    LimitEntry(H.HIGHWAY_TRACK),
    LimitEntry(H.HIGHWAY_PATH),
    LimitEntry(H.HIGHWAY_FOOTWAY),
    LimitEntry(H.HIGHWAY_PEDESTRIAN),
    LimitEntry(H.HIGHWAY_CYCLEWAY),
    LimitEntry(H.HIGHWAY_BRIDLEWAY),
    LimitEntry(H.HIGHWAY_STEPS),
    LimitEntry(H.MAN_MADE_PIER),
    LimitEntry(H.ROUTE_FERRY),
)

PEDESTRIAN_LIMITS_WITH_TRUNK: tuple[LimitEntry, ...] = PEDESTRIAN_LIMITS_NO_TRUNK + (
    LimitEntry(H.HIGHWAY_TRUNK),
    LimitEntry(H.HIGHWAY_TRUNK_LINK),
)

PEDESTRIAN_LIMITS = PEDESTRIAN_LIMITS_NO_TRUNK

# Countries where walking along trunk roads is legal
PEDESTRIAN_COUNTRY_LIMITS: dict[str, tuple[LimitEntry, ...]] = {
    "Belarus": PEDESTRIAN_LIMITS_WITH_TRUNK,
    "Brazil": PEDESTRIAN_LIMITS_WITH_TRUNK,
    "Russian Federation": PEDESTRIAN_LIMITS_WITH_TRUNK,
    "Ukraine": PEDESTRIAN_LIMITS_WITH_TRUNK,
}

PEDESTRIAN_SURFACES: tuple[SurfaceEntry, ...] = (
    SurfaceEntry.from_name("psurface-paved_good", 1.0, 1.0),
    SurfaceEntry.from_name("psurface-paved_bad", 1.0, 1.0),
    SurfaceEntry.from_name("psurface-unpaved_good", 1.0, 1.0),
    SurfaceEntry.from_name("psurface-unpaved_bad", 0.8, 0.8),
)


@dataclass(frozen=True)
class PedestrianTraits:
    vehicle_type: VehicleType = VehicleType.PEDESTRIAN
    yes_path: TagPath = ("hwtag", "yesfoot")
    no_path: TagPath = ("hwtag", "nofoot")
    respects_maxspeed: bool = False
    offroad_speed: SpeedKMpH = PEDESTRIAN_OFFROAD_SPEED

    def is_one_way(self, model: VehicleModel, types: Sequence[TagID]) -> bool:
        return False


def create_pedestrian_model(
    classificator: Classificator,
    limits: Iterable[LimitEntry] = PEDESTRIAN_LIMITS,
    info: HighwayBasedInfo = PEDESTRIAN_HIGHWAY_INFO,
    surfaces: Iterable[SurfaceEntry] = PEDESTRIAN_SURFACES,
    offroad_speed: SpeedKMpH = PEDESTRIAN_OFFROAD_SPEED,
    maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
) -> VehicleModel:
    return VehicleModel(
        classificator,
        limits,
        surfaces,
        info,
        PedestrianTraits(offroad_speed=offroad_speed),
        maxspeed_mode=maxspeed_mode,
    )
