"""Bicycle speed tables and traits."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedFactor, SpeedKMpH
from core.types import HighwayType, TagID, TagPath, VehicleType
from vehicles.model import MaxspeedMode, VehicleModel
from vehicles.tables import HighwayBasedInfo, LimitEntry, SurfaceEntry
from world.classificator import Classificator

H = HighwayType

BICYCLE_OFFROAD_SPEED = SpeedKMpH(weight=3.0, eta=3.0)  # Pushing the bike

ONE_DIRECTION_BICYCLE_PATH: TagPath = ("hwtag", "onedir_bicycle")
BIDIRECTIONAL_BICYCLE_PATH: TagPath = ("hwtag", "bidir_bicycle")

BICYCLE_SPEEDS: dict[HighwayType, InOutCitySpeedKMpH] = {
    H.HIGHWAY_TRUNK: InOutCitySpeedKMpH.same(SpeedKMpH(3.0, 18.0)),
    H.HIGHWAY_TRUNK_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(3.0, 18.0)),
    H.HIGHWAY_PRIMARY: InOutCitySpeedKMpH.same(SpeedKMpH(8.0, 18.0)),
    H.HIGHWAY_PRIMARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(8.0, 18.0)),
    H.HIGHWAY_SECONDARY: InOutCitySpeedKMpH.same(SpeedKMpH(12.0, 18.0)),
    H.HIGHWAY_SECONDARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(12.0, 18.0)),
    H.HIGHWAY_TERTIARY: InOutCitySpeedKMpH.same(SpeedKMpH(15.0, 18.0)),
    H.HIGHWAY_TERTIARY_LINK: InOutCitySpeedKMpH.same(SpeedKMpH(15.0, 18.0)),
    H.HIGHWAY_UNCLASSIFIED: InOutCitySpeedKMpH.uniform(16.0, 16.0),
    H.HIGHWAY_ROAD: InOutCitySpeedKMpH.uniform(14.0, 14.0),
    H.HIGHWAY_RESIDENTIAL: InOutCitySpeedKMpH.uniform(16.0, 16.0),
    H.HIGHWAY_LIVING_STREET: InOutCitySpeedKMpH.uniform(10.0, 10.0),
    H.HIGHWAY_SERVICE: InOutCitySpeedKMpH.uniform(14.0, 14.0),
    H.HIGHWAY_TRACK: InOutCitySpeedKMpH.uniform(10.0, 12.0),
    H.HIGHWAY_PATH: InOutCitySpeedKMpH.uniform(10.0, 12.0),
    H.HIGHWAY_CYCLEWAY: InOutCitySpeedKMpH.same(SpeedKMpH(20.0, 18.0)),
    H.HIGHWAY_FOOTWAY: InOutCitySpeedKMpH.same(SpeedKMpH(5.0, 8.0)),
    H.HIGHWAY_PEDESTRIAN: InOutCitySpeedKMpH.same(SpeedKMpH(5.0, 8.0)),
    H.HIGHWAY_BRIDLEWAY: InOutCitySpeedKMpH.uniform(6.0, 6.0),
    H.HIGHWAY_STEPS: InOutCitySpeedKMpH.uniform(1.0, 1.0),
    H.MAN_MADE_PIER: InOutCitySpeedKMpH.uniform(6.0, 6.0),
    H.ROUTE_FERRY: InOutCitySpeedKMpH.uniform(10.0, 10.0),
}

BICYCLE_FACTORS: dict[HighwayType, InOutCityFactor] = {
    hw_type: InOutCityFactor.uniform(1.0) for hw_type in BICYCLE_SPEEDS
}
# Busy city traffic is slower for bikes than the open road
BICYCLE_FACTORS[H.HIGHWAY_PRIMARY] = InOutCityFactor(
    in_city=SpeedFactor(weight=0.8, eta=0.9), out_city=SpeedFactor.identity()
)

BICYCLE_HIGHWAY_INFO = HighwayBasedInfo(speeds=BICYCLE_SPEEDS, factors=BICYCLE_FACTORS)

BICYCLE_LIMITS_NO_TRUNK: tuple[LimitEntry, ...] = (
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
    LimitEntry(H.HIGHWAY_CYCLEWAY),
    LimitEntry(H.HIGHWAY_FOOTWAY),
    LimitEntry(H.HIGHWAY_PEDESTRIAN),
    LimitEntry(H.HIGHWAY_BRIDLEWAY, is_routable=False),
    LimitEntry(H.HIGHWAY_STEPS),
    LimitEntry(H.MAN_MADE_PIER),
    LimitEntry(H.ROUTE_FERRY),
)

BICYCLE_LIMITS_WITH_TRUNK: tuple[LimitEntry, ...] = BICYCLE_LIMITS_NO_TRUNK + (
    LimitEntry(H.HIGHWAY_TRUNK, is_pass_through_allowed=False),
    LimitEntry(H.HIGHWAY_TRUNK_LINK, is_pass_through_allowed=False),
)

BICYCLE_LIMITS = BICYCLE_LIMITS_WITH_TRUNK

# Countries where cycling on trunk roads is forbidden
BICYCLE_COUNTRY_LIMITS: dict[str, tuple[LimitEntry, ...]] = {
    "Denmark": BICYCLE_LIMITS_NO_TRUNK,
    "Germany": BICYCLE_LIMITS_NO_TRUNK,
    "Netherlands": BICYCLE_LIMITS_NO_TRUNK,
}

BICYCLE_SURFACES: tuple[SurfaceEntry, ...] = (
    SurfaceEntry.from_name("psurface-paved_good", 1.0, 1.0),
    SurfaceEntry.from_name("psurface-paved_bad", 0.8, 0.8),
    SurfaceEntry.from_name("psurface-unpaved_good", 0.8, 0.8),
    SurfaceEntry.from_name("psurface-unpaved_bad", 0.5, 0.5),
)


@dataclass(frozen=True)
class BicycleTraits:
    """Bicycle hooks.

    Cyclists may be exempted from a one-way restriction, or bound by one on a
    road that is two-way for cars.
    """

    vehicle_type: VehicleType = VehicleType.BICYCLE
    yes_path: TagPath = ("hwtag", "yesbicycle")
    no_path: TagPath = ("hwtag", "nobicycle")
    respects_maxspeed: bool = False
    offroad_speed: SpeedKMpH = BICYCLE_OFFROAD_SPEED

    def is_one_way(self, model: VehicleModel, types: Sequence[TagID]) -> bool:
        if model.has_type(types, ONE_DIRECTION_BICYCLE_PATH):
            return True
        if model.has_type(types, BIDIRECTIONAL_BICYCLE_PATH):
            return False
        return model.has_one_way_tag(types)


def create_bicycle_model(
    classificator: Classificator,
    limits: Iterable[LimitEntry] = BICYCLE_LIMITS,
    info: HighwayBasedInfo = BICYCLE_HIGHWAY_INFO,
    surfaces: Iterable[SurfaceEntry] = BICYCLE_SURFACES,
    offroad_speed: SpeedKMpH = BICYCLE_OFFROAD_SPEED,
    maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
) -> VehicleModel:
    return VehicleModel(
        classificator,
        limits,
        surfaces,
        info,
        BicycleTraits(offroad_speed=offroad_speed),
        maxspeed_mode=maxspeed_mode,
    )
