"""Car speed tables and traits."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedFactor, SpeedKMpH
from core.types import HighwayType, TagID, TagPath, VehicleType
from vehicles.model import MaxspeedMode, VehicleModel
from vehicles.tables import HighwayBasedInfo, LimitEntry, SurfaceEntry
from world.classificator import Classificator

H = HighwayType

# Car can hardly move offroad; keep it just above zero so such edges are a last resort.
CAR_OFFROAD_SPEED = SpeedKMpH(weight=0.01, eta=0.01)

CAR_SPEEDS: dict[HighwayType, InOutCitySpeedKMpH] = {
    H.HIGHWAY_MOTORWAY: InOutCitySpeedKMpH(SpeedKMpH(100.0, 90.0), SpeedKMpH(115.0, 110.0)),
    H.HIGHWAY_MOTORWAY_LINK: InOutCitySpeedKMpH(SpeedKMpH(60.0, 55.0), SpeedKMpH(75.0, 70.0)),
    H.HIGHWAY_TRUNK: InOutCitySpeedKMpH(SpeedKMpH(90.0, 80.0), SpeedKMpH(105.0, 100.0)),
    H.HIGHWAY_TRUNK_LINK: InOutCitySpeedKMpH(SpeedKMpH(55.0, 50.0), SpeedKMpH(70.0, 65.0)),
    H.HIGHWAY_PRIMARY: InOutCitySpeedKMpH(SpeedKMpH(60.0, 55.0), SpeedKMpH(85.0, 80.0)),
    H.HIGHWAY_PRIMARY_LINK: InOutCitySpeedKMpH(SpeedKMpH(45.0, 40.0), SpeedKMpH(60.0, 55.0)),
    H.HIGHWAY_SECONDARY: InOutCitySpeedKMpH(SpeedKMpH(50.0, 45.0), SpeedKMpH(75.0, 70.0)),
    H.HIGHWAY_SECONDARY_LINK: InOutCitySpeedKMpH(SpeedKMpH(40.0, 35.0), SpeedKMpH(50.0, 45.0)),
    H.HIGHWAY_TERTIARY: InOutCitySpeedKMpH(SpeedKMpH(40.0, 38.0), SpeedKMpH(60.0, 55.0)),
    H.HIGHWAY_TERTIARY_LINK: InOutCitySpeedKMpH(SpeedKMpH(30.0, 28.0), SpeedKMpH(40.0, 35.0)),
    H.HIGHWAY_UNCLASSIFIED: InOutCitySpeedKMpH(SpeedKMpH(30.0, 28.0), SpeedKMpH(45.0, 40.0)),
    H.HIGHWAY_ROAD: InOutCitySpeedKMpH(SpeedKMpH(25.0, 22.0), SpeedKMpH(35.0, 30.0)),
    H.HIGHWAY_RESIDENTIAL: InOutCitySpeedKMpH(SpeedKMpH(25.0, 22.0), SpeedKMpH(30.0, 28.0)),
    H.HIGHWAY_LIVING_STREET: InOutCitySpeedKMpH(SpeedKMpH(10.0, 10.0), SpeedKMpH(12.0, 12.0)),
    H.HIGHWAY_SERVICE: InOutCitySpeedKMpH(SpeedKMpH(15.0, 12.0), SpeedKMpH(20.0, 18.0)),
    H.HIGHWAY_TRACK: InOutCitySpeedKMpH.same(SpeedKMpH(5.0, 5.0)),
    H.MAN_MADE_PIER: InOutCitySpeedKMpH.same(SpeedKMpH(10.0, 10.0)),
    H.RAILWAY_RAIL_MOTOR_VEHICLE: InOutCitySpeedKMpH.same(SpeedKMpH(25.0, 25.0)),
    H.ROUTE_FERRY: InOutCitySpeedKMpH.same(SpeedKMpH(10.0, 10.0)),
    H.ROUTE_SHUTTLE_TRAIN: InOutCitySpeedKMpH.same(SpeedKMpH(25.0, 25.0)),
}

CAR_FACTORS: dict[HighwayType, InOutCityFactor] = {
    hw_type: InOutCityFactor.uniform(1.0) for hw_type in CAR_SPEEDS
}
CAR_FACTORS.update(
    {
        # Discourage cutting through quiet streets without changing ETAs
        H.HIGHWAY_RESIDENTIAL: InOutCityFactor.same(SpeedFactor(weight=0.9, eta=1.0)),
        H.HIGHWAY_LIVING_STREET: InOutCityFactor.same(SpeedFactor(weight=0.75, eta=1.0)),
        H.HIGHWAY_SERVICE: InOutCityFactor.same(SpeedFactor(weight=0.8, eta=1.0)),
    }
)

CAR_HIGHWAY_INFO = HighwayBasedInfo(speeds=CAR_SPEEDS, factors=CAR_FACTORS)

CAR_LIMITS: tuple[LimitEntry, ...] = (
    LimitEntry(H.HIGHWAY_MOTORWAY),
    LimitEntry(H.HIGHWAY_MOTORWAY_LINK),
    LimitEntry(H.HIGHWAY_TRUNK),
    LimitEntry(H.HIGHWAY_TRUNK_LINK),
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
    LimitEntry(H.HIGHWAY_SERVICE, is_pass_through_allowed=False),
    LimitEntry(H.HIGHWAY_TRACK),
    LimitEntry(H.MAN_MADE_PIER),
    LimitEntry(H.RAILWAY_RAIL_MOTOR_VEHICLE),
    LimitEntry(H.ROUTE_FERRY),
    LimitEntry(H.ROUTE_SHUTTLE_TRAIN),
)

CAR_SURFACES: tuple[SurfaceEntry, ...] = (
    SurfaceEntry.from_name("psurface-paved_good", 1.0, 1.0),
    SurfaceEntry.from_name("psurface-paved_bad", 0.5, 0.5),
    SurfaceEntry.from_name("psurface-unpaved_good", 0.4, 0.8),
    SurfaceEntry.from_name("psurface-unpaved_bad", 0.1, 0.3),
)

# Countries with car limits different from the default
CAR_COUNTRY_LIMITS: dict[str, tuple[LimitEntry, ...]] = {}


@dataclass(frozen=True)
class CarTraits:
    vehicle_type: VehicleType = VehicleType.CAR
    yes_path: TagPath = ("hwtag", "yescar")
    no_path: TagPath = ("hwtag", "nocar")
    respects_maxspeed: bool = True
    offroad_speed: SpeedKMpH = CAR_OFFROAD_SPEED

    def is_one_way(self, model: VehicleModel, types: Sequence[TagID]) -> bool:
        return model.has_one_way_tag(types)


def create_car_model(
    classificator: Classificator,
    limits: Iterable[LimitEntry] = CAR_LIMITS,
    info: HighwayBasedInfo = CAR_HIGHWAY_INFO,
    surfaces: Iterable[SurfaceEntry] = CAR_SURFACES,
    maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
    offroad_speed: SpeedKMpH = CAR_OFFROAD_SPEED,
) -> VehicleModel:
    """Create a car model; defaults cover every car-routable category."""
    return VehicleModel(
        classificator,
        limits,
        surfaces,
        info,
        CarTraits(offroad_speed=offroad_speed),
        maxspeed_mode=maxspeed_mode,
    )
