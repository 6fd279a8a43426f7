"""Vehicle model selection by vehicle class and country."""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.speed import SpeedKMpH
from core.types import VehicleType
from vehicles import bicycle, car, pedestrian
from vehicles.model import MaxspeedMode, VehicleModel
from vehicles.tables import HighwayBasedInfo, LimitEntry, SurfaceEntry
from world.classificator import Classificator

if TYPE_CHECKING:
    from world.io.speed_profile import SpeedProfile

logger = logging.getLogger(__name__)

CountryParentGetter = Callable[[str], str]

DEFAULT_COUNTRY = ""


@dataclass(frozen=True)
class VehicleDefaults:
    """Static tables and constructor for one vehicle class."""

    create: Callable[..., VehicleModel]
    limits: tuple[LimitEntry, ...]
    country_limits: Mapping[str, tuple[LimitEntry, ...]]
    info: HighwayBasedInfo
    surfaces: tuple[SurfaceEntry, ...]
    offroad_speed: SpeedKMpH


VEHICLE_DEFAULTS: dict[VehicleType, VehicleDefaults] = {
    VehicleType.CAR: VehicleDefaults(
        create=car.create_car_model,
        limits=car.CAR_LIMITS,
        country_limits=car.CAR_COUNTRY_LIMITS,
        info=car.CAR_HIGHWAY_INFO,
        surfaces=car.CAR_SURFACES,
        offroad_speed=car.CAR_OFFROAD_SPEED,
    ),
    VehicleType.PEDESTRIAN: VehicleDefaults(
        create=pedestrian.create_pedestrian_model,
        limits=pedestrian.PEDESTRIAN_LIMITS,
        country_limits=pedestrian.PEDESTRIAN_COUNTRY_LIMITS,
        info=pedestrian.PEDESTRIAN_HIGHWAY_INFO,
        surfaces=pedestrian.PEDESTRIAN_SURFACES,
        offroad_speed=pedestrian.PEDESTRIAN_OFFROAD_SPEED,
    ),
    VehicleType.BICYCLE: VehicleDefaults(
        create=bicycle.create_bicycle_model,
        limits=bicycle.BICYCLE_LIMITS,
        country_limits=bicycle.BICYCLE_COUNTRY_LIMITS,
        info=bicycle.BICYCLE_HIGHWAY_INFO,
        surfaces=bicycle.BICYCLE_SURFACES,
        offroad_speed=bicycle.BICYCLE_OFFROAD_SPEED,
    ),
}


def create_vehicle_model(
    vehicle_type: VehicleType,
    classificator: Classificator,
    country: str = DEFAULT_COUNTRY,
    profile: "SpeedProfile | None" = None,
    maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
) -> VehicleModel:
    """Build a model for ``vehicle_type``.

    Args:
        vehicle_type: Vehicle class to build
        classificator: Taxonomy for tag lookups
        country: Country whose dedicated limits to use; the default limits
            apply if the country has none
        profile: Optional overrides for the class's tables
        maxspeed_mode: How posted limits are applied

    Raises:
        ValueError: If the profile belongs to another vehicle class
        VehicleModelConfigError: If the resulting tables are inconsistent
    """
    defaults = VEHICLE_DEFAULTS[vehicle_type]
    limits = defaults.country_limits.get(country, defaults.limits)
    info = defaults.info
    surfaces = defaults.surfaces
    offroad_speed = defaults.offroad_speed

    if profile is not None:
        if profile.vehicle != vehicle_type:
            raise ValueError(
                f"Speed profile is for {profile.vehicle.value}, not {vehicle_type.value}"
            )
        info = profile.apply_highway_info(info)
        surfaces = profile.apply_surfaces(surfaces)
        offroad_speed = profile.apply_offroad_speed(offroad_speed)

    return defaults.create(
        classificator,
        limits=limits,
        info=info,
        surfaces=surfaces,
        offroad_speed=offroad_speed,
        maxspeed_mode=maxspeed_mode,
    )


class VehicleModelFactory:
    """Holds one immutable model per vehicle class and per country with dedicated limits.

    All models are built up front, so lookups never construct or mutate
    anything and can be shared across threads.
    """

    def __init__(
        self,
        classificator: Classificator,
        country_parent_getter: CountryParentGetter | None = None,
        profiles: Iterable["SpeedProfile"] = (),
        maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
    ) -> None:
        """Initialize factory.

        Args:
            classificator: Taxonomy shared by all models
            country_parent_getter: Maps a region to its parent region, "" at the top
            profiles: At most one speed profile per vehicle class
            maxspeed_mode: How posted limits are applied
        """
        self._country_parent_getter = country_parent_getter
        profile_by_type: dict[VehicleType, "SpeedProfile"] = {}
        for profile in profiles:
            if profile.vehicle in profile_by_type:
                raise ValueError(f"Duplicate speed profile for {profile.vehicle.value}")
            profile_by_type[profile.vehicle] = profile

        self._models: dict[tuple[VehicleType, str], VehicleModel] = {}
        for vehicle_type, defaults in VEHICLE_DEFAULTS.items():
            for country in (DEFAULT_COUNTRY, *defaults.country_limits):
                self._models[(vehicle_type, country)] = create_vehicle_model(
                    vehicle_type,
                    classificator,
                    country=country,
                    profile=profile_by_type.get(vehicle_type),
                    maxspeed_mode=maxspeed_mode,
                )

        logger.debug(f"VehicleModelFactory built {len(self._models)} models")

    def get_vehicle_model(self, vehicle_type: VehicleType) -> VehicleModel:
        """Default model for the vehicle class."""
        return self._models[(vehicle_type, DEFAULT_COUNTRY)]

    def get_vehicle_model_for_country(
        self, vehicle_type: VehicleType, country: str
    ) -> VehicleModel:
        """Model for ``country``, falling back through its parents to the default.

        Args:
            vehicle_type: Vehicle class
            country: Country or region name as used by the boundary data

        Returns:
            The most specific model available
        """
        visited: set[str] = set()
        current = country
        while current and current not in visited:
            model = self._models.get((vehicle_type, current))
            if model is not None:
                if current != country:
                    logger.debug(f"Using {current} {vehicle_type.value} model for {country}")
                return model
            visited.add(current)
            if self._country_parent_getter is None:
                break
            current = self._country_parent_getter(current)

        return self.get_vehicle_model(vehicle_type)
