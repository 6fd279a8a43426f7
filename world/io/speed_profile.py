"""Speed profile overrides loaded from JSON.

A profile tunes the static tables of one vehicle class without code changes:

    {
        "vehicle": "car",
        "speeds": {"highway-primary": {"in_city": {"weight": 50, "eta": 45}}},
        "factors": {"highway-service": {"in_city": {"weight": 0.5}}},
        "surfaces": {"psurface-paved_bad": {"weight": 0.4, "eta": 0.5}},
        "offroad": {"weight": 2.0}
    }

Omitted ``eta`` equals ``weight``; omitted ``out_city`` equals ``in_city``.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

import orjson
from pydantic import BaseModel, Field, ValidationError, field_validator

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedFactor, SpeedKMpH
from core.types import PATH_SEPARATOR, HighwayType, VehicleType, path_from_name
from vehicles.tables import HighwayBasedInfo, SurfaceEntry, VehicleModelConfigError

logger = logging.getLogger(__name__)


class SpeedDTO(BaseModel):
    """Weight/eta speed in km/h."""

    weight: float = Field(ge=0.0, description="Weight speed in km/h")
    eta: float | None = Field(default=None, ge=0.0, description="ETA speed, defaults to weight")

    def to_speed(self) -> SpeedKMpH:
        eta = self.eta if self.eta is not None else self.weight
        return SpeedKMpH(weight=self.weight, eta=eta)


class FactorDTO(BaseModel):
    """Weight/eta multiplier."""

    weight: float = Field(gt=0.0, description="Weight multiplier")
    eta: float | None = Field(
        default=None, gt=0.0, description="ETA multiplier, defaults to weight"
    )

    def to_factor(self) -> SpeedFactor:
        eta = self.eta if self.eta is not None else self.weight
        return SpeedFactor(weight=self.weight, eta=eta)


class InOutCitySpeedDTO(BaseModel):
    in_city: SpeedDTO
    out_city: SpeedDTO | None = None

    def to_speed(self) -> InOutCitySpeedKMpH:
        in_city = self.in_city.to_speed()
        out_city = self.out_city.to_speed() if self.out_city is not None else in_city
        return InOutCitySpeedKMpH(in_city=in_city, out_city=out_city)


class InOutCityFactorDTO(BaseModel):
    in_city: FactorDTO
    out_city: FactorDTO | None = None

    def to_factor(self) -> InOutCityFactor:
        in_city = self.in_city.to_factor()
        out_city = self.out_city.to_factor() if self.out_city is not None else in_city
        return InOutCityFactor(in_city=in_city, out_city=out_city)


class SpeedProfile(BaseModel):
    """Overrides for one vehicle class's speed, factor and surface tables."""

    vehicle: VehicleType = Field(description="Vehicle class the profile applies to")
    speeds: dict[HighwayType, InOutCitySpeedDTO] = Field(default_factory=dict)
    factors: dict[HighwayType, InOutCityFactorDTO] = Field(default_factory=dict)
    surfaces: dict[str, FactorDTO] = Field(
        default_factory=dict, description="Surface tag name (e.g. psurface-paved_bad) to factor"
    )
    offroad: SpeedDTO | None = Field(default=None, description="Offroad speed override")

    @field_validator("surfaces")
    @classmethod
    def validate_surface_names(cls, v: dict[str, FactorDTO]) -> dict[str, FactorDTO]:
        """Surface keys must be full classification names."""
        for name in v:
            if PATH_SEPARATOR not in name:
                raise ValueError(f"Surface name must be a classification path, got '{name}'")
        return v

    def apply_highway_info(self, base: HighwayBasedInfo) -> HighwayBasedInfo:
        return base.with_overrides(
            speeds={hw_type: dto.to_speed() for hw_type, dto in self.speeds.items()},
            factors={hw_type: dto.to_factor() for hw_type, dto in self.factors.items()},
        )

    def apply_surfaces(self, base: Iterable[SurfaceEntry]) -> tuple[SurfaceEntry, ...]:
        """Replace matching surface entries and append new ones."""
        overrides = {path_from_name(name): dto.to_factor() for name, dto in self.surfaces.items()}
        entries = [
            SurfaceEntry(path=entry.path, factor=overrides.pop(entry.path, entry.factor))
            for entry in base
        ]
        entries.extend(SurfaceEntry(path=path, factor=factor) for path, factor in overrides.items())
        return tuple(entries)

    def apply_offroad_speed(self, base: SpeedKMpH) -> SpeedKMpH:
        return self.offroad.to_speed() if self.offroad is not None else base


def parse_speed_profile(data: bytes | str) -> SpeedProfile:
    """Parse and validate a JSON speed profile.

    Raises:
        VehicleModelConfigError: If the document is not valid JSON or does not
            match the profile schema
    """
    try:
        raw = orjson.loads(data)
        return SpeedProfile.model_validate(raw)
    except orjson.JSONDecodeError as e:
        logger.error(f"Invalid speed profile JSON: {e}")
        raise VehicleModelConfigError(f"Invalid speed profile JSON: {e}") from e
    except ValidationError as e:
        logger.error(f"Invalid speed profile: {e}")
        raise VehicleModelConfigError(f"Invalid speed profile: {e}") from e


def load_speed_profile(path: str | Path) -> SpeedProfile:
    """Load a speed profile from a JSON file.

    Raises:
        OSError: If the file cannot be read
        VehicleModelConfigError: If the content is invalid
    """
    profile = parse_speed_profile(Path(path).read_bytes())
    logger.info(
        f"Loaded {profile.vehicle.value} speed profile from {path}: "
        f"{len(profile.speeds)} speeds, {len(profile.factors)} factors, "
        f"{len(profile.surfaces)} surfaces"
    )
    return profile


def dump_speed_profile(profile: SpeedProfile) -> bytes:
    """Serialize a profile to JSON, omitting unset fields."""
    data = profile.model_dump(mode="json", exclude_none=True)
    return orjson.dumps(data, option=orjson.OPT_INDENT_2)
