"""Static speed, factor, limits and surface tables.

Tables are built once from module-level initializer data and exposed through
read-only mappings, so a single instance can back any number of models and
concurrent queries.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedFactor
from core.types import HighwayType, TagPath, path_from_name

logger = logging.getLogger(__name__)


class VehicleModelConfigError(ValueError):
    """Raised when static tables are inconsistent with each other."""


@dataclass(frozen=True)
class LimitEntry:
    """Routability and pass-through flags for one road category."""

    highway_type: HighwayType
    is_pass_through_allowed: bool = True
    is_routable: bool = True


@dataclass(frozen=True)
class SurfaceEntry:
    """Factor applied when a surface tag is present."""

    path: TagPath
    factor: SpeedFactor

    @classmethod
    def from_name(cls, name: str, weight: float, eta: float) -> "SurfaceEntry":
        return cls(path=path_from_name(name), factor=SpeedFactor(weight=weight, eta=eta))


@dataclass(frozen=True)
class HighwayBasedInfo:
    """Per-category base speeds and factors."""

    speeds: Mapping[HighwayType, InOutCitySpeedKMpH]
    factors: Mapping[HighwayType, InOutCityFactor] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze copies so callers cannot mutate shared tables
        object.__setattr__(self, "speeds", MappingProxyType(dict(self.speeds)))
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))

    def get_speed(self, highway_type: HighwayType) -> InOutCitySpeedKMpH | None:
        return self.speeds.get(highway_type)

    def get_factor(self, highway_type: HighwayType) -> InOutCityFactor | None:
        return self.factors.get(highway_type)

    def with_overrides(
        self,
        speeds: Mapping[HighwayType, InOutCitySpeedKMpH] | None = None,
        factors: Mapping[HighwayType, InOutCityFactor] | None = None,
    ) -> "HighwayBasedInfo":
        """Return a new table set with the given entries replaced or added."""
        return HighwayBasedInfo(
            speeds={**self.speeds, **(speeds or {})},
            factors={**self.factors, **(factors or {})},
        )


def find_table_defects(limits: Iterable[LimitEntry], info: HighwayBasedInfo) -> list[str]:
    """List inconsistencies between a limits table and its speed/factor tables."""
    defects: list[str] = []
    for entry in limits:
        hw_type = entry.highway_type
        speed = info.get_speed(hw_type)
        factor = info.get_factor(hw_type)
        if speed is None:
            defects.append(f"{hw_type.value}: no speed entry")
        elif not speed.is_positive():
            defects.append(f"{hw_type.value}: speed must be positive, got {speed}")
        if factor is None:
            defects.append(f"{hw_type.value}: no factor entry")

    for hw_type in info.factors:
        if hw_type not in info.speeds:
            defects.append(f"{hw_type.value}: factor entry without speed entry")
    return defects


def validate_tables(limits: Iterable[LimitEntry], info: HighwayBasedInfo) -> None:
    """Check a table set for configuration defects.

    Raises:
        VehicleModelConfigError: If any category is missing an entry or has a
            non-positive speed.
    """
    limits = list(limits)
    seen: set[HighwayType] = set()
    defects: list[str] = []
    for entry in limits:
        if entry.highway_type in seen:
            defects.append(f"{entry.highway_type.value}: duplicate limits entry")
        seen.add(entry.highway_type)
    defects.extend(find_table_defects(limits, info))

    if defects:
        logger.error(f"Vehicle model tables have {len(defects)} defect(s): {defects}")
        raise VehicleModelConfigError("Invalid vehicle model tables: " + "; ".join(defects))
