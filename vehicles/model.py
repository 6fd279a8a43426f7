"""Speed resolution engine shared by all vehicle classes.

A ``VehicleModel`` combines immutable tables with a ``VehicleTraits``
implementation that supplies the per-class behavior (offroad speed, access
tags, one-way rule, maxspeed handling).
"""

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Protocol

from core.params import SpeedParams
from core.speed import SpeedFactor, SpeedKMpH
from core.types import HighwayType, TagID, TagPath, VehicleType
from vehicles.tables import HighwayBasedInfo, LimitEntry, SurfaceEntry, validate_tables
from world.classificator import Classificator
from world.feature import RoadFeature

logger = logging.getLogger(__name__)

ONE_WAY_PATH: TagPath = ("hwtag", "oneway")

# Categories are matched on the full path first, then on the path truncated to
# this many levels (so "highway-secondary-bridge" matches "highway-secondary").
CATEGORY_LEVEL = 2


class MaxspeedMode(str, Enum):
    """How a posted limit combines with the category speed."""

    CLAMP = "clamp"  # Trim factored speed to the limit
    REPLACE_BASE = "replace_base"  # Limit replaces the base speed before factors


class VehicleTraits(Protocol):
    """Per-vehicle-class hooks consulted by ``VehicleModel``."""

    vehicle_type: VehicleType
    yes_path: TagPath  # Access tag that makes any feature a road
    no_path: TagPath  # Access tag that forbids the feature
    respects_maxspeed: bool
    offroad_speed: SpeedKMpH  # Used when no road category can be resolved

    def is_one_way(self, model: "VehicleModel", types: Sequence[TagID]) -> bool:
        """Whether the feature may only be travelled forward by this class."""
        ...


class VehicleModel:
    """Resolves weight/eta speeds and road properties from classification tags.

    All query methods are pure functions of their arguments and the tables
    fixed at construction.
    """

    def __init__(
        self,
        classificator: Classificator,
        limits: Iterable[LimitEntry],
        surfaces: Iterable[SurfaceEntry],
        info: HighwayBasedInfo,
        traits: VehicleTraits,
        maxspeed_mode: MaxspeedMode = MaxspeedMode.CLAMP,
    ) -> None:
        """Build a model from static tables.

        Args:
            classificator: Taxonomy used to translate tag ids to paths
            limits: Road categories this model knows, with their flags
            surfaces: Surface tag factors
            info: Base speeds and factors per category
            traits: Vehicle class hooks
            maxspeed_mode: How posted limits are applied

        Raises:
            VehicleModelConfigError: If the tables are inconsistent
        """
        limits = tuple(limits)
        validate_tables(limits, info)

        self._classificator = classificator
        self._info = info
        self._traits = traits
        self._maxspeed_mode = maxspeed_mode
        self._road_types: dict[TagPath, LimitEntry] = {
            entry.highway_type.path: entry for entry in limits
        }
        self._surface_factors: dict[TagPath, SpeedFactor] = {
            entry.path: entry.factor for entry in surfaces
        }
        self._max_weight_speed = max(
            (info.speeds[entry.highway_type].max_weight for entry in limits), default=0.0
        )

        logger.debug(
            f"Built {traits.vehicle_type.value} model: {len(self._road_types)} road types, "
            f"{len(self._surface_factors)} surfaces, max weight speed {self._max_weight_speed}"
        )

    @property
    def vehicle_type(self) -> VehicleType:
        return self._traits.vehicle_type

    @property
    def offroad_speed(self) -> SpeedKMpH:
        return self._traits.offroad_speed

    @property
    def maxspeed_mode(self) -> MaxspeedMode:
        return self._maxspeed_mode

    @property
    def highway_info(self) -> HighwayBasedInfo:
        return self._info

    def max_configured_weight_speed(self) -> float:
        """Upper bound of base weight speeds over all known categories.

        Used by path search as a heuristic bound; factors are not applied.
        """
        return self._max_weight_speed

    # --- tag lookups ---

    def _path(self, tag: TagID) -> TagPath | None:
        return self._classificator.get_path(tag)

    def _road_entry(self, tag: TagID) -> LimitEntry | None:
        path = self._path(tag)
        if path is None:
            return None
        entry = self._road_types.get(path)
        if entry is None and len(path) > CATEGORY_LEVEL:
            entry = self._road_types.get(path[:CATEGORY_LEVEL])
        return entry

    def _resolve_entry(self, types: Iterable[TagID]) -> LimitEntry | None:
        # Last match in iteration order wins. Kept for compatibility; it is not
        # established that any caller relies on the order.
        resolved = None
        for tag in types:
            entry = self._road_entry(tag)
            if entry is not None:
                resolved = entry
        return resolved

    def _surface_factor(self, types: Iterable[TagID]) -> SpeedFactor:
        factor = SpeedFactor.identity()
        for tag in types:
            path = self._path(tag)
            if path is not None and path in self._surface_factors:
                factor = self._surface_factors[path]
        return factor

    def has_type(self, types: Iterable[TagID], path: TagPath) -> bool:
        """True if any tag in ``types`` has exactly ``path``."""
        return any(self._path(tag) == path for tag in types)

    # --- queries ---

    def resolve_highway_type(self, types: Iterable[TagID]) -> HighwayType | None:
        entry = self._resolve_entry(types)
        return entry.highway_type if entry is not None else None

    def resolve_speed(self, types: Sequence[TagID], params: SpeedParams) -> SpeedKMpH:
        """Resolve the weight/eta speed of a feature for one direction.

        Args:
            types: Classification tags of the feature, in classificator order
            params: Direction, city flag and posted limit

        Returns:
            Factored and limited speed, or the offroad speed if no road
            category is present.
        """
        entry = self._resolve_entry(types)
        if entry is None:
            return self.offroad_speed

        hw_type = entry.highway_type
        limit_kmph = None
        if self._traits.respects_maxspeed:
            limit_kmph = params.maxspeed.get_speed_kmph(params.forward)

        if limit_kmph is not None and self._maxspeed_mode == MaxspeedMode.REPLACE_BASE:
            speed = SpeedKMpH.uniform(limit_kmph)
        else:
            speed = self._info.speeds[hw_type].get_speed(params.in_city)

        speed = speed * self._info.factors[hw_type].get_factor(params.in_city)
        speed = speed * self._surface_factor(types)

        if limit_kmph is not None and self._maxspeed_mode == MaxspeedMode.CLAMP:
            speed = speed.clamped(limit_kmph)
        return speed

    def get_speed(self, feature: RoadFeature, params: SpeedParams | None = None) -> SpeedKMpH:
        """Resolve the speed of ``feature``; defaults to forward with its own context."""
        if params is None:
            params = feature.speed_params()
        return self.resolve_speed(feature.types, params)

    def has_one_way_tag(self, types: Iterable[TagID]) -> bool:
        return self.has_type(types, ONE_WAY_PATH)

    def is_one_way(self, feature: RoadFeature) -> bool:
        return self._traits.is_one_way(self, feature.types)

    def has_pass_through_tag(self, types: Iterable[TagID]) -> bool:
        """True if the resolved category allows routes that merely cross it."""
        entry = self._resolve_entry(types)
        return entry is not None and entry.is_pass_through_allowed

    def is_pass_through_allowed(self, feature: RoadFeature) -> bool:
        return self.has_pass_through_tag(feature.types)

    def is_road_type(self, tag: TagID) -> bool:
        entry = self._road_entry(tag)
        return entry is not None and entry.is_routable

    def is_road(self, types: Sequence[TagID]) -> bool:
        """Whether this vehicle class may use the feature at all.

        Explicit access tags override the category: the "no" tag forbids, the
        "yes" tag allows.
        """
        if self.has_type(types, self._traits.no_path):
            return False
        if self.has_type(types, self._traits.yes_path):
            return True
        entry = self._resolve_entry(types)
        return entry is not None and entry.is_routable
