"""Posted speed limits with direction and unit metadata."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

KMPH_PER_MPH = 1.609344


class Units(str, Enum):
    """Unit system a maxspeed value was recorded in."""

    METRIC = "metric"
    IMPERIAL = "imperial"


def to_kmph(value: float, units: Units) -> float:
    """Convert a maxspeed value to km/h.

    Imperial values are rounded to the nearest whole km/h, as posted limits
    are whole numbers in either system.
    """
    if units == Units.IMPERIAL:
        return float(round(value * KMPH_PER_MPH))
    return float(value)


class Maxspeed(BaseModel):
    """Posted limit for a road segment.

    ``forward`` of None means no posted limit. ``backward`` of None means the
    backward limit equals the forward one. Malformed values are treated as
    absent rather than rejected.
    """

    model_config = ConfigDict(frozen=True)

    units: Units = Field(default=Units.METRIC, description="Unit system of the values")
    forward: float | None = Field(default=None, description="Forward limit, None if unknown")
    backward: float | None = Field(
        default=None, description="Backward limit, None if same as forward"
    )

    @field_validator("forward", "backward", mode="before")
    @classmethod
    def drop_malformed(cls, v: Any) -> float | None:
        """Coerce non-numeric, non-positive and non-finite limits to None."""
        if isinstance(v, bool) or not isinstance(v, int | float):
            return None
        if not math.isfinite(v) or v <= 0:
            return None
        return float(v)

    def is_valid(self) -> bool:
        """True if a forward limit is known."""
        return self.forward is not None

    def is_bidirectional(self) -> bool:
        """True if the backward limit differs from the forward one."""
        return self.is_valid() and self.backward is not None and self.backward != self.forward

    def get_speed_in_units(self, forward: bool) -> float | None:
        if not forward and self.backward is not None and self.forward is not None:
            return self.backward
        return self.forward

    def get_speed_kmph(self, forward: bool) -> float | None:
        """Limit for the given direction in km/h, None if there is no posted limit."""
        value = self.get_speed_in_units(forward)
        if value is None:
            return None
        return to_kmph(value, self.units)
