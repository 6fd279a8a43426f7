"""Per-query context for speed resolution."""

from pydantic import BaseModel, ConfigDict, Field

from core.maxspeed import Maxspeed


class SpeedParams(BaseModel):
    """Context a speed is resolved in.

    Attributes:
        forward: Travel direction along the feature geometry.
        in_city: Whether the segment lies inside a settlement boundary.
        maxspeed: Posted limit for the segment.
    """

    model_config = ConfigDict(frozen=True)

    forward: bool = Field(default=True, description="Travel along the feature direction")
    in_city: bool = Field(default=False, description="Segment is inside a city")
    maxspeed: Maxspeed = Field(default_factory=Maxspeed, description="Posted limit")
