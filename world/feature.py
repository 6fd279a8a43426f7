from dataclasses import dataclass, field

from core.maxspeed import Maxspeed
from core.params import SpeedParams
from core.types import TagID


@dataclass(frozen=True)
class RoadFeature:
    """Road segment as handed over by the graph builder.

    ``types`` keeps the order the classificator reported them in; speed
    resolution is order-sensitive.
    """

    types: tuple[TagID, ...]
    in_city: bool = False
    maxspeed: Maxspeed = field(default_factory=Maxspeed)
    country: str = ""  # Empty = no country-specific model

    def speed_params(self, forward: bool = True) -> SpeedParams:
        """Build query parameters for one travel direction."""
        return SpeedParams(forward=forward, in_city=self.in_city, maxspeed=self.maxspeed)
