import math
from dataclasses import dataclass

from core.speed import SpeedKMpH
from core.types import EdgeID, HighwayType, NodeID

KMPH_TO_MPS = 1000.0 / 3600.0


def travel_time_s(length_m: float, speed_kmph: float) -> float:
    """Seconds to cover ``length_m`` at ``speed_kmph``; infinite at zero speed."""
    if speed_kmph <= 0:
        return math.inf
    return length_m / (speed_kmph * KMPH_TO_MPS)


@dataclass(frozen=True)
class Edge:
    """Directed road edge with resolved weight/eta speeds."""

    id: EdgeID
    from_node: NodeID
    to_node: NodeID
    length_m: float
    highway_type: HighwayType | None  # None = offroad
    speed: SpeedKMpH
    is_pass_through_allowed: bool
    forward: bool  # Direction relative to the source feature

    @property
    def weight_s(self) -> float:
        """Cost minimized by path search."""
        return travel_time_s(self.length_m, self.speed.weight)

    @property
    def eta_s(self) -> float:
        """Expected travel time."""
        return travel_time_s(self.length_m, self.speed.eta)
