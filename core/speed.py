"""Weight/eta speed and factor value types.

Every speed in the model is a pair: ``weight`` is what path search minimizes,
``eta`` is what travel-time estimates use. Both are km/h.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SpeedFactor:
    """Multiplicative adjustment applied on top of a base speed."""

    weight: float = 1.0
    eta: float = 1.0

    def __post_init__(self) -> None:
        if self.weight <= 0 or self.eta <= 0:
            raise ValueError("SpeedFactor components must be positive")

    @classmethod
    def uniform(cls, value: float) -> "SpeedFactor":
        """Factor with the same multiplier for weight and eta."""
        return cls(weight=value, eta=value)

    @classmethod
    def identity(cls) -> "SpeedFactor":
        return cls()

    def is_identity(self) -> bool:
        return self.weight == 1.0 and self.eta == 1.0

    def __mul__(self, other: object) -> "SpeedFactor | SpeedKMpH":
        if isinstance(other, SpeedFactor):
            return SpeedFactor(weight=self.weight * other.weight, eta=self.eta * other.eta)
        if isinstance(other, SpeedKMpH):
            return other * self
        return NotImplemented


@dataclass(frozen=True)
class SpeedKMpH:
    """Weight and eta speeds in km/h. Both components are non-negative."""

    weight: float = 0.0
    eta: float = 0.0

    def __post_init__(self) -> None:
        if self.weight < 0 or self.eta < 0:
            raise ValueError("SpeedKMpH components must be non-negative")

    @classmethod
    def uniform(cls, value: float) -> "SpeedKMpH":
        """Speed with equal weight and eta components."""
        return cls(weight=value, eta=value)

    def is_positive(self) -> bool:
        """True if both components are strictly positive (usable as a table entry)."""
        return self.weight > 0 and self.eta > 0

    def clamped(self, limit_kmph: float) -> "SpeedKMpH":
        """Trim each component to ``limit_kmph``; components below it are kept."""
        return SpeedKMpH(weight=min(self.weight, limit_kmph), eta=min(self.eta, limit_kmph))

    def __mul__(self, other: object) -> "SpeedKMpH":
        if isinstance(other, SpeedFactor):
            return SpeedKMpH(weight=self.weight * other.weight, eta=self.eta * other.eta)
        return NotImplemented


@dataclass(frozen=True)
class InOutCitySpeedKMpH:
    """Speed pair for in-city and out-of-city roads."""

    in_city: SpeedKMpH
    out_city: SpeedKMpH

    @classmethod
    def same(cls, speed: SpeedKMpH) -> "InOutCitySpeedKMpH":
        """Same speed regardless of city boundaries."""
        return cls(in_city=speed, out_city=speed)

    @classmethod
    def uniform(cls, in_city_kmph: float, out_city_kmph: float) -> "InOutCitySpeedKMpH":
        return cls(
            in_city=SpeedKMpH.uniform(in_city_kmph), out_city=SpeedKMpH.uniform(out_city_kmph)
        )

    def get_speed(self, in_city: bool) -> SpeedKMpH:
        return self.in_city if in_city else self.out_city

    def is_positive(self) -> bool:
        return self.in_city.is_positive() and self.out_city.is_positive()

    @property
    def max_weight(self) -> float:
        return max(self.in_city.weight, self.out_city.weight)


@dataclass(frozen=True)
class InOutCityFactor:
    """Factor pair for in-city and out-of-city roads."""

    in_city: SpeedFactor
    out_city: SpeedFactor

    @classmethod
    def same(cls, factor: SpeedFactor) -> "InOutCityFactor":
        return cls(in_city=factor, out_city=factor)

    @classmethod
    def uniform(cls, value: float) -> "InOutCityFactor":
        """Single multiplier for both contexts and both components."""
        return cls.same(SpeedFactor.uniform(value))

    def get_factor(self, in_city: bool) -> SpeedFactor:
        return self.in_city if in_city else self.out_city
