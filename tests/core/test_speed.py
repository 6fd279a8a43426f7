"""Tests for speed and factor value types."""

import pytest

from core.speed import InOutCityFactor, InOutCitySpeedKMpH, SpeedFactor, SpeedKMpH


class TestSpeedKMpH:
    """Tests for SpeedKMpH construction and arithmetic."""

    def test_uniform_sets_both_components(self) -> None:
        """Test uniform speed has equal weight and eta."""
        speed = SpeedKMpH.uniform(42.0)
        assert speed == SpeedKMpH(weight=42.0, eta=42.0)

    def test_negative_component_raises(self) -> None:
        """Test that a negative weight or eta is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            SpeedKMpH(weight=-1.0, eta=10.0)
        with pytest.raises(ValueError, match="non-negative"):
            SpeedKMpH(weight=10.0, eta=-0.5)

    def test_zero_speed_is_allowed_but_not_positive(self) -> None:
        """Test zero speed is a valid value but not a usable table entry."""
        speed = SpeedKMpH(0.0, 0.0)
        assert not speed.is_positive()
        assert SpeedKMpH(0.1, 0.1).is_positive()

    def test_clamped_only_trims_exceeding_components(self) -> None:
        """Test clamping leaves components below the limit untouched."""
        speed = SpeedKMpH(weight=40.0, eta=70.0).clamped(60.0)
        assert speed == SpeedKMpH(weight=40.0, eta=60.0)

    def test_multiplication_is_commutative(self) -> None:
        """Test speed * factor equals factor * speed."""
        speed = SpeedKMpH(weight=90.0, eta=100.0)
        factor = SpeedFactor(weight=1.0, eta=1.1)

        left = speed * factor
        right = factor * speed

        assert left == right
        assert left.weight == pytest.approx(90.0)
        assert left.eta == pytest.approx(110.0)

    def test_multiplication_by_unsupported_type(self) -> None:
        """Test multiplying a speed by a plain number is not supported."""
        with pytest.raises(TypeError):
            SpeedKMpH(10.0, 10.0) * 2  # type: ignore[operator]


class TestSpeedFactor:
    """Tests for SpeedFactor."""

    def test_default_is_identity(self) -> None:
        """Test default factor leaves speeds unchanged."""
        assert SpeedFactor().is_identity()
        assert SpeedFactor.identity() * SpeedKMpH(30.0, 20.0) == SpeedKMpH(30.0, 20.0)

    @pytest.mark.parametrize("weight, eta", [(0.0, 1.0), (1.0, 0.0), (-0.5, 1.0)])
    def test_non_positive_component_raises(self, weight: float, eta: float) -> None:
        """Test factors must be positive multipliers."""
        with pytest.raises(ValueError, match="must be positive"):
            SpeedFactor(weight=weight, eta=eta)

    def test_factor_composition(self) -> None:
        """Test multiplying two factors multiplies componentwise."""
        combined = SpeedFactor(0.5, 0.8) * SpeedFactor(0.8, 0.5)
        assert isinstance(combined, SpeedFactor)
        assert combined.weight == pytest.approx(0.4)
        assert combined.eta == pytest.approx(0.4)


class TestInOutCity:
    """Tests for in-city/out-of-city wrappers."""

    def test_get_speed_selects_branch(self) -> None:
        """Test the city flag selects the matching speed."""
        speed = InOutCitySpeedKMpH(in_city=SpeedKMpH(45.0, 55.0), out_city=SpeedKMpH(50.0, 60.0))
        assert speed.get_speed(True) == SpeedKMpH(45.0, 55.0)
        assert speed.get_speed(False) == SpeedKMpH(50.0, 60.0)
        assert speed.max_weight == 50.0

    def test_same_uses_one_speed_for_both(self) -> None:
        """Test same() applies a speed regardless of city flag."""
        speed = InOutCitySpeedKMpH.same(SpeedKMpH(80.0, 70.0))
        assert speed.in_city == speed.out_city == SpeedKMpH(80.0, 70.0)

    def test_is_positive_requires_both_branches(self) -> None:
        """Test a zero branch makes the pair unusable as a table entry."""
        assert InOutCitySpeedKMpH.uniform(100.0, 150.0).is_positive()
        assert not InOutCitySpeedKMpH(SpeedKMpH(10.0, 10.0), SpeedKMpH(0.0, 10.0)).is_positive()

    def test_factor_uniform(self) -> None:
        """Test uniform factor covers both contexts and components."""
        factor = InOutCityFactor.uniform(0.5)
        assert factor.get_factor(True) == SpeedFactor(0.5, 0.5)
        assert factor.get_factor(False) == SpeedFactor(0.5, 0.5)
