import pytest

from muzz.application.calculator import MuzzleEnergyCalculator, required_inputs
from muzz.domain.exceptions import DomainError, UsageError
from muzz.domain.models.config import (
    CalculationConfig,
    ConstantMode,
    SolveTarget,
    UnitSystem,
)
from muzz.domain.models.measurements import Measurements


@pytest.fixture
def imperial_energy_config():
    return CalculationConfig()


def test_constant_is_resolved_once_at_construction(imperial_energy_config):
    calculator = MuzzleEnergyCalculator(imperial_energy_config)

    assert calculator.constant == 450240


def test_si_with_gravity_mode_resolves_to_one_thousand():
    config = CalculationConfig(
        units=UnitSystem.SI, constant_mode=ConstantMode.PRECISE_GRAVITY
    )

    assert MuzzleEnergyCalculator(config).constant == 1000


def test_calculate_energy(imperial_energy_config):
    """
    Test energy calculation fills the solved quantity into the measurements.
    """
    # Arrange
    calculator = MuzzleEnergyCalculator(imperial_energy_config)

    # Act
    result = calculator.calculate(Measurements(mass=230.0, velocity=900.0))

    # Assert
    assert result.target == "energy"
    assert result.value == pytest.approx(413.78, abs=0.01)
    assert result.measurements.energy == result.value
    assert result.measurements.mass == 230.0
    assert result.constant == 450240
    assert result.units is UnitSystem.IMPERIAL
    assert result.metadata == {"constant_mode": "industry"}


def test_calculate_mass():
    config = CalculationConfig(target=SolveTarget.MASS)

    result = MuzzleEnergyCalculator(config).calculate(
        Measurements(velocity=900.0, energy=414.0)
    )

    assert result.target == "mass"
    assert result.value == pytest.approx(230.12, abs=0.01)
    assert result.measurements.mass == result.value


def test_calculate_velocity_si():
    config = CalculationConfig(units=UnitSystem.SI, target=SolveTarget.VELOCITY)

    result = MuzzleEnergyCalculator(config).calculate(
        Measurements(mass=15.0, energy=546.75)
    )

    assert result.value == pytest.approx(270.0)
    assert result.measurements.velocity == result.value


def test_user_supplied_constant_is_used():
    config = CalculationConfig(
        units=UnitSystem.SI,
        constant_mode=ConstantMode.USER_SUPPLIED,
        custom_constant=500000.0,
    )

    result = MuzzleEnergyCalculator(config).calculate(
        Measurements(mass=15.0, velocity=270.0)
    )

    assert result.constant == 500000.0
    assert result.value == pytest.approx((15 / 2) * 270**2 / 500000)
    assert result.metadata == {"constant_mode": "custom"}


def test_knockout_ignores_solve_target():
    config = CalculationConfig(knockout=True, target=SolveTarget.MASS)

    result = MuzzleEnergyCalculator(config).calculate(
        Measurements(mass=230.0, velocity=860.0, diameter=0.45)
    )

    assert result.target == "knockout"
    assert result.value == pytest.approx(12.72, abs=0.01)
    assert result.constant is None
    assert result.measurements.energy is None


def test_velocity_with_zero_mass_raises_domain_error():
    config = CalculationConfig(target=SolveTarget.VELOCITY)

    with pytest.raises(DomainError):
        MuzzleEnergyCalculator(config).calculate(Measurements(mass=0.0, energy=414.0))


def test_negative_measurement_raises_domain_error(imperial_energy_config):
    with pytest.raises(DomainError, match="Mass must be non-negative"):
        MuzzleEnergyCalculator(imperial_energy_config).calculate(
            Measurements(mass=-1.0, velocity=900.0)
        )


def test_zero_custom_constant_raises_domain_error():
    config = CalculationConfig(
        constant_mode=ConstantMode.USER_SUPPLIED, custom_constant=0.0
    )

    with pytest.raises(DomainError, match="Constant must be a positive"):
        MuzzleEnergyCalculator(config).calculate(
            Measurements(mass=230.0, velocity=900.0)
        )


def test_missing_input_raises_usage_error(imperial_energy_config):
    with pytest.raises(UsageError, match="Missing required velocity"):
        MuzzleEnergyCalculator(imperial_energy_config).calculate(
            Measurements(mass=230.0)
        )


@pytest.mark.parametrize(
    "config, expected",
    [
        (CalculationConfig(), ("mass", "velocity")),
        (CalculationConfig(target=SolveTarget.MASS), ("velocity", "energy")),
        (CalculationConfig(target=SolveTarget.VELOCITY), ("mass", "energy")),
        (CalculationConfig(knockout=True), ("mass", "velocity", "diameter")),
    ],
)
def test_required_inputs(config, expected):
    assert required_inputs(config) == expected
