from muzz.domain import physics
from muzz.domain.constant_resolver import resolve_constant
from muzz.domain.exceptions import UsageError
from muzz.domain.models.config import CalculationConfig, SolveTarget
from muzz.domain.models.measurements import CalculationResult, Measurements
from muzz.domain.models.units import (
    Diameter,
    DivisorConstant,
    Energy,
    Mass,
    Velocity,
)
from muzz.domain.validators import validate_constant, validate_measurement
from muzz.logging_config import get_logger

logger = get_logger(__name__)

# Inputs each solve target needs, in positional order
REQUIRED_INPUTS: dict[SolveTarget, tuple[str, str]] = {
    SolveTarget.ENERGY: ("mass", "velocity"),
    SolveTarget.MASS: ("velocity", "energy"),
    SolveTarget.VELOCITY: ("mass", "energy"),
}
KNOCKOUT_INPUTS: tuple[str, str, str] = ("mass", "velocity", "diameter")


def required_inputs(config: CalculationConfig) -> tuple[str, ...]:
    """Names of the measurements a configuration consumes, in positional order."""
    if config.knockout:
        return KNOCKOUT_INPUTS
    return REQUIRED_INPUTS[config.target]


class MuzzleEnergyCalculator:
    """
    Runs one calculation for a configuration.

    The divisor constant is resolved once at construction and passed
    explicitly to every formula.
    """

    def __init__(self, config: CalculationConfig):
        self.config = config
        self.constant: DivisorConstant = resolve_constant(
            config.units, config.constant_mode, config.custom_constant
        )
        logger.debug(
            "Resolved constant K=%s (units=%s, mode=%s)",
            self.constant,
            config.units.value,
            config.constant_mode.value,
        )

    def _inputs(self, measurements: Measurements) -> dict[str, float]:
        values = {}
        for name in required_inputs(self.config):
            value = getattr(measurements, name)
            if value is None:
                raise UsageError(f"Missing required {name} value")
            values[name] = validate_measurement(value, name.capitalize())
        return values

    def calculate(self, measurements: Measurements) -> CalculationResult:
        """
        Compute the configured quantity.

        Args:
            measurements: Known quantities; the ones the target needs must be set

        Returns:
            CalculationResult with the solved quantity filled into its measurements

        Raises:
            UsageError: If a required measurement is missing
            DomainError: If an input is invalid or the formula is undefined
        """
        if self.config.knockout:
            return self._knockout(measurements)

        values = self._inputs(measurements)
        units = self.config.units
        k = DivisorConstant(validate_constant(self.constant))
        target = self.config.target

        if target is SolveTarget.ENERGY:
            m, v = Mass(values["mass"]), Velocity(values["velocity"])
            value = physics.energy(m, v, k, units)
            solved = Measurements(mass=m, velocity=v, energy=value)
        elif target is SolveTarget.MASS:
            v, e = Velocity(values["velocity"]), Energy(values["energy"])
            value = physics.mass(v, e, k, units)
            solved = Measurements(mass=value, velocity=v, energy=e)
        else:
            m, e = Mass(values["mass"]), Energy(values["energy"])
            value = physics.velocity(m, e, k, units)
            solved = Measurements(mass=m, velocity=value, energy=e)

        logger.debug("Solved %s = %s", target.value, value)
        return CalculationResult(
            target=target.value,
            value=value,
            measurements=solved,
            units=units,
            constant=k,
            metadata={"constant_mode": self.config.constant_mode.value},
        )

    def _knockout(self, measurements: Measurements) -> CalculationResult:
        values = self._inputs(measurements)
        m = Mass(values["mass"])
        v = Velocity(values["velocity"])
        d = Diameter(values["diameter"])

        value = physics.knockout_index(m, v, d, self.config.units)
        logger.debug("Taylor Knockout Formula index = %s", value)
        return CalculationResult(
            target="knockout",
            value=value,
            measurements=Measurements(mass=m, velocity=v, diameter=d),
            units=self.config.units,
        )
