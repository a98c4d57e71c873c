"""Facade adapter for using the calculator from Python code."""

from environs import Env

from muzz.application.calculator import MuzzleEnergyCalculator
from muzz.domain.models.config import (
    CalculationConfig,
    ConstantMode,
    ResultPolicy,
    SolveTarget,
    UnitSystem,
)
from muzz.domain.models.measurements import CalculationResult, Measurements
from muzz.infrastructure.output.formatters import ConsoleOutputFormatter
from muzz.settings import Settings


class MuzzleEnergyAPI:
    """
    Simplified facade offering one method per calculation.

    Unit system and constant default to the settings; each call may
    override them with the units, constant_mode and custom_constant
    keywords.
    """

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or Settings()
        self._formatter = ConsoleOutputFormatter()

    @classmethod
    def create_from_env(cls, env: Env) -> "MuzzleEnergyAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> api = MuzzleEnergyAPI.create_from_env(env)
        """
        return cls(Settings.from_env(env))

    def _config(
        self,
        target: SolveTarget = SolveTarget.ENERGY,
        knockout: bool = False,
        units: UnitSystem | str | None = None,
        constant_mode: ConstantMode | str | None = None,
        custom_constant: float | None = None,
    ) -> CalculationConfig:
        unit_system = UnitSystem(units) if units is not None else self._settings.units

        if custom_constant is not None and constant_mode is None:
            mode = ConstantMode.USER_SUPPLIED
        elif constant_mode is not None:
            mode = ConstantMode(constant_mode)
        else:
            mode = self._settings.constant_mode
            custom_constant = self._settings.custom_constant

        return CalculationConfig(
            units=unit_system,
            constant_mode=mode,
            custom_constant=custom_constant,
            target=target,
            knockout=knockout,
        )

    def _run(self, config: CalculationConfig, **values: float) -> CalculationResult:
        return MuzzleEnergyCalculator(config).calculate(Measurements(**values))

    def energy(self, mass: float, velocity: float, **options) -> CalculationResult:
        """Muzzle energy of a projectile of the given mass and velocity."""
        config = self._config(SolveTarget.ENERGY, **options)
        return self._run(config, mass=mass, velocity=velocity)

    def mass(self, velocity: float, energy: float, **options) -> CalculationResult:
        """Projectile mass from velocity and muzzle energy."""
        config = self._config(SolveTarget.MASS, **options)
        return self._run(config, velocity=velocity, energy=energy)

    def velocity(self, mass: float, energy: float, **options) -> CalculationResult:
        """Projectile velocity from mass and muzzle energy."""
        config = self._config(SolveTarget.VELOCITY, **options)
        return self._run(config, mass=mass, energy=energy)

    def knockout(
        self, mass: float, velocity: float, diameter: float, **options
    ) -> CalculationResult:
        """Taylor Knockout Formula index."""
        config = self._config(knockout=True, **options)
        return self._run(config, mass=mass, velocity=velocity, diameter=diameter)

    def describe(
        self,
        result: CalculationResult,
        verbose: bool = True,
        precise: bool | None = None,
    ) -> str:
        """Render a result the way the command line tool prints it."""
        if precise is None:
            precise = self._settings.precise
        policy = ResultPolicy(verbose=verbose, precise=precise)
        return self._formatter.format_result(result, policy)
