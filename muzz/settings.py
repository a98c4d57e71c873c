"""Environment-driven defaults for the calculator."""

from dataclasses import dataclass

from environs import Env

from muzz.domain.models.config import ConstantMode, UnitSystem


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Defaults read from the environment (or a .env file).

    Command-line flags always take precedence over these values.
    """

    units: UnitSystem = UnitSystem.IMPERIAL
    precise: bool = False
    custom_constant: float | None = None

    @property
    def constant_mode(self) -> ConstantMode:
        if self.custom_constant is not None:
            return ConstantMode.USER_SUPPLIED
        return ConstantMode.INDUSTRY_STANDARD

    @classmethod
    def from_env(cls, env: Env) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Environment variable handler (Env instance)

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> settings = Settings.from_env(env)
        """
        units = env.str("MUZZ_UNITS", UnitSystem.IMPERIAL.value).lower()
        try:
            unit_system = UnitSystem(units)
        except ValueError:
            raise ValueError(
                f"Invalid MUZZ_UNITS value {units!r}, expected 'imperial' or 'si'"
            )

        return cls(
            units=unit_system,
            precise=env.bool("MUZZ_PRECISE", default=False),
            custom_constant=env.float("MUZZ_CONSTANT", default=None),
        )
