"""Configuration models for a single calculation."""

from dataclasses import dataclass, field
from enum import Enum


class UnitSystem(Enum):
    IMPERIAL = "imperial"
    SI = "si"


class ConstantMode(Enum):
    """How the divisor constant K is obtained."""

    INDUSTRY_STANDARD = "industry"  # fixed 450240, Imperial only
    APPROXIMATE_GRAVITY = "approximate"  # 2 * 32.163 * 7000
    PRECISE_GRAVITY = "precise"  # 2 * 32.1739 * 7000
    USER_SUPPLIED = "custom"


class SolveTarget(Enum):
    MASS = "mass"
    VELOCITY = "velocity"
    ENERGY = "energy"


@dataclass(frozen=True, slots=True)
class ResultPolicy:
    """Output formatting switches, independent of the physics."""

    verbose: bool = True
    precise: bool = False


@dataclass(frozen=True, slots=True)
class CalculationConfig:
    """
    Everything needed to run one calculation except the measurements.

    custom_constant must be set when (and only when) constant_mode is
    USER_SUPPLIED. When knockout is True the solve target is ignored.
    """

    units: UnitSystem = UnitSystem.IMPERIAL
    constant_mode: ConstantMode = ConstantMode.INDUSTRY_STANDARD
    custom_constant: float | None = None
    target: SolveTarget = SolveTarget.ENERGY
    knockout: bool = False
    policy: ResultPolicy = field(default_factory=ResultPolicy)

    def __post_init__(self):
        if self.constant_mode is ConstantMode.USER_SUPPLIED:
            if self.custom_constant is None:
                raise ValueError("A custom constant requires a value")
        elif self.custom_constant is not None:
            raise ValueError(
                f"custom_constant given but constant mode is {self.constant_mode.value}"
            )
