# muzz/domain/models/__init__.py
from .units import Mass, Velocity, Energy, Diameter, DivisorConstant, KnockoutIndex
from .config import (
    UnitSystem,
    ConstantMode,
    SolveTarget,
    ResultPolicy,
    CalculationConfig,
)
from .measurements import Measurements, CalculationResult

__all__ = [
    "Mass",
    "Velocity",
    "Energy",
    "Diameter",
    "DivisorConstant",
    "KnockoutIndex",
    "UnitSystem",
    "ConstantMode",
    "SolveTarget",
    "ResultPolicy",
    "CalculationConfig",
    "Measurements",
    "CalculationResult",
]
