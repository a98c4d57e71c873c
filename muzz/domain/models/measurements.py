"""Domain models for calculation inputs and results"""

from dataclasses import dataclass, field
from typing import Any

from .config import UnitSystem
from .units import Diameter, DivisorConstant, Energy, Mass, Velocity


@dataclass(slots=True)
class Measurements:
    """
    Quantities known for a projectile.

    A field left as None was not supplied. The calculator fills in the
    quantity it solves for.
    """

    mass: Mass | None = None
    velocity: Velocity | None = None
    energy: Energy | None = None
    diameter: Diameter | None = None

    def to_dict(self) -> dict[str, float]:
        return {
            name: getattr(self, name)
            for name in ("mass", "velocity", "energy", "diameter")
            if getattr(self, name) is not None
        }


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Outcome of one calculation.

    target is "mass", "velocity", "energy" or "knockout". constant is the
    resolved divisor K, or None for the knockout index which does not use it.
    """

    target: str
    value: float
    measurements: Measurements
    units: UnitSystem
    constant: DivisorConstant | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_knockout(self) -> bool:
        return self.target == "knockout"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""
        data: dict[str, Any] = {
            "target": self.target,
            "value": self.value,
            "units": self.units.value,
            "inputs": self.measurements.to_dict(),
        }
        if self.constant is not None:
            data["constant"] = self.constant
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data
