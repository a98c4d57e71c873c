# muzz/domain/physics.py
"""
Closed-form muzzle energy formulas.

Each function is pure and receives the divisor constant K explicitly.

    Si:        E = (m / 2) * v^2 / K      (K = 1000, grams -> kilograms)
    Imperial:  E = m * v^2 / K            (K = 2 * g * 7000 or 450240)

The Taylor Knockout Formula is an independent score, not an inverse of
the energy formulas:

    Si:        TKOF = m * v * d / 3500
    Imperial:  TKOF = m * v * d / 7000
"""

import math

from muzz.domain.constants import TKOF_DIVISOR_IMPERIAL, TKOF_DIVISOR_SI
from muzz.domain.exceptions import DomainError
from muzz.domain.models.config import UnitSystem
from muzz.domain.models.units import (
    Diameter,
    DivisorConstant,
    Energy,
    KnockoutIndex,
    Mass,
    Velocity,
)


def _finite(value: float, quantity: str) -> float:
    if not math.isfinite(value):
        raise DomainError(f"{quantity} calculation produced a non-finite result ({value})")
    return value


def energy(
    mass: Mass, velocity: Velocity, k: DivisorConstant, units: UnitSystem
) -> Energy:
    """
    Muzzle energy from mass and velocity.

    Raises:
        DomainError: If K is zero or the result is not finite
    """
    if k == 0:
        raise DomainError("Cannot calculate energy with a zero constant")

    # zero mass carries no energy even when v^2 overflows
    if mass == 0:
        return Energy(0.0)

    if units is UnitSystem.SI:
        result = (mass / 2.0) * (velocity * velocity) / k
    else:
        result = mass * (velocity * velocity) / k
    return Energy(_finite(result, "Energy"))


def mass(
    velocity: Velocity, energy: Energy, k: DivisorConstant, units: UnitSystem
) -> Mass:
    """
    Projectile mass from velocity and muzzle energy.

    Raises:
        DomainError: If velocity is zero or the result is not finite
    """
    denominator = velocity * velocity
    # very small velocities underflow to zero when squared
    if denominator == 0:
        raise DomainError("Cannot calculate mass with zero velocity")

    if units is UnitSystem.SI:
        result = ((energy * 2) / denominator) * k
    else:
        result = (energy / denominator) * k
    return Mass(_finite(result, "Mass"))


def velocity(
    mass: Mass, energy: Energy, k: DivisorConstant, units: UnitSystem
) -> Velocity:
    """
    Projectile velocity from mass and muzzle energy.

    Raises:
        DomainError: If mass is zero, the radicand is negative or the
            result is not finite
    """
    if mass == 0:
        raise DomainError("Cannot calculate velocity with zero mass")

    if units is UnitSystem.SI:
        radicand = ((energy * 2) / mass) * k
    else:
        radicand = (energy / mass) * k

    if radicand < 0:
        raise DomainError(
            f"Cannot calculate velocity: square root of negative value {radicand}"
        )
    return Velocity(_finite(math.sqrt(radicand), "Velocity"))


def knockout_index(
    mass: Mass, velocity: Velocity, diameter: Diameter, units: UnitSystem
) -> KnockoutIndex:
    """Taylor Knockout Formula score from mass, velocity and diameter."""
    divisor = TKOF_DIVISOR_SI if units is UnitSystem.SI else TKOF_DIVISOR_IMPERIAL
    result = (mass * velocity * diameter) / divisor
    return KnockoutIndex(_finite(result, "Knockout index"))
