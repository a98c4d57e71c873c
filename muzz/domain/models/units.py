# muzz/domain/models/units.py
"""
Semantic quantity types for muzzle energy calculations.

Values carry no unit tag: whether a Mass is in grains or grams depends on
the UnitSystem passed alongside it.

Usage:
    from muzz.domain.models.units import Mass, Velocity, Energy

    def energy(mass: Mass, velocity: Velocity, k: DivisorConstant, ...) -> Energy:
        ...
"""

from typing import NewType

Mass = NewType("Mass", float)  # grains (Imperial) or grams (Si)
Velocity = NewType("Velocity", float)  # ft/s or m/s
Energy = NewType("Energy", float)  # foot-pounds (lbf) or joules
Diameter = NewType("Diameter", float)  # inch caliber or millimeters
DivisorConstant = NewType("DivisorConstant", float)  # K
KnockoutIndex = NewType("KnockoutIndex", float)  # TKOF score
