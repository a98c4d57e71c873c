# muzz/domain/constant_resolver.py
from muzz.domain.constants import (
    GRAINS_PER_POUND,
    GRAVITY_IMPERIAL,
    GRAVITY_IMPERIAL_APPROX,
    INDUSTRY_STANDARD_K,
    SI_K,
)
from muzz.domain.models.config import ConstantMode, UnitSystem
from muzz.domain.models.units import DivisorConstant
from muzz.logging_config import get_logger

logger = get_logger(__name__)


def gravity_constant(gravity: float) -> DivisorConstant:
    """K = 2 * g * 7000, with g in ft/s^2 and 7000 grains per pound."""
    return DivisorConstant(2 * gravity * GRAINS_PER_POUND)


def resolve_constant(
    units: UnitSystem,
    mode: ConstantMode | None = None,
    custom: float | None = None,
) -> DivisorConstant:
    """
    Resolve the divisor constant K used by the energy/mass/velocity formulas.

    Args:
        units: Unit system of the calculation
        mode: How K is obtained; None means the industry standard
        custom: Value for ConstantMode.USER_SUPPLIED

    Returns:
        The constant K

    Raises:
        ValueError: If mode is USER_SUPPLIED and no value is given

    Note:
        Si units force K = 1000 unless the constant is user supplied, so a
        gravity-based mode combined with Si resolves to 1000.
    """
    if mode is None:
        mode = ConstantMode.INDUSTRY_STANDARD

    if mode is ConstantMode.USER_SUPPLIED:
        if custom is None:
            raise ValueError("ConstantMode.USER_SUPPLIED requires a custom value")
        return DivisorConstant(float(custom))

    if units is UnitSystem.SI:
        if mode in (ConstantMode.APPROXIMATE_GRAVITY, ConstantMode.PRECISE_GRAVITY):
            logger.debug("Si units selected, ignoring %s constant mode", mode.value)
        return DivisorConstant(SI_K)

    if mode is ConstantMode.APPROXIMATE_GRAVITY:
        return gravity_constant(GRAVITY_IMPERIAL_APPROX)
    if mode is ConstantMode.PRECISE_GRAVITY:
        return gravity_constant(GRAVITY_IMPERIAL)
    return DivisorConstant(INDUSTRY_STANDARD_K)
