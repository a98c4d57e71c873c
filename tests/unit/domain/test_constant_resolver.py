# tests/unit/domain/test_constant_resolver.py
import pytest

from muzz.domain.constant_resolver import gravity_constant, resolve_constant
from muzz.domain.models.config import ConstantMode, UnitSystem


def test_industry_standard_imperial_is_exact():
    assert resolve_constant(UnitSystem.IMPERIAL, ConstantMode.INDUSTRY_STANDARD) == 450240


def test_unset_mode_defaults_to_industry_standard():
    assert resolve_constant(UnitSystem.IMPERIAL) == 450240
    assert resolve_constant(UnitSystem.IMPERIAL, None) == 450240


def test_approximate_gravity_imperial():
    k = resolve_constant(UnitSystem.IMPERIAL, ConstantMode.APPROXIMATE_GRAVITY)

    assert k == pytest.approx(2 * 32.163 * 7000)
    assert k == pytest.approx(450282.0)


def test_precise_gravity_imperial():
    k = resolve_constant(UnitSystem.IMPERIAL, ConstantMode.PRECISE_GRAVITY)

    assert k == pytest.approx(2 * 32.1739 * 7000)
    assert k == pytest.approx(450434.6)


@pytest.mark.parametrize(
    "mode",
    [
        ConstantMode.INDUSTRY_STANDARD,
        ConstantMode.APPROXIMATE_GRAVITY,
        ConstantMode.PRECISE_GRAVITY,
        None,
    ],
)
def test_si_forces_one_thousand(mode):
    """
    Test that Si units override every non-custom constant mode with K = 1000.
    """
    assert resolve_constant(UnitSystem.SI, mode) == 1000


def test_user_supplied_overrides_si_default():
    k = resolve_constant(UnitSystem.SI, ConstantMode.USER_SUPPLIED, 500000)

    assert k == 500000
    assert isinstance(k, float)


def test_user_supplied_imperial():
    assert resolve_constant(UnitSystem.IMPERIAL, ConstantMode.USER_SUPPLIED, 12.5) == 12.5


def test_user_supplied_without_value_raises():
    with pytest.raises(ValueError, match="requires a custom value"):
        resolve_constant(UnitSystem.IMPERIAL, ConstantMode.USER_SUPPLIED)


def test_gravity_constant_formula():
    assert gravity_constant(1.0) == 14000
