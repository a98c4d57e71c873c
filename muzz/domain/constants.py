"""Constants used across the application."""

# Earth gravitational acceleration in ft/s^2
# 32.163 is the approximation used by the small arms industry
GRAVITY_IMPERIAL_APPROX = 32.163
GRAVITY_IMPERIAL = 32.1739

GRAINS_PER_POUND = 7000

# Divisor constants (K) for the energy/mass/velocity formulas
INDUSTRY_STANDARD_K = 450240.0  # Imperial, not derived from gravity
SI_K = 1000.0  # grams -> kilograms

# Taylor Knockout Formula divisors
TKOF_DIVISOR_IMPERIAL = 7000.0
TKOF_DIVISOR_SI = 3500.0
