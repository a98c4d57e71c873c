"""Static help text for the command line tool."""

from muzz import __author__, __version__
from muzz.domain.constants import (
    GRAVITY_IMPERIAL,
    GRAVITY_IMPERIAL_APPROX,
    INDUSTRY_STANDARD_K,
    SI_K,
)

USAGE = "muzz [OPTION] MASS VELOCITY [DIAMETER]"

DESCRIPTION = f"""\
The program is used primarily to calculate the muzzle energy of projectiles.

Imperial gravity acceleration constants (K = 2 * GAC * 7000):
GAC-1 (industry):  {GRAVITY_IMPERIAL_APPROX}\tGAC-2 (standard):  {GRAVITY_IMPERIAL}"""

EXAMPLES = """\
Examples:

muzz 230 900
  Returns muzzle energy of a 230 grain bullet @ 900 ft/s

muzz -s 15 270
  Using Si units of measure, returns joules (15 grams @ 270 m/s)

muzz -qp 230 900
  Same, but only the number and with nothing rounded

muzz -mq 900 414
  Given the velocity and muzzle energy, it will return only the mass
  of the projectile.

muzz -t 230 860 .45
  Prints result using Taylor Knockout Formula, with the params being
  the mass (grains), velocity (ft/s) and diameter

muzz -ts 15 255 11.6
  Same, but using Si units (grams, meters/second, mm)"""

UNITS_HELP = f"""\
All units of measure are Imperial by default.

Weight:
  Si:\t\tGrams (g)
  Imperial:\tGrains (gr) (7000 per pound)

Velocity:
  Si:\t\tMeters per second (m/s)
  Imperial:\tFeet per second (ft/s)

Diameter:
  Si:\t\tMillimeters (mm)
  Imperial:\tInch caliber (fractions of inch) (ex.: .45)

Energy:
  Si:\t\tJoules (J)
  Imperial:\tFoot-pounds (lbf)


To calculate the standard muzzle energy of a projectile:

  Si:\t\t( (mass / 2) * (velocity*velocity) ) / K
  Imperial:\t( mass * (velocity*velocity) ) / K

  Default values of K are {INDUSTRY_STANDARD_K:.0f} (Imperial) or {SI_K:.0f} (Si).
  To use different numbers to calculate K, use the '-c' or '-C' options:
    -c:\t\tK = 2 * {GRAVITY_IMPERIAL_APPROX} * 7000
    -C:\t\tK = 2 * {GRAVITY_IMPERIAL} * 7000

  Si units always use K = {SI_K:.0f}, even with '-c' or '-C'.
  You can also use the '-k' option to use a custom constant.

The Taylor Knockout Formula, if used, will return a number that's roughly the
same regardless of whether or not the user chooses Si or Imperial units
of measure.  The formula is as follows:

  Si:\t\t( mass * velocity * diameter ) / 3500
  Imperial:\t( mass * velocity * diameter ) / 7000"""

VERSION = f"muzz, version {__version__}\n{__author__}"
