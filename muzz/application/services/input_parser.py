import math
from collections.abc import Sequence

from muzz.application.calculator import required_inputs
from muzz.domain.exceptions import ParseError, UsageError
from muzz.domain.models.config import CalculationConfig
from muzz.domain.models.measurements import Measurements


class MeasurementParser:
    """
    Turns positional command-line values into Measurements.

    The meaning of each position depends on the configuration:
    energy takes mass and velocity, mass takes velocity and energy,
    velocity takes mass and energy, and the knockout formula takes mass,
    velocity and diameter.
    """

    def parse_number(self, text: str, name: str = "value") -> float:
        """Parses one number, rejecting anything that is not a finite float."""
        try:
            value = float(text.strip())
        except (ValueError, TypeError, AttributeError):
            raise ParseError(f"Invalid {name} {text!r}: not a number")

        if not math.isfinite(value):
            raise ParseError(f"Invalid {name} {text!r}: must be a finite number")
        return value

    def parse(self, args: Sequence[str], config: CalculationConfig) -> Measurements:
        """
        Parses positional arguments for the given configuration.

        Raises:
            UsageError: If the number of arguments does not match
            ParseError: If an argument is not a number
        """
        names = required_inputs(config)

        if not args:
            raise UsageError("Parameters required")

        if len(args) < len(names):
            if config.knockout:
                raise UsageError(
                    "The Taylor Knockout Formula requires three parameters: "
                    "Mass, Velocity and Diameter of projectile"
                )
            raise UsageError("Need more than one parameter")

        if len(args) > len(names):
            raise UsageError(
                f"Too many parameters: expected {len(names)} "
                f"({', '.join(names)}), got {len(args)}"
            )

        values = {
            name: self.parse_number(text, name) for name, text in zip(names, args)
        }
        return Measurements(**values)
