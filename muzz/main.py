import argparse
import sys
from collections.abc import Sequence

from environs import Env

from muzz.logging_config import get_logger, setup_logging
from muzz.settings import Settings
from muzz.application.calculator import MuzzleEnergyCalculator
from muzz.application.services.input_parser import MeasurementParser
from muzz.domain.exceptions import DomainError, ParseError, UsageError
from muzz.domain.models.config import (
    CalculationConfig,
    ConstantMode,
    ResultPolicy,
    SolveTarget,
    UnitSystem,
)
from muzz.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
)
from muzz.infrastructure.output.help_text import (
    DESCRIPTION,
    EXAMPLES,
    UNITS_HELP,
    USAGE,
    VERSION,
)

logger = get_logger(__name__)

HELP_HINT = "\nTo view help, run with -h argument."


class PrintTextAction(argparse.Action):
    """Prints a block of text and exits, like argparse's version action."""

    def __init__(
        self,
        option_strings,
        text: str,
        dest=argparse.SUPPRESS,
        default=argparse.SUPPRESS,
        **kwargs,
    ):
        super().__init__(option_strings, dest=dest, default=default, nargs=0, **kwargs)
        self.text = text

    def __call__(self, parser, namespace, values, option_string=None):
        print(self.text)
        parser.exit()


class CustomConstantAction(argparse.Action):
    """-k NUM: select a user supplied constant and remember its value."""

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.constant_mode = ConstantMode.USER_SUPPLIED
        setattr(namespace, self.dest, values)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="muzz",
        usage=USAGE,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--units-help",
        action=PrintTextAction,
        text=UNITS_HELP,
        help="Print additional information on units used, etc.",
    )
    parser.add_argument(
        "-E",
        "--examples",
        action=PrintTextAction,
        text=EXAMPLES,
        help="Print example usage",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=VERSION,
        help="Print version and author info",
    )
    parser.add_argument(
        "-S",
        "-q",
        "--quiet",
        dest="verbose",
        action="store_false",
        help="Silent (quiet) mode; print only the resultant number",
    )

    units = parser.add_argument_group("units")
    units.add_argument(
        "-s",
        "--si",
        dest="units",
        action="store_const",
        const=UnitSystem.SI,
        help="Use Si (metric) units of measure - grams, m/s, joules",
    )
    units.add_argument(
        "-i",
        "--imperial",
        dest="units",
        action="store_const",
        const=UnitSystem.IMPERIAL,
        help="Use Imperial units - grains, ft/s, lbf (default)",
    )

    target = parser.add_argument_group("calculation")
    target.add_argument(
        "-m",
        dest="target",
        action="store_const",
        const=SolveTarget.MASS,
        help="Calculate for mass (num1 = velocity, num2 = energy)",
    )
    target.add_argument(
        "-v",
        dest="target",
        action="store_const",
        const=SolveTarget.VELOCITY,
        help="Calculate for velocity (num1 = mass, num2 = energy)",
    )
    target.add_argument(
        "-e",
        dest="target",
        action="store_const",
        const=SolveTarget.ENERGY,
        help="Calculate for energy (num1 = mass, num2 = velocity) (default)",
    )
    target.add_argument(
        "-t",
        "--tkof",
        dest="knockout",
        action="store_true",
        help="Use Taylor Knockout Formula (give mass, velocity, diameter)",
    )

    constant = parser.add_argument_group("constant")
    constant.add_argument(
        "-K",
        dest="constant_mode",
        action="store_const",
        const=ConstantMode.INDUSTRY_STANDARD,
        help="Use industry standard imperial constant (450,240) (default)",
    )
    constant.add_argument(
        "-k",
        dest="custom_constant",
        metavar="NUM",
        type=float,
        action=CustomConstantAction,
        help="Custom user constant",
    )
    constant.add_argument(
        "-c",
        dest="constant_mode",
        action="store_const",
        const=ConstantMode.APPROXIMATE_GRAVITY,
        help="Calculate constant using 'industry' GAC-1",
    )
    constant.add_argument(
        "-C",
        dest="constant_mode",
        action="store_const",
        const=ConstantMode.PRECISE_GRAVITY,
        help="Calculate constant using standard GAC-2",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "-p",
        "--precise",
        action="store_true",
        help="Be precise (two decimal places instead of rounding)",
    )
    output.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    parser.add_argument("values", nargs="*", metavar="NUM", help=argparse.SUPPRESS)
    parser.set_defaults(target=SolveTarget.ENERGY)
    return parser


def build_config(args: argparse.Namespace, settings: Settings) -> CalculationConfig:
    """Merge parsed flags over environment settings."""
    units = args.units or settings.units

    if args.constant_mode is None:
        constant_mode = settings.constant_mode
        custom_constant = settings.custom_constant
    else:
        constant_mode = args.constant_mode
        custom_constant = (
            args.custom_constant
            if constant_mode is ConstantMode.USER_SUPPLIED
            else None
        )

    if (
        units is UnitSystem.SI
        and not args.knockout
        and constant_mode
        in (ConstantMode.APPROXIMATE_GRAVITY, ConstantMode.PRECISE_GRAVITY)
    ):
        logger.warning(
            "Gravity constant (%s) is ignored with Si units; using K = 1000",
            constant_mode.value,
        )

    return CalculationConfig(
        units=units,
        constant_mode=constant_mode,
        custom_constant=custom_constant,
        target=args.target,
        knockout=args.knockout,
        policy=ResultPolicy(
            verbose=args.verbose, precise=args.precise or settings.precise
        ),
    )


def print_usage_error(message: str) -> None:
    print(f"ERROR:  {message}", file=sys.stderr)
    print(f"Usage:  {USAGE}", file=sys.stderr)
    print(HELP_HINT, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    # Load environment variables before anything reads them
    env = Env()
    env.read_env(".env")

    setup_logging(env)

    try:
        settings = Settings.from_env(env)
    except ValueError as e:
        print(f"ERROR:  {e}", file=sys.stderr)
        return 1

    parser = build_parser()
    # options may follow the numbers, e.g. "muzz 230 900 -q"
    args = parser.parse_intermixed_args(argv)
    config = build_config(args, settings)

    try:
        measurements = MeasurementParser().parse(args.values, config)
        result = MuzzleEnergyCalculator(config).calculate(measurements)
    except UsageError as e:
        print_usage_error(str(e))
        return 1
    except ParseError as e:
        print(f"ERROR:  {e}", file=sys.stderr)
        return 1
    except DomainError as e:
        logger.debug("Calculation failed for %s", args.values, exc_info=True)
        print(f"ERROR:  {e}", file=sys.stderr)
        return 1

    formatter: OutputFormatter = (
        JSONOutputFormatter() if args.json else ConsoleOutputFormatter()
    )
    print(formatter.format_result(result, config.policy))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
