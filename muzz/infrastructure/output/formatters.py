"""Output formatting services for console display."""

import json
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from muzz.domain.models.config import ResultPolicy, UnitSystem
from muzz.domain.models.measurements import CalculationResult

UNIT_LABELS: dict[UnitSystem, dict[str, str]] = {
    UnitSystem.SI: {"mass": "g", "velocity": "m/s", "energy": "J"},
    UnitSystem.IMPERIAL: {"mass": "gr", "velocity": "ft/s", "energy": "lbf"},
}


def round_half_away(value: float, places: int = 0) -> Decimal:
    """Round to the given number of places, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)


def format_fixed(value: float, places: int) -> str:
    # floats this large carry no fractional part to round
    if abs(value) >= 2**53:
        return f"{value:.{places}f}"
    return f"{round_half_away(value, places):.{places}f}"


def format_number(value: float, precise: bool) -> str:
    """2 decimal places when precise, otherwise the nearest integer."""
    return format_fixed(value, 2 if precise else 0)


def _json_number(value: float) -> float:
    if abs(value) >= 2**53:
        return float(value)
    return float(round_half_away(value, 2))


def _format_standard(result: CalculationResult, policy: ResultPolicy) -> str:
    if not policy.verbose:
        return format_number(result.value, policy.precise)

    labels = UNIT_LABELS[result.units]
    m = result.measurements
    return (
        f"{format_number(m.mass, policy.precise)} {labels['mass']} @ "
        f"{format_number(m.velocity, policy.precise)} {labels['velocity']} = "
        f"{format_number(m.energy, policy.precise)} {labels['energy']}"
    )


def _format_knockout(result: CalculationResult, policy: ResultPolicy) -> str:
    index = format_fixed(result.value, 2)
    if not policy.verbose:
        return index

    m = result.measurements
    if result.units is UnitSystem.SI:
        return (
            f"{format_fixed(m.mass, 2)} g @ {format_fixed(m.velocity, 2)} m/s "
            f"({format_fixed(m.diameter, 2)} mm diameter) = {index} TKOF"
        )

    return (
        f"{format_number(m.mass, policy.precise)} gr @ "
        f"{format_number(m.velocity, policy.precise)} ft/s "
        f'({format_fixed(m.diameter, 2)}" diameter) = {index} TKOF'
    )


def format_result_line(result: CalculationResult, policy: ResultPolicy) -> str:
    """Render a result as the single line printed by the command line tool."""
    if result.is_knockout:
        return _format_knockout(result, policy)
    return _format_standard(result, policy)


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: CalculationResult, policy: ResultPolicy) -> str:
        """Render a calculation result"""
        ...


class ConsoleOutputFormatter:
    """Format results as a bare number or a sentence with units"""

    def format_result(self, result: CalculationResult, policy: ResultPolicy) -> str:
        return format_result_line(result, policy)


class JSONOutputFormatter:
    """Format results as JSON (for scripts/automation)"""

    def format_result(self, result: CalculationResult, policy: ResultPolicy) -> str:
        output_dict = result.to_dict()
        output_dict["value"] = _json_number(output_dict["value"])
        output_dict["inputs"] = {
            k: _json_number(v) for k, v in output_dict["inputs"].items()
        }
        output_dict["formatted"] = format_result_line(result, policy)
        if result.is_knockout:
            output_dict["labels"] = {"index": "TKOF"}
        else:
            output_dict["labels"] = UNIT_LABELS[result.units]
        return json.dumps(output_dict, indent=2)
