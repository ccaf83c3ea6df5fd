"""Plain-text rendering of voltage-drop results.

Field groupings and decimal places are relied on by downstream consumers of
the report text; keep them stable.
"""

from collections.abc import Iterable

from voltage_drop.db.models import NOT_COMPUTABLE, CircuitResult


def _fmt(value: float, format_spec: str, not_available: str | None) -> str:
    if not_available is not None and value == NOT_COMPUTABLE:
        return not_available
    return format(value, format_spec)


def format_circuit(result: CircuitResult, not_available: str | None = None) -> list[str]:
    """Report lines for one circuit.

    ``not_available`` replaces figures that could not be computed; by default
    they are printed as -1.
    """

    def fmt(value: float, format_spec: str) -> str:
        return _fmt(value, format_spec, not_available)

    attrs = result.attributes
    calc = result.calculation
    lines = [
        f"CIRCUIT: {result.display_name}",
        "  PARAMETERS:",
        f"  - Poles: {fmt(attrs.poles, 'd')}",
        f"  - Voltage: {fmt(attrs.voltage, '.0f')} V",
        f"  - Current: {fmt(result.current, '.2f')} A",
        f"  - Power factor: {fmt(attrs.power_factor, '.3f')}",
        f"  - Circuit length: {fmt(result.length_m, '.2f')} m",
    ]
    if result.wire_size is not None:
        wire = result.wire_size
        lines += [
            f"  - Wire size: {wire.conductor_size}",
            f"  - Resistance (Rc): {wire.rc:.4f} Ohm/1000 ft",
            f"  - Reactance (Xc): {wire.xc:.4f} Ohm/1000 ft",
        ]
    lines += [
        "  VOLTAGE DROP:",
        f"  - K factor: {fmt(calc.k_factor, '.3f')}",
        f"  - Length in feet: {fmt(calc.length_ft, '.2f')} ft",
        f"  - sin(phi): {fmt(calc.sin_phi, '.4f')}",
        f"  - Resistive term: {fmt(calc.resistive_term, '.4f')}",
        f"  - Reactive term: {fmt(calc.reactive_term, '.4f')}",
        f"  - Impedance term: {fmt(calc.impedance_term, '.4f')}",
        f"  - Voltage drop: {fmt(calc.voltage_drop, '.4f')} V",
        f"  - VOLTAGE DROP: {fmt(calc.voltage_drop_percent, '.2f')}%",
    ]
    return lines


def format_report(results: Iterable[CircuitResult], not_available: str | None = None) -> str:
    """Render all circuits in order, each block followed by a blank line."""
    lines: list[str] = []
    for result in results:
        lines += format_circuit(result, not_available)
        lines.append("")
    return "\n".join(lines)
