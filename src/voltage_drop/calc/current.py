"""Design current for a circuit from its apparent and per-phase currents.

The apparent current is a vector sum and can understate the load on the
heaviest phase of an unbalanced circuit. When the phase readings are usable and
genuinely unbalanced, the worst phase is used instead.
"""

from voltage_drop.calc.resolver import resolve_apparent_current, resolve_phase_current
from voltage_drop.db.models import NOT_COMPUTABLE, CircuitAttributes
from voltage_drop.host import CircuitSource

BALANCE_TOLERANCE = 0.001


def _balanced(a: float, b: float) -> bool:
    return abs(a - b) < BALANCE_TOLERANCE


def two_pole_current(apparent: float, a: float, b: float) -> float:
    if a <= 0 or b <= 0:
        return apparent
    if _balanced(a, b):
        return apparent
    return a if a > b else b


def three_pole_current(apparent: float, a: float, b: float, c: float) -> float:
    """Worst phase current, or ``apparent`` when no phase stands out.

    Two phases tied above the third also fall back to ``apparent``.
    """
    if a <= 0 or b <= 0 or c <= 0:
        return apparent
    if _balanced(a, b) and _balanced(b, c) and _balanced(a, c):
        return apparent
    if a > b and a > c:
        return a
    if b > a and b > c:
        return b
    if c > a and c > b:
        return c
    return apparent


def design_current(attributes: CircuitAttributes) -> float:
    """Design current in amperes from an attribute snapshot, or ``NOT_COMPUTABLE``."""
    poles = attributes.poles
    if poles == 1:
        return attributes.apparent_current
    if poles == 2:
        return two_pole_current(
            attributes.apparent_current, attributes.current_phase_a, attributes.current_phase_b
        )
    if poles == 3:
        return three_pole_current(
            attributes.apparent_current,
            attributes.current_phase_a,
            attributes.current_phase_b,
            attributes.current_phase_c,
        )
    return NOT_COMPUTABLE


def estimate_current(circuit: CircuitSource, poles: int) -> float:
    """Return the design current in amperes, or ``NOT_COMPUTABLE``.

    Parameters
    ----------
    circuit : CircuitSource
        Circuit to read apparent and phase currents from.
    poles : int
        Resolved pole count; only 1, 2 and 3 are supported.
    """
    if poles not in (1, 2, 3):
        return NOT_COMPUTABLE
    return design_current(
        CircuitAttributes(
            poles=poles,
            apparent_current=resolve_apparent_current(circuit),
            current_phase_a=resolve_phase_current(circuit, "A"),
            current_phase_b=resolve_phase_current(circuit, "B"),
            current_phase_c=resolve_phase_current(circuit, "C"),
        )
    )
