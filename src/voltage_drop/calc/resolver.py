"""Resolve circuit attributes from ordered parameter candidates.

Each attribute is described by a list of candidates tried in order; the first
one that yields a present value wins. A missing attribute resolves to
``NOT_COMPUTABLE`` so that downstream steps can propagate it instead of failing.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from voltage_drop.db.models import NOT_COMPUTABLE, CircuitAttributes
from voltage_drop.db.schemas import (
    APPARENT_CURRENT,
    LENGTH,
    PHASE_CURRENT_TEMPLATE,
    WIRE_SIZE,
)
from voltage_drop.host import BuiltInParameter, CircuitSource, Level, ParameterValue, Unit

logger = logging.getLogger(__name__)

DEFAULT_POWER_FACTOR = 0.85


class Source(str, Enum):
    BUILTIN = "builtin"
    NAMED = "named"
    STRING = "string"


@dataclass(frozen=True)
class Candidate:
    """One place an attribute value may be read from."""

    source: Source
    key: str
    level: Level = Level.INSTANCE

    def read(self, circuit: CircuitSource) -> ParameterValue | None:
        if self.source is Source.BUILTIN:
            return circuit.get_builtin(BuiltInParameter(self.key))
        if self.source is Source.STRING:
            return circuit.lookup_string(self.key, self.level)
        return circuit.lookup(self.key, self.level)


def builtin(parameter: BuiltInParameter) -> Candidate:
    return Candidate(Source.BUILTIN, parameter.value)


def named(name: str, level: Level = Level.INSTANCE) -> Candidate:
    return Candidate(Source.NAMED, name, level)


def text(name: str, level: Level = Level.INSTANCE) -> Candidate:
    return Candidate(Source.STRING, name, level)


POLES = (builtin(BuiltInParameter.RBS_ELEC_NUMBER_OF_POLES),)
VOLTAGE = (builtin(BuiltInParameter.RBS_ELEC_VOLTAGE),)
POWER_FACTOR = (builtin(BuiltInParameter.RBS_ELEC_POWER_FACTOR),)
CIRCUIT_LENGTH = (
    builtin(BuiltInParameter.RBS_ELEC_CIRCUIT_LENGTH_PARAM),
    named(LENGTH),
)
WIRE_SIZE_LABEL = (text(WIRE_SIZE), text(WIRE_SIZE, Level.TYPE))


def _is_present(value: ParameterValue | None) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def resolve(
    circuit: CircuitSource,
    candidates: Sequence[Candidate],
    default: ParameterValue | None = NOT_COMPUTABLE,
) -> ParameterValue | None:
    """Return the first present candidate value, or ``default``."""
    for candidate in candidates:
        value = candidate.read(circuit)
        if _is_present(value):
            return value
    return default


def _to_float(value: ParameterValue | None) -> float:
    """Float value, or ``NOT_COMPUTABLE`` for text, NaN and infinities."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return NOT_COMPUTABLE
    return number if math.isfinite(number) else NOT_COMPUTABLE


def _numeric(circuit: CircuitSource, candidates: Sequence[Candidate]) -> float:
    return _to_float(resolve(circuit, candidates))


def resolve_poles(circuit: CircuitSource) -> int:
    return int(_numeric(circuit, POLES))


def resolve_voltage(circuit: CircuitSource) -> float:
    """Circuit line voltage in volts."""
    value = _numeric(circuit, VOLTAGE)
    if value == NOT_COMPUTABLE:
        return NOT_COMPUTABLE
    return circuit.from_internal(value, Unit.VOLTS)


def resolve_power_factor(circuit: CircuitSource) -> float:
    """Power factor as a fraction; stored percentages are scaled down.

    A missing power factor is common in early design models and falls back to
    0.85 rather than blocking the calculation.
    """
    value = resolve(circuit, POWER_FACTOR, default=None)
    if value is None or isinstance(value, str) or not math.isfinite(value):
        logger.debug("No power factor on %r, using %s", circuit.name, DEFAULT_POWER_FACTOR)
        return DEFAULT_POWER_FACTOR
    value = float(value)
    if value > 1:
        return value / 100.0
    return value


def resolve_raw_length(circuit: CircuitSource) -> float:
    """Circuit length in host units, before reserve and unit conversion."""
    return _numeric(circuit, CIRCUIT_LENGTH)


def resolve_wire_size_label(circuit: CircuitSource) -> str | None:
    value = resolve(circuit, WIRE_SIZE_LABEL, default=None)
    return None if value is None else str(value)


def resolve_apparent_current(circuit: CircuitSource) -> float:
    return _numeric(circuit, (named(APPARENT_CURRENT),))


def resolve_phase_current(circuit: CircuitSource, phase: str) -> float:
    return _numeric(circuit, (named(PHASE_CURRENT_TEMPLATE.format(phase=phase)),))


def read_attributes(circuit: CircuitSource) -> CircuitAttributes:
    """Snapshot every attribute the calculation reads from ``circuit``."""
    return CircuitAttributes(
        name=circuit.name,
        poles=resolve_poles(circuit),
        voltage=resolve_voltage(circuit),
        apparent_current=resolve_apparent_current(circuit),
        current_phase_a=resolve_phase_current(circuit, "A"),
        current_phase_b=resolve_phase_current(circuit, "B"),
        current_phase_c=resolve_phase_current(circuit, "C"),
        power_factor=resolve_power_factor(circuit),
        raw_length=resolve_raw_length(circuit),
        wire_size_label=resolve_wire_size_label(circuit),
    )
