"""Narrow read interface to the host building model.

The calculation only needs to read parameter values of a circuit (and of its
circuit type) and to convert host values into volts and meters. Anything that
implements :class:`CircuitSource` can be fed to the engine; :class:`CircuitRecord`
is the in-memory implementation used by the database export adapter and tests.
"""

from enum import Enum
from typing import Protocol, Union

from pydantic import BaseModel, ConfigDict, Field

ParameterValue = Union[int, float, str]


class BuiltInParameter(str, Enum):
    """Host built-in parameter identifiers read by the calculation."""

    RBS_ELEC_NUMBER_OF_POLES = "RBS_ELEC_NUMBER_OF_POLES"
    RBS_ELEC_VOLTAGE = "RBS_ELEC_VOLTAGE"
    RBS_ELEC_POWER_FACTOR = "RBS_ELEC_POWER_FACTOR"
    RBS_ELEC_CIRCUIT_LENGTH_PARAM = "RBS_ELEC_CIRCUIT_LENGTH_PARAM"


class Level(str, Enum):
    """Where a named parameter lives: on the circuit itself or on its type."""

    INSTANCE = "instance"
    TYPE = "type"


class Unit(str, Enum):
    VOLTS = "volts"
    METERS = "meters"


class UnitSystem(BaseModel):
    """Scale factors from host values to volts and meters."""

    model_config = ConfigDict(frozen=True)

    meters_per_length_unit: float = Field(gt=0, default=1.0)
    internal_per_volt: float = Field(gt=0, default=1.0)

    def from_internal(self, value: float, unit: Unit) -> float:
        if unit is Unit.METERS:
            return value * self.meters_per_length_unit
        if unit is Unit.VOLTS:
            return value / self.internal_per_volt
        raise ValueError(f"Unsupported unit: {unit}")


SI_UNITS = UnitSystem()

# Revit stores lengths in feet and potentials in kg·ft²/(s³·A).
REVIT_INTERNAL_UNITS = UnitSystem(
    meters_per_length_unit=0.3048,
    internal_per_volt=1 / 0.3048**2,
)


class CircuitSource(Protocol):
    """Read access to one circuit of the host model."""

    @property
    def name(self) -> str | None: ...

    def get_builtin(self, parameter: BuiltInParameter) -> ParameterValue | None:
        """Value of a built-in parameter, or None when it has no value."""

    def lookup(self, name: str, level: Level = Level.INSTANCE) -> float | None:
        """Numeric value of a named parameter, or None."""

    def lookup_string(self, name: str, level: Level = Level.INSTANCE) -> str | None:
        """String value of a named parameter, or None."""

    def from_internal(self, value: float, unit: Unit) -> float:
        """Convert a host value into the given display unit."""


class CircuitRecord(BaseModel):
    """Circuit held in memory as plain parameter dictionaries."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    builtins: dict[BuiltInParameter, ParameterValue] = Field(default_factory=dict)
    parameters: dict[str, ParameterValue] = Field(default_factory=dict)
    type_parameters: dict[str, ParameterValue] = Field(default_factory=dict)
    units: UnitSystem = SI_UNITS

    def _named(self, level: Level) -> dict[str, ParameterValue]:
        return self.type_parameters if level is Level.TYPE else self.parameters

    def get_builtin(self, parameter: BuiltInParameter) -> ParameterValue | None:
        return self.builtins.get(parameter)

    def lookup(self, name: str, level: Level = Level.INSTANCE) -> float | None:
        value = self._named(level).get(name)
        if value is None or isinstance(value, str):
            return None
        return float(value)

    def lookup_string(self, name: str, level: Level = Level.INSTANCE) -> str | None:
        value = self._named(level).get(name)
        if value is None:
            return None
        return str(value)

    def from_internal(self, value: float, unit: Unit) -> float:
        return self.units.from_internal(value, unit)
