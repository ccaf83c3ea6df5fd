"""Parameter names and database table mappings for circuit exports.

Revit can export a model to a Microsoft Access database over ODBC. Electrical
circuits land in one table and their circuit types in another; columns are the
parameter names with spaces removed. This module maps those columns back to the
parameter names and built-in identifiers the calculation reads.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from voltage_drop.host import SI_UNITS, BuiltInParameter, CircuitRecord, UnitSystem

# Named (shared/project) parameters read from the circuit.
APPARENT_CURRENT = "Apparent Current"
PHASE_CURRENT_TEMPLATE = "Apparent Current Phase {phase}"
LENGTH = "Length"
WIRE_SIZE = "EP_Wire Size"

# Export table names; these may vary by Revit version.
CIRCUIT_TABLE = "ElectricalCircuits"
CIRCUIT_TYPE_TABLE = "ElectricalCircuitTypes"

ID_COLUMN = "Id"
TYPE_ID_COLUMN = "TypeId"
NAME_COLUMN = "CircuitName"

# Column mappings: export column name → built-in parameter
BUILTIN_COLUMNS = {
    "NumberofPoles": BuiltInParameter.RBS_ELEC_NUMBER_OF_POLES,
    "Voltage": BuiltInParameter.RBS_ELEC_VOLTAGE,
    "PowerFactor": BuiltInParameter.RBS_ELEC_POWER_FACTOR,
    "CircuitLength": BuiltInParameter.RBS_ELEC_CIRCUIT_LENGTH_PARAM,
}

# Column mappings: export column name → named parameter
NAMED_COLUMNS = {
    "ApparentCurrent": APPARENT_CURRENT,
    "ApparentCurrentPhaseA": PHASE_CURRENT_TEMPLATE.format(phase="A"),
    "ApparentCurrentPhaseB": PHASE_CURRENT_TEMPLATE.format(phase="B"),
    "ApparentCurrentPhaseC": PHASE_CURRENT_TEMPLATE.format(phase="C"),
    "Length": LENGTH,
    "EP_WireSize": WIRE_SIZE,
}

TYPE_COLUMNS = {
    "EP_WireSize": WIRE_SIZE,
}


def _mapped(row: Mapping[str, Any], columns: Mapping[str, Any]) -> dict:
    """Pick the mapped columns of ``row`` that carry a value."""
    return {
        target: row[column]
        for column, target in columns.items()
        if row.get(column) is not None
    }


def circuits_from_rows(
    rows: Iterable[Mapping[str, Any]],
    type_rows: Iterable[Mapping[str, Any]] = (),
    units: UnitSystem = SI_UNITS,
) -> list[CircuitRecord]:
    """Build in-memory circuits from exported table rows.

    Parameters
    ----------
    rows : Iterable[Mapping[str, Any]]
        Circuit table rows keyed by column name.
    type_rows : Iterable[Mapping[str, Any]]
        Circuit type table rows, joined on ``TypeId``.
    units : UnitSystem
        Units the exported numeric values are stored in.

    Returns
    -------
    list[CircuitRecord]
        One circuit per row, in table order.
    """
    types = {row.get(ID_COLUMN): _mapped(row, TYPE_COLUMNS) for row in type_rows}
    circuits = []
    for row in rows:
        name = row.get(NAME_COLUMN)
        circuits.append(
            CircuitRecord(
                name=None if name is None else str(name),
                builtins=_mapped(row, BUILTIN_COLUMNS),
                parameters=_mapped(row, NAMED_COLUMNS),
                type_parameters=types.get(row.get(TYPE_ID_COLUMN), {}),
                units=units,
            )
        )
    return circuits
