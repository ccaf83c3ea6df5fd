"""Read circuits from a Revit ODBC export in Microsoft Access (.mdb/.accdb).

Uses pyodbc with the Microsoft Access ODBC driver (available on Windows).
"""

import logging
from pathlib import Path

import pyodbc

from voltage_drop.db.schemas import (
    BUILTIN_COLUMNS,
    CIRCUIT_TABLE,
    CIRCUIT_TYPE_TABLE,
    NAME_COLUMN,
    NAMED_COLUMNS,
    circuits_from_rows,
)
from voltage_drop.errors import ExportTableError
from voltage_drop.host import SI_UNITS, CircuitRecord, UnitSystem

logger = logging.getLogger(__name__)

ACCESS_DRIVER = "Microsoft Access Driver (*.mdb, *.accdb)"


def _connection_string(db_path: Path) -> str:
    """Build an ODBC connection string for an Access database."""
    suffix = db_path.suffix.lower()
    if suffix not in (".accdb", ".mdb"):
        raise ValueError(f"Unsupported file extension: {suffix}")
    return f"DRIVER={{{ACCESS_DRIVER}}};DBQ={db_path};"


def connect(db_path: str | Path) -> pyodbc.Connection:
    """Open a connection to an exported model database.

    Parameters
    ----------
    db_path : str | Path
        Path to the .mdb or .accdb file.

    Returns
    -------
    pyodbc.Connection
        An open ODBC connection.

    Raises
    ------
    FileNotFoundError
        If the database file does not exist.
    ValueError
        If the file is not an Access database.
    pyodbc.Error
        If the ODBC connection fails.
    """
    db_path = Path(db_path)
    if not db_path.exists():
        raise FileNotFoundError(f"Database not found: {db_path}")
    conn_str = _connection_string(db_path)
    return pyodbc.connect(conn_str)


def list_tables(conn: pyodbc.Connection) -> list[str]:
    """List all user tables in the database, excluding system tables."""
    cursor = conn.cursor()
    tables = []
    for row in cursor.tables(tableType="TABLE"):
        name = row.table_name
        if not name.startswith("MSys"):
            tables.append(name)
    return sorted(tables)


def list_columns(conn: pyodbc.Connection, table_name: str) -> list[dict[str, str]]:
    """List columns of ``table_name`` as dicts with 'name' and 'type_name' keys."""
    cursor = conn.cursor()
    return [
        {"name": row.column_name, "type_name": row.type_name}
        for row in cursor.columns(table=table_name)
    ]


def read_table(conn: pyodbc.Connection, table_name: str) -> list[dict]:
    """Read all rows from a table as a list of dicts keyed by column name."""
    cursor = conn.cursor()
    cursor.execute(f"SELECT * FROM [{table_name}]")  # noqa: S608
    col_names = [desc[0] for desc in cursor.description]
    rows = []
    for row in cursor.fetchall():
        rows.append(dict(zip(col_names, row, strict=True)))
    return rows


def missing_columns(conn: pyodbc.Connection, table_name: str) -> list[str]:
    """Mapped circuit columns that ``table_name`` does not have, sorted."""
    present = {column["name"] for column in list_columns(conn, table_name)}
    expected = {NAME_COLUMN, *BUILTIN_COLUMNS, *NAMED_COLUMNS}
    return sorted(expected - present)


def read_circuits(
    conn: pyodbc.Connection,
    units: UnitSystem = SI_UNITS,
    table_name: str = CIRCUIT_TABLE,
    type_table_name: str = CIRCUIT_TYPE_TABLE,
) -> list[CircuitRecord]:
    """Read every exported circuit joined with its circuit type.

    Parameters
    ----------
    conn : pyodbc.Connection
        An open database connection.
    units : UnitSystem
        Units the export stores lengths and voltages in.
    table_name : str
        Circuit table name.
    type_table_name : str
        Circuit type table name; optional in the export.

    Returns
    -------
    list[CircuitRecord]
        Circuits in table order.

    Raises
    ------
    ExportTableError
        If the circuit table is not in the database.
    """
    tables = list_tables(conn)
    if table_name not in tables:
        raise ExportTableError(table_name, tables)
    missing = missing_columns(conn, table_name)
    if missing:
        logger.warning("Export table %s has no column for: %s", table_name, ", ".join(missing))
    rows = read_table(conn, table_name)
    type_rows = read_table(conn, type_table_name) if type_table_name in tables else []
    logger.info("Read %d circuits and %d circuit types", len(rows), len(type_rows))
    return circuits_from_rows(rows, type_rows, units)
