"""Exceptions raised while loading inputs for the calculation.

The calculation itself never raises for missing circuit data; these cover the
configuration and export files around it.
"""

from pathlib import Path


class SettingsError(ValueError):
    """The settings file exists but cannot be parsed into lookup tables."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid settings file {path}: {reason}")


class ExportTableError(LookupError):
    """A required table is missing from the model export database."""

    def __init__(self, table_name: str, available: list[str]):
        self.table_name = table_name
        self.available = available
        super().__init__(
            f"Table not found: {table_name} (available: {', '.join(available) or 'none'})"
        )
