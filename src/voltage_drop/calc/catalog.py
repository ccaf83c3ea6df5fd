"""Conductor size catalog lookup."""

import logging

from voltage_drop.db.models import ElectricalPackSettings, WireSize, WireSizeTable

logger = logging.getLogger(__name__)

# Smallest, highest-impedance conductor; used whenever a label cannot be matched.
DEFAULT_WIRE_SIZE = WireSize(conductor_size="#14", rc=3.1, xc=0.073)


class WireSizeCatalog:
    """Case-insensitive lookup of conductor impedances.

    Unknown, blank and unconfigured labels resolve to ``DEFAULT_WIRE_SIZE``;
    the lookup never fails.
    """

    def __init__(self, table: WireSizeTable | None = None):
        self._sizes: dict[str, WireSize] = {}
        if table is not None:
            for wire_size in table.wire_sizes:
                # First entry wins on duplicate labels.
                self._sizes.setdefault(wire_size.conductor_size.casefold(), wire_size)

    @classmethod
    def from_settings(cls, settings: ElectricalPackSettings | None) -> "WireSizeCatalog":
        if settings is None or not settings.wire_size_tables:
            return cls()
        return cls(settings.wire_size_tables[0])

    def __len__(self) -> int:
        return len(self._sizes)

    def lookup(self, label: str | None) -> WireSize:
        if label is None or not label.strip():
            return DEFAULT_WIRE_SIZE
        wire_size = self._sizes.get(label.casefold())
        if wire_size is None:
            logger.debug("Wire size %r not in catalog, using %s", label, DEFAULT_WIRE_SIZE.conductor_size)
            return DEFAULT_WIRE_SIZE
        return wire_size
