"""Design length of a circuit including the configured reserve."""

import math
from collections.abc import Callable

from voltage_drop.db.models import NOT_COMPUTABLE, ElectricalPackSettings


def reserve_percent(settings: ElectricalPackSettings | None) -> float:
    """Wire reserve from the first template table, 0 when none is configured."""
    if settings is None or not settings.template_tables:
        return 0.0
    return settings.template_tables[0].wire_reserve_percent


def adjust_length(
    raw_length: float,
    reserve: float = 0.0,
    to_meters: Callable[[float], float] | None = None,
) -> float:
    """Convert ``raw_length`` to meters and add ``reserve`` percent.

    Returns ``NOT_COMPUTABLE`` for unresolved or non-positive lengths.
    ``to_meters`` may be omitted when the length is already in meters.
    """
    if not math.isfinite(raw_length) or raw_length <= 0:
        return NOT_COMPUTABLE
    meters = to_meters(raw_length) if to_meters is not None else raw_length
    return meters * (1 + reserve / 100.0)
