"""Run the voltage-drop calculation over a set of circuits."""

import logging
from collections.abc import Iterable
from functools import partial

from voltage_drop.calc.calculator import calculate
from voltage_drop.calc.catalog import WireSizeCatalog
from voltage_drop.calc.current import design_current
from voltage_drop.calc.length import adjust_length, reserve_percent
from voltage_drop.calc.resolver import read_attributes
from voltage_drop.db.models import CircuitResult, ElectricalPackSettings
from voltage_drop.host import CircuitSource, Unit

logger = logging.getLogger(__name__)


def sort_key(circuit: CircuitSource) -> str:
    return circuit.name or ""


class VoltageDropEngine:
    """Voltage-drop calculation bound to one set of lookup tables.

    The settings are read once on construction; evaluating a circuit does not
    modify the engine, so circuits can be evaluated in any order.
    """

    def __init__(self, settings: ElectricalPackSettings | None = None):
        self.catalog = WireSizeCatalog.from_settings(settings)
        self.reserve_percent = reserve_percent(settings)

    def evaluate(self, circuit: CircuitSource) -> CircuitResult:
        attributes = read_attributes(circuit)
        current = design_current(attributes)
        length_m = adjust_length(
            attributes.raw_length,
            self.reserve_percent,
            partial(circuit.from_internal, unit=Unit.METERS),
        )
        wire_size = self.catalog.lookup(attributes.wire_size_label)
        calculation = calculate(
            attributes.voltage,
            attributes.poles,
            current,
            attributes.power_factor,
            length_m,
            wire_size,
        )
        if not calculation.is_computed:
            logger.debug(
                "Voltage drop not computable for %r (V=%s, I=%s, L=%s)",
                circuit.name,
                attributes.voltage,
                current,
                length_m,
            )
        return CircuitResult(
            attributes=attributes,
            current=current,
            length_m=length_m,
            wire_size=wire_size,
            calculation=calculation,
        )

    def run(self, circuits: Iterable[CircuitSource]) -> list[CircuitResult]:
        """Evaluate ``circuits`` ordered by name.

        The sort is ordinal on the raw name and stable, so circuits sharing a
        name keep their input order.
        """
        results = [self.evaluate(circuit) for circuit in sorted(circuits, key=sort_key)]
        computed = sum(1 for result in results if result.calculation.is_computed)
        logger.info(
            "Calculated voltage drop for %d of %d circuits", computed, len(results)
        )
        return results
