"""Tests for design current estimation."""

import pytest

from voltage_drop.calc.current import (
    design_current,
    estimate_current,
    three_pole_current,
    two_pole_current,
)
from voltage_drop.calc.engine import VoltageDropEngine
from voltage_drop.db.models import NOT_COMPUTABLE, CircuitAttributes


def test_single_pole_uses_apparent_current(make_circuit):
    circuit = make_circuit(apparent_current=12.5, phases=(20, 20, 20))
    assert estimate_current(circuit, 1) == 12.5


def test_single_pole_without_apparent_current(make_circuit):
    assert estimate_current(make_circuit(), 1) == NOT_COMPUTABLE


@pytest.mark.parametrize("poles", [0, 4, -1])
def test_unsupported_pole_count(make_circuit, poles):
    circuit = make_circuit(apparent_current=10, phases=(10, 10, 10))
    assert estimate_current(circuit, poles) == NOT_COMPUTABLE


def test_two_pole_balanced_uses_apparent(make_circuit):
    circuit = make_circuit(apparent_current=9.0, phases=(10.0, 10.0005))
    assert estimate_current(circuit, 2) == 9.0


def test_two_pole_unbalanced_uses_larger_phase(make_circuit):
    assert estimate_current(make_circuit(apparent_current=9.0, phases=(8.0, 11.0)), 2) == 11.0
    assert estimate_current(make_circuit(apparent_current=9.0, phases=(11.0, 8.0)), 2) == 11.0


def test_two_pole_missing_phase_uses_apparent(make_circuit):
    assert estimate_current(make_circuit(apparent_current=9.0, phases=(8.0,)), 2) == 9.0


def test_two_pole_invalid_phase():
    assert two_pole_current(9.0, 0.0, 11.0) == 9.0


def test_three_pole_balanced_uses_apparent(make_circuit):
    circuit = make_circuit(apparent_current=10.0, phases=(10.0, 10.0004, 9.9998))
    assert estimate_current(circuit, 3) == 10.0


def test_three_pole_unbalanced_uses_maximum(make_circuit):
    circuit = make_circuit(apparent_current=10.5, phases=(10.0, 10.0, 12.0))
    assert estimate_current(circuit, 3) == 12.0


@pytest.mark.parametrize(
    "phases, expected",
    [((14.0, 10.0, 12.0), 14.0), ((10.0, 14.0, 12.0), 14.0), ((10.0, 12.0, 14.0), 14.0)],
)
def test_three_pole_each_phase_can_win(phases, expected):
    assert three_pole_current(11.0, *phases) == expected


def test_three_pole_tied_high_phases_use_apparent():
    assert three_pole_current(11.0, 12.0, 12.0, 10.0) == 11.0


def test_three_pole_missing_phase_uses_apparent(make_circuit):
    circuit = make_circuit(apparent_current=10.0, phases=(10.0, 12.0))
    assert estimate_current(circuit, 3) == 10.0


def test_three_pole_without_any_current(make_circuit):
    assert estimate_current(make_circuit(), 3) == NOT_COMPUTABLE


def test_design_current_from_snapshot():
    attrs = CircuitAttributes(
        poles=3,
        apparent_current=10.5,
        current_phase_a=10.0,
        current_phase_b=10.0,
        current_phase_c=12.0,
    )
    assert design_current(attrs) == 12.0
    assert design_current(attrs.model_copy(update={"poles": 1})) == 10.5
    assert design_current(attrs.model_copy(update={"poles": 4})) == NOT_COMPUTABLE


def test_engine_uses_attribute_snapshot(make_circuit):
    circuit = make_circuit(
        poles=2, voltage=208, length=20, apparent_current=20, phases=(20.0, 24.0)
    )
    result = VoltageDropEngine().evaluate(circuit)
    assert result.current == design_current(result.attributes) == 24.0
