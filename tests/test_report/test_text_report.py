"""Tests for the plain-text report."""

import pytest

from voltage_drop.calc.engine import VoltageDropEngine
from voltage_drop.report import format_circuit, format_report


@pytest.fixture
def three_phase_result(make_circuit):
    circuit = make_circuit(
        name="MDP - 1", poles=3, voltage=400, power_factor=0.85, length=50, apparent_current=10
    )
    return VoltageDropEngine().evaluate(circuit)


def test_circuit_block(three_phase_result):
    lines = format_circuit(three_phase_result)

    assert lines[0] == "CIRCUIT: MDP - 1"
    assert "  - Poles: 3" in lines
    assert "  - Voltage: 400 V" in lines
    assert "  - Current: 10.00 A" in lines
    assert "  - Power factor: 0.850" in lines
    assert "  - Circuit length: 50.00 m" in lines
    assert "  - Wire size: #14" in lines
    assert "  - Resistance (Rc): 3.1000 Ohm/1000 ft" in lines
    assert "  - Reactance (Xc): 0.0730 Ohm/1000 ft" in lines
    assert "  - K factor: 1.732" in lines
    assert "  - Length in feet: 164.04 ft" in lines
    assert "  - sin(phi): 0.5268" in lines
    assert "  - Resistive term: 2.6350" in lines
    assert "  - Reactive term: 0.0385" in lines
    assert "  - Impedance term: 2.6735" in lines
    assert lines[-1] == "  - VOLTAGE DROP: 1.90%"


def test_parameter_groups_come_first(three_phase_result):
    lines = format_circuit(three_phase_result)
    assert lines.index("  PARAMETERS:") < lines.index("  VOLTAGE DROP:")


def test_uncomputable_figures_print_sentinel(make_circuit):
    result = VoltageDropEngine().evaluate(make_circuit(name="", poles=1, voltage=120))
    lines = format_circuit(result)

    assert lines[0] == "CIRCUIT: Unnamed"
    assert "  - Current: -1.00 A" in lines
    assert "  - Circuit length: -1.00 m" in lines
    assert lines[-1] == "  - VOLTAGE DROP: -1.00%"


def test_uncomputable_figures_with_placeholder(make_circuit):
    result = VoltageDropEngine().evaluate(make_circuit(poles=4, voltage=480, length=10))
    lines = format_circuit(result, not_available="N/A")

    assert "  - Poles: 4" in lines
    assert "  - Current: N/A A" in lines
    assert "  - K factor: N/A" in lines
    assert lines[-1] == "  - VOLTAGE DROP: N/A%"


def test_report_separates_circuits(make_circuit):
    engine = VoltageDropEngine()
    results = engine.run([make_circuit(name="B"), make_circuit(name="A")])
    text = format_report(results)

    assert text.index("CIRCUIT: A") < text.index("CIRCUIT: B")
    assert "%\n\nCIRCUIT: B" in text
    assert text.endswith("%\n")


def test_empty_report():
    assert format_report([]) == ""
