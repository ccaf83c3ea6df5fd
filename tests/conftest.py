"""Shared fixtures for building in-memory circuits."""

import pytest

from voltage_drop.db.models import ElectricalPackSettings
from voltage_drop.host import BuiltInParameter, CircuitRecord


@pytest.fixture
def make_circuit():
    """Factory for circuits with the commonly read parameters."""

    def _make(
        name="LP-1",
        poles=None,
        voltage=None,
        power_factor=None,
        length=None,
        apparent_current=None,
        phases=(),
        wire_size=None,
        type_wire_size=None,
        **kwargs,
    ):
        builtins = {}
        if poles is not None:
            builtins[BuiltInParameter.RBS_ELEC_NUMBER_OF_POLES] = poles
        if voltage is not None:
            builtins[BuiltInParameter.RBS_ELEC_VOLTAGE] = voltage
        if power_factor is not None:
            builtins[BuiltInParameter.RBS_ELEC_POWER_FACTOR] = power_factor
        if length is not None:
            builtins[BuiltInParameter.RBS_ELEC_CIRCUIT_LENGTH_PARAM] = length
        parameters = dict(kwargs.pop("parameters", {}))
        if apparent_current is not None:
            parameters["Apparent Current"] = apparent_current
        for phase, current in zip("ABC", phases):
            parameters[f"Apparent Current Phase {phase}"] = current
        if wire_size is not None:
            parameters["EP_Wire Size"] = wire_size
        type_parameters = {}
        if type_wire_size is not None:
            type_parameters["EP_Wire Size"] = type_wire_size
        return CircuitRecord(
            name=name,
            builtins=builtins,
            parameters=parameters,
            type_parameters=type_parameters,
            **kwargs,
        )

    return _make


@pytest.fixture
def pack_settings():
    return ElectricalPackSettings.model_validate(
        {
            "WireSizeTables": [
                {
                    "WireSizes": [
                        {"ConductorSize": "#12", "Rc": 2.0, "Xc": 0.068},
                        {"ConductorSize": "#10", "Rc": 1.2, "Xc": 0.063},
                        {"ConductorSize": "4/0 AL", "Rc": 0.1, "Xc": 0.041},
                    ]
                },
                {"WireSizes": [{"ConductorSize": "#8", "Rc": 0.78, "Xc": 0.065}]},
            ],
            "TemplateTables": [{"WireReservePercent": 10}, {"WireReservePercent": 50}],
        }
    )
