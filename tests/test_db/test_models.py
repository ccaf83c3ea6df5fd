"""Tests for settings and result data models."""

import pytest
from pydantic import ValidationError

from voltage_drop.db.models import (
    NOT_COMPUTABLE,
    CircuitAttributes,
    CircuitResult,
    ElectricalPackSettings,
    TemplateTable,
    VoltageDropCalculation,
    WireSize,
)


def test_wire_size_accepts_pascal_and_camel_keys():
    pascal = WireSize.model_validate({"ConductorSize": "#12", "Rc": 2.0, "Xc": 0.068})
    camel = WireSize.model_validate({"conductorSize": "#12", "Rc": 2.0, "Xc": 0.068})
    snake = WireSize(conductor_size="#12", rc=2.0, xc=0.068)
    assert pascal == camel == snake


def test_wire_size_rejects_negative_resistance():
    with pytest.raises(ValidationError):
        WireSize(conductor_size="#12", rc=-2.0, xc=0.068)


def test_template_defaults():
    assert TemplateTable().wire_reserve_percent == 0.0
    assert TemplateTable.model_validate({"wireReservePercent": 5}).wire_reserve_percent == 5


def test_settings_defaults_are_empty():
    settings = ElectricalPackSettings()
    assert settings.wire_size_tables == []
    assert settings.template_tables == []


def test_settings_nested_tables(pack_settings):
    assert len(pack_settings.wire_size_tables) == 2
    assert pack_settings.wire_size_tables[0].wire_sizes[2].conductor_size == "4/0 AL"
    assert pack_settings.template_tables[0].wire_reserve_percent == 10


def test_calculation_defaults_are_not_computable():
    calc = VoltageDropCalculation()
    assert calc.voltage_drop_percent == NOT_COMPUTABLE
    assert calc.wire_size is None
    assert not calc.is_computed


def test_circuit_attributes_defaults():
    attrs = CircuitAttributes()
    assert attrs.poles == NOT_COMPUTABLE
    assert attrs.power_factor == 0.85
    assert attrs.wire_size_label is None


@pytest.mark.parametrize("name, expected", [(None, "Unnamed"), ("", "Unnamed"), ("LP-2", "LP-2")])
def test_result_display_name(name, expected):
    result = CircuitResult(
        attributes=CircuitAttributes(name=name),
        current=NOT_COMPUTABLE,
        length_m=NOT_COMPUTABLE,
        wire_size=WireSize(conductor_size="#14", rc=3.1, xc=0.073),
        calculation=VoltageDropCalculation(),
    )
    assert result.display_name == expected
    assert result.name == name
