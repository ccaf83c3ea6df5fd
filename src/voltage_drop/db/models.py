"""Data models for circuits, conductor catalogs and voltage-drop results."""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel, to_pascal

# Marks a figure that could not be computed. Kept distinct from a legitimate 0.
NOT_COMPUTABLE = -1

UNNAMED_CIRCUIT = "Unnamed"


def _settings_aliases(name: str) -> AliasChoices:
    return AliasChoices(name, to_camel(name), to_pascal(name))


class _SettingsModel(BaseModel):
    """Base for persisted settings; accepts snake, camel and Pascal keys."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(validation_alias=_settings_aliases),
        populate_by_name=True,
    )


class WireSize(_SettingsModel):
    """Conductor size with its impedance per 1000 ft."""

    conductor_size: str = Field(description="Conductor size label, e.g. '#12' or '4/0'")
    rc: float = Field(ge=0, description="Resistance in Ω per 1000 ft")
    xc: float = Field(ge=0, description="Reactance in Ω per 1000 ft")


class WireSizeTable(_SettingsModel):
    """Ordered conductor catalog."""

    wire_sizes: list[WireSize] = Field(default_factory=list)

    @field_validator("wire_sizes", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        # Unset lists are written as null in saved settings.
        return [] if value is None else value


class TemplateTable(_SettingsModel):
    """Design template values applied to every circuit."""

    wire_reserve_percent: float = Field(
        ge=0, default=0.0, description="Slack added to the measured circuit length, in %"
    )


class ElectricalPackSettings(_SettingsModel):
    """Lookup tables consumed by the calculation. Only the first of each is used."""

    wire_size_tables: list[WireSizeTable] = Field(default_factory=list)
    template_tables: list[TemplateTable] = Field(default_factory=list)

    @field_validator("wire_size_tables", "template_tables", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value


class CircuitAttributes(BaseModel):
    """Electrical attributes read from the host model for one circuit."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    poles: int = NOT_COMPUTABLE
    voltage: float = Field(default=NOT_COMPUTABLE, description="Line voltage in V")
    apparent_current: float = Field(default=NOT_COMPUTABLE, description="Apparent current in A")
    current_phase_a: float = NOT_COMPUTABLE
    current_phase_b: float = NOT_COMPUTABLE
    current_phase_c: float = NOT_COMPUTABLE
    power_factor: float = Field(default=0.85, description="Normalized power factor, 0-1")
    raw_length: float = Field(
        default=NOT_COMPUTABLE, description="Circuit length in host length units"
    )
    wire_size_label: str | None = None


class VoltageDropCalculation(BaseModel):
    """Full breakdown of one voltage-drop calculation.

    Figures that were not reached because an input was missing keep the
    ``NOT_COMPUTABLE`` value. ``k_factor`` of 0 is a real result for
    unsupported pole counts, not a missing value.
    """

    model_config = ConfigDict(frozen=True)

    voltage: float = NOT_COMPUTABLE
    poles: int = NOT_COMPUTABLE
    current: float = NOT_COMPUTABLE
    power_factor: float = NOT_COMPUTABLE
    sin_phi: float = NOT_COMPUTABLE
    wire_size: WireSize | None = None
    length_m: float = NOT_COMPUTABLE
    length_ft: float = NOT_COMPUTABLE
    k_factor: float = NOT_COMPUTABLE
    resistive_term: float = NOT_COMPUTABLE
    reactive_term: float = NOT_COMPUTABLE
    impedance_term: float = NOT_COMPUTABLE
    voltage_drop: float = Field(default=NOT_COMPUTABLE, description="Voltage drop in V")
    voltage_drop_percent: float = Field(
        default=NOT_COMPUTABLE, description="Voltage drop as % of circuit voltage"
    )

    @property
    def is_computed(self) -> bool:
        return self.voltage_drop_percent != NOT_COMPUTABLE


class CircuitResult(BaseModel):
    """Calculation output for one circuit, in report order."""

    model_config = ConfigDict(frozen=True)

    attributes: CircuitAttributes
    current: float = Field(description="Design current picked for the calculation, in A")
    length_m: float = Field(description="Design length including reserve, in m")
    wire_size: WireSize
    calculation: VoltageDropCalculation

    @property
    def name(self) -> str | None:
        return self.attributes.name

    @property
    def display_name(self) -> str:
        name = self.attributes.name
        if name is None or not name.strip():
            return UNNAMED_CIRCUIT
        return name
