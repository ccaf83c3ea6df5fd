"""Voltage-drop formula with a full breakdown of intermediate terms.

    VD = K · I · L · (R·cosφ + X·sinφ) / 1000

with L in feet and R, X in Ω per 1000 ft. K is 2 for single-phase and two-pole
circuits (out and back along the conductor pair) and √3 for three-phase.
"""

import math

from voltage_drop.db.models import NOT_COMPUTABLE, VoltageDropCalculation, WireSize

FEET_PER_METER = 3.28084
IMPEDANCE_BASIS_FT = 1000


def _finite(value: float) -> float:
    return value if math.isfinite(value) else NOT_COMPUTABLE


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def k_factor(poles: int) -> float:
    """Topology multiplier; 0 for pole counts without a defined topology."""
    if poles in (1, 2):
        return 2.0
    if poles == 3:
        return math.sqrt(3)
    return 0.0


def calculate(
    voltage: float,
    poles: int,
    current: float,
    power_factor: float,
    length_m: float,
    wire_size: WireSize | None,
) -> VoltageDropCalculation:
    """Compute the voltage drop of one circuit.

    Parameters
    ----------
    voltage : float
        Circuit line voltage in V.
    poles : int
        Pole count of the circuit's protective device.
    current : float
        Design current in A.
    power_factor : float
        Power factor as a fraction between 0 and 1.
    length_m : float
        Design length in m, reserve included.
    wire_size : WireSize | None
        Conductor impedance, or None when unresolved.

    Returns
    -------
    VoltageDropCalculation
        Breakdown record. When a required input is missing or out of range the
        record keeps the known inputs and ``voltage_drop_percent`` is
        ``NOT_COMPUTABLE``.
    """
    known = dict(
        voltage=_finite(voltage),
        poles=poles,
        current=_finite(current),
        power_factor=_finite(power_factor),
        length_m=length_m if _positive(length_m) else NOT_COMPUTABLE,
    )
    if not (_positive(voltage) and _positive(current) and _positive(length_m)):
        return VoltageDropCalculation(**known)
    if not 0 <= power_factor <= 1:
        # sinφ is undefined outside this range.
        return VoltageDropCalculation(**known)

    sin_phi = math.sqrt(1 - power_factor**2)
    if wire_size is None:
        return VoltageDropCalculation(**known, sin_phi=sin_phi)

    length_ft = length_m * FEET_PER_METER
    k = k_factor(poles)
    resistive = wire_size.rc * power_factor
    reactive = wire_size.xc * sin_phi
    impedance = resistive + reactive
    voltage_drop = (k * current * length_ft * impedance) / IMPEDANCE_BASIS_FT

    return VoltageDropCalculation(
        **known,
        sin_phi=sin_phi,
        wire_size=wire_size,
        length_ft=length_ft,
        k_factor=k,
        resistive_term=resistive,
        reactive_term=reactive,
        impedance_term=impedance,
        voltage_drop=voltage_drop,
        voltage_drop_percent=(voltage_drop / voltage) * 100,
    )
