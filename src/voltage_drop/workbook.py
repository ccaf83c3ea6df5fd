"""Excel export of voltage-drop results."""

import logging
from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from voltage_drop.db.models import NOT_COMPUTABLE, CircuitResult

logger = logging.getLogger(__name__)

SHEET_TITLE = "Voltage Drop"
NOT_AVAILABLE = "N/A"

HEADER_FONT = Font(name="Calibri", bold=True, size=11, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
HEADER_ALIGN = Alignment(horizontal="center", vertical="center", wrap_text=True)

# (header, number format, width, value getter)
COLUMNS = [
    ("Circuit", "@", 24, lambda r: r.display_name),
    ("Poles", "0", 8, lambda r: r.attributes.poles),
    ("Voltage (V)", "0", 10, lambda r: r.attributes.voltage),
    ("Current (A)", "0.00", 11, lambda r: r.current),
    ("Power Factor", "0.000", 11, lambda r: r.attributes.power_factor),
    ("Length (m)", "0.00", 11, lambda r: r.length_m),
    ("Wire Size", "@", 10, lambda r: r.wire_size.conductor_size),
    ("Rc (Ω/1000 ft)", "0.0000", 13, lambda r: r.wire_size.rc),
    ("Xc (Ω/1000 ft)", "0.0000", 13, lambda r: r.wire_size.xc),
    ("K", "0.000", 8, lambda r: r.calculation.k_factor),
    ("Length (ft)", "0.00", 11, lambda r: r.calculation.length_ft),
    ("sin φ", "0.0000", 9, lambda r: r.calculation.sin_phi),
    ("Resistive Term", "0.0000", 12, lambda r: r.calculation.resistive_term),
    ("Reactive Term", "0.0000", 12, lambda r: r.calculation.reactive_term),
    ("Impedance Term", "0.0000", 12, lambda r: r.calculation.impedance_term),
    ("Voltage Drop (V)", "0.0000", 13, lambda r: r.calculation.voltage_drop),
    ("Voltage Drop (%)", "0.00", 13, lambda r: r.calculation.voltage_drop_percent),
]


def write_results_sheet(ws, results: Iterable[CircuitResult]) -> int:
    """Write one row per circuit below a styled header; return the row count."""
    for col_idx, (header, _, width, _) in enumerate(COLUMNS, 1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGN
        ws.column_dimensions[get_column_letter(col_idx)].width = width

    count = 0
    for row_idx, result in enumerate(results, 2):
        for col_idx, (_, number_format, _, getter) in enumerate(COLUMNS, 1):
            value = getter(result)
            if isinstance(value, (int, float)) and value == NOT_COMPUTABLE:
                ws.cell(row=row_idx, column=col_idx, value=NOT_AVAILABLE)
                continue
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            cell.number_format = number_format
        count += 1

    # Freeze header row
    ws.freeze_panes = "A2"
    return count


def write_results_workbook(results: Iterable[CircuitResult], output_path: str | Path) -> Path:
    """Save ``results`` to a single-sheet .xlsx workbook at ``output_path``."""
    output_path = Path(output_path)
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE
    count = write_results_sheet(ws, results)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    logger.info("Saved %d circuits to %s", count, output_path)
    return output_path
