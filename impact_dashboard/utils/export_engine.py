"""
Impact Dashboard - Export Engine
Writes the projection table as CSV and as a formatted Excel workbook.
"""

import io
import zipfile
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from scenario_parameters import COMMON, METRICS
from utils.projection_engine import projections_frame


SHEET_NAME = "PROJECTIONS"
NUMBER_FORMATS = {
    'usd': '$#,##0',
    'count': '#,##0',
    'pct': '0.0"%"',
}


def _export_columns():
    """(column key, header) pairs in export order."""
    columns = [('company_name', 'Company'), ('component', 'Component'), ('year', 'Year')]
    columns += [(field, meta['label']) for field, meta in METRICS.items()]
    return columns


def generate_projections_csv(component: Optional[str] = None) -> str:
    """Projection table as CSV text, optionally limited to one component."""
    df = projections_frame(component)
    columns = _export_columns()
    df = df[[key for key, _ in columns]].rename(columns=dict(columns))
    return df.to_csv(index=False)


def create_projections_workbook(component: Optional[str] = None) -> bytes:
    """Projection table as an .xlsx workbook (one header row, one row per company/year)."""
    df = projections_frame(component)
    columns = _export_columns()

    title_font = Font(bold=True, size=14, color="1F4E79")
    header_font = Font(bold=True, color="FFFFFF")
    header_fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")

    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    scope = component or "All components"
    years = COMMON['YEARS']
    ws['A1'] = f"Projected Supply-Chain Impact {years[0]}-{years[-1]} ({scope})"
    ws['A1'].font = title_font
    ws['A2'] = "Hypothetical scenario - illustrative values only"
    ws['A2'].font = Font(italic=True, color="666666")

    header_row = 4
    for col_idx, (_, header) in enumerate(columns, start=1):
        cell = ws.cell(row=header_row, column=col_idx, value=header)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal='center', wrap_text=True)

    for row_offset, record in enumerate(df.to_dict('records'), start=1):
        for col_idx, (key, _) in enumerate(columns, start=1):
            value = record[key]
            if key == 'year':
                value = int(value)
            cell = ws.cell(row=header_row + row_offset, column=col_idx, value=value)
            if key in METRICS:
                cell.number_format = NUMBER_FORMATS[METRICS[key]['unit']]

    ws.freeze_panes = ws.cell(row=header_row + 1, column=1)
    ws.column_dimensions['A'].width = 22
    ws.column_dimensions['B'].width = 18
    ws.column_dimensions['C'].width = 8
    for col_idx in range(4, len(columns) + 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = 16

    buffer = io.BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer.getvalue()


def create_export_zip(component: Optional[str] = None) -> bytes:
    """Create a ZIP file with the projection table as CSV and Excel."""
    buffer = io.BytesIO()

    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr('Impact_Projections.csv', generate_projections_csv(component))
        zf.writestr('Impact_Projections.xlsx', create_projections_workbook(component))

    buffer.seek(0)
    return buffer.getvalue()
