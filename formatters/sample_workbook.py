"""
Sample Workbook Formatter - Generate an example input workbook

PURPOSE: Write a small three-sheet workbook (Unit Breakdown, Nurse Call,
         Patient Monitoring) in the layout facilities actually send:
         a title block above the header row, styled headers, and
         rows that exercise bundling, mixed recipients and fail-safe
         groups

R EQUIVALENT: Like openxlsx::createWorkbook() + writeData(startRow = 3)
for each sheet

AVIATION ANALOGY: Like a sample weight-and-balance form filled in for
training - real layout, made-up aircraft

AUTHOR: Glen Lewis
DATE: 2025
"""

from pathlib import Path
from typing import List, Sequence

# openpyxl for Excel generation
try:
    from openpyxl import Workbook
    from openpyxl.styles import Font, PatternFill
    from openpyxl.utils import get_column_letter
    OPENPYXL_AVAILABLE = True
except ImportError:
    OPENPYXL_AVAILABLE = False


# =============================================================================
# SAMPLE CONTENT
# =============================================================================

UNIT_HEADERS = [
    'Facility', 'Common Unit Name', 'Nurse Call Configuration Group',
    'Patient Monitoring Configuration Group', 'No Caregiver Alert Number or Group',
]

UNIT_ROWS = [
    ['St. Mary', '4 West, 4 East', 'NC-4W', 'PM-4W', 'VGroup: House Supervisor'],
    ['St. Mary', 'ICU', 'NC-ICU', 'PM-ICU', ''],
    ['St. Mary', '', '', '', ''],
]

FLOW_HEADERS = [
    'Configuration Group', 'Common Alert or Alarm Name', 'Sending System Alert Name',
    'Priority', 'Device - A', 'Ringtone Device - A', 'Response Options',
    'Time to 1st Recipient', '1st Recipient',
    'Time to 2nd Recipient', '2nd Recipient',
    'Time to 3rd Recipient', '3rd Recipient',
    'Time to 4th Recipient', '4th Recipient',
    'Time to 5th Recipient', '5th Recipient',
]

NURSE_CALL_ROWS = [
    ['NC-4W', 'Call Bell', 'CALL_BELL', 'Medium', 'Badge', 'Tone 1', 'Accept, Escalate',
     0, 'VAssign: [Room] Nurse', 60, 'VGroup: Charge RN', '', '', '', '', '', ''],
    ['NC-4W', 'Bed Alarm', 'BED_EXIT', 'Medium', 'Badge', 'Tone 1', 'Accept, Escalate',
     0, 'VAssign: [Room] Nurse', 60, 'VGroup: Charge RN', '', '', '', '', '', ''],
    ['NC-4W', 'Code Blue', 'CODE_BLUE', 'High(Edge)', 'Badge', 'Tone 5', 'No Response',
     0, 'VGroup: Code Team; VAssign: [Room] Nurse', '', '', '', '', '', '', '', ''],
    ['NC-ICU', 'Toilet Assist', '', 'Low', 'Badge', '', 'Accept',
     '30 sec', 'VAssign: [Room] CNA', '2m', 'VAssign: [Room] Nurse', '', '', '', '', '', ''],
]

CLINICAL_ROWS = [
    ['PM-4W', 'SpO2 Low', 'SPO2_LOW', 'High', 'Badge', '', 'No Response',
     0, 'VAssign: [Room] Nurse', '1:30', 'VGroup: Charge RN', '', '', '', '', '', ''],
    ['PM-4W', 'HR High', 'HR_HIGH', 'High', 'Badge', '', 'No Response',
     0, 'VAssign: [Room] Nurse', '1:30', 'VGroup: Charge RN', '', '', '', '', '', ''],
    ['PM-ICU', 'Leads Off', '', 'Low', 'Badge', 'Vocera Tone 2', 'No Response',
     0, 'VGroup: ICU Monitor Tech', '', '', '', '', '', '', '', ''],
]


class SampleWorkbookFormatter:
    """
    PURPOSE: Write the sample input workbook

    EXAMPLE:
        path = SampleWorkbookFormatter().create("samples/St_Mary_Alarms.xlsx")
    """

    def __init__(self):
        if not OPENPYXL_AVAILABLE:
            raise ImportError("openpyxl required. Install with: pip install openpyxl")

        # Style definitions (same scheme as the other Excel outputs)
        self.title_font = Font(bold=True, size=14)
        self.header_fill = PatternFill(start_color="2F5496", end_color="2F5496", fill_type="solid")
        self.header_font = Font(color="FFFFFF", bold=True, size=11)

    def create(self, output_path: str, facility: str = 'St. Mary') -> str:
        """
        Write the workbook.

        PARAMETERS:
            output_path: .xlsx file to create (parent folders are created)
            facility: Facility name shown in each title block

        RETURNS:
            str: Path written
        """
        wb = Workbook()
        wb.remove(wb.active)  # Remove default sheet

        self._write_sheet(wb, 'Unit Breakdown', f"{facility} - Unit Breakdown",
                          UNIT_HEADERS, UNIT_ROWS)
        self._write_sheet(wb, 'Nurse Call', f"{facility} - Nurse Call Alarms",
                          FLOW_HEADERS, NURSE_CALL_ROWS)
        self._write_sheet(wb, 'Patient Monitoring', f"{facility} - Patient Monitoring Alarms",
                          FLOW_HEADERS, CLINICAL_ROWS)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(str(output_path))

        return str(output_path)

    def _write_sheet(self, wb, sheet_name: str, title: str,
                     headers: Sequence[str], rows: List[list]) -> None:
        """Title on row 1, blank row 2, headers on row 3, data from row 4."""
        ws = wb.create_sheet(sheet_name)

        ws.cell(row=1, column=1, value=title).font = self.title_font

        for col, header in enumerate(headers, 1):
            cell = ws.cell(row=3, column=col, value=header)
            cell.fill = self.header_fill
            cell.font = self.header_font
            ws.column_dimensions[get_column_letter(col)].width = max(14, len(header) + 2)

        for row_num, values in enumerate(rows, 4):
            for col, value in enumerate(values, 1):
                if value != '':
                    ws.cell(row=row_num, column=col, value=value)

        ws.freeze_panes = 'A4'
