"""
Flow Review Report - Word document for clinical sign-off

PURPOSE: Lay out every generated delivery flow in a form a charge nurse
         or clinical informaticist can read and sign, without opening
         the JSON: flow name, priority, alarms, units and the
         escalation steps

R EQUIVALENT: Like an officer::read_docx() report built with body_add_par()
and body_add_table() for each flow

AVIATION ANALOGY: Like the printed flight plan the crew initials at
briefing - same content as the FMS load, in a form people can check

AUTHOR: Glen Lewis
DATE: 2025
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH

DESTINATION_COLUMNS = ['Step', 'Delay (s)', 'Type', 'Recipients', 'Presence']


def _recipients_text(destination: Dict[str, Any]) -> str:
    targets = destination.get('functionalRoles') or destination.get('groups') or []
    names = [t.get('name', '') for t in targets]
    prefix = 'Role: ' if destination.get('recipientType') == 'functional_role' else 'Group: '
    return prefix + ', '.join(names)


def create_flow_review_report(document: Dict[str, Any], output_path: str,
                              source_name: Optional[str] = None) -> str:
    """
    Write the review report.

    PARAMETERS:
        document: Output of DocumentAssembler.assemble()
        output_path: .docx file to create (parent folders are created)
        source_name: Workbook name shown on the cover section

    RETURNS:
        str: Path written

    EXAMPLE:
        create_flow_review_report(doc, "output/St_Mary_review.docx",
                                  source_name="St_Mary_Alarms.xlsx")
    """
    doc = Document()

    # Title
    title = doc.add_heading('ALARM DELIVERY FLOW REVIEW', 0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    # Header info
    flows: List[Dict[str, Any]] = document.get('deliveryFlows', [])
    doc.add_paragraph()
    if source_name:
        doc.add_paragraph(f"Source Workbook: {source_name}")
    doc.add_paragraph(f"Configuration Version: {document.get('version', '')}")
    doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    doc.add_paragraph(f"Delivery Flows: {len(flows)}")
    doc.add_paragraph(f"Alarm Definitions: {len(document.get('alarmAlertDefinitions', []))}")

    if not flows:
        doc.add_paragraph('No delivery flows were generated.')

    for number, flow in enumerate(flows, start=1):
        doc.add_heading(f"{number}. {flow.get('name', '')}", level=2)

        doc.add_paragraph(f"Priority: {flow.get('priority') or '(not specified)'}", style='List Bullet')
        doc.add_paragraph(f"Alarms: {', '.join(flow.get('alarmsAlerts', []))}", style='List Bullet')

        units = flow.get('units', [])
        if units:
            unit_text = ', '.join(f"{u.get('name', '')} ({u.get('facilityName', '')})" for u in units)
        else:
            unit_text = '(no units linked)'
        doc.add_paragraph(f"Units: {unit_text}", style='List Bullet')

        destinations = flow.get('destinations', [])
        if not destinations:
            doc.add_paragraph('No destinations.')
            continue

        table = doc.add_table(rows=len(destinations) + 1, cols=len(DESTINATION_COLUMNS))
        table.style = 'Table Grid'

        # Header row
        hdr_cells = table.rows[0].cells
        for col, heading in enumerate(DESTINATION_COLUMNS):
            hdr_cells[col].text = heading

        for i, destination in enumerate(destinations, start=1):
            row_cells = table.rows[i].cells
            row_cells[0].text = str(destination.get('order', ''))
            row_cells[1].text = str(destination.get('delayTime', ''))
            row_cells[2].text = destination.get('destinationType', '')
            row_cells[3].text = _recipients_text(destination)
            row_cells[4].text = destination.get('presenceConfig', '')

    # Sign-off
    doc.add_heading('Sign-off', level=2)
    sig_table = doc.add_table(rows=2, cols=3)
    sig_table.style = 'Table Grid'
    sig_hdr = sig_table.rows[0].cells
    sig_hdr[0].text = 'Reviewer'
    sig_hdr[1].text = 'Signature'
    sig_hdr[2].text = 'Date'

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.save(str(output_path))
    return str(output_path)
