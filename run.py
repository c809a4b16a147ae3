#!/usr/bin/env python3
"""
ALARM FLOW TOOLKIT CLI

PURPOSE: Command-line interface for converting facility alarm workbooks
         (Unit Breakdown, Nurse Call, Patient Monitoring sheets) into the
         notification configuration JSON the alerting platform imports

R EQUIVALENT: Like an R package's main script that routes to different
              functions based on command-line arguments

AVIATION ANALOGY: Like a flight management system interface -
                  different modes for different operations

USAGE EXAMPLES:
    # Convert a workbook to one JSON document
    python3 run.py --convert "St_Mary_Alarms.xlsx" --output outputs/St_Mary.json

    # Write NurseCalls.json and Clinicals.json
    python3 run.py --convert "St_Mary_Alarms.xlsx" --split --output-dir outputs/

    # Attach every unit to flows whose config group is not in the Unit Breakdown
    python3 run.py --convert "St_Mary_Alarms.xlsx" --all-units

    # Word review report for clinical sign-off
    python3 run.py --convert "St_Mary_Alarms.xlsx" --review-report outputs/review.docx

    # What did the workbook contain?
    python3 run.py --summary "St_Mary_Alarms.xlsx"

    # Sample workbook to try things out
    python3 run.py --generate-sample samples/St_Mary_Alarms.xlsx

AUTHOR: Glen Lewis
DATE: 2025
"""

import sys
import os
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Import CLI components from cli/ package
from cli import (
    configure_logging,
    create_parser,
    format_count,
    print_counts,
    print_error,
    print_header,
    print_info,
    print_list_item,
    print_subheader,
    print_success,
    print_warning,
)

# Import engine components
from builders.document_assembler import DocumentAssembler, extract_tables
from config import default_alias_config, load_alias_config
from formatters.json_formatter import write_document, write_split_documents
from formatters.sample_workbook import SampleWorkbookFormatter
from parsers.records import FlowType
from parsers.workbook_loader import NURSE_CALL, PATIENT_MONITORING, UNIT_BREAKDOWN, load_workbook_sheets
from reports.flow_review_report import create_flow_review_report
from reports.load_summary import SUMMARY_LABELS, build_load_summary


# ============================================================================
# HELPERS
# ============================================================================

def load_workbook_tables(workbook_path: str, aliases):
    """Read a workbook and return (LoadedTables, sheets found)."""
    sheets = load_workbook_sheets(workbook_path, aliases)
    tables = extract_tables(sheets[UNIT_BREAKDOWN], sheets[NURSE_CALL],
                            sheets[PATIENT_MONITORING], aliases)
    return tables, sheets


def report_missing_sheets(sheets) -> None:
    labels = {
        UNIT_BREAKDOWN: 'Unit Breakdown',
        NURSE_CALL: 'Nurse Call',
        PATIENT_MONITORING: 'Patient Monitoring',
    }
    for key, label in labels.items():
        if sheets.get(key) is None:
            print_warning(f"No {label} sheet found - treated as empty")


def print_summary(summary) -> None:
    print_subheader("Load summary")
    print_counts(SUMMARY_LABELS, summary)


# ============================================================================
# COMMAND HANDLERS
# ============================================================================

def handle_convert(aliases, args) -> None:
    """
    Convert a workbook to JSON.

    With --split, writes NurseCalls.json and Clinicals.json to --output-dir
    (default: the workbook's folder). Otherwise writes one document to
    --output (default: the workbook path with a .json suffix).
    """
    workbook = Path(args.convert_file)
    print(f"\nReading: {workbook}")
    tables, sheets = load_workbook_tables(str(workbook), aliases)
    report_missing_sheets(sheets)

    assembler = DocumentAssembler(version=aliases.version,
                                  all_units_fallback=args.all_units)
    document = assembler.assemble(tables)

    if args.split:
        output_dir = args.output_dir or str(workbook.parent)
        documents = {
            FlowType.NURSE_CALLS: assembler.assemble(tables, flow_type=FlowType.NURSE_CALLS),
            FlowType.CLINICALS: assembler.assemble(tables, flow_type=FlowType.CLINICALS),
        }
        written = write_split_documents(documents, output_dir)
        for flow_type, path in written.items():
            flows = len(documents[flow_type]['deliveryFlows'])
            print_success(f"{flow_type}: {format_count(flows, 'flow')} -> {path}")
    else:
        output = args.output or str(workbook.with_suffix('.json'))
        path = write_document(document, output)
        print_success(f"{format_count(len(document['deliveryFlows']), 'flow')} -> {path}")

    if args.review_report:
        path = create_flow_review_report(document, args.review_report, source_name=workbook.name)
        print_success(f"Review report -> {path}")

    summary = build_load_summary(tables, document)
    if summary['unlinked_flows']:
        print_warning(f"{format_count(summary['unlinked_flows'], 'flow')} with no linked units")
    if args.verbose:
        print_summary(summary)


def handle_summary(aliases, args) -> None:
    """Print what a workbook contains without writing output."""
    tables, sheets = load_workbook_tables(args.summary_file, aliases)

    print_header(f"Load Summary: {Path(args.summary_file).name}")
    report_missing_sheets(sheets)

    assembler = DocumentAssembler(version=aliases.version,
                                  all_units_fallback=args.all_units)
    document = assembler.assemble(tables)
    print_summary(build_load_summary(tables, document))

    print_subheader("Delivery flows")
    if not document['deliveryFlows']:
        print_info("  (none)")
    for flow in document['deliveryFlows']:
        print_list_item(flow['name'], indent=1)


def handle_generate_sample(args) -> None:
    """Write the sample input workbook."""
    path = SampleWorkbookFormatter().create(args.generate_sample)
    print_success(f"Sample workbook created: {path}")


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None):
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        if args.generate_sample:
            handle_generate_sample(args)
            return

        if not (args.convert_file or args.summary_file):
            parser.print_help()
            return

        aliases = load_alias_config(args.aliases) if args.aliases else default_alias_config()

        if args.convert_file:
            handle_convert(aliases, args)

        elif args.summary_file:
            handle_summary(aliases, args)

    except (FileNotFoundError, ValueError, ImportError) as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
