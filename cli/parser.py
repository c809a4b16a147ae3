"""
CLI Argument Parser
===================

Defines all command-line arguments for the Alarm Flow Toolkit.

Flags rather than subcommands: --convert, --summary and --generate-sample
select the operation; the remaining options modify --convert.
"""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser.

    RETURNS:
        argparse.ArgumentParser; dest names used by run.py are convert_file,
        summary_file, output, output_dir, split, all_units, review_report,
        generate_sample, aliases, verbose
    """
    parser = argparse.ArgumentParser(
        description="Alarm Flow Toolkit - Convert facility alarm workbooks to notification configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Convert a workbook:
    python3 run.py --convert "St_Mary_Alarms.xlsx" --output outputs/St_Mary.json

  Write NurseCalls.json and Clinicals.json separately:
    python3 run.py --convert "St_Mary_Alarms.xlsx" --split --output-dir outputs/

  Summarize what a workbook contains:
    python3 run.py --summary "St_Mary_Alarms.xlsx"

  Write a Word review report alongside the JSON:
    python3 run.py --convert "St_Mary_Alarms.xlsx" --review-report outputs/St_Mary_review.docx

  Generate a sample workbook:
    python3 run.py --generate-sample samples/St_Mary_Alarms.xlsx
        """
    )

    # ==== GLOBAL OPTIONS ====
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Enable verbose output")
    parser.add_argument('--aliases', type=str, metavar='YAML',
                        help="Alias table to use instead of config/field_aliases.yaml")

    # ==== CONVERT OPERATIONS ====
    parser.add_argument('--convert', dest='convert_file', type=str, metavar='WORKBOOK',
                        help="Convert an alarm workbook (.xlsx) to JSON")
    parser.add_argument('--output', type=str, metavar='JSON',
                        help="Output file for --convert (default: <workbook>.json)")
    parser.add_argument('--split', action='store_true',
                        help="Write NurseCalls.json and Clinicals.json instead of one file")
    parser.add_argument('--output-dir', type=str, metavar='DIR',
                        help="Output folder for --split (default: workbook folder)")
    parser.add_argument('--all-units', action='store_true',
                        help="Attach every unit to flows whose config group links no units")
    parser.add_argument('--review-report', type=str, metavar='DOCX',
                        help="Also write a Word review report of the generated flows")

    # ==== REPORTING ====
    parser.add_argument('--summary', dest='summary_file', type=str, metavar='WORKBOOK',
                        help="Print a load summary for a workbook without writing output")

    # ==== SAMPLES ====
    parser.add_argument('--generate-sample', type=str, metavar='XLSX',
                        help="Generate a sample input workbook")

    return parser
