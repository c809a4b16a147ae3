"""
CLI Package for the Alarm Flow Toolkit
======================================

    cli/
    ├── __init__.py     - Package exports (this file)
    ├── parser.py       - argparse definitions
    └── utils.py        - Output and logging helpers

Command handlers live in run.py.
"""

from .parser import create_parser
from .utils import (
    configure_logging,
    format_count,
    print_counts,
    print_error,
    print_header,
    print_info,
    print_list_item,
    print_subheader,
    print_success,
    print_table_row,
    print_warning,
)

__all__ = [
    'create_parser',
    'configure_logging',
    'format_count',
    'print_counts',
    'print_error',
    'print_header',
    'print_info',
    'print_list_item',
    'print_subheader',
    'print_success',
    'print_table_row',
    'print_warning',
]
