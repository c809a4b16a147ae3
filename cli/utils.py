"""
CLI Utility Functions
=====================

Output helpers shared by the command handlers in run.py.

Status lines go to stdout; errors go to stderr so a shell redirect of the
converter's output never swallows them.
"""

import logging
import sys
from typing import Dict, Iterable, Tuple


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

RULE_WIDTH = 60


def print_header(title: str, width: int = RULE_WIDTH) -> None:
    """
    Print a title framed by rules.

    EXAMPLE:
        print_header("Load Summary: St_Mary_Alarms.xlsx")
        # ============================================================
        # LOAD SUMMARY: ST_MARY_ALARMS.XLSX
        # ============================================================
    """
    rule = "=" * width
    print(f"\n{rule}\n{title.upper()}\n{rule}")


def print_subheader(title: str) -> None:
    """Section title underlined to its own length."""
    print(f"\n{title}\n{'-' * max(len(title), 20)}")


def print_success(message: str) -> None:
    print(f"✓ {message}")


def print_error(message: str) -> None:
    """Errors go to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def print_warning(message: str) -> None:
    print(f"Warning: {message}")


def print_info(message: str) -> None:
    print(message)


def print_table_row(label: str, value: str, indent: int = 0, label_width: int = 44) -> None:
    """
    Print an aligned label/value row.

    EXAMPLE:
        print_table_row("Nurse call rows", "48", indent=1)
        #   Nurse call rows ........................ 48
    """
    prefix = "  " * indent
    print(f"{prefix}{label} {'.' * max(2, label_width - len(label))} {value}")


def print_counts(labels: Iterable[Tuple[str, str]], counts: Dict[str, int], indent: int = 1) -> None:
    """Print one aligned row per (key, label) pair, reading values from counts."""
    for key, label in labels:
        print_table_row(label, str(counts.get(key, 0)), indent=indent)


def print_list_item(item: str, indent: int = 0, bullet: str = "•") -> None:
    prefix = "  " * indent
    print(f"{prefix}{bullet} {item}")


# =============================================================================
# LOGGING
# =============================================================================

def configure_logging(verbose: bool = False) -> None:
    """Library log records to stderr: INFO by default, DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# FORMATTING HELPERS
# =============================================================================

def format_count(count: int, singular: str, plural: str = None) -> str:
    """
    Count plus noun, pluralized.

    EXAMPLE:
        format_count(1, "flow")           # "1 flow"
        format_count(3, "flow")           # "3 flows"
        format_count(2, "unit", "units")  # "2 units"
    """
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"
