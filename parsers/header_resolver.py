"""
Header Resolver - Locate the header row and map fields to columns

PURPOSE: Find which row of a sheet holds the column headers and work out
         which column carries each logical field (facility, alarm name,
         1st recipient, ...)

R EQUIVALENT: Like readxl::read_excel(skip = n) where n is discovered by
scanning the top of the sheet, followed by janitor::clean_names() and a
rename() driven by a lookup table of accepted names

AVIATION ANALOGY: Like finding the data block on a load sheet that was
filled in by a different station - the boxes are all there but the
titles above them vary, so you match on the wording you recognize

HEADER DETECTION:
    The first N rows (default 40) are scored as

        score = (alias hits x 10) + (non-empty cell count)

    and the highest-scoring row wins. Ties keep the earliest row. A sheet
    where no row scores above zero has no header at all.

AUTHOR: Glen Lewis
DATE: 2025
"""

import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from parsers.cell_reader import read_cell


# Anything that is not a lowercase letter or digit collapses to one space
_NON_ALNUM = re.compile(r'[^a-z0-9]+')

DEFAULT_SCAN_ROWS = 40


def normalize_header(text) -> str:
    """
    Normalize a header cell or alias for comparison.

    EXAMPLE:
        normalize_header("  Ringtone Device - A ")  # 'ringtone device a'
        normalize_header("EMDAN Compliant?")        # 'emdan compliant'
    """
    if text is None:
        return ''
    return _NON_ALNUM.sub(' ', str(text).lower()).strip()


class HeaderMatch:
    """
    Result of resolving one sheet's header.

    ATTRIBUTES:
        row_index: 0-based index of the header row
        columns: field name -> 0-based column index (None when unresolved)
    """

    def __init__(self, row_index: int, columns: Dict[str, Optional[int]]):
        self.row_index = row_index
        self.columns = columns

    def column_for(self, field_name: str) -> Optional[int]:
        """Column index for a field, or None if the sheet lacks it."""
        return self.columns.get(field_name)

    def missing_fields(self) -> List[str]:
        """Fields that no header cell matched."""
        return [name for name, col in self.columns.items() if col is None]

    def __repr__(self) -> str:
        return f"HeaderMatch(row_index={self.row_index}, columns={self.columns})"


class HeaderResolver:
    """
    PURPOSE: Detect the header row of a sheet and resolve field columns

    PARAMETERS:
        field_aliases: Mapping of logical field -> ordered alias list.
                       Aliases may be raw header text; they are normalized
                       here so callers can pass YAML values straight in.
        scan_rows: Size of the header search window

    EXAMPLE:
        resolver = HeaderResolver({'facility': ['Facility'],
                                   'unit_names': ['Common Unit Name']})
        match = resolver.resolve(sheet)
        if match is None:
            ...  # treat as an empty sheet
        col = match.column_for('facility')
    """

    def __init__(self, field_aliases: Mapping[str, Sequence[str]],
                 scan_rows: int = DEFAULT_SCAN_ROWS):
        self.field_aliases = {
            field_name: _dedupe([normalize_header(a) for a in aliases if normalize_header(a)])
            for field_name, aliases in field_aliases.items()
        }
        self.scan_rows = scan_rows
        self._all_aliases = {a for aliases in self.field_aliases.values() for a in aliases}

    def find_header_row(self, sheet) -> Optional[int]:
        """
        Return the 0-based index of the best-scoring row in the scan window.

        RETURNS:
            Row index, or None when no row scores above zero (blank sheet)
        """
        if sheet is None:
            return None

        best_row = None
        best_score = 0
        last_row = min(sheet.last_row, self.scan_rows - 1)

        for row_index in range(0, last_row + 1):
            score = self._score_row(self._row_headers(sheet, row_index))
            # strict > keeps the first row on ties
            if score > best_score:
                best_score = score
                best_row = row_index

        return best_row

    def map_columns(self, headers: Sequence[str]) -> Dict[str, Optional[int]]:
        """
        Map each field to the column of its first matching alias.

        PARAMETERS:
            headers: Normalized header cells of the header row

        RETURNS:
            Dict of field -> column index, None for unresolved fields
        """
        columns = {}
        for field_name, aliases in self.field_aliases.items():
            columns[field_name] = None
            for alias in aliases:
                if alias in headers:
                    columns[field_name] = headers.index(alias)
                    break
        return columns

    def resolve(self, sheet) -> Optional[HeaderMatch]:
        """
        Detect the header row and resolve every field.

        RETURNS:
            HeaderMatch, or None if the sheet is absent or has no header
        """
        row_index = self.find_header_row(sheet)
        if row_index is None:
            return None
        headers = self._row_headers(sheet, row_index)
        return HeaderMatch(row_index, self.map_columns(headers))

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _row_headers(self, sheet, row_index: int) -> List[str]:
        return [normalize_header(read_cell(sheet.cell(row_index, col)))
                for col in range(sheet.last_column + 1)]

    def _score_row(self, headers: Iterable[str]) -> int:
        hits = 0
        non_empty = 0
        for header in headers:
            if not header:
                continue
            non_empty += 1
            if header in self._all_aliases:
                hits += 1
        return hits * 10 + non_empty


def _dedupe(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return ordered
