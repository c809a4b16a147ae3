"""
JSON Formatter - Render and write configuration documents

PURPOSE: Produce the exact text the alerting platform imports and the
         review tooling diffs, so formatting must never drift:
         - two-space indentation
         - keys in insertion order (never sorted)
         - one array element per line, [] for empty arrays
         - non-ASCII text kept as-is, quotes/backslashes/control
           characters escaped

R EQUIVALENT: jsonlite::toJSON(doc, pretty = 2, auto_unbox = TRUE)
followed by writeLines()

AUTHOR: Glen Lewis
DATE: 2025
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from parsers.records import FlowType

LOGGER = logging.getLogger(__name__)

# Per-type file names used by write_split_documents()
SPLIT_FILE_NAMES = {
    FlowType.NURSE_CALLS: 'NurseCalls.json',
    FlowType.CLINICALS: 'Clinicals.json',
}


def render_document(document: Dict[str, Any]) -> str:
    """
    Render a document as pretty-printed JSON text.

    EXAMPLE:
        text = render_document({'version': '1.1.0', 'deliveryFlows': []})
        # '{\\n  "version": "1.1.0",\\n  "deliveryFlows": []\\n}'
    """
    return json.dumps(document, indent=2, ensure_ascii=False)


def write_document(document: Dict[str, Any], output_path: str) -> str:
    """
    Write a document to a file (UTF-8, trailing newline).

    PARAMETERS:
        document: Document from DocumentAssembler / transform()
        output_path: Destination file; parent folders are created

    RETURNS:
        str: Path written
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(render_document(document))
        f.write('\n')

    LOGGER.info("Wrote %s (%d flows)", output_path, len(document.get('deliveryFlows', [])))
    return str(output_path)


def write_split_documents(documents: Dict[str, Dict[str, Any]], output_dir: str) -> Dict[str, str]:
    """
    Write one file per flow type.

    PARAMETERS:
        documents: flow type -> document restricted to that type
        output_dir: Folder for NurseCalls.json / Clinicals.json

    RETURNS:
        Dict of flow type -> path written
    """
    written = {}
    for flow_type, document in documents.items():
        file_name = SPLIT_FILE_NAMES.get(flow_type)
        if file_name is None:
            raise ValueError(f"Unknown flow type: {flow_type}")
        written[flow_type] = write_document(document, str(Path(output_dir) / file_name))
    return written
