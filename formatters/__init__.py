"""
Formatters package for the Alarm Flow Toolkit

Provides output rendering:
- render_document / write_document: deterministic pretty JSON
- write_split_documents: NurseCalls.json and Clinicals.json side by side
"""

from .json_formatter import render_document, write_document, write_split_documents

__all__ = ['render_document', 'write_document', 'write_split_documents']
