"""
Reports package for the Alarm Flow Toolkit

Provides the load summary and the Word review report of generated flows.
"""

from .load_summary import SUMMARY_LABELS, build_load_summary
from .flow_review_report import create_flow_review_report

__all__ = ['SUMMARY_LABELS', 'build_load_summary', 'create_flow_review_report']
