#!/usr/bin/env python3
"""
Generate a sample input workbook for trying the converter.
Run once, then: python3 run.py --convert samples/St_Mary_Alarms.xlsx
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from formatters.sample_workbook import SampleWorkbookFormatter


def create_sample(output_path: str = 'samples/St_Mary_Alarms.xlsx') -> str:
    path = SampleWorkbookFormatter().create(output_path)
    print(f"Sample workbook created: {path}")
    return path


if __name__ == '__main__':
    create_sample(sys.argv[1] if len(sys.argv) > 1 else 'samples/St_Mary_Alarms.xlsx')
