#!/usr/bin/env python3
"""
Example: Validate every row of a member export.

Builds a small DataFrame the way a CSV export would load, validates
each row as its own session, and prints the per-row outcome.

Usage:
    python examples/validate_member_export.py
"""

import sys
from pathlib import Path

import pandas as pd

# Allow imports from src/
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from ruleval import validate_frame

RULES = {
    'member_id': 'required|regex:M[0-9]{4}',
    'name': 'required|max:40',
    'email': 'required|email',
    'tier': 'in:bronze,silver,gold',
    'renewal_opt_in': 'bool',
}


def load_members() -> pd.DataFrame:
    return pd.DataFrame({
        'member_id': ['M0001', 'M0002', 'X17', 'M0004', None],
        'name': ['Alpha', 'Bravo', 'Charlie', '', 'Echo'],
        'email': ['alpha@gmail.com', 'bravo.gmail.com', 'charlie@gmail.com', 'delta@gmail.com', 'echo@gmail.com'],
        'tier': ['gold', 'silver', 'platinum', 'bronze', None],
        'renewal_opt_in': ['yes', 'no', 'on', 'maybe', None],
    })


def main():
    df = load_members()
    print(f"\n--- Validating {len(df):,} member rows ---")

    report = validate_frame(df, RULES)
    print(report.to_frame().to_string(index=False))

    print(f"\n  Rows with failures: {report.failed_rows}")
    print(f"  Clean rows:         {len(report.valid_frame()):,}")
    print()


if __name__ == '__main__':
    main()
