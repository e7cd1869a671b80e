#!/usr/bin/env python3
"""
Example: Validate a sign-up form submission.

Runs the same payload in collect-mode (every failure reported) and in
throw-mode (first failure raised), then registers a custom check.

Usage:
    python examples/validate_signup_form.py
"""

import logging
import sys
from pathlib import Path

# Allow imports from src/
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from ruleval import ValidationError, ValidationReport, Validator, run

SUBMISSION = {
    'username': 'ab',
    'email': 'ada@@example',
    'password': 'hunter22',
    'password_confirmation': 'hunter2',
    'age': '36',
    'newsletter': 'sure',
    'plan': 'gold',
    'coupon': None,
}

RULES = {
    'username': 'required|min:3|max:20|regex:[a-z_]+',
    'email': 'required|email',
    'password': 'required|length:7,64',
    'password_confirmation': 'required|confirm:password',
    'age': 'required|integer',
    'newsletter': 'bool',
    'plan': 'in:free,pro,team',
    'coupon': 'min:6',
}

MESSAGES = {
    'age.integer': 'Age must be sent as a number, not text',
}


def main():
    logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

    print("\n--- Collect mode ---")
    result = run(SUBMISSION, RULES, MESSAGES)
    report = ValidationReport('signup', result)
    report.print_summary()
    report.print_failures()
    print(f"  Valid fields: {sorted(result.valid())}")

    print("\n--- Throw mode ---")
    try:
        run(SUBMISSION, RULES, MESSAGES, throwable=True)
    except ValidationError as exc:
        print(f"  Raised [{exc.code}] on {exc.field}.{exc.rule}: {exc.message}")

    print("\n--- Custom check ---")
    v = Validator().extend(
        'not_reserved',
        lambda field, value, *reserved: value not in reserved,
        message='The {field} field may not be one of: {params}',
    )
    result = v.make({'username': 'admin'}, {'username': 'required|not_reserved:admin,root'})
    for message in result.failed():
        print(f"  {message}")
    print()


if __name__ == '__main__':
    main()
