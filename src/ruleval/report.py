"""
Validation report generation.

Wraps a ValidationResult into a human-readable report with valid/failed
counts and the collected failure messages.
"""

from dataclasses import dataclass
from typing import Dict, List

from .session import ValidationResult


@dataclass
class ValidationReport:
    """
    Presentation of a single validation run.

    Attributes:
        name: Name of this validation run.
        result: The collect-mode result being reported.
    """
    name: str
    result: ValidationResult

    @property
    def passed(self) -> bool:
        """True if no failure was recorded."""
        return not self.result.fails()

    @property
    def valid_count(self) -> int:
        return len(self.result.valid())

    @property
    def fail_count(self) -> int:
        return len(self.result.errors())

    @property
    def failures(self) -> List[str]:
        return self.result.failed()

    def to_dict(self) -> Dict:
        """Serialize the full report to a dictionary."""
        return {
            'name': self.name,
            'passed': self.passed,
            'summary': {
                'fields_received': len(self.result.get_data()),
                'valid_fields': self.valid_count,
                'failures': self.fail_count,
            },
            'valid': self.result.valid(),
            'errors': self.failures,
        }

    def print_summary(self) -> None:
        """Print a concise summary to stdout."""
        status = 'PASSED' if self.passed else 'FAILED'
        print(f"\n{'=' * 60}")
        print(f"  Validation: {self.name}")
        print(f"  Status:     {status}")
        print(f"  Valid:      {self.valid_count} fields")
        print(f"  Failures:   {self.fail_count}")
        print(f"{'=' * 60}")

    def print_failures(self) -> None:
        """Print every failure message in order."""
        if not self.failures:
            print("  No failures.")
            return

        print(f"\n  Failures ({self.fail_count}):")
        print(f"  {'-' * 56}")
        for message in self.failures:
            print(f"  FAIL  {message}")
