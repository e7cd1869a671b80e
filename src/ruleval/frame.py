"""
Row-wise validation of a pandas DataFrame.

Each row is validated as its own collect-mode session. Missing values
(NaN, None, NA) are passed to checks as None so the null-skip rules
apply to them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from .parser import RuleSpec
from .registry import RuleRegistry, default_registry
from .session import SessionConfig, ValidationResult, execute

logger = logging.getLogger('ruleval.frame')


@dataclass
class FrameReport:
    """Per-row results of a DataFrame validation."""
    frame: pd.DataFrame
    results: List[ValidationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(r.fails() for r in self.results)

    @property
    def failed_rows(self) -> List[Any]:
        """Index labels of rows with at least one failure."""
        return [label for label, r in zip(self.frame.index, self.results) if r.fails()]

    def to_frame(self) -> pd.DataFrame:
        """One row per input row: ``row``, ``passed``, ``error_count``, ``errors``."""
        return pd.DataFrame({
            'row': list(self.frame.index),
            'passed': [not r.fails() for r in self.results],
            'error_count': [len(r.errors()) for r in self.results],
            'errors': [r.failed() for r in self.results],
        })

    def valid_frame(self) -> pd.DataFrame:
        """Input rows that produced no failure."""
        mask = [not r.fails() for r in self.results]
        return self.frame.loc[mask]


def _records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    # Nullable dtypes keep integer columns with gaps as ints instead of float64
    typed = df.convert_dtypes()
    cleaned = typed.astype(object).where(typed.notna(), None)
    return cleaned.to_dict(orient='records')


def validate_frame(
    df: pd.DataFrame,
    rules: Mapping[str, RuleSpec],
    messages: Optional[Mapping[str, str]] = None,
    registry: Optional[RuleRegistry] = None,
) -> FrameReport:
    """Validate every row of ``df`` against ``rules``.

    Rule names are resolved once before the first row, so an unknown
    rule raises even for an empty frame.
    """
    config = SessionConfig(
        rules=rules,
        messages=messages or {},
        throwable=False,
        registry=registry if registry is not None else default_registry(),
    )
    config.plan()

    report = FrameReport(frame=df)
    for record in _records(df):
        report.results.append(execute(config, record))

    logger.info(f"Validated {len(df):,} rows: {len(report.failed_rows):,} with failures")
    return report
