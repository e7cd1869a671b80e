"""
Built-in check library.

Every check takes ``(field, value, *params)`` and returns a CheckResult.
Checks never raise for bad data and never decide how a failure is
surfaced: the session turns a FAIL into an exception or an ErrorBag
entry. Checks marked skip-on-null return SKIP for ``None``, which counts
as neither a pass nor a failure.
"""

import numbers
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from .errors import RuleConfigError


class Status(Enum):
    PASS = 'pass'
    FAIL = 'fail'
    SKIP = 'skip'


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check.

    Attributes:
        status: PASS, FAIL or SKIP.
        context: Values interpolated into the failure message.
        rule: Rule whose message describes the failure, when it is not
            the rule that was invoked.
    """
    status: Status
    context: Dict[str, Any] = field(default_factory=dict)
    rule: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status is Status.PASS

    @property
    def failed(self) -> bool:
        return self.status is Status.FAIL

    @property
    def skipped(self) -> bool:
        return self.status is Status.SKIP

    @classmethod
    def coerce(cls, outcome: Any) -> 'CheckResult':
        """Accept the plain ``bool``/``None`` returns of custom checks."""
        if isinstance(outcome, CheckResult):
            return outcome
        if outcome is None:
            return SKIPPED
        return PASSED if outcome else cls(Status.FAIL)


PASSED = CheckResult(Status.PASS)
SKIPPED = CheckResult(Status.SKIP)


def passed() -> CheckResult:
    return PASSED


def skipped() -> CheckResult:
    return SKIPPED


def failed(**context: Any) -> CheckResult:
    return CheckResult(Status.FAIL, context)


# --- Parameter and value helpers ----------------------------------------------

TRUTHY_STRINGS = frozenset({'on', 'yes', 'true', '1', 'off', 'no', 'false', '0'})

_NUMERIC_STRING = re.compile(r'^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$')


def _param(params: Tuple[str, ...], index: int) -> Optional[str]:
    """Return a parameter or None when too few were given."""
    if index < len(params) and params[index] != '':
        return params[index]
    return None


def _int_param(rule: str, params: Tuple[str, ...], index: int) -> Optional[int]:
    raw = _param(params, index)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise RuleConfigError(
            f"Rule '{rule}' expects an integer parameter, got {raw!r}"
        ) from None


def is_empty(value: Any) -> bool:
    """Emptiness as used by ``required``.

    None, '', '0', 0, 0.0, False and empty containers are empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == '' or value == '0'
    if isinstance(value, numbers.Number):
        return value == 0
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_container(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Real):
        return True
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def loosely_equal(left: Any, right: Any) -> bool:
    """Compare across str/number boundaries (``1 == '1'``, ``'1.0' == 1``)."""
    if left == right:
        return True
    if left is None or right is None:
        return False
    if is_numeric(left) and is_numeric(right):
        return float(left) == float(right)
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    return str(left) == str(right)


def has_key(container: Any, key: str) -> bool:
    if isinstance(container, Mapping):
        if key in container:
            return True
        try:
            return int(key) in container
        except ValueError:
            return False
    try:
        index = int(key)
    except ValueError:
        return False
    return 0 <= index < len(container)


# --- Checks -------------------------------------------------------------------

def required(field: str, value: Any, *params: str) -> CheckResult:
    if is_empty(value):
        return failed()
    return passed()


def max_length(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    limit = _int_param('max', params, 0)
    if limit is None or len(str(value)) <= limit:
        return passed()
    return failed(max=limit)


def min_length(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    limit = _int_param('min', params, 0)
    if limit is None or len(str(value)) >= limit:
        return passed()
    return failed(min=limit)


def length(field: str, value: Any, *params: str) -> CheckResult:
    """Length strictly between min and max; bounds are swapped if reversed."""
    if value is None:
        return skipped()
    low = _int_param('length', params, 0)
    high = _int_param('length', params, 1)
    if low is not None and high is not None and low > high:
        low, high = high, low
    size = len(str(value))
    if (low is None or size > low) and (high is None or size < high):
        return passed()
    return failed(min=low, max=high)


def boolean(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    if isinstance(value, bool) or str(value).lower() in TRUTHY_STRINGS:
        return passed()
    return failed()


def one_of(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    if any(loosely_equal(value, option) for option in params):
        return passed()
    return failed(options=', '.join(params))


def regex(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    pattern = _param(params, 0)
    if pattern is None:
        raise RuleConfigError("Rule 'regex' requires a pattern")
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise RuleConfigError(f"Rule 'regex' has an invalid pattern {pattern!r}: {exc}") from exc
    if compiled.fullmatch(str(value)):
        return passed()
    return failed(pattern=pattern)


def confirm(field: str, value: Any, *params: str, data: Mapping) -> CheckResult:
    """Value must loosely equal the value of another field in the input."""
    other = _param(params, 0)
    if other is None:
        raise RuleConfigError("Rule 'confirm' requires the name of the confirming field")
    if loosely_equal(value, data.get(other)):
        return passed()
    return failed(other=other)


def integer(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return passed()
    return failed()


def numeric(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    return passed() if is_numeric(value) else failed()


def array(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    return passed() if is_container(value) else failed()


def isset(field: str, value: Any, *params: str) -> CheckResult:
    """Every listed key must exist in the container value.

    Runs the ``array`` check first; a non-container fails with the
    ``array`` message context, a missing key with ``missing`` set.
    """
    outcome = array(field, value)
    if outcome.skipped:
        return outcome
    if outcome.failed:
        return CheckResult(Status.FAIL, outcome.context, rule='array')
    for key in params:
        if not has_key(value, key):
            return failed(missing=key)
    return passed()


def email(field: str, value: Any, *params: str) -> CheckResult:
    if value is None:
        return skipped()
    if not isinstance(value, str):
        return failed()
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return failed()
    return passed()


BUILTIN_CHECKS = {
    'required': required,
    'max': max_length,
    'min': min_length,
    'length': length,
    'bool': boolean,
    'in': one_of,
    'regex': regex,
    'confirm': confirm,
    'integer': integer,
    'numeric': numeric,
    'array': array,
    'isset': isset,
    'email': email,
}

DATA_AWARE_CHECKS = frozenset({'confirm'})
