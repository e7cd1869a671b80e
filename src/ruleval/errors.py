"""
Exception types raised by the validation engine.

Data failures (a value breaking a rule in throw-mode) and configuration
failures (a rule spec that cannot be executed) are kept as separate
hierarchies so callers can tell bad input from a bad rule table.
"""

from typing import Optional

VALIDATION_ERROR_CODE = 603


class ValidationError(Exception):
    """Raised in throw-mode on the first failing check.

    Attributes:
        message: Resolved failure message.
        code: Numeric error code, always 603.
        field: Field whose check failed.
        rule: Name of the failing rule.
    """

    def __init__(
        self,
        message: str,
        code: int = VALIDATION_ERROR_CODE,
        field: Optional[str] = None,
        rule: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field
        self.rule = rule


class RuleConfigError(Exception):
    """A rule spec or registration that cannot be executed."""


class UnknownRuleError(RuleConfigError, KeyError):
    """Rule name has no registered check."""

    def __init__(self, name: str):
        super().__init__(f"Rule '{name}' is not registered")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
