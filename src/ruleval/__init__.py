"""
Declarative field validation.

Rule specs such as ``"required|length:3,20"`` are parsed into
instructions, resolved against a registry of named checks and run
against a data bag, either collecting every failure or raising on the
first one.
"""

from .bag import ErrorBag
from .errors import RuleConfigError, UnknownRuleError, ValidationError, VALIDATION_ERROR_CODE
from .frame import FrameReport, validate_frame
from .messages import DEFAULT_MESSAGES, GENERIC_MESSAGE
from .parser import RuleInstruction, parse_rules
from .registry import RuleDefinition, RuleRegistry, default_registry
from .report import ValidationReport
from .rules import CheckResult, Status, failed, passed, skipped
from .session import SessionConfig, ValidationResult, Validator, run

__all__ = [
    'CheckResult',
    'DEFAULT_MESSAGES',
    'ErrorBag',
    'FrameReport',
    'GENERIC_MESSAGE',
    'RuleConfigError',
    'RuleDefinition',
    'RuleInstruction',
    'RuleRegistry',
    'SessionConfig',
    'Status',
    'UnknownRuleError',
    'VALIDATION_ERROR_CODE',
    'ValidationError',
    'ValidationReport',
    'ValidationResult',
    'Validator',
    'default_registry',
    'failed',
    'parse_rules',
    'passed',
    'run',
    'skipped',
    'validate_frame',
]
