"""
Validation session.

``run()`` validates one data bag against per-field rule specs and
returns a fresh ValidationResult. The configuration is frozen before any
check executes; every rule name is resolved up front so an unknown rule
fails before any data is looked at.

Usage:
    result = run(
        {'name': 'Ada', 'age': '36'},
        {'name': 'required|max:20', 'age': 'required|numeric'},
        messages={'age.numeric': 'Age must be a number'},
    )
    if result.fails():
        print(result.failed())
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .bag import ErrorBag
from .errors import ValidationError
from .messages import GENERIC_MESSAGE, format_message
from .parser import RuleInstruction, RuleSpec, parse_rules
from .registry import RuleDefinition, RuleRegistry, default_registry
from .rules import CheckResult

logger = logging.getLogger('ruleval.session')

Step = Tuple[RuleInstruction, RuleDefinition]


@dataclass(frozen=True)
class SessionConfig:
    """Immutable configuration for one validation run.

    Attributes:
        rules: Rule spec per field, iterated in declaration order.
        messages: Overrides keyed ``"<field>.<rule>"``.
        throwable: Raise on the first failure instead of collecting.
        registry: Registry used to resolve rule names.
    """
    rules: Mapping[str, RuleSpec]
    messages: Mapping[str, str] = field(default_factory=dict)
    throwable: bool = False
    registry: RuleRegistry = field(default_factory=default_registry)

    def plan(self) -> List[Tuple[str, List[Step]]]:
        """Parse every spec and resolve every rule name.

        Raises:
            UnknownRuleError: If any instruction names an unregistered rule.
        """
        return [
            (key, [(ins, self.registry.resolve(ins.name)) for ins in parse_rules(spec)])
            for key, spec in self.rules.items()
        ]


class ValidationResult:
    """Outcome of one run: valid subset, error bag and the inputs."""

    def __init__(self, data: Mapping[str, Any], messages: Mapping[str, str]):
        self._data = dict(data)
        self._messages = dict(messages)
        self._valid: Dict[str, Any] = {}
        self._errors = ErrorBag()

    def _accept(self, key: str, value: Any) -> None:
        self._valid[key] = value

    def get_data(self, key: Optional[str] = None) -> Any:
        """Return the whole input bag, or one value (None if missing)."""
        if key is None:
            return dict(self._data)
        return self._data.get(key)

    def get_message(self, key: str, default: str = GENERIC_MESSAGE) -> str:
        return self._messages.get(key, default)

    def errors(self) -> ErrorBag:
        return self._errors

    def valid(self) -> Dict[str, Any]:
        """Fields for which at least one rule passed."""
        return dict(self._valid)

    def fails(self) -> bool:
        return not self._errors.is_empty()

    def failed(self) -> List[str]:
        return self._errors.all()

    def __repr__(self) -> str:
        return f"ValidationResult(valid={list(self._valid)}, errors={len(self._errors)})"


def _invoke(rule: RuleDefinition, key: str, value: Any, params: Tuple[str, ...],
            data: Mapping[str, Any]) -> CheckResult:
    if rule.pass_data:
        return CheckResult.coerce(rule.check(key, value, *params, data=data))
    return CheckResult.coerce(rule.check(key, value, *params))


def report_failure(config: SessionConfig, result: ValidationResult, key: str,
                   rule_name: str, outcome: CheckResult, params: Tuple[str, ...]) -> bool:
    """Resolve the failure message, then raise or record it.

    Returns False so callers can propagate the non-pass status.

    Raises:
        ValidationError: In throw-mode.
    """
    override = config.messages.get(f"{key}.{rule_name}")
    if override is not None:
        message = override
    else:
        context = {'params': ', '.join(params), **outcome.context}
        message = format_message(config.registry.message_for(rule_name), key, context)

    if config.throwable:
        raise ValidationError(message, field=key, rule=rule_name)
    result.errors().push(message)
    return False


def execute(config: SessionConfig, data: Mapping[str, Any]) -> ValidationResult:
    """Run a configured session against ``data``."""
    plan = config.plan()
    result = ValidationResult(data, config.messages)

    for key, steps in plan:
        value = data.get(key)
        for instruction, rule in steps:
            outcome = _invoke(rule, key, value, instruction.params, data)
            logger.debug(f"{key}.{instruction.name} -> {outcome.status.value}")
            if outcome.passed:
                result._accept(key, value)
            elif outcome.failed:
                try:
                    report_failure(config, result, key, outcome.rule or instruction.name,
                                   outcome, instruction.params)
                except ValidationError:
                    logger.warning(f"Validation aborted on {key}.{instruction.name}")
                    raise

    logger.debug(
        f"Validated {len(plan)} fields: {len(result.valid())} valid, {len(result.errors())} errors"
    )
    return result


def run(
    data: Mapping[str, Any],
    rules: Mapping[str, RuleSpec],
    messages: Optional[Mapping[str, str]] = None,
    throwable: bool = False,
    registry: Optional[RuleRegistry] = None,
) -> ValidationResult:
    """Validate ``data`` against ``rules`` and return a fresh result.

    Args:
        data: Input values keyed by field name.
        rules: Rule spec per field (string or list).
        messages: Overrides keyed ``"<field>.<rule>"``.
        throwable: Raise ValidationError on the first failure.
        registry: Registry to resolve rule names; built-ins by default.

    Raises:
        ValidationError: First failure, in throw-mode.
        UnknownRuleError: A rule name is not registered (either mode).
        RuleConfigError: A rule parameter cannot be used.
    """
    config = SessionConfig(
        rules=rules,
        messages=messages or {},
        throwable=throwable,
        registry=registry if registry is not None else default_registry(),
    )
    return execute(config, data)


class Validator:
    """
    Reusable, chainable front end over ``run()``.

    Each Validator owns its registry, so ``extend`` never leaks custom
    rules into other validators.

    Usage:
        v = Validator().set_throwable(True)
        v.extend('even', lambda field, value, *p: int(value) % 2 == 0)
        result = v.make({'n': 4}, {'n': 'required|even'})
    """

    def __init__(self, registry: Optional[RuleRegistry] = None, throwable: bool = False):
        self._registry = registry.copy() if registry is not None else default_registry()
        self._throwable = throwable

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def is_throwable(self) -> bool:
        return self._throwable

    def set_throwable(self, throwable: bool) -> 'Validator':
        self._throwable = throwable
        return self

    def extend(self, name: str, check: Callable[..., object], message: Optional[str] = None,
               pass_data: bool = False, replace: bool = False) -> 'Validator':
        """Register a custom check on this validator's registry."""
        self._registry.register(name, check, message=message, pass_data=pass_data, replace=replace)
        return self

    def make(self, data: Mapping[str, Any], rules: Mapping[str, RuleSpec],
             messages: Optional[Mapping[str, str]] = None) -> ValidationResult:
        return run(data, rules, messages, throwable=self._throwable, registry=self._registry)
