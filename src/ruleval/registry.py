"""
Name-to-check registry.

Resolution is by exact name. A registry starts with the built-in checks
and can be extended with custom checks that follow the same
``(field, value, *params)`` convention.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from .errors import RuleConfigError, UnknownRuleError
from .messages import DEFAULT_MESSAGES, GENERIC_MESSAGE
from .rules import BUILTIN_CHECKS, DATA_AWARE_CHECKS

Check = Callable[..., object]


@dataclass(frozen=True)
class RuleDefinition:
    """A registered check and its default message template.

    Attributes:
        name: Rule name used in rule specs.
        check: Callable invoked as ``check(field, value, *params)``.
        message: Default failure template.
        pass_data: If True the whole input bag is passed as ``data=``.
    """
    name: str
    check: Check
    message: str = GENERIC_MESSAGE
    pass_data: bool = False


class RuleRegistry:
    """
    Registry of named checks.

    Usage:
        registry = RuleRegistry()
        registry.register('even', lambda field, value, *p: value % 2 == 0,
                          message='The {field} field must be even')
        registry.resolve('even')
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None, builtins: bool = True):
        """Initialize the registry.

        Args:
            messages: Default templates keyed by rule name. Replaces the
                English defaults when given.
            builtins: Register the built-in check library.
        """
        self._messages = dict(DEFAULT_MESSAGES if messages is None else messages)
        self._rules: Dict[str, RuleDefinition] = {}
        self._log = logging.getLogger('ruleval.registry')

        if builtins:
            for name, check in BUILTIN_CHECKS.items():
                self.register(name, check, pass_data=name in DATA_AWARE_CHECKS)

    def register(
        self,
        name: str,
        check: Check,
        message: Optional[str] = None,
        pass_data: bool = False,
        replace: bool = False,
    ) -> 'RuleRegistry':
        """Register a check under ``name``.

        Raises:
            RuleConfigError: If the name is taken and ``replace`` is False,
                or the name contains a rule-spec separator.
        """
        if not name or any(sep in name for sep in '|:,'):
            raise RuleConfigError(f"Invalid rule name {name!r}")
        if name in self._rules and not replace:
            raise RuleConfigError(f"Rule '{name}' is already registered")
        if not callable(check):
            raise RuleConfigError(f"Check for rule '{name}' is not callable")

        template = message or self._messages.get(name, GENERIC_MESSAGE)
        self._rules[name] = RuleDefinition(name, check, template, pass_data)
        self._log.debug(f"Registered rule '{name}'")
        return self

    def resolve(self, name: str) -> RuleDefinition:
        """Return the definition for ``name``.

        Raises:
            UnknownRuleError: If no check is registered under ``name``.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def message_for(self, name: str) -> str:
        """Default template for a rule, falling back to the generic message."""
        rule = self._rules.get(name)
        if rule is not None:
            return rule.message
        return self._messages.get(name, GENERIC_MESSAGE)

    def copy(self) -> 'RuleRegistry':
        clone = RuleRegistry(messages=self._messages, builtins=False)
        clone._rules = dict(self._rules)
        return clone

    def names(self) -> List[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_registry() -> RuleRegistry:
    """Fresh registry holding only the built-in checks."""
    return RuleRegistry()
