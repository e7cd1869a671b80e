"""
Rule expression parsing.

A rule spec is either a string such as ``"required|length:3,20"`` or a
list whose items are strings, ``RuleInstruction`` objects, or
``(name, params)`` tuples. Strings are split on ``|`` between rules, on
the first ``:`` between name and parameters, and on ``,`` between
parameters. Parameters are kept as strings.

There is no escaping: a literal ``|``, ``:`` or ``,`` cannot appear in a
string parameter. Pass a ``RuleInstruction`` or a tuple instead.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

RULE_SEPARATOR = '|'
NAME_SEPARATOR = ':'
PARAM_SEPARATOR = ','


@dataclass(frozen=True)
class RuleInstruction:
    """One parsed (name, parameters) pair."""
    name: str
    params: Tuple[str, ...] = ()


RuleItem = Union[str, RuleInstruction, Tuple[str, Sequence[str]]]
RuleSpec = Union[str, Sequence[RuleItem], None]


def parse_instruction(token: str) -> RuleInstruction:
    """Split a single ``name:p1,p2`` token."""
    name, _, blob = token.partition(NAME_SEPARATOR)
    params = tuple(blob.split(PARAM_SEPARATOR)) if blob else ()
    return RuleInstruction(name=name, params=params)


def _from_item(item: RuleItem) -> RuleInstruction:
    if isinstance(item, RuleInstruction):
        return item
    if isinstance(item, str):
        return parse_instruction(item)
    if isinstance(item, tuple) and len(item) == 2:
        name, params = item
        if isinstance(params, str):
            params = (params,)
        return RuleInstruction(name=name, params=tuple(str(p) for p in params))
    raise TypeError(f"Unsupported rule item: {item!r}")


def parse_rules(spec: RuleSpec) -> List[RuleInstruction]:
    """Expand a rule spec into an ordered list of instructions.

    An empty string, empty list or None yields no instructions.
    """
    if not spec:
        return []
    items: Iterable[RuleItem]
    if isinstance(spec, str):
        items = spec.split(RULE_SEPARATOR)
    else:
        items = spec
    return [_from_item(item) for item in items]
