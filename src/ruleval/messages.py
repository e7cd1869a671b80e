"""
Default failure messages.

Templates use ``str.format`` placeholders. ``{field}`` is always
available; the remaining names come from the context each check
returns. Swap the whole table (e.g. for another locale) by passing
``messages=`` to ``RuleRegistry``.
"""

import logging
from typing import Any, Mapping

GENERIC_MESSAGE = 'Validation failed'

DEFAULT_MESSAGES = {
    'required': 'The {field} field is required',
    'max': 'The {field} field may not be longer than {max} characters',
    'min': 'The {field} field must be at least {min} characters',
    'length': 'The {field} field length must be between {min} and {max} characters',
    'bool': 'The {field} field must be a boolean',
    'in': 'The {field} field must be one of: {options}',
    'regex': 'The {field} field format is invalid',
    'confirm': 'The {field} field must match {other}',
    'integer': 'The {field} field must be an integer',
    'numeric': 'The {field} field must be numeric',
    'array': 'The {field} field must be an array',
    'isset': 'The {field} field is missing key {missing}',
    'email': 'The {field} field must be a valid email address',
}

logger = logging.getLogger('ruleval.messages')


def format_message(template: str, field: str, context: Mapping[str, Any]) -> str:
    """Interpolate a template, leaving it untouched if a placeholder is unknown."""
    try:
        return template.format(**{**context, 'field': field})
    except (KeyError, IndexError, ValueError) as exc:
        logger.warning(f"Message template {template!r} cannot be formatted: {exc}")
        return template
