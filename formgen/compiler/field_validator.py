"""Field validators — live checkers built from rule descriptors.

A ``FieldValidator`` checks one submitted value. The order of checks is
fixed:

1. Empty values (absent, ``None``, ``""``, ``[]``) are settled first: they
   fail with the required message when the field is required, and are
   accepted otherwise. Absent booleans count as ``False`` instead.
2. The value must have (or, for numbers, coerce to) the field's kind;
   a mismatch reports the type message and stops. Numeric strings are
   read the way JavaScript's ``Number()`` reads them.
3. Every constraint rule runs and all failures are collected.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable

from formgen.compiler.patterns import pattern_matches
from formgen.compiler.rules import FieldRules, RuleKind, ValueKind, describe_field
from formgen.models.form_document import Field

logger = logging.getLogger(__name__)


@dataclass
class FieldResult:
    """Outcome of checking one value: the coerced value and any messages."""

    value: Any
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class FieldValidator:
    """Checks submitted values for a single field."""

    def __init__(self, rules: FieldRules):
        self.rules = rules

    @property
    def field_id(self) -> str:
        return self.rules.field_id

    def __repr__(self) -> str:
        return f"FieldValidator({self.rules.field_id!r}, {self.rules.field_type.value})"

    def __call__(self, value: Any = None) -> FieldResult:
        rules = self.rules

        if rules.kind is ValueKind.BOOLEAN:
            if value is None:
                value = False
            if not isinstance(value, bool):
                return FieldResult(value, [rules.type_message])
            return FieldResult(value, self._run(value))

        if _is_empty(value, rules.kind):
            if rules.required:
                return FieldResult(value, [rules.required_message])
            return FieldResult([] if rules.kind is ValueKind.STRING_LIST else value)

        coerced, ok = _coerce(value, rules.kind)
        if not ok:
            return FieldResult(value, [rules.type_message])
        return FieldResult(coerced, self._run(coerced))

    def _run(self, value: Any) -> list[str]:
        messages: list[str] = []
        for rule in self.rules.rules:
            if not _RULE_CHECKS[rule.kind](value, rule.value) and rule.message not in messages:
                messages.append(rule.message)
        return messages


def compile_field(field: Field) -> FieldValidator:
    """Compile a field of a structurally valid document into its validator."""
    validator = FieldValidator(describe_field(field))
    logger.debug("Compiled %r with %d rule(s)", validator, len(validator.rules.rules))
    return validator


# --- Empty values and coercion ---


# Characters String.prototype.trim() removes, as Number() does before parsing
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# The string forms JavaScript's Number() accepts; no underscores, no "nan"
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _is_empty(value: Any, kind: ValueKind) -> bool:
    if value is None:
        return True
    if kind is ValueKind.STRING_LIST:
        return isinstance(value, list) and not value
    if kind is ValueKind.NUMBER and isinstance(value, str):
        return value.strip(JS_WHITESPACE) == ""
    return value == ""


def _parse_number(text: str) -> int | float | None:
    """Parse a numeric string the way ``Number()`` does; ``None`` if not finite."""
    text = text.strip(JS_WHITESPACE)
    if _RADIX_LITERAL.fullmatch(text):
        number = int(text, 0)
        try:
            float(number)
        except OverflowError:
            return None
        return number
    if not _DECIMAL_LITERAL.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _coerce(value: Any, kind: ValueKind) -> tuple[Any, bool]:
    """Return ``(value, True)`` when *value* has or converts to *kind*."""
    if kind is ValueKind.STRING:
        return value, isinstance(value, str)

    if kind is ValueKind.STRING_LIST:
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
        return value, ok

    if kind is ValueKind.NUMBER:
        if isinstance(value, bool):
            return value, False
        if isinstance(value, (int, float)):
            return value, math.isfinite(value)
        if isinstance(value, str):
            number = _parse_number(value)
            if number is None:
                return value, False
            return number, True
        return value, False

    raise NotImplementedError(f"No coercion for value kind '{kind.value}'")


# --- Rule checks ---


def _is_multiple(value: float, step: float) -> bool:
    # Exact rationals from the decimal text, so 0.3 is a multiple of 0.1
    return (Fraction(str(value)) / Fraction(str(step))).denominator == 1


_RULE_CHECKS: dict[RuleKind, Callable[[Any, Any], bool]] = {
    RuleKind.MIN_LENGTH: lambda v, n: len(v) >= n,
    RuleKind.MAX_LENGTH: lambda v, n: len(v) <= n,
    RuleKind.PATTERN: lambda v, p: pattern_matches(p, v),
    RuleKind.MINIMUM: lambda v, n: v >= n,
    RuleKind.MAXIMUM: lambda v, n: v <= n,
    RuleKind.MULTIPLE_OF: _is_multiple,
    RuleKind.ONE_OF: lambda v, values: v in values,
    RuleKind.ALL_OF: lambda v, values: all(item in values for item in v),
    RuleKind.IS_TRUE: lambda v, _: v is True,
}
