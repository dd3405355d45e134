"""Declarative rule descriptors for compiled fields.

Every field of a valid document is described once, here, as a
``FieldRules``: the kind of value it accepts, the ordered constraint rules
with their final messages, and how required-ness applies. The live
validator (``formgen.compiler.field_validator``) and the zod source emitter
(``formgen.generators.zod_source``) both consume these descriptors and
never look at the field itself, so the two cannot disagree on bounds or
messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from formgen.models.form_document import (
    ChoiceField,
    Field,
    FieldType,
    NumberField,
    NumericValidation,
    PatternField,
    RangeField,
    TextField,
    ToggleField,
    require_all_field_types,
)

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
TEL_PATTERN = r"^\d{10}$"
PASSWORD_MIN_LENGTH = 8
RANGE_DEFAULT_MIN = 0
RANGE_DEFAULT_MAX = 100


class ValueKind(Enum):
    """The shape of value a field accepts after coercion."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


class RuleKind(Enum):
    """A single constraint checked on a non-empty, correctly typed value."""

    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    MULTIPLE_OF = "multiple_of"
    ONE_OF = "one_of"  # value is one of the option values
    ALL_OF = "all_of"  # every list element is an option value
    IS_TRUE = "is_true"


@dataclass(frozen=True)
class Rule:
    kind: RuleKind
    message: str
    value: Any = None  # bound, step, pattern source, or tuple of option values


@dataclass(frozen=True)
class FieldRules:
    """Everything needed to check, or emit a checker for, one field.

    ``folded`` fields (choices and toggles) express required-ness through
    their own rules; the others check type and constraints first and are
    then wrapped by a required/optional policy.
    """

    field_id: str
    field_type: FieldType
    label: str
    kind: ValueKind
    required: bool
    required_message: str
    type_message: str
    rules: tuple[Rule, ...] = ()
    folded: bool = False


_TYPE_MESSAGES = {
    ValueKind.STRING: "{label} must be a string",
    ValueKind.NUMBER: "{label} must be a number",
    ValueKind.BOOLEAN: "{label} must be true or false",
    ValueKind.STRING_LIST: "{label} must be a list of options",
}


def describe_field(field: Field) -> FieldRules:
    """Return the rule descriptor for a field of a valid document."""
    return _DESCRIBERS[field.type](field)


def _base(field: Field, kind: ValueKind, rules: list[Rule], **overrides: Any) -> FieldRules:
    values = {
        "field_id": field.id,
        "field_type": field.type,
        "label": field.label,
        "kind": kind,
        "required": field.required,
        "required_message": f"{field.label} is required",
        "type_message": _TYPE_MESSAGES[kind].format(label=field.label),
        "rules": tuple(rules),
    }
    values.update(overrides)
    return FieldRules(**values)


def _custom(field: Field, default: str) -> str:
    """The author's validation message, if any, replaces every constraint message."""
    validation = getattr(field, "validation", None)
    if validation is not None and validation.message:
        return validation.message
    return default


# --- Per-type describers ---


def _describe_text(field: TextField) -> FieldRules:
    rules = []
    validation = field.validation
    if validation is not None and validation.min is not None:
        rules.append(
            Rule(
                RuleKind.MIN_LENGTH,
                _custom(field, f"{field.label} must be at least {validation.min} characters"),
                validation.min,
            )
        )
    if validation is not None and validation.max is not None:
        rules.append(
            Rule(
                RuleKind.MAX_LENGTH,
                _custom(field, f"{field.label} must be at most {validation.max} characters"),
                validation.max,
            )
        )
    return _base(field, ValueKind.STRING, rules)


def _describe_email(field: PatternField) -> FieldRules:
    rules = [Rule(RuleKind.PATTERN, _custom(field, "Invalid email address"), EMAIL_PATTERN)]
    if field.validation is not None and field.validation.pattern:
        rules.append(
            Rule(RuleKind.PATTERN, _custom(field, "Invalid format"), field.validation.pattern)
        )
    return _base(field, ValueKind.STRING, rules)


def _describe_password(field: PatternField) -> FieldRules:
    if field.validation is not None and field.validation.pattern:
        rule = Rule(RuleKind.PATTERN, _custom(field, "Invalid format"), field.validation.pattern)
    else:
        rule = Rule(
            RuleKind.MIN_LENGTH,
            _custom(field, f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"),
            PASSWORD_MIN_LENGTH,
        )
    return _base(field, ValueKind.STRING, [rule])


def _describe_tel(field: PatternField) -> FieldRules:
    # A custom pattern replaces the 10-digit default rather than adding to it.
    if field.validation is not None and field.validation.pattern:
        rule = Rule(
            RuleKind.PATTERN, _custom(field, "Invalid phone number"), field.validation.pattern
        )
    else:
        rule = Rule(RuleKind.PATTERN, _custom(field, "Phone number must be 10 digits"), TEL_PATTERN)
    return _base(field, ValueKind.STRING, [rule])


def _numeric_rules(field: Field, validation: NumericValidation, lo: Any, hi: Any) -> list[Rule]:
    rules = []
    if lo is not None:
        rules.append(Rule(RuleKind.MINIMUM, _custom(field, f"Minimum value is {lo}"), lo))
    if hi is not None:
        rules.append(Rule(RuleKind.MAXIMUM, _custom(field, f"Maximum value is {hi}"), hi))
    if validation.step is not None:
        rules.append(
            Rule(
                RuleKind.MULTIPLE_OF,
                _custom(field, f"Value must be a multiple of {validation.step}"),
                validation.step,
            )
        )
    return rules


def _describe_number(field: NumberField) -> FieldRules:
    validation = field.validation or NumericValidation()
    return _base(
        field, ValueKind.NUMBER, _numeric_rules(field, validation, validation.min, validation.max)
    )


def _describe_range(field: RangeField) -> FieldRules:
    validation = field.validation
    lo = validation.min if validation.min is not None else RANGE_DEFAULT_MIN
    hi = validation.max if validation.max is not None else RANGE_DEFAULT_MAX
    return _base(field, ValueKind.NUMBER, _numeric_rules(field, validation, lo, hi))


def _describe_single_choice(field: ChoiceField) -> FieldRules:
    values = tuple(field.option_values)
    return _base(
        field,
        ValueKind.STRING,
        [Rule(RuleKind.ONE_OF, "Invalid selection", values)],
        folded=True,
    )


def _describe_checkbox_group(field: ChoiceField) -> FieldRules:
    values = tuple(field.option_values)
    return _base(
        field,
        ValueKind.STRING_LIST,
        [Rule(RuleKind.ALL_OF, "Invalid selection", values)],
        required_message=f"Select at least one option for {field.label}",
        folded=True,
    )


def _describe_toggle(field: ToggleField, verb: str) -> FieldRules:
    message = f"{field.label} must be {verb}"
    rules = [Rule(RuleKind.IS_TRUE, message)] if field.required else []
    return _base(field, ValueKind.BOOLEAN, rules, required_message=message, folded=True)


_DESCRIBERS: dict[FieldType, Callable[[Any], FieldRules]] = require_all_field_types(
    {
        FieldType.TEXT: _describe_text,
        FieldType.TEXTAREA: _describe_text,
        FieldType.EMAIL: _describe_email,
        FieldType.PASSWORD: _describe_password,
        FieldType.TEL: _describe_tel,
        FieldType.NUMBER: _describe_number,
        FieldType.RANGE: _describe_range,
        FieldType.SELECT: _describe_single_choice,
        FieldType.RADIO: _describe_single_choice,
        FieldType.CHECKBOX_GROUP: _describe_checkbox_group,
        FieldType.CHECKBOX: lambda f: _describe_toggle(f, "checked"),
        FieldType.SWITCH: lambda f: _describe_toggle(f, "turned on"),
    },
    "constraint compiler",
)
