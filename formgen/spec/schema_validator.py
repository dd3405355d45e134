"""Schema validator — structural validation of form documents.

This is the gate every document passes before anything is compiled from
it. A candidate is an arbitrary parsed JSON value; on success the validator
returns a typed ``FormDocument``, on failure it raises
``SchemaValidationError`` carrying every defect found.

Two preconditions are fatal-fast (the candidate must be an object and
``fields`` must be a non-empty array): without them no field-level check
can run, so they abort with a single message. Every other rule is checked
exhaustively across all fields and reported together, in document order.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable

from formgen.compiler.patterns import compile_pattern
from formgen.errors import SchemaValidationError
from formgen.models.form_document import (
    FIELD_CLASSES,
    PLACEHOLDER_TYPES,
    ChoiceField,
    Field,
    FieldOption,
    FieldType,
    FormDocument,
    LengthValidation,
    NumberField,
    NumericValidation,
    PatternField,
    PatternValidation,
    RangeField,
    TextField,
    ToggleField,
    require_all_field_types,
)

logger = logging.getLogger(__name__)


def validate_form_schema(candidate: Any) -> FormDocument:
    """Validate a parsed form document and return its typed form.

    Args:
        candidate: Any parsed JSON value (normally a dict).

    Returns:
        The typed ``FormDocument``.

    Raises:
        SchemaValidationError: with the full, ordered list of defects.
    """
    errors = collect_schema_errors(candidate)
    if errors:
        logger.debug("Schema validation failed with %d error(s)", len(errors))
        raise SchemaValidationError(errors)

    document = _build_document(candidate)
    logger.debug("Schema validation passed for %d field(s)", len(document.fields))
    return document


def collect_schema_errors(candidate: Any) -> list[str]:
    """Return every structural defect of *candidate*. Empty list means valid."""
    if not isinstance(candidate, dict):
        return ["Schema must be an object"]

    fields = candidate.get("fields")
    if not isinstance(fields, list):
        return ["fields must be an array"]
    if not fields:
        return ["fields must be a non-empty array"]

    errors: list[str] = []

    for key in ("formTitle", "formDescription"):
        if not _is_non_empty_string(candidate.get(key)):
            errors.append(f"{key} must be a non-empty string")

    # Scoped to this call; ids are only unique within one document.
    seen_ids: set[str] = set()
    for index, field in enumerate(fields):
        _check_field(field, index, seen_ids, errors)

    return errors


# --- Per-field checks ---


def _check_field(field: Any, index: int, seen_ids: set[str], errors: list[str]):
    """Check common attributes, then the variant-specific ones."""
    if not isinstance(field, dict):
        errors.append(f"Field at index {index} must be an object")
        return

    field_id = field.get("id")
    if not _is_non_empty_string(field_id):
        errors.append(f"Field at index {index} must have a non-empty string id")
    elif field_id in seen_ids:
        errors.append(f'Duplicate field ID found: "{field_id}"')
    else:
        seen_ids.add(field_id)

    ref = _field_ref(field, index)

    raw_type = field.get("type")
    field_type = _parse_type(raw_type)
    if raw_type is None:
        errors.append(f"Field {ref} must have a type")
    elif field_type is None:
        errors.append(f'Invalid field type "{raw_type}" for field {ref}')

    if not _is_non_empty_string(field.get("label")):
        errors.append(f"Field {ref} must have a non-empty string label")

    if field.get("required") is not None and not isinstance(field["required"], bool):
        errors.append(f"Field {ref} required property must be a boolean")

    validation = field.get("validation")
    if validation is not None and not isinstance(validation, dict):
        errors.append(f"Field {ref} validation must be an object")
        validation = None

    if field_type is None:
        return

    if field_type in PLACEHOLDER_TYPES:
        placeholder = field.get("placeholder")
        if placeholder is not None and not isinstance(placeholder, str):
            errors.append(f"Field {ref} placeholder must be a string")

    _VARIANT_CHECKS[field_type](field, validation or {}, ref, errors)


def _check_length(field: dict, validation: dict, ref: str, errors: list[str]):
    bounds = {}
    for key in ("min", "max"):
        value = validation.get(key)
        if value is None:
            continue
        if not _is_whole_number(value) or value < 0:
            errors.append(f"Field {ref} {key} length must be a non-negative integer")
        else:
            bounds[key] = value

    _check_bounds_order(bounds, ref, errors)
    _check_message(validation, ref, errors)


def _check_pattern(field: dict, validation: dict, ref: str, errors: list[str]):
    pattern = validation.get("pattern")
    if pattern is not None:
        if not isinstance(pattern, str):
            errors.append(f"Field {ref} validation pattern must be a string")
        else:
            try:
                compile_pattern(pattern)
            except re.error as exc:
                errors.append(
                    f"Field {ref} validation pattern is not a valid regular expression: {exc}"
                )

    _check_message(validation, ref, errors)


def _check_numeric(field: dict, validation: dict, ref: str, errors: list[str]):
    bounds = {}
    for key in ("min", "max", "step"):
        value = validation.get(key)
        if value is None:
            continue
        if not _is_number(value):
            errors.append(f"Field {ref} {key} value must be a number")
        elif key == "step" and value <= 0:
            errors.append(f"Field {ref} step value must be greater than 0")
        else:
            bounds[key] = value

    _check_bounds_order(bounds, ref, errors)
    _check_message(validation, ref, errors)

    if field.get("type") == FieldType.RANGE.value:
        if validation.get("min") is None or validation.get("max") is None:
            errors.append(f"Field {ref} of type range must have min and max values")


def _check_options(field: dict, validation: dict, ref: str, errors: list[str]):
    options = field.get("options")
    if not isinstance(options, list) or not options:
        errors.append(f"Field {ref} must have non-empty options array")
        return

    for index, option in enumerate(options):
        if (
            not isinstance(option, dict)
            or not isinstance(option.get("value"), str)
            or not isinstance(option.get("label"), str)
        ):
            errors.append(f"Invalid option at index {index} for field {ref}")


def _check_toggle(field: dict, validation: dict, ref: str, errors: list[str]):
    """checkbox and switch carry nothing beyond the common attributes."""


_VariantCheck = Callable[[dict, dict, str, list], None]

_VARIANT_CHECKS: dict[FieldType, _VariantCheck] = require_all_field_types(
    {
        FieldType.TEXT: _check_length,
        FieldType.TEXTAREA: _check_length,
        FieldType.EMAIL: _check_pattern,
        FieldType.TEL: _check_pattern,
        FieldType.PASSWORD: _check_pattern,
        FieldType.NUMBER: _check_numeric,
        FieldType.RANGE: _check_numeric,
        FieldType.SELECT: _check_options,
        FieldType.RADIO: _check_options,
        FieldType.CHECKBOX_GROUP: _check_options,
        FieldType.CHECKBOX: _check_toggle,
        FieldType.SWITCH: _check_toggle,
    },
    "schema validator",
)


def _check_bounds_order(bounds: dict, ref: str, errors: list[str]):
    if "min" in bounds and "max" in bounds and bounds["min"] > bounds["max"]:
        errors.append(f"Field {ref} min value must be less than or equal to max value")


def _check_message(validation: dict, ref: str, errors: list[str]):
    message = validation.get("message")
    if message is not None and not isinstance(message, str):
        errors.append(f"Field {ref} validation message must be a string")


# --- Helpers ---


def _field_ref(field: dict, index: int) -> str:
    """Name a field in messages by its id, or its position when it has none."""
    field_id = field.get("id")
    if _is_non_empty_string(field_id):
        return f'"{field_id}"'
    return f"at index {index}"


def _parse_type(raw_type: Any) -> FieldType | None:
    if not isinstance(raw_type, str):
        return None
    try:
        return FieldType(raw_type)
    except ValueError:
        return None


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number in the grammar
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_whole_number(value: Any) -> bool:
    # JSON has one number type, so 2.0 is as good as 2
    if not _is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


# --- Typed document construction ---


def _build_document(candidate: dict) -> FormDocument:
    """Build the typed document from a candidate that has no defects."""
    return FormDocument(
        form_title=candidate["formTitle"],
        form_description=candidate["formDescription"],
        fields=tuple(_build_field(raw) for raw in candidate["fields"]),
    )


def _build_field(raw: dict) -> Field:
    field_type = FieldType(raw["type"])
    cls = FIELD_CLASSES[field_type]
    common = {
        "id": raw["id"],
        "type": field_type,
        "label": raw["label"],
        "required": raw.get("required") or False,
    }
    validation = raw.get("validation")

    if cls is TextField:
        return TextField(
            **common,
            placeholder=raw.get("placeholder"),
            validation=_length_validation(validation),
        )
    if cls is PatternField:
        return PatternField(
            **common,
            placeholder=raw.get("placeholder"),
            validation=PatternValidation(
                pattern=validation.get("pattern"),
                message=validation.get("message"),
            )
            if validation is not None
            else None,
        )
    if cls is NumberField:
        return NumberField(
            **common,
            placeholder=raw.get("placeholder"),
            validation=_numeric_validation(validation) if validation is not None else None,
        )
    if cls is RangeField:
        return RangeField(**common, validation=_numeric_validation(validation))
    if cls is ChoiceField:
        return ChoiceField(
            **common,
            options=tuple(FieldOption(value=o["value"], label=o["label"]) for o in raw["options"]),
            placeholder=raw.get("placeholder") if field_type in PLACEHOLDER_TYPES else None,
        )
    if cls is ToggleField:
        return ToggleField(**common)
    raise NotImplementedError(f"No typed model for field type '{field_type.value}'")


def _length_validation(validation: dict | None) -> LengthValidation | None:
    if validation is None:
        return None
    return LengthValidation(
        min=_as_int(validation.get("min")),
        max=_as_int(validation.get("max")),
        message=validation.get("message"),
    )


def _as_int(value: int | float | None) -> int | None:
    return None if value is None else int(value)


def _numeric_validation(validation: dict) -> NumericValidation:
    return NumericValidation(
        min=validation.get("min"),
        max=validation.get("max"),
        step=validation.get("step"),
        message=validation.get("message"),
    )
