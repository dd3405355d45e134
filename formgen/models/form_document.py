"""Core data models for form documents.

A form document is a title, a description and an ordered list of fields.
Fields form a closed tagged union discriminated by ``FieldType``; each
variant family has its own dataclass carrying only the attributes the
grammar allows for it.

Instances are only built by the schema validator from an already-checked
candidate, so the models themselves do not re-validate anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class FieldType(Enum):
    """Every field type a form document may declare."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    NUMBER = "number"
    RANGE = "range"
    TEL = "tel"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    CHECKBOX_GROUP = "checkbox-group"
    TEXTAREA = "textarea"
    SWITCH = "switch"


# Field types that may carry a placeholder attribute.
PLACEHOLDER_TYPES = frozenset(
    {
        FieldType.TEXT,
        FieldType.PASSWORD,
        FieldType.EMAIL,
        FieldType.TEL,
        FieldType.TEXTAREA,
        FieldType.SELECT,
        FieldType.NUMBER,
    }
)


# --- Validation blocks ---


@dataclass(frozen=True)
class LengthValidation:
    """Character-length bounds for text and textarea fields."""

    min: int | None = None
    max: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class PatternValidation:
    """Regular-expression constraint for email, tel and password fields."""

    pattern: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class NumericValidation:
    """Numeric bounds and step for number and range fields."""

    min: float | None = None
    max: float | None = None
    step: float | None = None
    message: str | None = None


@dataclass(frozen=True)
class FieldOption:
    """One selectable value of a choice field."""

    value: str
    label: str


# --- Fields ---


@dataclass(frozen=True)
class BaseField:
    """Attributes common to every field type."""

    id: str
    type: FieldType
    label: str
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "label": self.label,
            "required": self.required,
        }
        return data


@dataclass(frozen=True)
class TextField(BaseField):
    placeholder: str | None = None
    validation: LengthValidation | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.validation is not None:
            data["validation"] = _compact(
                min=self.validation.min,
                max=self.validation.max,
                message=self.validation.message,
            )
        return data


@dataclass(frozen=True)
class PatternField(BaseField):
    placeholder: str | None = None
    validation: PatternValidation | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.validation is not None:
            data["validation"] = _compact(
                pattern=self.validation.pattern,
                message=self.validation.message,
            )
        return data


@dataclass(frozen=True)
class NumberField(BaseField):
    placeholder: str | None = None
    validation: NumericValidation | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.validation is not None:
            data["validation"] = _numeric_dict(self.validation)
        return data


@dataclass(frozen=True)
class RangeField(BaseField):
    """A slider; both bounds are mandatory."""

    validation: NumericValidation = field(default_factory=NumericValidation)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["validation"] = _numeric_dict(self.validation)
        return data


@dataclass(frozen=True)
class ChoiceField(BaseField):
    """select, radio and checkbox-group fields."""

    options: tuple[FieldOption, ...] = ()
    placeholder: str | None = None

    @property
    def option_values(self) -> list[str]:
        return [o.value for o in self.options]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        data["options"] = [{"value": o.value, "label": o.label} for o in self.options]
        return data


@dataclass(frozen=True)
class ToggleField(BaseField):
    """checkbox and switch fields: a single boolean."""


Field = Union[TextField, PatternField, NumberField, RangeField, ChoiceField, ToggleField]

FIELD_CLASSES: dict[FieldType, type] = {
    FieldType.TEXT: TextField,
    FieldType.TEXTAREA: TextField,
    FieldType.EMAIL: PatternField,
    FieldType.TEL: PatternField,
    FieldType.PASSWORD: PatternField,
    FieldType.NUMBER: NumberField,
    FieldType.RANGE: RangeField,
    FieldType.SELECT: ChoiceField,
    FieldType.RADIO: ChoiceField,
    FieldType.CHECKBOX_GROUP: ChoiceField,
    FieldType.CHECKBOX: ToggleField,
    FieldType.SWITCH: ToggleField,
}


# --- Document ---


@dataclass(frozen=True)
class FormDocument:
    """A structurally valid form document."""

    form_title: str
    form_description: str
    fields: tuple[Field, ...]

    @property
    def field_ids(self) -> list[str]:
        return [f.id for f in self.fields]

    def get_field(self, field_id: str) -> Field | None:
        return next((f for f in self.fields if f.id == field_id), None)

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase wire form of the document."""
        return {
            "formTitle": self.form_title,
            "formDescription": self.form_description,
            "fields": [f.to_dict() for f in self.fields],
        }


def _compact(**values: Any) -> dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


def _numeric_dict(validation: NumericValidation) -> dict[str, Any]:
    return _compact(
        min=validation.min,
        max=validation.max,
        step=validation.step,
        message=validation.message,
    )


def require_all_field_types(table: dict, owner: str) -> dict:
    """Return *table* unchanged if it has an entry for every ``FieldType``.

    Dispatch tables keyed by field type call this at import time so a new
    field type without a matching case fails loudly instead of being skipped.
    """
    missing = [t.value for t in FieldType if t not in table]
    if missing:
        raise NotImplementedError(f"{owner} has no case for field type(s): {', '.join(missing)}")
    return table
