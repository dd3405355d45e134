"""Exception types raised by formgen.

Two disjoint kinds reach callers before any data is checked:
``InputFormatError`` for text that does not parse at all, and
``SchemaValidationError`` for a parsed document that does not conform to
the field grammar. ``FormDataError`` is raised later, when a submission is
checked against an already valid form.
"""

from __future__ import annotations

from dataclasses import dataclass


class FormgenError(Exception):
    """Base class for all formgen errors."""


class InputFormatError(FormgenError):
    """The input text is not well-formed JSON/YAML, or could not be read."""


class SchemaValidationError(FormgenError):
    """A form document failed structural validation.

    ``errors`` holds every defect found, in document order.
    """

    def __init__(self, errors: list[str]):
        super().__init__("Schema validation failed")
        self.errors = list(errors)

    def __str__(self) -> str:
        return "Schema validation failed: " + "; ".join(self.errors)


@dataclass(frozen=True)
class FieldIssue:
    """A single data-level failure for one field of a submission."""

    field_id: str
    message: str

    def __str__(self) -> str:
        return f"{self.field_id}: {self.message}"


class FormDataError(FormgenError):
    """Submitted form data failed one or more field validators."""

    def __init__(self, issues: list[FieldIssue]):
        super().__init__("Form data validation failed")
        self.issues = list(issues)

    @property
    def messages(self) -> list[str]:
        return [i.message for i in self.issues]

    def __str__(self) -> str:
        return "Form data validation failed: " + "; ".join(str(i) for i in self.issues)
