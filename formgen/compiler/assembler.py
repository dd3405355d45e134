"""Form document assembler — one validator for a whole submission.

The document validator runs every field validator against its key in the
submitted mapping and collects all failures, so a form can show every
invalid field at once rather than stopping at the first.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formgen.compiler.field_validator import FieldValidator, compile_field
from formgen.errors import FieldIssue, FormDataError
from formgen.models.form_document import FormDocument

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of checking a submission against a form."""

    data: dict[str, Any] = field(default_factory=dict)
    issues: list[FieldIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    def errors_by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.field_id, []).append(issue.message)
        return grouped

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        failed = len(self.errors_by_field())
        return f"[{status}] {len(self.data)} field(s), {failed} invalid, {len(self.issues)} error(s)"


class DocumentValidator:
    """Ordered mapping of field id to field validator, in field order."""

    def __init__(self, validators: dict[str, FieldValidator]):
        self.validators = dict(validators)

    @property
    def field_ids(self) -> list[str]:
        return list(self.validators)

    def __len__(self) -> int:
        return len(self.validators)

    def __getitem__(self, field_id: str) -> FieldValidator:
        return self.validators[field_id]

    def safe_parse(self, data: Mapping[str, Any]) -> ParseResult:
        """Check *data* without raising; absent keys count as not provided."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Form data must be a mapping, got {type(data).__name__}")

        result = ParseResult()
        for field_id, validator in self.validators.items():
            outcome = validator(data.get(field_id))
            result.data[field_id] = outcome.value
            result.issues.extend(FieldIssue(field_id, message) for message in outcome.errors)

        logger.debug("Parsed submission: %s", result.summary())
        return result

    def parse(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Return the coerced data, or raise ``FormDataError`` with every failure."""
        result = self.safe_parse(data)
        if not result.passed:
            raise FormDataError(result.issues)
        return result.data


def assemble(document: FormDocument) -> DocumentValidator:
    """Compile every field of a valid document into one document validator."""
    return DocumentValidator({f.id: compile_field(f) for f in document.fields})
