"""Pipeline — load, validate, compile and generate in one place.

Stages run strictly in order:
1. Parse the input (input-format errors)
2. Validate structure (schema errors, typed document on success)
3. Compile field validators and assemble the document validator
4. Generate source on request

Each call is independent; no state is kept between documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from formgen.compiler.assembler import DocumentValidator, assemble
from formgen.generators.form_code import FLAVORS, generate_form_code
from formgen.generators.zod_source import generate_validator_source
from formgen.models.form_document import FormDocument
from formgen.spec.schema_validator import collect_schema_errors, validate_form_schema
from formgen.utils.loader import load_document_file, parse_document_text

logger = logging.getLogger(__name__)

CODE_FLAVORS = ("zod", *FLAVORS)


@dataclass
class ValidationReport:
    """Non-raising result of structural validation."""

    form_title: str
    field_count: int
    errors: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.errors

    def summary(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.form_title}: {self.field_count} field(s), {len(self.errors)} error(s)"


@dataclass
class CompiledForm:
    """A valid document together with its document validator."""

    document: FormDocument
    validator: DocumentValidator

    @property
    def source(self) -> str:
        """zod source text equivalent to ``validator``."""
        return generate_validator_source(self.document)

    def generate_code(self, flavor: str = "zod") -> str:
        if flavor == "zod":
            return self.source
        if flavor not in CODE_FLAVORS:
            raise ValueError(f"Unknown flavor '{flavor}'. Must be one of: {', '.join(CODE_FLAVORS)}")
        return generate_form_code(self.document, flavor)


def check_document(candidate: Any) -> ValidationReport:
    """Report every structural defect without raising."""
    title = "unknown"
    field_count = 0
    if isinstance(candidate, dict):
        if isinstance(candidate.get("formTitle"), str) and candidate["formTitle"]:
            title = candidate["formTitle"]
        if isinstance(candidate.get("fields"), list):
            field_count = len(candidate["fields"])
    return ValidationReport(
        form_title=title,
        field_count=field_count,
        errors=collect_schema_errors(candidate),
    )


def build_form(candidate: Any) -> CompiledForm:
    """Validate *candidate* and compile it.

    Raises:
        SchemaValidationError: if the document is structurally invalid.
    """
    document = validate_form_schema(candidate)
    validator = assemble(document)
    logger.debug("Built form %r with fields %s", document.form_title, validator.field_ids)
    return CompiledForm(document=document, validator=validator)


def build_form_from_text(text: str, fmt: str = "json") -> CompiledForm:
    """Parse editor text and build the form (``InputFormatError`` on bad text)."""
    return build_form(parse_document_text(text, fmt))


def build_form_from_file(path: str | Path) -> CompiledForm:
    return build_form(load_document_file(path))
