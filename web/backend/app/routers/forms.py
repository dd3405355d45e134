"""Forms router -- schema validation, submission checking and code generation."""

from __future__ import annotations

import os
from typing import Any

from fastapi import APIRouter, HTTPException

from formgen.errors import InputFormatError, SchemaValidationError
from formgen.pipeline import CODE_FLAVORS, CompiledForm, build_form, check_document
from formgen.samples import get_sample_document
from formgen.spec.schema import get_schema
from formgen.utils.loader import parse_document_text

from web.backend.app.models.api import (
    CodeRequest,
    CodeResponse,
    FieldIssueResponse,
    ParseRequest,
    ParseResponse,
    SchemaResponse,
    ValidateRequest,
    ValidateResponse,
)

router = APIRouter(tags=["forms"])

# Flavor used by /api/forms/code when the request does not name one
DEFAULT_CODE_FLAVOR = os.environ.get("FORMGEN_CODE_FLAVOR", "html")


def _build_or_422(document: Any) -> CompiledForm:
    """Build a form, turning structural errors into a 422 with the full list."""
    try:
        return build_form(document)
    except SchemaValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": "Schema validation failed", "errors": exc.errors},
        )


@router.post(
    "/api/forms/validate",
    response_model=ValidateResponse,
    summary="Validate a form document",
)
async def validate_form(request: ValidateRequest):
    """Validate editor input against the field grammar.

    Malformed text is a 400; a parsed document with structural defects is
    a normal response with ``valid: false`` and every defect listed.
    """
    if request.schema_text is not None:
        try:
            candidate = parse_document_text(request.schema_text, request.format)
        except InputFormatError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    else:
        candidate = request.document

    report = check_document(candidate)
    document = build_form(candidate).document.to_dict() if report.passed else None

    return ValidateResponse(
        valid=report.passed,
        errors=report.errors,
        document=document,
        summary=report.summary(),
    )


@router.post(
    "/api/forms/parse",
    response_model=ParseResponse,
    summary="Check a submission against a form",
)
async def parse_submission(request: ParseRequest):
    """Run every field validator and report all failures together."""
    form = _build_or_422(request.document)
    result = form.validator.safe_parse(request.data)

    return ParseResponse(
        passed=result.passed,
        data=result.data,
        errors=[
            FieldIssueResponse(field_id=issue.field_id, message=issue.message)
            for issue in result.issues
        ],
        errors_by_field=result.errors_by_field(),
        summary=result.summary(),
    )


@router.post(
    "/api/forms/code",
    response_model=CodeResponse,
    summary="Generate validator or form code",
)
async def generate_code(request: CodeRequest):
    """Generate the code preview for a valid form document."""
    flavor = request.flavor or DEFAULT_CODE_FLAVOR
    if flavor not in CODE_FLAVORS:
        raise HTTPException(status_code=400, detail=f"Unknown flavor '{flavor}'")

    form = _build_or_422(request.document)
    return CodeResponse(flavor=flavor, code=form.generate_code(flavor))


@router.get("/api/forms/sample", summary="Get the sample form document")
async def sample_form():
    """Return the built-in sample document the editor starts from."""
    return get_sample_document()


@router.get(
    "/api/schema",
    response_model=SchemaResponse,
    summary="Get the form document JSON Schema",
)
async def get_form_schema():
    """Return the canonical JSON Schema for form documents."""
    return SchemaResponse(schema=get_schema())
