"""Pydantic models for API request/response serialization.

These models mirror the formgen dataclasses and provide proper JSON
serialization for the FastAPI endpoints.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Schema validation models
# ---------------------------------------------------------------------------


class ValidateRequest(BaseModel):
    """Editor input: raw text, or an already parsed document."""

    schema_text: Optional[str] = None
    document: Optional[Any] = None
    format: Literal["json", "yaml"] = "json"


class ValidateResponse(BaseModel):
    """Mirrors formgen.pipeline.ValidationReport."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    document: Optional[dict[str, Any]] = None
    summary: str = ""


class SchemaResponse(BaseModel):
    """Wraps the JSON Schema dict."""

    schema_data: dict[str, Any] = Field(default_factory=dict, alias="schema")

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Submission models
# ---------------------------------------------------------------------------


class ParseRequest(BaseModel):
    """A form document plus one submission keyed by field id."""

    document: Any
    data: dict[str, Any] = Field(default_factory=dict)


class FieldIssueResponse(BaseModel):
    """Mirrors formgen.errors.FieldIssue."""

    field_id: str
    message: str


class ParseResponse(BaseModel):
    """Mirrors formgen.compiler.assembler.ParseResult."""

    passed: bool
    data: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldIssueResponse] = Field(default_factory=list)
    errors_by_field: dict[str, list[str]] = Field(default_factory=dict)
    summary: str = ""


# ---------------------------------------------------------------------------
# Code generation models
# ---------------------------------------------------------------------------


class CodeRequest(BaseModel):
    """Request body for code generation; flavor defaults from config."""

    document: Any
    flavor: Optional[Literal["zod", "html", "shadcn"]] = None


class CodeResponse(BaseModel):
    flavor: str
    code: str
