"""Loader — read form documents from text or files.

Failures here are input-format errors (the text does not parse at all)
and are kept distinct from structural schema errors.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from formgen.errors import InputFormatError

YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document_text(text: str, fmt: str = "json") -> Any:
    """Parse raw editor text into a JSON value.

    Args:
        text: The raw document text.
        fmt: ``"json"`` or ``"yaml"``.

    Raises:
        InputFormatError: if the text is not well-formed.
    """
    if fmt == "json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"Invalid JSON: {e}") from e
    if fmt == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise InputFormatError(f"Invalid YAML: {e}") from e
    raise ValueError(f"Unknown document format '{fmt}'. Must be 'json' or 'yaml'")


def load_document_file(path: str | Path) -> Any:
    """Read and parse a document file; the format follows the file suffix."""
    path = Path(path)
    if not path.exists():
        raise InputFormatError(f"File not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputFormatError(f"Could not read {path}: {e}") from e

    fmt = "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"
    return parse_document_text(text, fmt)
