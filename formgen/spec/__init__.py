"""Structural specification of form documents.

This package provides the two halves of structural checking:
1. Schema — JSON Schema export of the field grammar, for external tools
2. Schema Validator — the authoritative checker, including the cross-field
   rules JSON Schema cannot express (unique ids, min <= max, regex validity)
"""

SCHEMA_VERSION = "1.0.0"
