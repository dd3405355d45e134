"""Built-in sample form document, used as the editor's starting point."""

from __future__ import annotations

import copy
import json

SAMPLE_DOCUMENT: dict = {
    "formTitle": "Project Requirements Survey",
    "formDescription": "Please fill out this survey about your project needs",
    "fields": [
        {
            "id": "name",
            "type": "text",
            "label": "Full Name",
            "required": True,
            "placeholder": "Enter your full name",
        },
        {
            "id": "email",
            "type": "email",
            "label": "Email Address",
            "required": True,
            "placeholder": "you@example.com",
            "validation": {
                "pattern": r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
                "message": "Please enter a valid email address",
            },
        },
        {
            "id": "companySize",
            "type": "select",
            "label": "Company Size",
            "required": True,
            "options": [
                {"value": "1-50", "label": "1-50 employees"},
                {"value": "51-200", "label": "51-200 employees"},
                {"value": "201-1000", "label": "201-1000 employees"},
                {"value": "1000+", "label": "1000+ employees"},
            ],
        },
        {
            "id": "industry",
            "type": "radio",
            "label": "Industry",
            "required": True,
            "options": [
                {"value": "tech", "label": "Technology"},
                {"value": "healthcare", "label": "Healthcare"},
                {"value": "finance", "label": "Finance"},
                {"value": "retail", "label": "Retail"},
                {"value": "other", "label": "Other"},
            ],
        },
        {
            "id": "timeline",
            "type": "select",
            "label": "Project Timeline",
            "required": True,
            "options": [
                {"value": "immediate", "label": "Immediate (within 1 month)"},
                {"value": "short", "label": "Short-term (1-3 months)"},
                {"value": "medium", "label": "Medium-term (3-6 months)"},
                {"value": "long", "label": "Long-term (6+ months)"},
            ],
        },
        {
            "id": "comments",
            "type": "textarea",
            "label": "Additional Comments",
            "required": False,
            "placeholder": "Any other details you'd like to share...",
        },
        {
            "id": "satisfaction",
            "type": "range",
            "label": "Satisfaction Level",
            "required": True,
            "validation": {"min": 0, "max": 10, "step": 1},
        },
    ],
}


def get_sample_document() -> dict:
    """Return a fresh copy of the sample document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


def get_sample_text() -> str:
    return json.dumps(SAMPLE_DOCUMENT, indent=2) + "\n"
