"""Zod source emitter — literal validator source for a form document.

Renders the same ``FieldRules`` descriptors the live validators are built
from into TypeScript using the ``zod`` library, so the code shown to (or
exported by) a user accepts exactly what ``DocumentValidator`` accepts,
with the same bounds and messages. Output is deterministic for a given
document.
"""

from __future__ import annotations

import json
from typing import Any

from formgen.compiler.rules import FieldRules, Rule, RuleKind, ValueKind, describe_field
from formgen.models.form_document import FormDocument

INDENT = "  "

# Empty strings and null mean "not provided"; numeric strings are coerced.
TO_NUMBER_HELPER = """const toNumber = (value: unknown) => {
  if (value === null || value === undefined) return undefined;
  if (typeof value === "string") {
    return value.trim() === "" ? undefined : Number(value);
  }
  return value;
};"""


def js_literal(value: Any) -> str:
    """Render a Python literal as its JavaScript equivalent."""
    return json.dumps(value, ensure_ascii=False)


def _opts(message: str) -> str:
    return f"{{ message: {js_literal(message)} }}"


def _base_params(rules: FieldRules, with_required: bool) -> str:
    params = [f"invalid_type_error: {js_literal(rules.type_message)}"]
    if with_required:
        params.append(f"required_error: {js_literal(rules.required_message)}")
    return "{ " + ", ".join(params) + " }"


def _render_constraint(rule: Rule) -> str:
    if rule.kind is RuleKind.MIN_LENGTH:
        return f".min({rule.value}, {_opts(rule.message)})"
    if rule.kind is RuleKind.MAX_LENGTH:
        return f".max({rule.value}, {_opts(rule.message)})"
    if rule.kind is RuleKind.PATTERN:
        return f".regex(new RegExp({js_literal(rule.value)}), {_opts(rule.message)})"
    if rule.kind is RuleKind.MINIMUM:
        return f".min({js_literal(rule.value)}, {_opts(rule.message)})"
    if rule.kind is RuleKind.MAXIMUM:
        return f".max({js_literal(rule.value)}, {_opts(rule.message)})"
    if rule.kind is RuleKind.MULTIPLE_OF:
        return f".multipleOf({js_literal(rule.value)}, {_opts(rule.message)})"
    if rule.kind is RuleKind.ONE_OF:
        return f".refine((value) => {js_literal(list(rule.value))}.includes(value), {_opts(rule.message)})"
    if rule.kind is RuleKind.ALL_OF:
        return (
            f".refine((values) => values.every((value) => "
            f"{js_literal(list(rule.value))}.includes(value)), {_opts(rule.message)})"
        )
    if rule.kind is RuleKind.IS_TRUE:
        return f".refine((value) => value === true, {_opts(rule.message)})"
    raise NotImplementedError(f"No zod rendering for rule '{rule.kind.value}'")


def _render_string(rules: FieldRules) -> str:
    constraints = "".join(_render_constraint(r) for r in rules.rules)
    if rules.required:
        return (
            f"z.string({_base_params(rules, True)})"
            f".min(1, {_opts(rules.required_message)}){constraints}"
        )
    if not constraints:
        return f"z.string({_base_params(rules, False)}).optional().nullable()"
    return (
        f'z.string({_base_params(rules, False)}){constraints}.or(z.literal("")).optional().nullable()'
    )


def _render_choice(rules: FieldRules) -> str:
    (rule,) = rules.rules
    values = js_literal(list(rule.value))
    if rules.required:
        return (
            f"z.string({_base_params(rules, True)})"
            f".min(1, {_opts(rules.required_message)})"
            f"{_render_constraint(rule)}"
        )
    return (
        f"z.string({_base_params(rules, False)})"
        f'.refine((value) => value === "" || {values}.includes(value), {_opts(rule.message)})'
        ".optional().nullable()"
    )


def _render_string_list(rules: FieldRules) -> str:
    constraints = "".join(_render_constraint(r) for r in rules.rules)
    if rules.required:
        return (
            f"z.array(z.string(), {_base_params(rules, True)})"
            f".min(1, {_opts(rules.required_message)}){constraints}"
        )
    return f"z.array(z.string(), {_base_params(rules, False)}){constraints}.optional().nullable()"


def _render_number(rules: FieldRules) -> str:
    constraints = "".join(_render_constraint(r) for r in rules.rules)
    inner = f"z.number({_base_params(rules, rules.required)}).finite(){constraints}"
    if not rules.required:
        inner += ".optional()"
    return f"z.preprocess(toNumber, {inner})"


def _render_boolean(rules: FieldRules) -> str:
    constraints = "".join(_render_constraint(r) for r in rules.rules)
    if rules.required:
        return f"z.boolean({_base_params(rules, True)}){constraints}"
    return f"z.boolean({_base_params(rules, False)}).optional().nullable()"


def render_field_schema(rules: FieldRules) -> str:
    """Render one field's zod schema expression."""
    if rules.kind is ValueKind.NUMBER:
        return _render_number(rules)
    if rules.kind is ValueKind.BOOLEAN:
        return _render_boolean(rules)
    if rules.kind is ValueKind.STRING_LIST:
        return _render_string_list(rules)
    if rules.folded:
        return _render_choice(rules)
    return _render_string(rules)


def render_object_schema(document: FormDocument, indent: str = "") -> str:
    """Render ``z.object({...})`` for the whole document, in field order."""
    lines = ["z.object({"]
    for field in document.fields:
        expression = render_field_schema(describe_field(field))
        lines.append(f"{indent}{INDENT}{js_literal(field.id)}: {expression},")
    lines.append(f"{indent}}})")
    return "\n".join(lines)


def needs_number_helper(document: FormDocument) -> bool:
    return any(describe_field(f).kind is ValueKind.NUMBER for f in document.fields)


def generate_validator_source(document: FormDocument, export_name: str = "formSchema") -> str:
    """Generate a standalone TypeScript module exporting the zod schema."""
    parts = ['import { z } from "zod";', ""]
    if needs_number_helper(document):
        parts.extend([TO_NUMBER_HELPER, ""])
    parts.append(f"export const {export_name} = {render_object_schema(document)};")
    parts.append("")
    parts.append(f"export type FormData = z.infer<typeof {export_name}>;")
    return "\n".join(parts) + "\n"
