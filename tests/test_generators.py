"""Tests for zod source and React form code generation."""

import pytest

from formgen.compiler.rules import describe_field
from formgen.generators.form_code import FLAVORS, generate_form_code
from formgen.generators.zod_source import (
    TO_NUMBER_HELPER,
    generate_validator_source,
    js_literal,
    needs_number_helper,
    render_field_schema,
)
from formgen.models.form_document import FieldType
from formgen.samples import get_sample_document
from formgen.spec.schema_validator import validate_form_schema


def _make_document(*fields):
    return validate_form_schema(
        {"formTitle": "Signup", "formDescription": "Create an account", "fields": list(fields)}
    )


def _render(field: dict) -> str:
    return render_field_schema(describe_field(_make_document(field).fields[0]))


# --- zod source ---


def test_js_literal_escapes_strings():
    assert js_literal('say "hi"') == '"say \\"hi\\""'
    assert js_literal(["a", "b"]) == '["a", "b"]'
    assert js_literal(2.5) == "2.5"


def test_required_text_schema():
    expr = _render(
        {"id": "name", "type": "text", "label": "Name", "required": True, "validation": {"min": 2}}
    )
    assert expr.startswith("z.string(")
    assert '.min(1, { message: "Name is required" })' in expr
    assert '.min(2, { message: "Name must be at least 2 characters" })' in expr
    assert ".optional()" not in expr


def test_optional_constrained_text_accepts_empty_string():
    expr = _render({"id": "nick", "type": "text", "label": "Nick", "validation": {"max": 8}})
    assert '.or(z.literal(""))' in expr
    assert expr.endswith(".optional().nullable()")


def test_email_uses_shared_pattern_and_message():
    field = {
        "id": "email",
        "type": "email",
        "label": "Email",
        "validation": {"message": "Please enter a valid email address"},
    }
    expr = _render(field)
    assert expr.count('{ message: "Please enter a valid email address" }') == 1
    rules = describe_field(_make_document(field).fields[0])
    assert js_literal(rules.rules[0].value) in expr


def test_number_schema_uses_preprocess():
    expr = _render(
        {
            "id": "age",
            "type": "number",
            "label": "Age",
            "required": True,
            "validation": {"min": 0, "max": 120, "step": 1},
        }
    )
    assert expr.startswith("z.preprocess(toNumber, z.number(")
    assert '.min(0, { message: "Minimum value is 0" })' in expr
    assert '.max(120, { message: "Maximum value is 120" })' in expr
    assert '.multipleOf(1, { message: "Value must be a multiple of 1" })' in expr


def test_choice_and_group_schemas():
    options = [{"value": "a", "label": "A"}, {"value": "b", "label": "B"}]
    select = _render({"id": "s", "type": "select", "label": "S", "options": options})
    group = _render(
        {"id": "g", "type": "checkbox-group", "label": "G", "required": True, "options": options}
    )
    assert 'value === "" || ["a", "b"].includes(value)' in select
    assert group.startswith("z.array(z.string()")
    assert '"Select at least one option for G"' in group


def test_required_switch_schema():
    expr = _render({"id": "alerts", "type": "switch", "label": "Alerts", "required": True})
    assert expr.startswith("z.boolean(")
    assert '"Alerts must be turned on"' in expr


def test_number_helper_only_when_needed():
    text_only = _make_document({"id": "a", "type": "text", "label": "A"})
    with_range = _make_document(
        {"id": "r", "type": "range", "label": "R", "validation": {"min": 0, "max": 5}}
    )
    assert not needs_number_helper(text_only)
    assert TO_NUMBER_HELPER not in generate_validator_source(text_only)
    assert TO_NUMBER_HELPER in generate_validator_source(with_range)


def test_validator_source_module_shape():
    document = validate_form_schema(get_sample_document())
    source = generate_validator_source(document, export_name="surveySchema")
    assert source.startswith('import { z } from "zod";')
    assert "export const surveySchema = z.object({" in source
    assert "export type FormData = z.infer<typeof surveySchema>;" in source
    for field_id in document.field_ids:
        assert f'  "{field_id}": ' in source


def test_validator_source_is_deterministic():
    first = generate_validator_source(validate_form_schema(get_sample_document()))
    second = generate_validator_source(validate_form_schema(get_sample_document()))
    assert first == second


def test_every_field_type_renders():
    fields = []
    for field_type in FieldType:
        field = {"id": field_type.value, "type": field_type.value, "label": field_type.value}
        if field_type.value in ("select", "radio", "checkbox-group"):
            field["options"] = [{"value": "x", "label": "X"}]
        if field_type is FieldType.RANGE:
            field["validation"] = {"min": 1, "max": 3}
        fields.append(field)
    source = generate_validator_source(_make_document(*fields))
    for field_type in FieldType:
        assert f'  "{field_type.value}": z.' in source


# --- form code ---


@pytest.mark.parametrize("flavor", FLAVORS)
def test_form_code_embeds_validator(flavor):
    document = validate_form_schema(get_sample_document())
    code = generate_form_code(document, flavor)
    assert "resolver: zodResolver(formSchema)" in code
    assert "const formSchema = z.object({" in code
    assert "export function DynamicForm()" in code
    assert '"Project Requirements Survey"' in code


def test_html_form_controls():
    document = _make_document(
        {"id": "bio", "type": "textarea", "label": "Bio", "placeholder": "About you"},
        {
            "id": "plan",
            "type": "select",
            "label": "Plan",
            "required": True,
            "options": [{"value": "free", "label": "Free"}],
        },
    )
    code = generate_form_code(document, "html")
    assert '<textarea id={"bio"} {...form.register("bio")} placeholder={"About you"} />' in code
    assert '<option value={"free"}>{"Free"}</option>' in code
    assert '{"Plan"} {" *"}' in code


def test_shadcn_form_controls():
    document = _make_document(
        {"id": "vol", "type": "range", "label": "Volume", "validation": {"min": 0, "max": 11}},
        {"id": "ok", "type": "switch", "label": "OK"},
    )
    code = generate_form_code(document, "shadcn")
    assert 'import { Slider } from "@/components/ui/slider";' in code
    assert "<Slider min={0} max={11}" in code
    assert "<Switch checked={formField.value} onCheckedChange={formField.onChange} />" in code


def test_unknown_flavor_is_rejected():
    document = _make_document({"id": "a", "type": "text", "label": "A"})
    with pytest.raises(ValueError):
        generate_form_code(document, "vue")
