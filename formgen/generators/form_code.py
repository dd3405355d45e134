"""Form code generator — a React form component for a form document.

Two flavors are supported:

- ``html``: react-hook-form with plain HTML inputs
- ``shadcn``: react-hook-form with shadcn/ui form components

Both embed the zod schema from ``formgen.generators.zod_source`` as the
form resolver, so submit-time checking in the generated component matches
``DocumentValidator`` exactly.
"""

from __future__ import annotations

from typing import Any, Callable

from formgen.generators.zod_source import (
    TO_NUMBER_HELPER,
    js_literal,
    needs_number_helper,
    render_object_schema,
)
from formgen.models.form_document import (
    ChoiceField,
    Field,
    FieldType,
    FormDocument,
    NumberField,
    RangeField,
    require_all_field_types,
)

FLAVORS = ("html", "shadcn")


def _indent(lines: list[str], depth: int) -> list[str]:
    pad = "  " * depth
    return [pad + line if line else line for line in lines]


def _register(field: Field) -> str:
    return f"{{...form.register({js_literal(field.id)})}}"


def _placeholder_attr(field: Field) -> str:
    placeholder = getattr(field, "placeholder", None)
    return f" placeholder={{{js_literal(placeholder)}}}" if placeholder else ""


def _numeric_attrs(field: Field) -> str:
    validation = field.validation if isinstance(field, (NumberField, RangeField)) else None
    if validation is None:
        return ""
    attrs = []
    for name in ("min", "max", "step"):
        value = getattr(validation, name)
        if value is not None:
            attrs.append(f"{name}={{{js_literal(value)}}}")
    return (" " + " ".join(attrs)) if attrs else ""


# --- html flavor ---


def _html_input(field: Field) -> list[str]:
    return [
        f'<input type="{field.type.value}" id={{{js_literal(field.id)}}} {_register(field)}'
        f"{_placeholder_attr(field)} />"
    ]


def _html_number(field: Field) -> list[str]:
    return [
        f'<input type="{field.type.value}" id={{{js_literal(field.id)}}} {_register(field)}'
        f"{_placeholder_attr(field)}{_numeric_attrs(field)} />"
    ]


def _html_textarea(field: Field) -> list[str]:
    return [f"<textarea id={{{js_literal(field.id)}}} {_register(field)}{_placeholder_attr(field)} />"]


def _html_select(field: ChoiceField) -> list[str]:
    lines = [f"<select id={{{js_literal(field.id)}}} {_register(field)}>"]
    lines.append(f'  <option value="">{{{js_literal(field.placeholder or "Select an option")}}}</option>')
    for option in field.options:
        lines.append(f"  <option value={{{js_literal(option.value)}}}>{{{js_literal(option.label)}}}</option>")
    lines.append("</select>")
    return lines


def _html_option_inputs(field: ChoiceField, input_type: str) -> list[str]:
    lines = []
    for option in field.options:
        lines.extend(
            [
                "<label>",
                f'  <input type="{input_type}" {_register(field)} value={{{js_literal(option.value)}}} />',
                f"  {{{js_literal(option.label)}}}",
                "</label>",
            ]
        )
    return lines


def _html_checkbox(field: Field) -> list[str]:
    return [f'<input type="checkbox" id={{{js_literal(field.id)}}} {_register(field)} />']


def _html_switch(field: Field) -> list[str]:
    return [f'<input type="checkbox" role="switch" id={{{js_literal(field.id)}}} {_register(field)} />']


_HTML_CONTROLS: dict[FieldType, Callable[[Any], list[str]]] = require_all_field_types(
    {
        FieldType.TEXT: _html_input,
        FieldType.EMAIL: _html_input,
        FieldType.PASSWORD: _html_input,
        FieldType.TEL: _html_input,
        FieldType.NUMBER: _html_number,
        FieldType.RANGE: _html_number,
        FieldType.TEXTAREA: _html_textarea,
        FieldType.SELECT: _html_select,
        FieldType.RADIO: lambda f: _html_option_inputs(f, "radio"),
        FieldType.CHECKBOX_GROUP: lambda f: _html_option_inputs(f, "checkbox"),
        FieldType.CHECKBOX: _html_checkbox,
        FieldType.SWITCH: _html_switch,
    },
    "html form generator",
)


def _html_field(field: Field) -> list[str]:
    required = ' {" *"}' if field.required else ""
    errors = f"form.formState.errors[{js_literal(field.id)}]"
    return [
        "<div>",
        f"  <label htmlFor={{{js_literal(field.id)}}}>{{{js_literal(field.label)}}}{required}</label>",
        *_indent(_HTML_CONTROLS[field.type](field), 1),
        f"  {{{errors} && <span>{{{errors}?.message}}</span>}}",
        "</div>",
    ]


# --- shadcn flavor ---


def _shadcn_input(field: Field) -> list[str]:
    return [f'<Input type="{field.type.value}" autoComplete="off"{_placeholder_attr(field)} {{...formField}} />']


def _shadcn_number(field: Field) -> list[str]:
    return [
        f'<Input type="number" autoComplete="off"{_placeholder_attr(field)}{_numeric_attrs(field)}'
        " {...formField} />"
    ]


def _shadcn_range(field: RangeField) -> list[str]:
    return [
        '<div className="flex gap-8">',
        f"  <Slider{_numeric_attrs(field)}",
        "    value={[Number(formField.value ?? " + js_literal(field.validation.min or 0) + ")]}",
        "    onValueChange={(value) => formField.onChange(value[0])}",
        "  />",
        '  <span className="text-sm font-bold">{formField.value}</span>',
        "</div>",
    ]


def _shadcn_textarea(field: Field) -> list[str]:
    return [f"<Textarea{_placeholder_attr(field)} {{...formField}} />"]


def _shadcn_select(field: ChoiceField) -> list[str]:
    lines = [
        "<Select onValueChange={formField.onChange} defaultValue={formField.value}>",
        "  <SelectTrigger>",
        f"    <SelectValue placeholder={{{js_literal(field.placeholder or 'Select an option')}}} />",
        "  </SelectTrigger>",
        "  <SelectContent>",
    ]
    for option in field.options:
        lines.append(
            f"    <SelectItem value={{{js_literal(option.value)}}}>{{{js_literal(option.label)}}}</SelectItem>"
        )
    lines.extend(["  </SelectContent>", "</Select>"])
    return lines


def _shadcn_radio(field: ChoiceField) -> list[str]:
    lines = ["<RadioGroup onValueChange={formField.onChange} defaultValue={formField.value}>"]
    for option in field.options:
        lines.extend(
            [
                '  <div className="flex items-center space-x-2">',
                f"    <RadioGroupItem value={{{js_literal(option.value)}}} />",
                f"    <Label>{{{js_literal(option.label)}}}</Label>",
                "  </div>",
            ]
        )
    lines.append("</RadioGroup>")
    return lines


def _shadcn_checkbox_group(field: ChoiceField) -> list[str]:
    lines = ["<div>"]
    for option in field.options:
        value = js_literal(option.value)
        lines.extend(
            [
                '  <div className="flex items-center space-x-2">',
                "    <Checkbox",
                f"      checked={{(formField.value ?? []).includes({value})}}",
                "      onCheckedChange={(checked) =>",
                "        formField.onChange(",
                "          checked",
                f"            ? [...(formField.value ?? []), {value}]",
                f"            : (formField.value ?? []).filter((v: string) => v !== {value})",
                "        )",
                "      }",
                "    />",
                f"    <Label>{{{js_literal(option.label)}}}</Label>",
                "  </div>",
            ]
        )
    lines.append("</div>")
    return lines


def _shadcn_checkbox(field: Field) -> list[str]:
    return ["<Checkbox checked={formField.value} onCheckedChange={formField.onChange} />"]


def _shadcn_switch(field: Field) -> list[str]:
    return ["<Switch checked={formField.value} onCheckedChange={formField.onChange} />"]


_SHADCN_CONTROLS: dict[FieldType, Callable[[Any], list[str]]] = require_all_field_types(
    {
        FieldType.TEXT: _shadcn_input,
        FieldType.EMAIL: _shadcn_input,
        FieldType.PASSWORD: _shadcn_input,
        FieldType.TEL: _shadcn_input,
        FieldType.NUMBER: _shadcn_number,
        FieldType.RANGE: _shadcn_range,
        FieldType.TEXTAREA: _shadcn_textarea,
        FieldType.SELECT: _shadcn_select,
        FieldType.RADIO: _shadcn_radio,
        FieldType.CHECKBOX_GROUP: _shadcn_checkbox_group,
        FieldType.CHECKBOX: _shadcn_checkbox,
        FieldType.SWITCH: _shadcn_switch,
    },
    "shadcn form generator",
)


def _shadcn_field(field: Field) -> list[str]:
    required = ' {" *"}' if field.required else ""
    return [
        "<FormField",
        "  control={form.control}",
        f"  name={{{js_literal(field.id)}}}",
        "  render={({ field: formField }) => (",
        "    <FormItem>",
        f"      <FormLabel>{{{js_literal(field.label)}}}{required}</FormLabel>",
        "      <FormControl>",
        *_indent(_SHADCN_CONTROLS[field.type](field), 4),
        "      </FormControl>",
        "      <FormMessage />",
        "    </FormItem>",
        "  )}",
        "/>",
    ]


_SHADCN_IMPORTS = [
    'import { Button } from "@/components/ui/button";',
    'import { Checkbox } from "@/components/ui/checkbox";',
    "import {",
    "  Form,",
    "  FormControl,",
    "  FormField,",
    "  FormItem,",
    "  FormLabel,",
    "  FormMessage,",
    '} from "@/components/ui/form";',
    'import { Input } from "@/components/ui/input";',
    'import { Label } from "@/components/ui/label";',
    'import { RadioGroup, RadioGroupItem } from "@/components/ui/radio-group";',
    "import {",
    "  Select,",
    "  SelectContent,",
    "  SelectItem,",
    "  SelectTrigger,",
    "  SelectValue,",
    '} from "@/components/ui/select";',
    'import { Slider } from "@/components/ui/slider";',
    'import { Switch } from "@/components/ui/switch";',
    'import { Textarea } from "@/components/ui/textarea";',
]


# --- Assembly ---


def generate_form_code(document: FormDocument, flavor: str = "html") -> str:
    """Generate a React form component for *document* in the given flavor."""
    if flavor not in FLAVORS:
        raise ValueError(f"Unknown flavor '{flavor}'. Must be one of: {', '.join(FLAVORS)}")

    lines = [
        f"/* {document.form_title}: react-hook-form with zod validation ({flavor}) */",
        "",
        'import { zodResolver } from "@hookform/resolvers/zod";',
        'import { useForm } from "react-hook-form";',
        'import { z } from "zod";',
    ]
    if flavor == "shadcn":
        lines.extend(_SHADCN_IMPORTS)
    lines.append("")
    if needs_number_helper(document):
        lines.extend([TO_NUMBER_HELPER, ""])
    lines.extend(
        [
            f"const formSchema = {render_object_schema(document)};",
            "",
            "type FormData = z.infer<typeof formSchema>;",
            "",
            "export function DynamicForm() {",
            "  const form = useForm<FormData>({",
            "    resolver: zodResolver(formSchema),",
            "  });",
            "",
            "  const onSubmit = (data: FormData) => {",
            "    console.log(data);",
            "  };",
            "",
            "  return (",
        ]
    )

    header = [
        f"<h2>{{{js_literal(document.form_title)}}}</h2>",
        f"<p>{{{js_literal(document.form_description)}}}</p>",
    ]
    if flavor == "html":
        body = ["<form onSubmit={form.handleSubmit(onSubmit)}>", *_indent(header, 1)]
        for field in document.fields:
            body.extend(_indent(_html_field(field), 1))
        body.extend(['  <button type="submit">Submit</button>', "</form>"])
    else:
        body = [
            "<Form {...form}>",
            '  <form onSubmit={form.handleSubmit(onSubmit)} className="space-y-6">',
            *_indent(header, 2),
        ]
        for field in document.fields:
            body.extend(_indent(_shadcn_field(field), 2))
        body.extend(['    <Button type="submit">Submit</Button>', "  </form>", "</Form>"])

    lines.extend(_indent(body, 2))
    lines.extend(["  );", "}"])
    return "\n".join(lines) + "\n"
