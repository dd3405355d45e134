"""formgen CLI — the main entry point for the Form Generator."""

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from formgen import __version__
from formgen.errors import InputFormatError, SchemaValidationError

console = Console()

EXIT_INVALID = 1
EXIT_INPUT_FORMAT = 2


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def main(verbose: bool):
    """formgen — Form Generator.

    Validate JSON form schemas, check submissions against them, and
    generate equivalent validator and form code.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def _load_or_exit(path: str):
    from formgen.utils.loader import load_document_file

    try:
        return load_document_file(path)
    except InputFormatError as e:
        console.print(f"  [red]Failed to parse:[/] {e}")
        sys.exit(EXIT_INPUT_FORMAT)


def _print_schema_errors(errors: list[str]):
    console.print("[red]Schema validation FAILED:[/]")
    for error in errors:
        console.print(f"  [red]x[/] {error}")


# ── Validate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def validate(schema_path: str, as_json: bool):
    """Validate a form document against the field grammar.

    Every structural defect is reported in one pass.
    """
    from formgen.pipeline import check_document

    data = _load_or_exit(schema_path)
    report = check_document(data)

    if as_json:
        click.echo(json.dumps({"valid": report.passed, "errors": report.errors}, indent=2))
    else:
        console.print(f"\n[bold blue]formgen[/] — Validating: {schema_path}\n")
        if report.passed:
            table = Table(title=f"{report.form_title} ({report.field_count} fields)")
            table.add_column("ID", style="cyan")
            table.add_column("Type")
            table.add_column("Label")
            table.add_column("Required", justify="center")
            for field in data["fields"]:
                required = "[green]Y[/]" if field.get("required") else "[dim]N[/]"
                table.add_row(field["id"], field["type"], field["label"], required)
            console.print(table)
            console.print("\n[green]Valid![/]")
        else:
            _print_schema_errors(report.errors)

    if not report.passed:
        sys.exit(EXIT_INVALID)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
@click.argument("data_path")
def check(schema_path: str, data_path: str):
    """Check a form submission (a JSON object keyed by field id).

    All invalid fields are reported together.
    """
    from formgen.pipeline import build_form

    console.print(f"\n[bold blue]formgen[/] — Checking: {data_path}\n")

    try:
        form = build_form(_load_or_exit(schema_path))
    except SchemaValidationError as e:
        _print_schema_errors(e.errors)
        sys.exit(EXIT_INVALID)

    submission = _load_or_exit(data_path)
    if not isinstance(submission, dict):
        console.print("  [red]Form data must be a JSON object keyed by field id[/]")
        sys.exit(EXIT_INPUT_FORMAT)

    result = form.validator.safe_parse(submission)
    errors = result.errors_by_field()
    for field_id in form.validator.field_ids:
        if field_id in errors:
            for message in errors[field_id]:
                console.print(f"  [red]x[/] {field_id}: {message}")
        else:
            console.print(f"  [green]v[/] {field_id}")

    console.print(Panel(result.summary(), title="Submission Result"))
    if not result.passed:
        sys.exit(EXIT_INVALID)


# ── Generate ─────────────────────────────────────────────────────────


@main.command()
@click.argument("schema_path")
@click.option(
    "--flavor",
    "-f",
    default="zod",
    type=click.Choice(["zod", "html", "shadcn"]),
    help="zod validator module, or a React form component",
)
@click.option("--output", "-o", default=None, help="Write the code to this file")
def generate(schema_path: str, flavor: str, output: str | None):
    """Generate validator or form code for a form document."""
    from formgen.pipeline import build_form

    try:
        form = build_form(_load_or_exit(schema_path))
    except SchemaValidationError as e:
        _print_schema_errors(e.errors)
        sys.exit(EXIT_INVALID)

    code = form.generate_code(flavor)
    if output:
        with open(output, "w") as f:
            f.write(code)
        console.print(f"[green]{flavor} code written to:[/] {output}")
    else:
        console.print(Syntax(code, "typescript", theme="monokai", word_wrap=True))


# ── Schema / Sample ──────────────────────────────────────────────────


@main.command()
def schema():
    """Print the JSON Schema describing form documents."""
    from formgen.spec.schema import get_schema

    click.echo(json.dumps(get_schema(), indent=2))


@main.command()
@click.option("--output", "-o", default=None, help="Write the sample to this file")
def sample(output: str | None):
    """Print (or write) a sample form document to start from."""
    from formgen.samples import get_sample_text

    text = get_sample_text()
    if output:
        with open(output, "w") as f:
            f.write(text)
        console.print(f"[green]Sample form written to:[/] {output}")
    else:
        click.echo(text, nl=False)
