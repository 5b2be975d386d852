from __future__ import annotations

import json
from pathlib import Path

import typer

app = typer.Typer(name="shouldbe", help="Preview and configure shouldbe failure messages")
schema_app = typer.Typer(name="schema", help="Generate config schema tooling")
app.add_typer(schema_app, name="schema")


def _decode(raw: str, what: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: {what} is not valid JSON: {e}", err=True)
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Fluent assertion engine tooling."""
    from shouldbe.verbose import setup_logger

    setup_logger(verbose=verbose)


@app.command()
def render(
    template: str = typer.Argument(help="Failure-message template"),
    label: str = typer.Option("subject", "--label", help="Subject label for {subject}"),
    actual_json: str = typer.Option("null", "--actual-json", help="Subject value as JSON, for {actual}"),
    because: str = typer.Option("", "--because", help="Reason, for {because}"),
    arg_json: list[str] = typer.Option(
        [], "--arg-json", help="Positional argument as JSON, formatted for {0}, {1}, ... (repeatable)"
    ),
):
    """Render a failure message as an assertion would raise it."""
    from shouldbe.exceptions import AssertionFailedException
    from shouldbe.formatting import format_value
    from shouldbe.testable import Testable

    if not label.strip():
        typer.echo("Error: --label must not be empty", err=True)
        raise typer.Exit(1)

    actual = _decode(actual_json, "--actual-json")
    args = [format_value(_decode(a, "--arg-json")) for a in arg_json]

    testable = Testable(actual, label)
    try:
        testable.fail(template, because, *args)
    except AssertionFailedException as e:
        typer.echo(e.message)
    except (ValueError, IndexError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("format")
def format_cmd(
    value_json: str = typer.Argument(help="Value to render, as JSON"),
):
    """Print the canonical rendering of a JSON value."""
    from shouldbe.formatting import format_value

    typer.echo(format_value(_decode(value_json, "VALUE_JSON")))


@app.command("check-config")
def check_config(
    config: str = typer.Argument(help="Path to shouldbe YAML config"),
):
    """Validate a config file and show what it would install."""
    import yaml
    from pydantic import ValidationError

    from shouldbe.config import apply_config, load_config
    from shouldbe.formatting import formatters

    config_path = Path(config)
    if not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        loaded = load_config(config_path)
    except ValidationError as e:
        typer.echo(f"Error: invalid config:\n{e}", err=True)
        raise typer.Exit(1)
    except yaml.YAMLError as e:
        typer.echo(f"Error: config is not valid YAML:\n{e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: invalid config: {e}", err=True)
        raise typer.Exit(1)

    apply_config(loaded)

    typer.echo(f"Config OK: {config_path}")
    typer.echo(f"  default_label: {loaded.default_label}")
    for cls in formatters.registered_types():
        typer.echo(f"  formatter: {cls.__module__}.{cls.__qualname__}")
    typer.echo(f"  frozen: {str(formatters.frozen).lower()}")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/shouldbe.schema.json", help="Output path for JSON Schema"
    ),
    doc: str | None = typer.Option(None, help="Optional output path for schema docs"),
):
    """Generate JSON Schema (and optionally docs) for the config format."""
    from shouldbe.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")
