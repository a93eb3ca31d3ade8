from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

from loadsim.config import get_settings
from loadsim.domain.definitions import expand_definitions, load_definitions
from loadsim.domain.errors import SchemaError
from loadsim.domain.registry import available_scenario_types, scenario_from_json
from loadsim.reporter import print_scenarios
from loadsim.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Load simulation scenario tooling.")
log = get_logger(__name__)


def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"Cannot read {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json}")


@app.command()
def types() -> None:
    """
    List the scenario types that can be decoded.
    """
    typer.echo("\n".join(available_scenario_types()))


@app.command()
def validate(path: Path = typer.Argument(..., help="JSON file holding a single scenario.")) -> None:
    """
    Decode a scenario file and print its canonical JSON.
    """
    _setup()
    try:
        scenario = scenario_from_json(_read(path))
    except SchemaError as exc:
        typer.echo(f"Invalid scenario: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    log.info("Scenario valid", extra={"path": str(path), "scenario_type": scenario.scenario_type})
    typer.echo(scenario.to_json())


@app.command()
def expand(
    path: Path = typer.Argument(..., help="JSON file holding an array of scenario definitions."),
    table: bool = typer.Option(False, "--table", "-t", help="Render a table instead of JSON."),
) -> None:
    """
    Expand scenario definitions into the ordered list of scenarios to execute.
    """
    _setup()
    try:
        definitions = load_definitions(_read(path))
    except SchemaError as exc:
        typer.echo(f"Invalid definitions: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    scenarios = expand_definitions(definitions)
    log.info(
        "Definitions expanded",
        extra={"path": str(path), "definitions": len(definitions), "scenarios": len(scenarios)},
    )
    if table:
        print_scenarios(scenarios)
        return
    typer.echo(json.dumps([scenario.to_dict() for scenario in scenarios], indent=2))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
