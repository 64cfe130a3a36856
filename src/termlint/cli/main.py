"""CLI entry point for termlint.

Invoked as::

    termlint [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m termlint.cli.main

Commands
--------
validate    Scan a model for non-inclusive terms
terms       Show the resolved term table
validators  List registered validators
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from termlint.errors import ConfigurationError, ModelLoadError
from termlint.validator.terms import TermsConfig

console = Console()
err_console = Console(stderr=True)

EXIT_FINDINGS = 1
EXIT_USAGE = 2


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_term_options(values: tuple[str, ...], option: str) -> dict[str, tuple[str, ...]]:
    """Parse repeated ``TERM=suggestion,suggestion`` options."""
    terms: dict[str, tuple[str, ...]] = {}
    for value in values:
        term, sep, suggestions = value.partition("=")
        if not sep:
            raise click.BadParameter(f"expected TERM=suggestion[,suggestion...], got {value!r}", param_hint=option)
        terms[term.strip()] = tuple(s.strip() for s in suggestions.split(",") if s.strip())
    return terms


def _load_config(config_path: str | None, append: tuple[str, ...], replace: tuple[str, ...]) -> TermsConfig:
    """Merge the configuration file with command-line term options, exiting on error."""
    cli_config = TermsConfig(
        append_terms=_parse_term_options(append, "--append"),
        replace_terms=_parse_term_options(replace, "--replace"),
    )
    try:
        base = TermsConfig.from_file(config_path) if config_path else TermsConfig()
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(EXIT_USAGE)
    return base.merged(cli_config)


def _severity_color(severity_name: str) -> str:
    """Map a DiagnosticSeverity name to a Rich color string."""
    colors = {
        "ERROR": "red",
        "DANGER": "red",
        "WARNING": "yellow",
        "NOTE": "blue",
    }
    return colors.get(severity_name, "white")


_term_options = [
    click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=False, dir_okay=False),
        default=None,
        help="YAML or JSON validator configuration file",
    ),
    click.option(
        "--append",
        multiple=True,
        metavar="TERM=S1,S2",
        help="Add a term (and its suggestions) to the built-in terms",
    ),
    click.option(
        "--replace",
        multiple=True,
        metavar="TERM=S1,S2",
        help="Use this term instead of the built-in terms",
    ),
]


def term_options(func):  # type: ignore[no-untyped-def]
    for option in reversed(_term_options):
        func = option(func)
    return func


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="termlint")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """Find non-inclusive terms in shape names, namespaces and trait values."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from termlint import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]termlint[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# validators command
# ---------------------------------------------------------------------------


@cli.command(name="validators")
def validators_command() -> None:
    """List registered validators, including those from entry-points."""
    from termlint.plugins.registry import VALIDATORS

    VALIDATORS.load_entrypoints()
    console.print("[bold]Registered validators:[/bold]")
    for name in VALIDATORS.list_validators():
        console.print(f"  {name}")


# ---------------------------------------------------------------------------
# terms command
# ---------------------------------------------------------------------------


@cli.command(name="terms")
@term_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format. 'json' prints a configuration document that reproduces the table.",
)
def terms_command(
    config_path: str | None,
    append: tuple[str, ...],
    replace: tuple[str, ...],
    output_format: str,
) -> None:
    """Show the resolved non-inclusive term table."""
    config = _load_config(config_path, append, replace)
    try:
        table = config.build()
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(EXIT_USAGE)

    if output_format == "json":
        click.echo(json.dumps(TermsConfig(replace_terms=dict(table)).to_dict(), indent=2))
        return

    output = Table(title="Non-inclusive terms")
    output.add_column("Term", style="bold")
    output.add_column("Suggestions")
    for term, suggestions in table.items():
        output.add_row(term, ", ".join(suggestions) or "[dim](none)[/dim]")
    console.print(output)


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.argument("model_file", type=click.Path(exists=False))
@term_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format",
)
def validate_command(
    model_file: str,
    config_path: str | None,
    append: tuple[str, ...],
    replace: tuple[str, ...],
    output_format: str,
) -> None:
    """Scan a model for non-inclusive terms.

    MODEL_FILE is a JSON or YAML model document.
    """
    from termlint.model.loader import load_model
    from termlint.validator import NoninclusiveTermsValidator

    config = _load_config(config_path, append, replace)
    try:
        validator = NoninclusiveTermsValidator(config)
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(EXIT_USAGE)

    try:
        model = load_model(model_file)
    except ModelLoadError as exc:
        err_console.print(f"[red]Model error:[/red] {exc}")
        sys.exit(EXIT_USAGE)

    diagnostics = validator.validate(model)

    if output_format == "json":
        click.echo(json.dumps([d.to_dict() for d in diagnostics], indent=2))
        sys.exit(EXIT_FINDINGS if diagnostics else 0)

    if not diagnostics:
        console.print(f"[green]OK[/green] {model_file} — no non-inclusive terms found")
        sys.exit(0)

    table = Table(title=f"Validation: {model_file}", show_lines=True)
    table.add_column("Severity", style="bold", min_width=8)
    table.add_column("Shape", min_width=10)
    table.add_column("Location", min_width=8)
    table.add_column("Message")

    for d in diagnostics:
        color = _severity_color(d.severity.value)
        loc = "-" if d.source_location.is_none else f"{d.source_location.line}:{d.source_location.column}"
        table.add_row(
            f"[{color}]{d.severity.value}[/{color}]",
            str(d.shape_id) if d.shape_id is not None else "-",
            loc,
            d.message,
        )

    console.print(table)
    console.print(f"\n[bold]Summary:[/bold] {len(diagnostics)} warning(s)")
    sys.exit(EXIT_FINDINGS)


if __name__ == "__main__":
    cli()
