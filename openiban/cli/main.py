"""Main CLI entry point for OpenIBAN."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from openiban import __version__
from openiban.checksum import calculate_check_digits
from openiban.exceptions import ConfigurationError, InvalidIbanError
from openiban.iban import IbanFormat
from openiban.parser import IbanParser
from openiban.utils.config import get_settings
from openiban.utils.logging import LogPerformance, configure_logging, get_logger
from openiban.validation import IbanValidator, IbanValidatorOptions, ValidationMethod

app = typer.Typer(
    name="openiban",
    help="🏦 IBAN validation (structure + ISO 7064 MOD-97)",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()
logger = get_logger(__name__)


def _build_validator(method: Optional[str]) -> IbanValidator:
    settings = get_settings()
    options = IbanValidatorOptions.from_settings(settings)
    if method:
        options.validation_method = ValidationMethod.from_name(method)
    return IbanValidator(options)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"openiban {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Configure logging from settings before any command runs."""
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        dev_mode=settings.dev_mode,
    )


# ============================================================================
# COMMAND: validate
# ============================================================================


@app.command()
def validate(
    ibans: list[str] = typer.Argument(..., help="One or more IBANs (quote values with spaces)"),
    method: Optional[str] = typer.Option(
        None, "--method", "-m", help="Validation method (strict|loose)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """✅ Validate IBANs.

    Examples:
        openiban validate "NL91 ABNA 0417 1643 00"

        openiban validate NL91ABNA041716430A --method loose --json
    """
    try:
        validator = _build_validator(method)
    except ConfigurationError as e:
        console.print(f"[red]✗ {e.message}[/]")
        raise typer.Exit(2)

    with LogPerformance("batch_validation", logger):
        results = [validator.validate(iban) for iban in ibans]

    if as_json:
        typer.echo(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        table = Table(title="IBAN Validation", show_header=True)
        table.add_column("IBAN", style="cyan")
        table.add_column("Country")
        table.add_column("Result", style="bold")

        for result in results:
            status = (
                f"[green]✓ {result.result.value}[/]"
                if result.is_valid
                else f"[red]✗ {result.result.value}[/]"
            )
            country = result.country.country_name if result.country else "-"
            table.add_row(result.value or "", country, status)

        console.print(table)

    if not all(r.is_valid for r in results):
        raise typer.Exit(1)


# ============================================================================
# COMMAND: countries
# ============================================================================


@app.command()
def countries(
    sepa_only: bool = typer.Option(False, "--sepa-only", help="Only list SEPA countries"),
) -> None:
    """🌍 List supported countries."""
    registry = get_settings().build_registry().filter(sepa_only=sepa_only)

    table = Table(title=f"Supported Countries ({len(registry)})", show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country")
    table.add_column("Length", justify="right")
    table.add_column("BBAN")
    table.add_column("SEPA", justify="center")
    table.add_column("Example", style="dim")

    for code in sorted(registry):
        info = registry[code]
        table.add_row(
            code,
            info.country_name,
            str(info.length),
            str(info.bban),
            "✓" if info.is_sepa else "",
            info.example,
        )

    console.print(table)


# ============================================================================
# COMMAND: format
# ============================================================================


@app.command("format")
def format_iban(
    iban: str = typer.Argument(..., help="IBAN to format"),
    style: IbanFormat = typer.Option(IbanFormat.PRINT, "--style", "-s", help="Output format"),
) -> None:
    """🖨️ Print an IBAN in electronic, print or obfuscated form."""
    parser = IbanParser(_build_validator(None))
    try:
        parsed = parser.parse(iban)
    except InvalidIbanError as e:
        console.print(f"[red]✗ Invalid IBAN: {e.result.result.value}[/]")
        raise typer.Exit(1)

    typer.echo(parsed.to_string(style))


# ============================================================================
# COMMAND: check-digits
# ============================================================================


@app.command("check-digits")
def check_digits(
    country_code: str = typer.Argument(..., help="Two-letter country code"),
    bban: str = typer.Argument(..., help="BBAN (account part after the check digits)"),
) -> None:
    """🔢 Compute the check digits and print the complete IBAN."""
    country_code = country_code.upper()
    try:
        digits = calculate_check_digits(country_code, "".join(bban.split()))
    except ValueError as e:
        console.print(f"[red]✗ {e}[/]")
        raise typer.Exit(1)

    typer.echo(f"{country_code}{digits}{''.join(bban.split())}")


if __name__ == "__main__":
    app()
