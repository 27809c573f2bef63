"""deviceppi CLI.

Diagnostic commands for the classification table and the fallback
heuristic:

    deviceppi resolve --json
    deviceppi lookup "iPhone14,5"
    deviceppi guess --device-class tablet --scale 2
    deviceppi table --ppi 264
"""

from __future__ import annotations

import json
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from deviceppi.core.config import load_config
from deviceppi.core.env import LOG_LEVELS
from deviceppi.core.exceptions import DevicePpiError
from deviceppi.core.logging import configure_logging, get_logger
from deviceppi.ppi.catalog import DEFAULT_TABLE
from deviceppi.ppi.estimator import guess
from deviceppi.ppi.facade import resolve_ppi
from deviceppi.ppi.resolver import lookup
from deviceppi.ppi.types import (
    BestGuess,
    DeviceClass,
    Found,
    ResolutionOutcome,
    ScaleSignal,
)
from deviceppi.shared.platform import detect_platform

console = Console()
logger = get_logger(__name__)

# Commands other than resolve do not load configuration
DEFAULT_CLI_LOG_LEVEL = "WARNING"

app = typer.Typer(
    name="deviceppi",
    help="Physical pixel density lookup for iPhone, iPod touch and iPad models",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def safe_cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Report DevicePpiError with its fix suggestions and exit 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DevicePpiError as e:
            logger.error(f"{func.__name__} failed", error_code=e.error_code)
            typer.echo(f"✗ {e.user_message} [{e.error_code}]", err=True)
            typer.echo(f"  Why: {e.why_it_happened}", err=True)
            for suggestion in e.how_to_fix:
                typer.echo(f"  - {suggestion}", err=True)
            raise typer.Exit(code=1)

    return wrapper


def _outcome_to_dict(outcome: ResolutionOutcome) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "ppi": outcome.ppi,
        "exact": outcome.is_exact,
        "identifier": outcome.identifier,
    }
    if isinstance(outcome, BestGuess):
        data["error_code"] = outcome.reason.error_code
        data["reason"] = str(outcome.reason)
    else:
        data["model"] = outcome.model_name
    return data


def _version_callback(value: bool) -> None:
    if value:
        from deviceppi import __version__

        typer.echo(f"deviceppi {__version__}")
        raise typer.Exit()


def _log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    level = value.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(sorted(LOG_LEVELS))}")
    return level


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING, ERROR or CRITICAL (overrides configuration)",
        callback=_log_level_callback,
    ),
) -> None:
    """deviceppi - physical pixel density of device displays."""
    ctx.obj = {"log_level": log_level}
    configure_logging(level=log_level or DEFAULT_CLI_LOG_LEVEL)


@app.command("resolve")
@safe_cli_command
def resolve_command(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to deviceppi.yaml"
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Resolve the PPI of this device, guessing if the model is unknown."""
    config = load_config(config_path=config_path)
    if not (ctx.obj or {}).get("log_level"):
        configure_logging(level=config.log_level)
    outcome = resolve_ppi(config=config)

    if as_json:
        typer.echo(json.dumps(_outcome_to_dict(outcome)))
        return

    if isinstance(outcome, BestGuess):
        info = detect_platform()
        console.print(f"[yellow]Best guess:[/yellow] {outcome.ppi:g} ppi")
        console.print(f"  {outcome.reason}")
        console.print(f"  Platform: {info.system} ({info.machine})")
    else:
        console.print(
            f"[green]Exact:[/green] {outcome.ppi:g} ppi "
            f"({outcome.model_name or outcome.identifier})"
        )


@app.command("lookup")
def lookup_command(
    identifier: str = typer.Argument(..., help='Hardware identifier, e.g. "iPhone14,5"'),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Look up a hardware identifier in the classification table."""
    result = lookup(identifier)

    if as_json:
        payload: Dict[str, Any] = {"identifier": identifier, "found": result.is_found}
        if isinstance(result, Found):
            payload.update(ppi=result.ppi, model=result.model_name)
        typer.echo(json.dumps(payload))
    elif isinstance(result, Found):
        console.print(f"{identifier}: {result.ppi:g} ppi ({result.model_name})")
    else:
        console.print(f"[red]Unknown hardware identifier:[/red] {identifier}")

    if not result.is_found:
        raise typer.Exit(1)


@app.command("guess")
@safe_cli_command
def guess_command(
    device_class: DeviceClass = typer.Option(
        DeviceClass.PHONE, "--device-class", "-d", help="Device form factor"
    ),
    scale: float = typer.Option(2.0, "--scale", "-s", help="Logical scale factor"),
    native_scale: Optional[float] = typer.Option(
        None, "--native-scale", "-n", help="Native scale factor (defaults to --scale)"
    ),
) -> None:
    """Show the fallback estimate for a device class and scale."""
    signal = ScaleSignal(
        logical_scale=scale,
        native_scale=native_scale if native_scale is not None else scale,
    )
    ppi = guess(device_class, signal)
    console.print(
        f"{device_class.value} @ {signal.logical_scale:g}x "
        f"(native {signal.native_scale:g}x): {ppi:g} ppi"
    )


@app.command("table")
def table_command(
    ppi: Optional[float] = typer.Option(None, "--ppi", help="Only show this PPI"),
) -> None:
    """List the classification table."""
    entries = [entry for entry in DEFAULT_TABLE if ppi is None or entry.ppi == ppi]
    if not entries:
        console.print(f"[yellow]No entries with ppi {ppi:g}[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Classification table")
    table.add_column("PPI", justify="right")
    table.add_column("Model")
    table.add_column("Identifiers")

    for entry in entries:
        by_model: Dict[str, list] = {}
        for identifier, model_name in entry.model_names.items():
            by_model.setdefault(model_name, []).append(identifier)
        for model_name, identifiers in by_model.items():
            table.add_row(f"{entry.ppi:g}", model_name, ", ".join(identifiers))

    console.print(table)


def cli_main() -> None:
    """Console script entry point."""
    app()
