from __future__ import annotations

import sys
from typing import Any, Dict, Optional

import typer
from pydantic import ValidationError

from kudu_datagen.config import Settings, get_settings
from kudu_datagen.runner import DEFAULT_MODE, available_modes, resolve_mode, run_mode
from kudu_datagen.utils.logging import configure_logging

app = typer.Typer(help="Kudu data generator CLI.")

BANNER_RULE = "-" * 47


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"masters={settings.kudu_masters} | table={settings.table_name} "
        f"backup={settings.backup_table_name or '-'} buckets={settings.hash_buckets} "
        f"unique_key={settings.unique_key} | interval={settings.insert_interval_seconds}s "
        f"value_length={settings.value_length} max_rows={settings.max_rows or 'unbounded'}"
    )


@app.command()
def run(
    mode: str = typer.Argument(
        DEFAULT_MODE,
        help="Start mode: 'clean' recreates the table, 'resume' continues from the max key, "
        "'list' shows the modes.",
    ),
    masters: Optional[str] = typer.Option(
        None,
        "--masters",
        "-m",
        help="Comma-separated Kudu masters (host:port,...). Overrides KUDU_MASTERS.",
    ),
    table: Optional[str] = typer.Option(
        None,
        "--table",
        "-t",
        help="Table to write to (default from settings).",
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        "-i",
        min=0,
        help="Seconds to wait between inserts.",
    ),
    max_rows: Optional[int] = typer.Option(
        None,
        "--max-rows",
        "-n",
        min=1,
        help="Stop after this many rows (default: run until interrupted).",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Deterministic RNG seed for generated values.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON.",
    ),
) -> None:
    """
    Prepare the table according to MODE, then insert rows at a fixed cadence.
    """
    if mode.strip().lower() == "list":
        typer.echo("Available modes: " + ", ".join(available_modes()))
        return

    overrides: Dict[str, Any] = {
        "kudu_masters": masters,
        "table_name": table,
        "insert_interval_seconds": interval,
        "max_rows": max_rows,
        "seed": seed,
    }
    try:
        settings = Settings.model_validate(
            {
                **get_settings().model_dump(),
                **{k: v for k, v in overrides.items() if v is not None},
            }
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(level=settings.log_level, json_logs=json_logs or settings.log_json)

    try:
        resolve_mode(mode, settings)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="MODE") from exc

    typer.echo(BANNER_RULE)
    typer.echo(f"Connecting to Kudu master(s) at {settings.kudu_masters}")
    typer.echo("Set KUDU_MASTERS=master-0:port,master-1:port,... or --masters to override.")
    typer.echo(BANNER_RULE)

    try:
        run_mode(mode, settings=settings)
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130)
    except Exception as exc:  # noqa: BLE001 - logged with traceback by the runner
        typer.echo(f"Run failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
