# src/propkit/cli.py
"""CLI for propkit.

Usage:
    # List the demo properties
    propkit properties

    # Check one with defaults (100 trials, time-derived seed)
    propkit check reverse-involution

    # Replay a reported failure
    propkit check username-length-bad --seed=1234 --preset=debug

    # Look at what a generator produces
    propkit sample users --count=5 --seed=42
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from propkit.contracts.results import CheckResult
from propkit.core.config import list_presets, load_settings
from propkit.core.logging import configure_logging
from propkit.engine import check, sample
from propkit.examples import DEMO_GENERATORS, DEMO_PROPERTIES

app = typer.Typer(
    name="propkit",
    help="propkit: seeded property checks with shrinking.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from propkit import __version__

        typer.echo(f"propkit {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit logs as JSON."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """Configure logging before any command runs."""
    try:
        configure_logging(json_output=json_logs, level=log_level)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command()
def properties() -> None:
    """List the demo properties."""
    for prop in DEMO_PROPERTIES.values():
        marker = " [expected to fail]" if prop.expected_to_fail else ""
        typer.echo(f"{prop.name:<26} {prop.description}{marker}")


@app.command()
def presets() -> None:
    """List the bundled settings presets."""
    for name in list_presets():
        typer.echo(name)


def _report(name: str, result: CheckResult[Any], expected_to_fail: bool) -> None:
    if result.ok:
        typer.secho(
            f"PASSED {name} ({result.trials_run} trials, seed={result.seed.state})",
            fg=typer.colors.GREEN,
        )
        return

    if result.status == "unsatisfiable":
        typer.secho(
            f"UNSATISFIABLE {name}: {result.error} (trial {result.trials_run}, seed={result.seed.state})",
            fg=typer.colors.RED,
        )
        return

    counterexample = result.counterexample
    if counterexample is None:
        raise RuntimeError("failed CheckResult without counterexample")
    typer.secho(f"FAILED {name} after {result.trials_run} trial(s)", fg=typer.colors.RED)
    typer.echo(f"  counterexample: {counterexample.minimal!r}")
    typer.echo(f"  original:       {counterexample.original!r}")
    typer.echo(f"  reason:         {counterexample.reason}")
    typer.echo(f"  seed:           {counterexample.seed.state}")
    typer.echo(f"  shrink steps:   {counterexample.shrink_steps} ({counterexample.shrink_attempts} candidates tried)")
    if expected_to_fail:
        typer.secho("  (known-broken property: this failure is expected)", fg=typer.colors.YELLOW)


@app.command("check")
def check_command(
    name: Annotated[str, typer.Argument(help="Demo property name (see 'propkit properties').")],
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Settings preset. Use 'propkit presets' to list them."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML settings file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    trials: Annotated[
        int | None,
        typer.Option("--trials", "-n", help="Number of random trials.", min=1),
    ] = None,
    max_shrink_steps: Annotated[
        int | None,
        typer.Option("--max-shrink-steps", help="Shrink candidate budget.", min=0),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Starting seed (replays a reported run).", min=0),
    ] = None,
) -> None:
    """Check a demo property. Exits 1 if it does not hold."""
    prop = DEMO_PROPERTIES.get(name)
    if prop is None:
        typer.secho(
            f"Error: unknown property '{name}'. Available: {sorted(DEMO_PROPERTIES)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    overrides: dict[str, Any] = {}
    if trials is not None:
        overrides["trials"] = trials
    if max_shrink_steps is not None:
        overrides["max_shrink_steps"] = max_shrink_steps
    if seed is not None:
        overrides["seed"] = seed

    try:
        settings = load_settings(preset=preset, config_file=config_file, overrides=overrides)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e
    except (ValidationError, ValueError) as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    result = check(prop.generator, prop.predicate, settings)
    _report(prop.name, result, prop.expected_to_fail)
    if not result.ok:
        raise typer.Exit(1)


@app.command("sample")
def sample_command(
    name: Annotated[str, typer.Argument(help=f"Generator name: {', '.join(DEMO_GENERATORS)}.")],
    count: Annotated[int, typer.Option("--count", "-n", help="Number of values.", min=0)] = 10,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Starting seed (time-derived when omitted).", min=0),
    ] = None,
) -> None:
    """Print sampled values from a demo generator, one per line."""
    generator = DEMO_GENERATORS.get(name)
    if generator is None:
        typer.secho(
            f"Error: unknown generator '{name}'. Available: {sorted(DEMO_GENERATORS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)
    for value in sample(generator, count, seed):
        typer.echo(repr(value))


def main() -> None:
    """Entry point for propkit CLI."""
    app()


if __name__ == "__main__":
    main()
