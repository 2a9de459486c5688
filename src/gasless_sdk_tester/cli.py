"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from gasless_sdk_tester.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from gasless_sdk_tester.probe_execution import ProbeOutcome
from gasless_sdk_tester.results_writing import format_outcome_line
from gasless_sdk_tester.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_gasless_probe_run,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="gasless-sdk-tester")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
def cli(log_level: str) -> None:
    """Manual verification harness for gasless-transfer SDK clients."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML harness configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML harness configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON harness configuration file (built-in defaults when omitted)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an .xlsx results workbook to write",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Probe the built-in offline client instead of the configured SDK.",
)
def run_probes(config_path: str | None, output_path: str | None, dry_run: bool) -> None:
    """Run the gasless SDK probes and print one line per outcome."""
    try:
        outcome = execute_gasless_probe_run(
            RunRequest(config_path=config_path, output_path=output_path, dry_run=dry_run),
            on_outcome=_echo_outcome,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    report = outcome.report
    click.echo(f"{report.passed} passed, {report.failed} failed")
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    if not outcome.all_passed:
        raise CliError(f"{report.failed} of {len(report.outcomes)} probes failed.")


def _echo_outcome(outcome: ProbeOutcome) -> None:
    click.echo(format_outcome_line(outcome))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
