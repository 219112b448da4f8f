"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from request_preflight.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from request_preflight.limits_catalog import LIMITS


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="request-preflight")
def cli() -> None:
    """Pre-flight limit validation for document and block write requests."""


@cli.command(name="limits")
def show_limits() -> None:
    """Print every enforced limit category and its threshold."""
    width = max(len(category.value) for category in LIMITS)
    for category, limit in LIMITS.items():
        click.echo(f"{category.value.ljust(width)}  {limit}")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML validator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML validator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="show-config")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML validator configuration file",
)
def show_config(config_path: str) -> None:
    """Load a validator configuration and print the effective settings."""
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    auto_split = "true" if configuration.validation.auto_split_long_text else "false"
    click.echo(f"auto_split_long_text: {auto_split}")


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
