"""Command-line interface for siz."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from siz.config.exceptions import OptionsError
from siz.config.models import build_options
from siz.utils.logging import DEFAULT_LOG_LEVEL, LOG_LEVELS, configure_logging

from .runner import ApplicationRunner, report_error

try:
    __version__ = version("siz")
except PackageNotFoundError:
    __version__ = "unknown"

# Options that cannot be combined, as (option, option) pairs of parameter names
CONFLICTING_OPTIONS: tuple[tuple[str, str], ...] = (
    ("binary_units", "metric_units"),
    ("glob", "default_type"),
    ("highlow", "name"),
    ("highlow", "parallel"),
    ("name", "parallel"),
)

OPTION_FLAGS: dict[str, str] = {
    "binary_units": "--binary-units",
    "metric_units": "--metric-units",
    "glob": "--glob",
    "default_type": "--type",
    "highlow": "--highlow",
    "name": "--name",
    "parallel": "--parallel",
}


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str,
) -> str:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    normalized_value = value.upper().strip()
    if normalized_value not in LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(LOG_LEVELS)}'
        )
    return normalized_value


def split_comma_values(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: tuple[str, ...],
) -> tuple[str, ...] | None:
    """Split repeated, comma separated option values into one flat tuple.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Raw values, one per occurrence of the option

    Returns:
        Non-empty values in order, or None when the option was not given
    """
    if not value:
        return None
    return tuple(part for item in value for part in item.split(",") if part)


def check_conflicts(values: dict[str, object]) -> None:
    """Reject mutually exclusive options.

    Args:
        values: Parsed parameter values keyed by parameter name

    Raises:
        click.UsageError: If two conflicting options were both given
    """
    for first, second in CONFLICTING_OPTIONS:
        if values.get(first) and values.get(second):
            raise click.UsageError(
                f"the argument '{OPTION_FLAGS[first]}' cannot be used with '{OPTION_FLAGS[second]}'"
            )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, type=click.Path(path_type=str))
@click.option("-b", "--binary-units", is_flag=True, help="Display sizes in binary units (KiB, MiB, ...)")
@click.option("-c", "--color", is_flag=True, help="Colorize paths in the output")
@click.option("-d", "--depth", type=click.IntRange(min=0), default=None, help="Maximum directory depth, the root is depth 0")
@click.option("-L", "--follow", is_flag=True, help="Follow symbolic links")
@click.option(
    "-g",
    "--glob",
    multiple=True,
    callback=split_comma_values,
    metavar="GLOB[,GLOB...]",
    help="Gitignore style globs to include, prefix with '!' to exclude",
)
@click.option("-H", "--hidden", is_flag=True, help="Include hidden files and directories")
@click.option("-l", "--highlow", is_flag=True, help="Sort by size, largest first")
@click.option("--list-types", is_flag=True, help="List supported file types and their globs, then exit")
@click.option("-m", "--metric-units", is_flag=True, help="Display sizes in SI units (kB, MB, ...)")
@click.option("-n", "--name", is_flag=True, help="Sort by path name")
@click.option("-p", "--parallel", is_flag=True, help="Walk in parallel, output is unordered")
@click.option(
    "-t",
    "--type",
    "default_type",
    multiple=True,
    callback=split_comma_values,
    metavar="TYPE[,TYPE...]",
    help="Only include files of these types, see --list-types",
)
@click.option("-j", "--threads", type=click.IntRange(min=1), default=None, help="Worker threads for --parallel")
@click.option(
    "--log-level",
    type=str,
    default=DEFAULT_LOG_LEVEL,
    callback=validate_log_level,
    help="Diagnostic logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.version_option(version=__version__, prog_name="siz")
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    binary_units: bool,
    color: bool,
    depth: int | None,
    follow: bool,
    glob: tuple[str, ...] | None,
    hidden: bool,
    highlow: bool,
    list_types: bool,
    metric_units: bool,
    name: bool,
    parallel: bool,
    default_type: tuple[str, ...] | None,
    threads: int | None,
    log_level: str,
) -> None:
    """Report file sizes under PATH.

    Files are listed smallest first by default. Ignore files (.ignore, and
    .gitignore inside git repositories) are honored and hidden entries are
    skipped.

    Examples:

        # Largest files first, in binary units
        siz -lb .

        # Only Python and Rust sources, sorted by path
        siz -n --type py,rust src

        # Markdown files, excluding the changelog
        siz -g '*.md,!CHANGELOG.md' .
    """
    values: dict[str, object] = dict(ctx.params)
    check_conflicts(values)
    configure_logging(log_level=log_level, color=color)

    try:
        options = build_options(
            path=path,
            binary_units=binary_units,
            metric_units=metric_units,
            color=color,
            depth=depth,
            follow=follow,
            glob=glob,
            hidden=hidden,
            highlow=highlow,
            list_types=list_types,
            name=name,
            parallel=parallel,
            default_type=default_type,
            threads=threads,
        )
    except OptionsError as exc:
        ctx.exit(report_error(exc))

    runner = ApplicationRunner(options)
    ctx.exit(runner.run())


def main() -> None:
    """Run the command line interface and exit the process."""
    cli(prog_name="siz")
