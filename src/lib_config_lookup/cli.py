"""CLI adapter for ``lib_config_lookup`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators inspect what the configuration service hands to consumers
without writing Python code.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_timeout` / :func:`cli_get` / :func:`cli_keys` – lookups against the
  default dataset.
* :func:`cli_demo` – narrated walk-through of a lookup and its result type.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root and never
reaches into the store directly except to list its keys.
"""

from __future__ import annotations

import sys
from importlib import metadata
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import CONNECTION_TIMEOUT_KEY, DEFAULT_CONNECTION_TIMEOUT, InMemoryValueStore, build_service
from .testing import i_should_fail

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("lib_config_lookup")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Integer-backed configuration lookup with string normalisation",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_config_lookup",
    message="lib_config_lookup version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_config_lookup")
    except metadata.PackageNotFoundError:
        click.echo("lib_config_lookup (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_config_lookup')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("timeout", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_timeout() -> None:
    """Print the connection timeout setting as the service returns it.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> CliRunner().invoke(cli, ["timeout"]).output.strip()
    '30'
    """

    click.echo(build_service().get_connection_timeout_setting())


@cli.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--default",
    "default",
    default=DEFAULT_CONNECTION_TIMEOUT,
    show_default=True,
    help="Value printed when KEY is absent or the lookup fails",
)
def cli_get(key: str, default: str) -> None:
    """Print the value stored under KEY as a string."""

    click.echo(build_service().get_setting(key, default))


@cli.command("keys", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_keys() -> None:
    """List the keys known to the default store, one per line."""

    for key in InMemoryValueStore().keys():
        click.echo(key)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_demo() -> None:
    """Walk through a connection timeout lookup and show the result type."""

    service = build_service()
    click.echo("--- Starting Configuration Lookup Demonstration ---")
    value = service.get_connection_timeout_setting()
    click.echo(f"[Application] Connection timeout for '{CONNECTION_TIMEOUT_KEY}' (as string): {value}")
    click.echo(f"[Application] Type of returned value: {type(value).__name__}")
    click.echo("--- Demonstration Complete ---")


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger a deterministic error for testing traceback handling."""

    i_should_fail()


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_config_lookup",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
