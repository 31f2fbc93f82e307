"""Typer application and CLI entry point for credent.

Running ``credent`` reads the credentials stored for a profile, or prompts
for them and stores them when the profile does not exist yet::

    credent                      # default profile
    credent --profile work       # named profile
    credent set --profile work   # prompt again and replace stored credentials
    credent list                 # stored profiles and usernames

Credentials are stored under the ``credent`` application directory unless
``--app`` or ``CREDENT_APP_NAME`` names another one.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. :class:`~credent.exceptions.CredentError` failures print
their message and exit with the error's ``exit_code``.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import sys
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any, Optional, TypeVar

import typer

from credent import __version__
from credent.config import DEFAULT_PROFILE_NAME
from credent.exceptions import ConfigError, CredentError
from credent.exit_codes import EXIT_INTERRUPTED, EXIT_INVALID_USAGE

if TYPE_CHECKING:
    from credent.model import Credentials

T = TypeVar("T")

app = typer.Typer(
    name="credent",
    help="Read credentials for a profile from file, or prompt for and store them.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"credent {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send library debug logging to stderr when ``--verbose`` is active."""
    if verbose:
        logging.basicConfig(
            level=logging.WARNING,
            stream=sys.stderr,
            format="[debug] %(name)s: %(message)s",
        )
        logging.getLogger("credent").setLevel(logging.DEBUG)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    profile: str = typer.Option(
        DEFAULT_PROFILE_NAME, "--profile", "-p", help="Profile name to use."
    ),
    app_name: Optional[str] = typer.Option(
        None, "--app", help="Application directory to store credentials under."
    ),
    reveal: bool = typer.Option(
        False, "--reveal", help="Also print the stored and plain text password."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Show the credentials stored for a profile, prompting for them if absent.

    Initialises the global :class:`~credent.output.OutputManager` from CLI
    flags and stores shared options in ``ctx.obj`` for sub-commands. When no
    sub-command is given, loads the profile and falls back to prompting.
    """
    from credent.config import get_default_app_name, get_password_encoding
    from credent.output import OutputFormat, OutputManager, error, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    _configure_logging(verbose)

    try:
        get_password_encoding()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    if not profile:
        error("Profile name must not be empty.")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile
    ctx.obj["app_name"] = app_name or get_default_app_name()
    ctx.obj["reveal"] = reveal

    if ctx.invoked_subcommand is None:
        credentials = _run(_existing_or_prompted(ctx.obj["app_name"], profile))
        _output_credentials(profile, credentials, reveal)


@app.command("set")
def set_command(ctx: typer.Context) -> None:
    """Prompt for credentials and store them, replacing any stored for the profile."""
    profile_name: str = ctx.obj["profile"]
    credentials = _run(_prompt_and_store(ctx.obj["app_name"], profile_name))
    _output_credentials(profile_name, credentials, ctx.obj["reveal"])


@app.command("list")
def list_command(ctx: typer.Context) -> None:
    """List stored profiles and their usernames. Passwords are never shown."""
    from credent.fs import CredentialsFile, CredentialsFileLoader
    from credent.output import debug, info, print_table

    app_name: str = ctx.obj["app_name"]
    profiles = _run(CredentialsFileLoader.load_all(app_name))
    if not profiles:
        info("No stored profiles.")
        return

    debug(f"Credentials file: {CredentialsFile.path(app_name)}")
    rows = [[p.name, str(p.credentials.username)] for p in profiles]
    print_table(["profile", "username"], rows, title="Stored profiles")


# ------------------------------------------------------------------ #
# Flow
# ------------------------------------------------------------------ #


async def _existing_or_prompted(app_name: str, profile_name: str) -> Credentials:
    from credent.fs import CredentialsFile, CredentialsFileLoader
    from credent.output import note

    profile = await CredentialsFileLoader.load_profile(app_name, profile_name)
    if profile is not None:
        note(f"Read existing credentials from `{CredentialsFile.path(app_name)}`.")
        return profile.credentials
    return await _prompt_and_store(app_name, profile_name)


async def _prompt_and_store(app_name: str, profile_name: str) -> Credentials:
    from credent.cli import CredentialsCliReader
    from credent.fs import CredentialsFile, CredentialsFileStorer
    from credent.model import Profile
    from credent.output import note

    credentials = await CredentialsCliReader().prompt_credentials()
    await CredentialsFileStorer.store(app_name, Profile(profile_name, credentials))
    note(f"Stored credentials in `{CredentialsFile.path(app_name)}`.")
    return credentials


def _output_credentials(profile_name: str, credentials: Credentials, reveal: bool) -> None:
    from credent.output import print_fields, print_heading

    print_heading(f"[{profile_name}]")
    fields = [
        ("credentials", str(credentials)),
        ("credentials (repr)", repr(credentials)),
        ("password", str(credentials.password)),
    ]
    if reveal:
        fields.append(("password.encoded()", credentials.password.encoded()))
        fields.append(("password.plain_text()", credentials.password.plain_text()))
    print_fields(fields)


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run *coro* to completion, turning credent errors into a clean exit."""
    from credent.output import error

    try:
        return asyncio.run(coro)
    except CredentError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``credent`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except CredentError as exc:
        from credent.output import error

        error(str(exc))
        sys.exit(exc.exit_code)
