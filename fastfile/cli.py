"""Command line interface for fastfile."""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__, config as config_module
from .api import FastFile
from .config import load_config
from .errors import ArgumentError, NotFoundError
from .output import build_sizes_table, format_status_icon, format_timestamp, print_paths
from .services.system_service import DoctorCheckResult, run_all_doctor_checks
from .text import Messages, Styles

console = Console()

app = typer.Typer(
    help=Messages.APP_HELP,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"fastfile v{__version__}")
        raise typer.Exit()


def _parse_boolean(value: str) -> bool:
    token = value.strip().lower()
    if token in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if token in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise typer.BadParameter(Messages.ERROR_BOOLEAN_INVALID.format(value=value))


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


def _client() -> FastFile:
    return FastFile.from_config()


def _reject_path(exc: ArgumentError) -> typer.Exit:
    message = Messages.INFO_INVALID_PATH.format(reason=escape(str(exc)))
    console.print(_styled(message, Styles.ERROR))
    return typer.Exit(code=2)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help=Messages.HELP_VERBOSE),
) -> None:
    """Global Typer callback for shared options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )


@app.command()
def exists(
    path: str = typer.Argument(..., help=Messages.HELP_PATH),
    directory: bool = typer.Option(False, "--dir", "-d", help=Messages.HELP_DIR),
) -> None:
    """Report whether a file (or directory) exists."""
    client = _client()
    try:
        found = client.directory_exists(path) if directory else client.file_exists(path)
    except ArgumentError as exc:
        raise _reject_path(exc)
    console.print(Messages.INFO_EXISTS if found else Messages.INFO_MISSING)
    if not found:
        raise typer.Exit(code=1)


@app.command("ls")
def list_entries(
    path: str = typer.Argument(..., help=Messages.HELP_PATH),
    dirs: bool = typer.Option(False, "--dirs", help=Messages.HELP_LIST_DIRS),
    recursive: bool = typer.Option(False, "--recursive", "-r", help=Messages.HELP_RECURSIVE),
) -> None:
    """List the files (or directories) under a directory."""
    client = _client()
    try:
        entries = (
            client.get_directories(path, recursive)
            if dirs
            else client.get_files(path, recursive)
        )
    except ArgumentError as exc:
        raise _reject_path(exc)
    except (FileNotFoundError, NotADirectoryError):
        console.print(_styled(Messages.INFO_NOT_FOUND.format(path=escape(path)), Styles.ERROR))
        raise typer.Exit(code=1)
    if not entries:
        console.print(_styled(Messages.INFO_NO_RESULTS.format(path=escape(path)), Styles.INFO))
        return
    print_paths(console, sorted(entries, key=str.casefold))


@app.command()
def ctime(
    path: str = typer.Argument(..., help=Messages.HELP_PATH),
    directory: bool = typer.Option(False, "--dir", "-d", help=Messages.HELP_DIR),
) -> None:
    """Print the creation time of a file (or directory)."""
    client = _client()
    try:
        created = (
            client.get_directory_creation_time(path)
            if directory
            else client.get_file_creation_time(path)
        )
    except ArgumentError as exc:
        raise _reject_path(exc)
    except NotFoundError:
        console.print(_styled(Messages.INFO_NOT_FOUND.format(path=escape(path)), Styles.ERROR))
        raise typer.Exit(code=1)
    console.print(format_timestamp(created))


@app.command()
def sizes(
    path: str = typer.Argument(..., help=Messages.HELP_PATH),
    recursive: bool = typer.Option(False, "--recursive", "-r", help=Messages.HELP_RECURSIVE),
) -> None:
    """Print the size of every file under a directory."""
    client = _client()
    try:
        entries = client.get_file_sizes(path, recursive)
    except ArgumentError as exc:
        raise _reject_path(exc)
    except (FileNotFoundError, NotADirectoryError):
        console.print(_styled(Messages.INFO_NOT_FOUND.format(path=escape(path)), Styles.ERROR))
        raise typer.Exit(code=1)
    if not entries:
        console.print(_styled(Messages.INFO_NO_RESULTS.format(path=escape(path)), Styles.INFO))
        return
    console.print(build_sizes_table(sorted(entries, key=lambda item: item[1].casefold())))


@app.command(help=Messages.HELP_DOCTOR)
def doctor(
    drive: str = typer.Option(None, "--drive", help=Messages.HELP_DOCTOR_DRIVE),
) -> None:
    """Run diagnostic checks for the Everything client and index."""
    console.print(_styled(Messages.DOCTOR_TITLE.format(version=__version__), Styles.TITLE))
    console.print()

    results: list[DoctorCheckResult] = []
    try:
        config = load_config()
    except (OSError, ValueError) as exc:
        config = config_module.Config()
        results.append(
            DoctorCheckResult(
                name="Config JSON",
                passed=False,
                message=Messages.DOCTOR_CONFIG_INVALID.format(
                    path=config_module.config_file_path()
                ),
                detail=str(exc),
            )
        )
    results.extend(run_all_doctor_checks(config, drive=drive))

    has_failure = False
    for result in results:
        icon = format_status_icon(result.passed, console=console)
        if not result.passed:
            has_failure = True
        console.print(f"  {icon} [bold]{result.name}:[/bold] {result.message}")
        if result.detail:
            console.print(f"      [dim]{result.detail}[/dim]")

    console.print()
    if has_failure:
        console.print(_styled(Messages.DOCTOR_SOME_FAILED, Styles.WARNING))
        raise typer.Exit(code=1)
    console.print(_styled(Messages.DOCTOR_ALL_PASSED, Styles.SUCCESS))


@app.command()
def config(
    set_es_path_option: str = typer.Option(
        None,
        "--set-es-path",
        help=Messages.HELP_SET_ES_PATH,
    ),
    clear_es_path: bool = typer.Option(
        False,
        "--clear-es-path",
        help=Messages.HELP_CLEAR_ES_PATH,
    ),
    set_verify_option: str = typer.Option(
        None,
        "--set-verify",
        help=Messages.HELP_SET_VERIFY,
    ),
    set_enabled_option: str = typer.Option(
        None,
        "--set-enabled",
        help=Messages.HELP_SET_ENABLED,
    ),
    show: bool = typer.Option(False, "--show", help=Messages.HELP_SHOW_CONFIG),
) -> None:
    """Manage persisted fastfile settings."""
    changed = False
    if set_es_path_option is not None:
        config_module.set_es_path(set_es_path_option)
        console.print(
            _styled(Messages.INFO_ES_PATH_SET.format(value=set_es_path_option), Styles.SUCCESS)
        )
        changed = True
    if clear_es_path:
        config_module.set_es_path(None)
        console.print(_styled(Messages.INFO_ES_PATH_CLEARED, Styles.SUCCESS))
        changed = True
    if set_verify_option is not None:
        value = _parse_boolean(set_verify_option)
        config_module.set_verify(value)
        console.print(_styled(Messages.INFO_VERIFY_SET.format(value=value), Styles.SUCCESS))
        changed = True
    if set_enabled_option is not None:
        value = _parse_boolean(set_enabled_option)
        config_module.set_enabled(value)
        console.print(_styled(Messages.INFO_ENABLED_SET.format(value=value), Styles.SUCCESS))
        changed = True

    if show or not changed:
        cfg = load_config()
        console.print(
            _styled(
                Messages.INFO_CONFIG_SUMMARY.format(
                    es_path=config_module.resolve_es_path(cfg.es_path),
                    verify=cfg.verify,
                    enabled=cfg.enabled,
                    path=config_module.config_file_path(),
                ),
                Styles.INFO,
            )
        )


def run(argv: list[str] | None = None) -> None:
    """Entry point wrapper allowing optional argument override."""
    if argv is None:
        app()
    else:
        app(args=list(argv))


if __name__ == "__main__":  # pragma: no cover
    run(sys.argv[1:])
