"""atuin-z command line: rank history directories, manage exclusions, emit shell init."""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from atuin_z.config import exclusionsPath, loadConfig, resolveDbPath
from atuin_z.db import connect, queryDirs
from atuin_z.errors import AtuinZError
from atuin_z.exclusions import addExclusion, loadExclusions
from atuin_z.matching import rank
from atuin_z.models import ScoredPath, ScoringMode
from atuin_z.shell import Shell, initScript
from atuin_z.version import __version__

logger = logging.getLogger("atuin_z")

_CONTEXT = {"help_option_names": ["-h", "--help"]}

_cli = typer.Typer(
    name="atuin-z",
    help="Frecency-based directory jumping from Atuin history.",
    add_completion=False,
    context_settings=_CONTEXT,
    rich_markup_mode="rich",
)
_init_cli = typer.Typer(
    name="atuin-z init",
    help="Output the [bold]z[/bold] shell function for eval.",
    add_completion=False,
    context_settings=_CONTEXT,
    rich_markup_mode="rich",
)

_err_console = Console(stderr=True)


def _checkFormat(format: str) -> None:
    if format not in ("human", "json"):
        raise typer.BadParameter(f"Invalid format {format!r}; choose human or json")


def _fail(message: str, format: str) -> NoReturn:
    if format == "json":
        print(json.dumps({"ok": False, "error": message}))
    else:
        _err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise typer.Exit(1)


def _versionCallback(value: bool) -> None:
    if value:
        print(f"atuin-z {__version__}")
        raise typer.Exit()


def _pickMode(by_rank: bool, by_time: bool) -> ScoringMode:
    if by_rank:
        return ScoringMode.FREQUENCY
    if by_time:
        return ScoringMode.RECENCY
    return ScoringMode.FRECENCY


def _currentPrefix(pwd: str | None) -> str:
    """$ATUIN_Z_PWD, else the process working directory."""
    if pwd:
        return pwd
    try:
        return os.getcwd()
    except OSError as e:
        raise AtuinZError(f"could not determine current directory: {e}") from e


def _render(results: list[ScoredPath], list_all: bool, format: str) -> None:
    shown = results if list_all else results[:1]
    if format == "json":
        print(json.dumps({"ok": True, "results": [r.model_dump() for r in shown]}))
        return
    for r in shown:
        if list_all:
            print(f"{r.score:>10.1f}  {r.path}")
        else:
            print(r.path)


@_cli.command()
def jump(
    keywords: list[str] | None = typer.Argument(
        None, help="Keywords to match against directory paths."
    ),
    list_all: bool = typer.Option(False, "--list", "-l", help="List all matches with scores."),
    by_rank: bool = typer.Option(False, "--rank", "-r", help="Rank by frequency only."),
    by_time: bool = typer.Option(False, "--time", "-t", help="Rank by recency only."),
    current: bool = typer.Option(
        False, "--current", "-c", help="Restrict to subdirectories of $ATUIN_Z_PWD."
    ),
    exclude: bool = typer.Option(
        False, "--exclude", "-x", help="Add the given paths to the exclusion list."
    ),
    db: str | None = typer.Option(None, "--db", help="Override database path."),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_versionCallback, is_eager=True, help="Show version."
    ),
) -> None:
    """Print the best-matching directory for KEYWORDS (or all matches with -l)."""
    _checkFormat(format)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s | %(message)s",
    )
    keywords = keywords or []

    try:
        config = loadConfig()

        if exclude:
            if not keywords:
                _fail("atuin-z -x requires a path argument", format)
            target = exclusionsPath(config)
            added = [p for p in map(os.path.abspath, keywords) if addExclusion(target, p)]
            if format == "json":
                print(json.dumps({"ok": True, "excluded": added}))
            return

        db_path = resolveDbPath(config, db)
        logger.debug("Using history database %s", db_path)
        conn = connect(db_path)
        try:
            cwd_prefix = _currentPrefix(config.pwd) if current else None
            entries = queryDirs(conn, cwd_prefix)
        finally:
            conn.close()

        exclusion_list = loadExclusions(exclusionsPath(config))
        mode = _pickMode(by_rank, by_time)
        results = rank(entries, keywords, mode, time.time_ns(), exclusion_list)
    except AtuinZError as e:
        _fail(str(e), format)

    _render(results, list_all, format)


@_init_cli.command()
def init(shell: Shell = typer.Argument(help="Shell type.")) -> None:
    """Print the shell function; use as: eval "$(atuin-z init bash)"."""
    print(initScript(shell), end="")


def main() -> None:
    args = sys.argv[1:]
    if args[:1] == ["init"]:
        _init_cli(args=args[1:], prog_name="atuin-z init")
    else:
        _cli(args=args, prog_name="atuin-z")


if __name__ == "__main__":
    main()
