"""semdiffstat CLI.

Two invocation forms:

    semdiffstat OLD NEW
    semdiffstat PATH OLD-FILE OLD-HEX OLD-MODE NEW-FILE NEW-HEX NEW-MODE

The second is git's external diff convention, e.g.
``GIT_EXTERNAL_DIFF=semdiffstat git diff``.
"""

from __future__ import annotations

from pathlib import Path

import click

from semdiffstat import __version__
from semdiffstat.cli.render import changes_to_json, make_console, render_changes, render_header
from semdiffstat.config.loader import load_config
from semdiffstat.core.errors import (
    ConfigError,
    InternalError,
    ParseError,
    UnsupportedLanguageError,
)
from semdiffstat.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_log_file_path,
    get_logger,
)
from semdiffstat.diff.engine import compute_diff
from semdiffstat.diff.models import OTHER_NAME, Change
from semdiffstat.diff.ordering import sort_changes
from semdiffstat.diff.sequence import line_diffstat
from semdiffstat.parsing.packs import PACKS
from semdiffstat.parsing.splitter import detect_language

_LANGUAGES = sorted({pack.name for pack in PACKS.values()})
_GIT_ARGC = 7


def _read(name: str) -> bytes:
    try:
        return Path(name).read_bytes()
    except OSError as e:
        raise click.ClickException(f"could not read file {name}: {e.strerror or e}") from e


def _resolve_language(explicit: str | None, default: str, *paths: str) -> str:
    if explicit:
        return explicit
    for p in paths:
        detected = detect_language(p)
        if detected is not None:
            return detected
    return default


def _with_log_hint(message: str) -> str:
    path = get_log_file_path()
    return f"{message} (see {path})" if path is not None else message


def _fallback_changes(a: bytes, b: bytes) -> list[Change]:
    """Whole-file line diffstat reported as a single other change."""
    ins, dels = line_diffstat(a, b)
    if ins == 0 and dels == 0:
        return []
    return [Change(name=OTHER_NAME, ins_lines=ins, del_lines=dels, is_other=True)]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="semdiffstat")
@click.argument("args", nargs=-1, metavar="OLD NEW")
@click.option(
    "--lang",
    type=click.Choice(_LANGUAGES),
    default=None,
    help="Source language (default: detected from file extension)",
)
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(["name", "magnitude", "kind"]),
    default=None,
    help="Display order; 'other' is always last",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--color/--no-color", default=None, help="Force or disable colored output")
@click.option(
    "--fallback/--no-fallback",
    default=None,
    help="On syntax errors, print a plain line diffstat instead of failing",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    args: tuple[str, ...],
    lang: str | None,
    sort_key: str | None,
    as_json: bool,
    color: bool | None,
    fallback: bool | None,
    verbose: bool,
) -> None:
    """Summarize changes between OLD and NEW by function and method.

    Also usable as a git external diff tool (seven arguments).
    """
    if len(args) not in (2, _GIT_ARGC):
        raise click.UsageError(f"expected 2 or {_GIT_ARGC} arguments, got {len(args)}")

    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config=config.logging, verbose=verbose)
    log = get_logger(__name__)

    git_path: str | None = None
    if len(args) == _GIT_ARGC:
        git_path = args[0]
        a_name, b_name = args[1], args[4]
        if color is None and config.output.color == "auto":
            # git pipes our output into its pager
            color = True
    else:
        a_name, b_name = args

    if color is None and config.output.color != "auto":
        color = config.output.color == "always"
    if fallback is None:
        fallback = config.diff.fallback_on_parse_error

    clear_context()
    bind_context(a=a_name, b=b_name)
    asrc = _read(a_name)
    bsrc = _read(b_name)

    hint_paths = [p for p in (git_path, b_name, a_name) if p]
    language = _resolve_language(lang, config.diff.default_language, *hint_paths)
    log.debug("diff_start", language=language, a_bytes=len(asrc), b_bytes=len(bsrc))

    try:
        changes = compute_diff(asrc, bsrc, language=language)
    except (UnsupportedLanguageError, InternalError) as e:
        log.error("diff_failed", error=e.error_name, details=e.details)
        raise click.ClickException(_with_log_hint(str(e))) from e
    except ParseError as e:
        failed = a_name if e.side == "a" else b_name
        if not fallback:
            raise click.ClickException(
                f"could not parse {language} files {a_name} and {b_name}: {failed}: {e.message}"
            ) from e
        log.warning("parse_failed_using_line_diffstat", file=failed, error=e.message)
        changes = _fallback_changes(asrc, bsrc)

    changes = sort_changes(changes, sort_key or config.output.sort)
    log.debug("diff_complete", changes=len(changes))

    if as_json:
        click.echo(changes_to_json(changes, git_path))
        return

    console = make_console(color)
    if git_path is not None:
        render_header(git_path, console)
    render_changes(changes, console)


if __name__ == "__main__":
    cli()
