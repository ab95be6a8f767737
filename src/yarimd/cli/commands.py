"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from yarimd.config import Settings, load_config
from yarimd.core.files import content_path
from yarimd.core.pipeline import make_context, run_rewrite
from yarimd.core.resolve import resolve_glossary
from yarimd.core.utils.diff import diff_summary, unified_diff
from yarimd.log import setup_logging


PathArg = Annotated[Path, typer.Argument(help="Markdown file or directory to process")]
RootOpt = Annotated[Optional[str], typer.Option("--root", help="Content root holding resources/")]
VerboseOpt = Annotated[int, typer.Option("--verbose", "-v", count=True, help="Repeat for more log output")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: int = 0) -> Settings:
    """Load config with standard CLI error handling, then attach the log sink."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(verbose, level=None if verbose else settings.log_level)
    return settings


def _run(path: Path, settings: Settings, write: bool):
    """run_rewrite, echoing each failure; exits 1 when nothing at all could be processed."""
    results, failures = run_rewrite(path, settings, write=write)
    for p, e in failures:
        typer.echo(f"Warning: could not process {p}: {e}", err=True)
    if failures and not results:
        raise typer.Exit(1)
    return results, failures


def fix_cmd(path: PathArg, root: RootOpt = None, verbose: VerboseOpt = 0):
    """Rewrite macros in place."""
    settings = _settings(overrides={"content_root": root}, verbose=verbose)
    results, failures = _run(path, settings, write=True)
    for r in results:
        if r.written:
            s = diff_summary(r.original, r.rewritten)
            typer.echo(f"  fixed: {r.path} (+{s['added']} -{s['deleted']})")
    written = sum(r.written for r in results)
    typer.echo(f"Done - {written} rewritten, {len(results) - written} unchanged, {len(failures)} failed")
    if failures:
        raise typer.Exit(1)


def check_cmd(path: PathArg, root: RootOpt = None, verbose: VerboseOpt = 0):
    """List files that still contain rewritable macros; exit 1 if any do."""
    settings = _settings(overrides={"content_root": root}, verbose=verbose)
    results, failures = _run(path, settings, write=False)
    pending = [r for r in results if r.changed]
    for r in pending:
        typer.echo(f"  would fix: {r.path}")
    typer.echo(f"{len(pending)} of {len(results)} file(s) would change")
    if pending or failures:
        raise typer.Exit(1)


def diff_cmd(path: PathArg, root: RootOpt = None, verbose: VerboseOpt = 0):
    """Print the unified diff each file would get, without writing."""
    settings = _settings(overrides={"content_root": root}, verbose=verbose)
    results, failures = _run(path, settings, write=False)
    for r in results:
        if r.changed:
            typer.echo("".join(unified_diff(r.original, r.rewritten, r.path.as_posix())), nl=False)
    if failures:
        raise typer.Exit(1)


def resolve_cmd(
    term: Annotated[str, typer.Argument(help="Glossary term, e.g. 'web component'")],
    from_file: Annotated[Path, typer.Option("--from", help="File the link would be written into")] = Path("index.md"),
    root: RootOpt = None,
    ):
    """Print the link a {{Glossary}} macro for TERM would resolve to."""
    settings = _settings(overrides={"content_root": root})
    ctx = make_context(content_path(from_file, Path(settings.content_root)), settings=settings)
    typer.echo(resolve_glossary(term, ctx))
