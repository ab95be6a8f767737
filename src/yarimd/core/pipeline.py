"""Stage ordering and the text, file, and directory rewrite entry points"""

from pathlib import Path, PurePath
from typing import Callable, NamedTuple, Optional

from loguru import logger

from yarimd.config import Settings
from yarimd.core.files import content_path, discover_files, write_atomic
from yarimd.core.models import FileResult, RewriteContext
from yarimd.core.resources import FileResourceIndex, ResourceIndex
from yarimd.core.stages.glossary import replace_glossary_links, replace_html_glossary_links
from yarimd.core.stages.links import replace_docs_links, replace_image_paths
from yarimd.core.stages.references import (
    replace_css_links,
    replace_domxref_links,
    replace_element_links,
    replace_http_status_links,
)
from yarimd.core.stages.templates import remove_templates


class Stage(NamedTuple):
    name:  str
    apply: Callable[[str, RewriteContext], str]


# Order matters: the HTML-wrapped glossary form must be consumed before the bare one.
STAGES: tuple[Stage, ...] = (
    Stage("html-glossary", replace_html_glossary_links),
    Stage("glossary",      replace_glossary_links),
    Stage("templates",     remove_templates),
    Stage("docs-links",    replace_docs_links),
    Stage("images",        replace_image_paths),
    Stage("htmlelement",   replace_element_links),
    Stage("cssxref",       replace_css_links),
    Stage("httpstatus",    replace_http_status_links),
    Stage("domxref",       replace_domxref_links),
)


def make_context(
    path: PurePath | str,
    index: Optional[ResourceIndex] = None,
    settings: Optional[Settings] = None,
    ) -> RewriteContext:
    """Build a RewriteContext, defaulting to the on-disk resource index under content_root."""
    settings = settings or Settings()
    if index is None:
        index = FileResourceIndex(settings.resources_path)
    return RewriteContext(path=PurePath(path), index=index, settings=settings)


def rewrite_text(
    text: str,
    path: PurePath | str = "index.md",
    index: Optional[ResourceIndex] = None,
    settings: Optional[Settings] = None,
    ) -> str:
    """Run every stage in order over text and return the fully rewritten result."""
    ctx = make_context(path, index, settings)
    for stage in STAGES:
        text = stage.apply(text, ctx)
    return text


def rewrite_file(
    path: Path,
    settings: Settings,
    index: Optional[ResourceIndex] = None,
    write: bool = True,
    ) -> FileResult:
    """Rewrite one file; it is written back only when write is set and the text changed."""
    logger.info(f"Processing {path}")
    original = path.read_bytes().decode("utf-8")
    rel = content_path(path, Path(settings.content_root))
    result = FileResult(path=path, original=original, rewritten=rewrite_text(original, rel, index, settings))
    if write and result.changed:
        write_atomic(path, result.rewritten)
        result.written = True
    return result


def run_rewrite(
    path: Path,
    settings: Settings,
    write: bool = True,
    index: Optional[ResourceIndex] = None,
    ) -> tuple[list[FileResult], list[tuple[Path, Exception]]]:
    """Rewrite a file or every .md/.mdx file under a directory.

    Returns (results, failures). A file that cannot be read, decoded, or written
    is recorded in failures and left untouched; the remaining files still run.
    """
    if index is None:
        index = FileResourceIndex(settings.resources_path)
    results: list[FileResult] = []
    failures: list[tuple[Path, Exception]] = []
    for p in discover_files(Path(path)):
        try:
            results.append(rewrite_file(p, settings, index, write))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipped {p}: {e}")
            failures.append((p, e))
    return results, failures
