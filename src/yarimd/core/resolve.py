"""Link resolution: local resource file when present, canonical remote URL otherwise"""

import re
from pathlib import PurePath

from loguru import logger

from yarimd.core.models import RewriteContext


GLOSSARY = "glossary"

_whitespace_re = re.compile(r"\s+")


def relative_prefix(path: PurePath | str) -> str:
    """Return one '../' per directory level of path (segments minus one)."""
    depth = len(PurePath(path).parts) - 1
    return "../" * max(depth, 0)


def canonical_slug(term: str) -> str:
    """'web component' -> 'Web_Component': word-initial capitals, whitespace runs to '_'."""
    words = _whitespace_re.split(term.strip())
    return "_".join(w[:1].upper() + w[1:] for w in words)


def local_resource_link(path: PurePath | str, category: str, slug: str, resources_dir: str = "resources") -> str:
    return f"{relative_prefix(path)}{resources_dir}/{category}/{slug}.md"


def resolve_glossary(term: str, ctx: RewriteContext) -> str:
    """Resolve a glossary term to a local relative link or the remote glossary page."""
    if ctx.index.exists(GLOSSARY, term):
        logger.debug(f"Local glossary entry for {term!r} exists")
        return local_resource_link(ctx.path, GLOSSARY, term, ctx.settings.resources_dir)
    return f"{ctx.settings.glossary_url}{canonical_slug(term)}"
