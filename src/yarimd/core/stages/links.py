"""Plain Markdown link and image rewrites"""

import re

from yarimd.core.macros import substitute
from yarimd.core.models import RewriteContext


# Targets we never prefix: URLs with a scheme, protocol-relative, root-relative, fragments.
_NOT_RELATIVE_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:|/|#)")

IMAGE_RE = re.compile(r"!\[(?P<alt>[^\]]*)\]\((?P<src>(?!https?://)[^)]+)\)")


def docs_link_re(docs_prefix: str) -> re.Pattern:
    """Markdown links whose target starts with the root-relative docs prefix."""
    return re.compile(r"\[(?P<label>[^\]]+)\]\((?P<url>" + re.escape(docs_prefix) + r"[^)]+)\)")


def replace_docs_links(text: str, ctx: RewriteContext) -> str:
    """[label](/en-US/docs/...) -> [label](https://developer.mozilla.org/en-US/docs/...)"""
    domain = ctx.settings.domain.rstrip("/")
    return substitute(
        docs_link_re(ctx.settings.docs_prefix),
        text,
        lambda m: f"[{m['label']}]({domain}{m['url']})",
        "docs link",
    )


def replace_image_paths(text: str, ctx: RewriteContext) -> str:
    """![alt](images/x.png) -> ![alt](assets/images/x.png); already-moved images are kept."""
    assets = ctx.settings.assets_dir.strip("/")

    def _render(m: re.Match) -> str:
        src = m["src"]
        if _NOT_RELATIVE_RE.match(src) or src == assets or src.startswith(f"{assets}/"):
            return m.group(0)
        return f"![{m['alt']}]({assets}/{src})"

    return substitute(IMAGE_RE, text, _render, "image")
