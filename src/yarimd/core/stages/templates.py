"""Removal of navigation scaffold macros (sidebars, quicklinks, previous/next menus)"""

import re

from loguru import logger

from yarimd.core.macros import substitute
from yarimd.core.models import RewriteContext


QUOTED = r"""(?:"[^"]*"|'[^']*')"""
ARG_LIST = r"\(\s*" + QUOTED + r"(?:\s*,\s*" + QUOTED + r")*\s*\)"

SCAFFOLD_MACROS = (
    r"LearnSidebar",
    r"GlossarySidebar",
    r"QuicklinksWithSubPages" + ARG_LIST,
    r"(?:LearnSidebar)?(?:PreviousMenuNext|PreviousMenu|NextMenuPrevious)" + ARG_LIST,
)

# Trailing spaces and one line break go with the macro so no blank line is left behind.
TEMPLATE_RE = re.compile(r"\{\{(?:" + "|".join(SCAFFOLD_MACROS) + r")\}\}[ \t]*(?:\r?\n)?")


def remove_templates(text: str, ctx: RewriteContext | None = None) -> str:
    """Delete every navigation scaffold macro from text."""
    def _drop(m: re.Match) -> str:
        logger.debug(f"Removed {m.group(0).strip()}")
        return ""

    return substitute(TEMPLATE_RE, text, _drop, "template")
