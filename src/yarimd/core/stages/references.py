"""Reference macros that always link to the canonical remote pages"""

from yarimd.core.macros import MacroGrammar, substitute_macros
from yarimd.core.models import MacroMatch, RewriteContext


DOMXREF = MacroGrammar(r"domxref")
HTML_ELEMENT = MacroGrammar(r"(?i:htmlelement)")
CSSXREF = MacroGrammar(r"cssxref", arity=1)
HTTP_STATUS = MacroGrammar(r"HTTPStatus")


def api_path(term: str) -> str:
    """'Interface.member' -> 'Interface/member'; a bare interface stays as is."""
    interface, _, member = term.partition(".")
    return f"{interface}/{member}" if member else interface


def replace_domxref_links(text: str, ctx: RewriteContext) -> str:
    """{{domxref("Interface.member"[, "label"])}} -> [label](API_URL/Interface/member)"""
    # TODO: resolve against a local copy of the Web/API pages once resources/ ships one.
    base = ctx.settings.api_url

    def _render(macro: MacroMatch) -> str:
        return f"[{macro.display}]({base}{api_path(macro.term)})"

    return substitute_macros(DOMXREF, text, _render, "domxref")


def replace_element_links(text: str, ctx: RewriteContext) -> str:
    """{{htmlelement("tag"[, "label"])}} -> [`<label>`](ELEMENT_URL/tag)"""
    base = ctx.settings.element_url

    def _render(macro: MacroMatch) -> str:
        return f"[`<{macro.display}>`]({base}{macro.term})"

    return substitute_macros(HTML_ELEMENT, text, _render, "htmlelement")


def replace_css_links(text: str, ctx: RewriteContext) -> str:
    """{{cssxref("property")}} -> [`property`](CSS_URL/property)"""
    base = ctx.settings.css_url

    def _render(macro: MacroMatch) -> str:
        return f"[`{macro.term}`]({base}{macro.term})"

    return substitute_macros(CSSXREF, text, _render, "cssxref")


def replace_http_status_links(text: str, ctx: RewriteContext) -> str:
    """{{HTTPStatus("code"[, "label"])}} -> [label](STATUS_URL/code)"""
    base = ctx.settings.http_status_url

    def _render(macro: MacroMatch) -> str:
        return f"[{macro.display}]({base}{macro.term})"

    return substitute_macros(HTTP_STATUS, text, _render, "HTTPStatus")
