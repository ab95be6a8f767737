"""Glossary macro stages: HTML-wrapped first, then bare"""

from yarimd.core.macros import MacroGrammar, substitute_macros
from yarimd.core.models import MacroMatch, RewriteContext
from yarimd.core.resolve import resolve_glossary


GLOSSARY_NAME = r"[Gg]lossary"

HTML_GLOSSARY = MacroGrammar(GLOSSARY_NAME, wrapped=True)
GLOSSARY = MacroGrammar(GLOSSARY_NAME)


def replace_html_glossary_links(text: str, ctx: RewriteContext) -> str:
    """<tag>{{Glossary("term"[, "label"])}}</tag> -> <tag><a href="URL">label</a></tag>.

    Must run before replace_glossary_links, which would otherwise rewrite the
    inner macro to Markdown inside the HTML element.
    """
    def _render(macro: MacroMatch) -> str:
        link = resolve_glossary(macro.term, ctx)
        return f'{macro.open_tag}<a href="{link}">{macro.display}</a>{macro.close_tag}'

    return substitute_macros(HTML_GLOSSARY, text, _render, "HTML Glossary")


def replace_glossary_links(text: str, ctx: RewriteContext) -> str:
    """{{Glossary("term"[, "label"])}} -> [label](URL)"""
    def _render(macro: MacroMatch) -> str:
        return f"[{macro.display}]({resolve_glossary(macro.term, ctx)})"

    return substitute_macros(GLOSSARY, text, _render, "Glossary")
