"""Unit tests for core/stages/glossary.py"""

from pathlib import PurePath

from yarimd.core.models import RewriteContext
from yarimd.core.resources import MemoryResourceIndex
from yarimd.core.stages.glossary import replace_glossary_links, replace_html_glossary_links


GLOSSARY_URL = "https://developer.mozilla.org/en-US/docs/Glossary/"


# --- bare ---

def test_bare_term(ctx):
    assert replace_glossary_links('{{Glossary("HTML")}}', ctx) == f"[HTML]({GLOSSARY_URL}HTML)"


def test_bare_term_with_label(ctx):
    out = replace_glossary_links('{{Glossary("web component", "Web Components")}}', ctx)
    assert out == f"[Web Components]({GLOSSARY_URL}Web_Component)"


def test_bare_lowercase_macro_name(ctx):
    assert replace_glossary_links('{{glossary("CSS")}}', ctx) == f"[CSS]({GLOSSARY_URL}CSS)"


def test_bare_other_capitalization_not_matched(ctx):
    text = '{{GLOSSARY("CSS")}}'
    assert replace_glossary_links(text, ctx) == text


def test_bare_multiple_in_sentence(ctx):
    text = 'Both {{Glossary("HTML")}} and {{Glossary("CSS", "style sheets")}} matter.'
    assert replace_glossary_links(text, ctx) == (
        f"Both [HTML]({GLOSSARY_URL}HTML) and [style sheets]({GLOSSARY_URL}CSS) matter."
    )


def test_bare_local_resource(settings):
    ctx = RewriteContext(PurePath("learn/html/index.md"), MemoryResourceIndex.of("glossary", "HTML"), settings)
    assert replace_glossary_links('{{Glossary("HTML")}}', ctx) == "[HTML](../../resources/glossary/HTML.md)"


# --- wrapped ---

def test_wrapped_term(ctx):
    out = replace_html_glossary_links('<td>{{Glossary("HTTP")}}</td>', ctx)
    assert out == f'<td><a href="{GLOSSARY_URL}HTTP">HTTP</a></td>'


def test_wrapped_keeps_attributes_and_label(ctx):
    out = replace_html_glossary_links('<th scope="row">{{glossary("MIME type", "MIME")}}</th>', ctx)
    assert out == f'<th scope="row"><a href="{GLOSSARY_URL}MIME_Type">MIME</a></th>'


def test_wrapped_requires_adjacent_tags(ctx):
    text = '<td> {{Glossary("HTTP")}} </td>'
    assert replace_html_glossary_links(text, ctx) == text


def test_wrapped_then_bare_leaves_no_macro(ctx):
    """Running wrapped then bare never rewrites the wrapped macro into Markdown."""
    text = '<dt>{{Glossary("HTTP")}}</dt> and {{Glossary("HTML")}}'
    out = replace_glossary_links(replace_html_glossary_links(text, ctx), ctx)
    assert "{{" not in out
    assert f'<dt><a href="{GLOSSARY_URL}HTTP">HTTP</a></dt>' in out
    assert f"[HTML]({GLOSSARY_URL}HTML)" in out
