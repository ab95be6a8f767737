"""Integration tests for the full rewrite pipeline.

The canonical document below mixes every macro family the pipeline knows.
Read the expected output top-to-bottom as a reference for what each stage
produces with default settings, for a file two levels below the content root
(learn/html/intro.md) and a resource index holding only the HTML glossary entry.
"""

import pytest

from yarimd.core.pipeline import rewrite_text
from yarimd.core.resources import MemoryResourceIndex


DOCS = "https://developer.mozilla.org/en-US/docs/"

CANONICAL_MD = """\
---
title: Intro
---

{{LearnSidebar}}

Learn {{Glossary("HTML")}} and {{glossary("web component", "Web Components")}}.

<dl><dt>{{Glossary("HTTP")}}</dt></dl>

Use {{htmlelement("p")}}, {{cssxref("width")}}, {{HTTPStatus("404", "Not Found")}}
and {{domxref("Document.querySelector")}}. See [forms](/en-US/docs/Learn/Forms).

![diagram](images/fig1.png)

{{PreviousMenuNext("Learn/A", "Learn/B", "Learn")}}
"""

EXPECTED_MD = f"""\
---
title: Intro
---


Learn [HTML](../../resources/glossary/HTML.md) and [Web Components]({DOCS}Glossary/Web_Component).

<dl><dt><a href="{DOCS}Glossary/HTTP">HTTP</a></dt></dl>

Use [`<p>`]({DOCS}Web/HTML/Element/p), [`width`]({DOCS}Web/CSS/width), [Not Found]({DOCS}Web/HTTP/Status/404)
and [Document.querySelector]({DOCS}Web/API/Document/querySelector). See [forms]({DOCS}Learn/Forms).

![diagram](assets/images/fig1.png)

"""


@pytest.fixture(name="local_index")
def local_index_fixture():
    return MemoryResourceIndex.of("glossary", "HTML")


def test_canonical_document(local_index):
    assert rewrite_text(CANONICAL_MD, "learn/html/intro.md", local_index) == EXPECTED_MD


def test_canonical_document_idempotent(local_index):
    once = rewrite_text(CANONICAL_MD, "learn/html/intro.md", local_index)
    assert rewrite_text(once, "learn/html/intro.md", local_index) == once


# --- scenarios ---

@pytest.mark.parametrize("text,expected", [
    ('{{Glossary("HTML")}}', f"[HTML]({DOCS}Glossary/HTML)"),
    ('{{Glossary("web component", "Web Components")}}', f"[Web Components]({DOCS}Glossary/Web_Component)"),
    ('{{cssxref("width")}}', f"[`width`]({DOCS}Web/CSS/width)"),
    ("{{LearnSidebar}}\nBody text.\n", "Body text.\n"),
    ("![diagram](images/fig1.png)", "![diagram](assets/images/fig1.png)"),
])
def test_scenarios(index, text, expected):
    out = rewrite_text(text, "index.md", index)
    assert out == expected
    assert rewrite_text(out, "index.md", index) == out


@pytest.mark.parametrize("text", [
    "",
    "# Heading\n\nJust prose with a [link](https://example.com).\n",
    "Code: `{{ not a macro }}` and {{Glossary(unquoted)}}\n",
    '<p>{{Glossary("unterminated)}}</p>\n',
])
def test_identity_without_recognized_macros(index, text):
    assert rewrite_text(text, "a/b/c.md", index) == text


def test_wrapped_glossary_never_half_rewritten(index):
    out = rewrite_text('<strong>{{Glossary("DOM", "the DOM")}}</strong>', "index.md", index)
    assert out == f'<strong><a href="{DOCS}Glossary/DOM">the DOM</a></strong>'
    assert "{{" not in out and "](" not in out


def test_locale_setting_changes_targets(index, settings):
    settings = settings.model_copy(update={"locale": "fr"})
    out = rewrite_text('[x](/fr/docs/Web) {{cssxref("color")}}', "index.md", index, settings)
    assert out == "[x](https://developer.mozilla.org/fr/docs/Web) [`color`](https://developer.mozilla.org/fr/docs/Web/CSS/color)"
