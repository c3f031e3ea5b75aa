"""Unit tests for document link rewriting.

These tests cover each rewrite rule as a pure function, ``LinkRewriter`` over
parsed element trees, and the Markdown extension that applies it during
conversion: overview links become the landing page, sibling and
source-directory links become generated HTML siblings, and everything else
passes through untouched. Rewriting twice must equal rewriting once, and only
``<a href>`` values are ever changed.
"""

from __future__ import annotations

import xml.etree.ElementTree as etree

import pytest

from workshop_pages.generator.link_rewriter import (
    LinkRewriter,
    RewriteContext,
    rewrite_href,
    rewrite_overview_link,
    rewrite_sibling_link,
    rewrite_source_dir_link,
)
from workshop_pages.generator.renderer import HtmlContentRenderer


def _render(markdown: str, rewriter: LinkRewriter | None = None) -> str:
    rewriter = rewriter or LinkRewriter()
    return HtmlContentRenderer(link_extension=rewriter.extension()).markdown(markdown)


def _rewrite_markup(markup: str, rewriter: LinkRewriter | None = None) -> str:
    root = etree.fromstring(markup)  # noqa: S314 - trusted test markup
    rewritten = (rewriter or LinkRewriter()).rewrite(root)
    return etree.tostring(rewritten, encoding="unicode")


@pytest.mark.parametrize(
    ("markdown", "expected"),
    [
        ("[Home](../README.md)", '<p><a href="index.html">Home</a></p>'),
        ("[Topic](03-topic.md)", '<p><a href="03-topic.html">Topic</a></p>'),
        (
            "[Example](https://example.com)",
            '<p><a href="https://example.com">Example</a></p>',
        ),
    ],
)
def test_rewrite_concrete_cases(markdown: str, expected: str) -> None:
    """Overview, sibling, and external links follow their documented outcome."""
    assert _render(markdown) == expected


def test_rewrite_is_idempotent() -> None:
    """Applying the rewriter twice yields the same tree as applying it once."""
    markup = (
        '<div><p><a href="../README.md">home</a> <a href="03-topic.md#step-2">next</a> '
        '<a href="../exercises/04-inline.md">inline</a> '
        '<a href="https://example.com/page.md">remote</a> <a href="#top">top</a></p></div>'
    )
    once = _rewrite_markup(markup)
    assert _rewrite_markup(once) == once
    assert 'href="index.html"' in once
    assert 'href="03-topic.html#step-2"' in once
    assert 'href="04-inline.html"' in once
    assert 'href="https://example.com/page.md"' in once, "external .md must not change"


def test_tree_without_links_is_unchanged() -> None:
    markup = "<div><p>No links here.</p></div>"
    assert _rewrite_markup(markup) == markup


def test_code_span_text_is_not_rewritten() -> None:
    """Attribute-like text inside inline code stays exactly as written."""
    html = _render('Write `<a href="01-build.md">` in your page.\n')
    assert 'href="01-build.md"' in html
    assert "01-build.html" not in html


def test_only_anchor_href_is_rewritten() -> None:
    """Prose and non-anchor attributes mentioning ``.md`` files are left alone."""
    markup = (
        '<div><p title="see 03-topic.md">Read 03-topic.md first.</p>'
        '<img src="03-topic.md" /><a href="03-topic.md">go</a></div>'
    )
    rewritten = _rewrite_markup(markup)
    assert 'title="see 03-topic.md"' in rewritten
    assert "Read 03-topic.md first." in rewritten
    assert 'src="03-topic.md"' in rewritten
    assert '<a href="03-topic.html">go</a>' in rewritten


def test_anchor_without_href_is_skipped() -> None:
    markup = '<div><a name="top">top</a></div>'
    assert _rewrite_markup(markup) == markup


@pytest.mark.parametrize(
    "href",
    [
        "https://example.com",
        "http://example.com/a.md",
        "mailto:someone@example.com",
        "#anchor",
        "/absolute/page.md",
        "images/diagram.png",
        "nested/dir/page.md",
        "../other/page.md",
        "",
    ],
)
def test_unrecognized_links_pass_through(href: str) -> None:
    """Links that match no rule are returned exactly as given."""
    assert rewrite_href(href, RewriteContext()) == href


def test_overview_rule_keeps_fragment() -> None:
    context = RewriteContext()
    assert rewrite_overview_link("../README.md#prerequisites", context) == (
        "index.html#prerequisites"
    )
    assert rewrite_overview_link("README.md", context) is None


def test_source_dir_rule_uses_configured_directory() -> None:
    context = RewriteContext(source_dir_name="lessons")
    assert rewrite_source_dir_link("../lessons/05-fmt.md", context) == "05-fmt.html"
    assert rewrite_source_dir_link("../exercises/05-fmt.md", context) is None


def test_sibling_rule_accepts_dot_slash_and_query() -> None:
    context = RewriteContext()
    assert rewrite_sibling_link("./06-ssa.md?plain=1", context) == "06-ssa.html?plain=1"
    assert rewrite_sibling_link("06-ssa.html", context) is None


def test_known_outputs_take_precedence() -> None:
    """A configured mapping overrides plain suffix substitution."""
    rewriter = LinkRewriter.for_documents({"intro.md": "welcome.html"})
    assert _render("[x](intro.md)", rewriter) == '<p><a href="welcome.html">x</a></p>'


def test_renderer_without_link_extension_keeps_links() -> None:
    html = HtmlContentRenderer().markdown("[Topic](03-topic.md)")
    assert html == '<p><a href="03-topic.md">Topic</a></p>'


def test_first_matching_rule_wins() -> None:
    """Custom rule order is honoured and later rules are not consulted."""
    calls: list[str] = []

    def _always(href: str, _context: RewriteContext) -> str:
        calls.append("always")
        return "first.html"

    def _never(href: str, _context: RewriteContext) -> str:  # pragma: no cover - must not run
        calls.append("never")
        return "second.html"

    assert rewrite_href("x.md", RewriteContext(), rules=(_always, _never)) == "first.html"
    assert calls == ["always"]
