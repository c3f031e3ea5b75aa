"""Helpers for rewriting markdown document links to generated HTML pages.

Workshop documents live one directory below the project root and link to each
other by filename (``03-topic.md``), through the source directory
(``../exercises/03-topic.md``), or back to the project overview
(``../README.md``). Once converted, those references must point at the
generated siblings in the flat output directory. Each reference shape is a
small rule: a pure function from an ``href`` value to its rewritten form, or
``None`` when the rule does not apply. Rules run in sequence and the first
match wins; anything unmatched passes through unchanged.

Rules are applied to the ``href`` of ``<a>`` elements in the parsed markdown
tree, through :class:`LinkRewriteExtension`, so text that merely looks like
an attribute (inside code spans, for instance) is left alone.

Examples
--------
>>> rewrite_href("../README.md", RewriteContext())
'index.html'
>>> rewrite_href("03-topic.md#setup", RewriteContext())
'03-topic.html#setup'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath
import typing as typ
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from workshop_pages._constants import (
    DEFAULT_OVERVIEW_LINK,
    DEFAULT_SOURCE_DIR_NAME,
    INDEX_FILENAME,
    OUTPUT_SUFFIX,
    SOURCE_SUFFIX,
)

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

_EXTERNAL_PREFIXES = ("http://", "https://", "mailto:", "tel:", "data:", "javascript:")

LinkRule = cabc.Callable[[str, "RewriteContext"], str | None]


@dc.dataclass(frozen=True, slots=True)
class RewriteContext:
    """Settings shared by every rewrite rule.

    Attributes
    ----------
    overview_link : str
        Relative path of the project overview document as written in sources.
    source_dir_name : str
        Name of the directory holding the sources, seen from one level up.
    known_outputs : Mapping[str, str]
        Source filename to output filename for every configured document.
    """

    overview_link: str = DEFAULT_OVERVIEW_LINK
    source_dir_name: str = DEFAULT_SOURCE_DIR_NAME
    known_outputs: cabc.Mapping[str, str] = dc.field(default_factory=dict)

    def output_for(self, source_name: str) -> str:
        """Return the output filename for ``source_name``."""
        known = self.known_outputs.get(source_name)
        if known:
            return known
        return source_name.removesuffix(SOURCE_SUFFIX) + OUTPUT_SUFFIX


def _split_target(href: str) -> tuple[str, str] | None:
    """Split ``href`` into a relative path and its ``?query#fragment`` tail."""
    if not href or href.startswith(("#", "/")) or "://" in href:
        return None
    if href.lower().startswith(_EXTERNAL_PREFIXES):
        return None
    parsed = urlsplit(href)
    if parsed.scheme or parsed.netloc or not parsed.path:
        return None
    tail = ""
    if parsed.query:
        tail += f"?{parsed.query}"
    if parsed.fragment:
        tail += f"#{parsed.fragment}"
    return parsed.path, tail


def rewrite_overview_link(href: str, context: RewriteContext) -> str | None:
    """Rewrite a reference to the overview document into the landing page."""
    split = _split_target(href)
    if split is None:
        return None
    path, tail = split
    if posixpath.normpath(path) != posixpath.normpath(context.overview_link):
        return None
    return INDEX_FILENAME + tail


def rewrite_source_dir_link(href: str, context: RewriteContext) -> str | None:
    """Rewrite ``../<source dir>/name.md`` into the generated ``name.html``."""
    split = _split_target(href)
    if split is None:
        return None
    path, tail = split
    parent, name = posixpath.split(posixpath.normpath(path))
    if parent != f"../{context.source_dir_name}" or not name.endswith(SOURCE_SUFFIX):
        return None
    return context.output_for(name) + tail


def rewrite_sibling_link(href: str, context: RewriteContext) -> str | None:
    """Rewrite a sibling ``name.md`` (optionally ``./name.md``) into ``name.html``."""
    split = _split_target(href)
    if split is None:
        return None
    path, tail = split
    name = path.removeprefix("./")
    if "/" in name or not name.endswith(SOURCE_SUFFIX) or name == SOURCE_SUFFIX:
        return None
    return context.output_for(name) + tail


DEFAULT_RULES: tuple[LinkRule, ...] = (
    rewrite_overview_link,
    rewrite_source_dir_link,
    rewrite_sibling_link,
)


def rewrite_href(
    href: str,
    context: RewriteContext,
    rules: cabc.Sequence[LinkRule] = DEFAULT_RULES,
) -> str:
    """Return ``href`` rewritten by the first matching rule, or unchanged."""
    for rule in rules:
        rewritten = rule(href, context)
        if rewritten is not None:
            return rewritten
    return href


class LinkRewriter:
    """Rewrite document references on the ``<a>`` elements of a parsed fragment."""

    def __init__(
        self,
        context: RewriteContext | None = None,
        rules: cabc.Sequence[LinkRule] = DEFAULT_RULES,
    ) -> None:
        self.context = context or RewriteContext()
        self.rules = tuple(rules)

    @classmethod
    def for_documents(
        cls,
        source_to_output: typ.Mapping[str, str],
        *,
        overview_link: str = DEFAULT_OVERVIEW_LINK,
        source_dir_name: str = DEFAULT_SOURCE_DIR_NAME,
    ) -> LinkRewriter:
        """Build a rewriter aware of every configured document's output name."""
        context = RewriteContext(
            overview_link=overview_link,
            source_dir_name=source_dir_name,
            known_outputs=dict(source_to_output),
        )
        return cls(context)

    def rewrite(self, root: Element) -> Element:
        """Rewrite the ``href`` of every anchor below ``root`` in place.

        Only ``<a>`` elements are visited, so text in code spans, code blocks,
        and prose is never altered. Already-rewritten references no longer end
        in ``.md`` and therefore match no rule, so applying this twice equals
        applying it once.
        """
        for element in root.iter("a"):
            href = element.get("href")
            if not href:
                continue
            rewritten = rewrite_href(href, self.context, self.rules)
            if rewritten != href:
                element.set("href", rewritten)
        return root

    def extension(self) -> LinkRewriteExtension:
        """Return a Markdown extension applying this rewriter during conversion."""
        return LinkRewriteExtension(self)


class LinkRewriteExtension(Extension):
    """Rewrite document links while markdown is converted to HTML.

    Pass an instance to :class:`~workshop_pages.generator.renderer.HtmlContentRenderer`
    as its ``link_extension`` so ``03-topic.md`` style references in the parsed
    tree point at the generated pages before serialisation.
    """

    def __init__(self, rewriter: LinkRewriter) -> None:
        self.rewriter = rewriter

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the link treeprocessor on the Markdown instance."""
        processor = LinkRewriteTreeprocessor(md, self.rewriter)
        md.treeprocessors.register(processor, "workshop_links", 15)


class LinkRewriteTreeprocessor(Treeprocessor):
    """Apply a :class:`LinkRewriter` to the parsed markdown tree."""

    def __init__(self, md: Markdown, rewriter: LinkRewriter) -> None:
        super().__init__(md)
        self.rewriter = rewriter

    def run(self, root: Element) -> Element:
        """Rewrite anchors after inline patterns have produced them."""
        return self.rewriter.rewrite(root)


__all__ = [
    "DEFAULT_RULES",
    "LinkRewriteExtension",
    "LinkRewriteTreeprocessor",
    "LinkRewriter",
    "LinkRule",
    "RewriteContext",
    "rewrite_href",
    "rewrite_overview_link",
    "rewrite_sibling_link",
    "rewrite_source_dir_link",
]
