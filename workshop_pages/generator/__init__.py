"""Utilities for rendering, link rewriting, and composing workshop pages."""

from .link_rewriter import (
    LinkRewriteExtension,
    LinkRewriter,
    RewriteContext,
    rewrite_href,
)
from .models import GenerationResult, Navigation, PageViewModel, RenderedPage
from .page_composer import PageComposer, resolve_navigation
from .renderer import HtmlContentRenderer
from .site_generator import SiteGenerator

__all__ = [
    "GenerationResult",
    "HtmlContentRenderer",
    "LinkRewriteExtension",
    "LinkRewriter",
    "Navigation",
    "PageComposer",
    "PageViewModel",
    "RenderedPage",
    "RewriteContext",
    "SiteGenerator",
    "resolve_navigation",
    "rewrite_href",
]
