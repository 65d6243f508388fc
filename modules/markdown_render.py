"""
Markdown -> HTML conversion, also exposed as a template filter.
"""
import logging

import markdown
from markupsafe import Markup, escape

logger = logging.getLogger("markdown")

MD_EXTENSIONS = ["fenced_code", "tables"]


def to_html(text: str) -> str:
    # fresh Markdown instance per call: no state carried between documents
    try:
        return markdown.markdown(text, extensions=MD_EXTENSIONS)
    except RecursionError:
        # pathologically nested input; fall back to the literal text
        logger.warning(f"Markdown nesting too deep ({len(text)} chars), rendering as plain text")
        return f"<pre>{escape(text)}</pre>"


def markdown_filter(value) -> Markup:
    """Jinja filter: ``{{ article.body | markdown }}``."""
    if value is None:
        return Markup("")
    return Markup(to_html(str(value)))
