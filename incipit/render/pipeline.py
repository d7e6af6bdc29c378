"""Markdown to ANSI rendering pipeline."""

import logging

from incipit.errors import ProseRenderError
from incipit.render.blocks import extract_code_blocks, extract_headings
from incipit.render.inject import inject_code_blocks, inject_headings
from incipit.render.prose import ProseRenderer

logger = logging.getLogger(__name__)


def render_markdown(markdown: str, theme: str, width: int) -> str:
    """Render a Markdown document for the terminal.

    Code blocks and headings are pulled out first and replaced by
    placeholders, the remaining prose goes through rich, and the styled blocks
    are then put back where their placeholders landed.

    If the prose renderer cannot be built or fails, the original document is
    returned unchanged.

    Args:
        markdown: Raw document text
        theme: Theme name (``dark``, ``light`` or ``notty``)
        width: Word-wrap width in columns

    Returns:
        Rendered text, never ending in a newline
    """
    prose, blocks = extract_code_blocks(markdown)
    prose, headings = extract_headings(prose)

    try:
        rendered = ProseRenderer(theme, width).render(prose)
    except ProseRenderError:
        logger.debug("Prose rendering failed, showing raw document", exc_info=True)
        return markdown

    rendered = rendered.rstrip("\n")
    rendered = inject_code_blocks(rendered, blocks, width, theme)
    rendered = inject_headings(rendered, headings, theme)
    logger.debug(f"Rendered {len(blocks)} code blocks and {len(headings)} headings at width {width}")
    # An empty heading label on the last line leaves a blank line behind
    return rendered.rstrip("\n")
