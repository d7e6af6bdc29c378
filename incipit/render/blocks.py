"""Extraction of fenced code blocks and ATX headings from raw Markdown.

Each extracted construct is replaced in the prose by a placeholder token so
the prose renderer never sees it. The renderers re-insert the styled block at
the placeholder's position afterwards (see ``incipit.render.inject``).
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

CODE_BLOCK_TAG = "INCIPIT_CODEBLOCK"
HEADER_TAG = "INCIPIT_HEADER"

# Group 1 = language (optional), group 2 = body. The closing fence may carry
# trailing horizontal whitespace.
CODE_BLOCK_RE = re.compile(
    r"^`{3}([a-zA-Z][a-zA-Z0-9_+-]*)?\n(.*?)^`{3}[^\S\r\n]*$",
    re.MULTILINE | re.DOTALL,
)

# Group 1 = '#' run (level), group 2 = heading text.
HEADER_RE = re.compile(r"^(#{1,6})[ \t]+(.+)$", re.MULTILINE)


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block; ``language`` is empty when the fence has no tag."""

    language: str
    code: str


@dataclass(frozen=True)
class HeadingBlock:
    """An ATX heading with its raw (possibly emphasized) text."""

    level: int
    text: str


def placeholder(tag: str, index: int) -> str:
    """Build the placeholder token for the block at ``index``."""
    return f"{tag}_{index}"


def code_block_placeholder(index: int) -> str:
    """Placeholder token for the code block at ``index``."""
    return placeholder(CODE_BLOCK_TAG, index)


def header_placeholder(index: int) -> str:
    """Placeholder token for the heading at ``index``."""
    return placeholder(HEADER_TAG, index)


def extract_code_blocks(markdown: str) -> tuple[str, list[CodeBlock]]:
    """Pull fenced code blocks out of ``markdown``.

    Args:
        markdown: Raw document text

    Returns:
        Tuple of (prose with placeholders, blocks in document order)
    """
    blocks: list[CodeBlock] = []

    def _replace(match: re.Match[str]) -> str:
        token = code_block_placeholder(len(blocks))
        blocks.append(CodeBlock(language=match.group(1) or "", code=match.group(2)))
        return token

    prose = CODE_BLOCK_RE.sub(_replace, markdown)
    logger.debug(f"Extracted {len(blocks)} code blocks")
    return prose, blocks


def extract_headings(markdown: str) -> tuple[str, list[HeadingBlock]]:
    """Pull ATX headings out of ``markdown``.

    Must run after :func:`extract_code_blocks` so that ``#`` lines inside a
    fence are never taken for headings.

    Args:
        markdown: Prose, usually with code blocks already extracted

    Returns:
        Tuple of (prose with placeholders, headings in document order)
    """
    headings: list[HeadingBlock] = []

    def _replace(match: re.Match[str]) -> str:
        token = header_placeholder(len(headings))
        headings.append(HeadingBlock(level=len(match.group(1)), text=match.group(2)))
        return token

    prose = HEADER_RE.sub(_replace, markdown)
    logger.debug(f"Extracted {len(headings)} headings")
    return prose, headings
