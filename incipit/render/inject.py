"""Substitution of rendered blocks back into the rendered prose.

A placeholder is expected to sit on an output line of its own. The whole line
holding it is replaced, so any other text on that line is lost, and only the
first placeholder found on a line is honored.
"""

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from incipit.ansi import strip_ansi
from incipit.render.blocks import CodeBlock, HeadingBlock, code_block_placeholder, header_placeholder
from incipit.render.code import render_code_block
from incipit.render.heading import render_heading

T = TypeVar("T")


def _placeholder_pattern(token: str) -> re.Pattern[str]:
    # INCIPIT_CODEBLOCK_1 must not match inside INCIPIT_CODEBLOCK_10
    return re.compile(re.escape(token) + r"(?!\d)")


def inject_blocks(
    rendered: str,
    blocks: Sequence[T],
    placeholder_for: Callable[[int], str],
    render_block: Callable[[T], str],
) -> str:
    """Replace each line carrying a placeholder with its rendered block.

    Args:
        rendered: Output of the prose renderer (may contain ANSI codes)
        blocks: Extracted blocks; list index is the placeholder index
        placeholder_for: Maps a block index to its placeholder token
        render_block: Renders one block

    Returns:
        Rendered text with placeholder lines substituted
    """
    if not blocks:
        return rendered
    patterns = [_placeholder_pattern(placeholder_for(index)) for index in range(len(blocks))]
    consumed: set[int] = set()
    lines = rendered.split("\n")
    for i, line in enumerate(lines):
        plain = strip_ansi(line)
        for index, pattern in enumerate(patterns):
            if index in consumed or not pattern.search(plain):
                continue
            lines[i] = render_block(blocks[index])
            consumed.add(index)
            break
    return "\n".join(lines)


def inject_code_blocks(rendered: str, blocks: Sequence[CodeBlock], width: int, theme: str) -> str:
    """Swap code block placeholders for boxed code blocks."""
    return inject_blocks(
        rendered,
        blocks,
        code_block_placeholder,
        lambda block: render_code_block(block, width, theme),
    )


def inject_headings(rendered: str, headings: Sequence[HeadingBlock], theme: str) -> str:
    """Swap heading placeholders for pill-rendered headings."""
    return inject_blocks(
        rendered,
        headings,
        header_placeholder,
        lambda heading: render_heading(heading, theme),
    )
