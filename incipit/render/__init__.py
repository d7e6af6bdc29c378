"""Markdown rendering: extraction, block renderers and the pipeline."""

from incipit.render.blocks import CodeBlock, HeadingBlock, extract_code_blocks, extract_headings
from incipit.render.code import render_code_block
from incipit.render.heading import render_heading
from incipit.render.pipeline import render_markdown

__all__ = [
    "CodeBlock",
    "HeadingBlock",
    "extract_code_blocks",
    "extract_headings",
    "render_code_block",
    "render_heading",
    "render_markdown",
]
