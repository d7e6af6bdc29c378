"""Incipit - a terminal pager for Markdown documents."""

__version__ = "0.1.0"
