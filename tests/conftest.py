"""Pytest fixtures for Incipit tests."""

import pytest

from incipit.pager import Pager, Resize

DOCUMENT_LINES = 100

# Lines holding the word "Needle" for each render width
NEEDLE_LINES = {
    80: [5, 50],
    100: [7],
    120: [10, 20, 30],
}


class FakeRenderer:
    """Deterministic stand-in for render_markdown that counts its calls."""

    def __init__(self):
        self.calls: list[int] = []

    def __call__(self, markdown: str, theme: str, width: int) -> str:
        self.calls.append(width)
        lines = [f"hay {i}" for i in range(DOCUMENT_LINES)]
        for index in NEEDLE_LINES.get(width, []):
            lines[index] = f"\x1b[1mNeedle\x1b[0m at {index}"
        return "\n".join(lines)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's color and width settings out of the tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("INCIPIT_WIDTH", raising=False)
    monkeypatch.delenv("INCIPIT_LOG_FILE", raising=False)


@pytest.fixture
def renderer():
    """Create a counting fake renderer."""
    return FakeRenderer()


@pytest.fixture
def pager(renderer):
    """Create a pager that has not seen its first resize yet."""
    return Pager("notes.md", "# ignored", "dark", render=renderer)


@pytest.fixture
def ready_pager(pager):
    """Create a pager sized to an 80x24 terminal (22 content rows)."""
    pager.handle(Resize(width=80, height=24))
    return pager


@pytest.fixture
def sample_markdown():
    """A small document with headings, prose and two code blocks."""
    return (
        "# Incipit\n"
        "\n"
        "A pager for *Markdown* documents.\n"
        "\n"
        "## Usage\n"
        "\n"
        "```sh\n"
        "# not a heading\n"
        "incipit README.md\n"
        "```\n"
        "\n"
        "Some more text.\n"
        "\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
    )
