"""Line search over rendered output."""

from collections.abc import Sequence


def compute_matches(lines: Sequence[str], query: str) -> list[int]:
    """Return indices of lines containing ``query``, ignoring case.

    An empty query matches every line.

    Examples:
        >>> compute_matches(["Hello World", "foo"], "hello")
        [0]
    """
    needle = query.lower()
    return [index for index, line in enumerate(lines) if needle in line.lower()]
