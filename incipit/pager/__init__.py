"""Interactive pager over rendered Markdown."""

from incipit.pager.app import PagerApp
from incipit.pager.models import KeyPress, MouseWheel, PagerAction, PagerMode, Resize
from incipit.pager.search import compute_matches
from incipit.pager.state import Pager

__all__ = [
    "KeyPress",
    "MouseWheel",
    "Pager",
    "PagerAction",
    "PagerApp",
    "PagerMode",
    "Resize",
    "compute_matches",
]
