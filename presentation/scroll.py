"""
Scroll progress mapping

Pure functions turning a raw vertical scroll offset into the shrink/fade
parameters of the welcome section and the visibility of later sections.
All of them are total over non-negative offsets.
"""

from dataclasses import dataclass
from typing import Dict, Mapping

SHRINK_START_RATIO = 0.3
MIN_SCALE_RATIO = 0.8  # shrinks to 20% of original size
FADE_RATIO = 0.7


@dataclass(frozen=True)
class ScrollState:
    scroll_y: float
    is_scrolled: bool
    show_main_content: bool

    def to_dict(self):
        return {
            'scrollY': self.scroll_y,
            'isScrolled': self.is_scrolled,
            'showMainContent': self.show_main_content,
        }


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def shrink_start(hide_welcome: float) -> float:
    """Offset at which the welcome section starts shrinking"""
    return hide_welcome * SHRINK_START_RATIO


def shrink_progress(scroll_offset: float, hide_welcome: float) -> float:
    """
    Normalised shrink progress in [0, 1]

    0 below shrink_start, 1 at and beyond hide_welcome, linear in between.
    """
    start = shrink_start(hide_welcome)
    return clamp((scroll_offset - start) / (hide_welcome - start))


def welcome_scale(progress: float) -> float:
    return 1 - progress * MIN_SCALE_RATIO


def welcome_opacity(progress: float) -> float:
    return 1 - progress * FADE_RATIO


def is_welcome_visible(scroll_offset: float, hide_welcome: float) -> bool:
    # Hard cutover: no fade to zero, the section simply stops rendering
    return scroll_offset <= hide_welcome


def derive_scroll_state(scroll_offset: float, hide_welcome: float, scrolled_offset: float = 50) -> ScrollState:
    """Recompute ScrollState for the current frame"""
    return ScrollState(
        scroll_y=scroll_offset,
        is_scrolled=scroll_offset > scrolled_offset,
        show_main_content=not is_welcome_visible(scroll_offset, hide_welcome),
    )


def section_visibility(scroll_offset: float, hide_welcome: float,
                       reveal_offsets: Mapping[str, float]) -> Dict[str, bool]:
    """
    Which content sections are revealed

    Reveal offsets are measured from the point where the welcome section
    disappears; nothing is revealed while it is still on screen.
    """
    past_welcome = scroll_offset - hide_welcome
    return {
        name: past_welcome > 0 and past_welcome >= offset
        for name, offset in reveal_offsets.items()
    }
