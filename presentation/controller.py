"""
Presentation controller

Owns the scroll/viewport signals of one page instance and recomputes the
derived presentation state whenever either of them changes.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .breakpoints import BreakpointBucket, classify_width
from .scroll import ScrollState, derive_scroll_state, section_visibility
from .welcome import WelcomeFrame, compute_welcome_frame


@dataclass(frozen=True)
class PresentationFrame:
    scroll: ScrollState
    bucket: BreakpointBucket
    welcome: Optional[WelcomeFrame]
    sections: Dict[str, bool]

    def to_dict(self):
        return {
            'scroll': self.scroll.to_dict(),
            'bucket': self.bucket.value,
            'welcome': self.welcome.to_dict() if self.welcome is not None else None,
            'sections': dict(self.sections),
        }


class PresentationController:
    def __init__(self, hide_welcome: float, scrolled_offset: float = 50,
                 reveal_offsets: Optional[Mapping[str, float]] = None,
                 width: float = 1280, scroll_y: float = 0):
        if hide_welcome <= 0:
            raise ValueError('hide_welcome must be positive')
        self.hide_welcome = float(hide_welcome)
        self.scrolled_offset = float(scrolled_offset)
        self.reveal_offsets = dict(reveal_offsets or {})
        self._width = float(width)
        self._scroll_y = 0.0
        self.frame = None
        self.on_scroll(scroll_y)

    @classmethod
    def from_config(cls, config, **kwargs):
        return cls(
            hide_welcome=config.get('HIDE_WELCOME', 800),
            scrolled_offset=config.get('SCROLLED_OFFSET', 50),
            reveal_offsets=config.get('SECTION_REVEAL_OFFSETS', {}),
            **kwargs
        )

    @property
    def scroll_state(self) -> ScrollState:
        return self.frame.scroll

    @property
    def bucket(self) -> BreakpointBucket:
        return self.frame.bucket

    def on_scroll(self, scroll_y: float) -> PresentationFrame:
        # Overscroll (negative offsets) is treated as the top of the page
        self._scroll_y = max(0.0, float(scroll_y))
        return self._recompute()

    def on_resize(self, width: float) -> PresentationFrame:
        self._width = max(0.0, float(width))
        return self._recompute()

    def _recompute(self) -> PresentationFrame:
        self.frame = PresentationFrame(
            scroll=derive_scroll_state(self._scroll_y, self.hide_welcome, self.scrolled_offset),
            bucket=classify_width(self._width),
            welcome=compute_welcome_frame(self._scroll_y, self.hide_welcome, self._width),
            sections=section_visibility(self._scroll_y, self.hide_welcome, self.reveal_offsets),
        )
        return self.frame
