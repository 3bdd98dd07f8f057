"""
Welcome section frame computation

A WelcomeFrame holds every animated parameter of the welcome section for
one (scroll offset, viewport width) pair. compute_welcome_frame returns
None once the section is past its threshold.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from .breakpoints import BreakpointBucket, classify_width, displacement_multiplier
from .scroll import (
    is_welcome_visible,
    shrink_progress,
    welcome_opacity,
    welcome_scale,
)

# Full desktop travel (x, y) of each block at shrink progress 1
ELEMENT_TRAVEL: Dict[str, Tuple[float, float]] = {
    'top_left_video': (200, 150),
    'top_right_video': (-200, 150),
    'name_block': (100, -50),
    'social_links': (-150, -100),
}
CONTAINER_TRAVEL = (50, 30)
SUBTITLE_DROP = 100


@dataclass(frozen=True)
class Offset:
    x: float
    y: float

    def to_dict(self):
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class WelcomeFrame:
    shrink_progress: float
    scale: float
    opacity: float
    bucket: BreakpointBucket
    container: Offset
    elements: Dict[str, Offset] = field(default_factory=dict)
    subtitle_opacity: float = 1.0
    subtitle_offset: float = 0.0

    def to_dict(self):
        return {
            'shrinkProgress': self.shrink_progress,
            'scale': self.scale,
            'opacity': self.opacity,
            'bucket': self.bucket.value,
            'container': self.container.to_dict(),
            'elements': {name: offset.to_dict() for name, offset in self.elements.items()},
            'subtitle': {'opacity': self.subtitle_opacity, 'y': self.subtitle_offset},
        }


def element_offsets(progress: float, bucket: BreakpointBucket) -> Dict[str, Offset]:
    """Displacement of each decorative block toward centre"""
    multiplier = displacement_multiplier(bucket)
    return {
        name: Offset(dx * progress * multiplier, dy * progress * multiplier)
        for name, (dx, dy) in ELEMENT_TRAVEL.items()
    }


def compute_welcome_frame(scroll_offset: float, hide_welcome: float, width: float) -> Optional[WelcomeFrame]:
    if not is_welcome_visible(scroll_offset, hide_welcome):
        return None

    progress = shrink_progress(scroll_offset, hide_welcome)
    bucket = classify_width(width)
    return WelcomeFrame(
        shrink_progress=progress,
        scale=welcome_scale(progress),
        opacity=welcome_opacity(progress),
        bucket=bucket,
        container=Offset(CONTAINER_TRAVEL[0] * progress, CONTAINER_TRAVEL[1] * progress),
        elements=element_offsets(progress, bucket),
        subtitle_opacity=1 - progress,
        subtitle_offset=progress * SUBTITLE_DROP,
    )


@dataclass(frozen=True)
class AnimatedLetter:
    """One hoverable letter of the owner's name"""

    letter: str
    is_hovered: bool = False

    def enter(self) -> 'AnimatedLetter':
        return replace(self, is_hovered=True)

    def leave(self) -> 'AnimatedLetter':
        return replace(self, is_hovered=False)

    @property
    def color(self) -> str:
        return 'white' if self.is_hovered else 'stone-400'


def letters_for(name: str):
    return tuple(AnimatedLetter(letter) for letter in name.upper() if not letter.isspace())


def normalize_pointer(client_x: float, client_y: float, viewport_width: float, viewport_height: float):
    """Pointer position mapped to [-1, 1] on both axes"""
    if viewport_width <= 0 or viewport_height <= 0:
        return 0.0, 0.0
    return (client_x / viewport_width) * 2 - 1, (client_y / viewport_height) * 2 - 1
