"""
Breakpoints - viewport width classification
"""

from enum import Enum
from typing import Dict, Tuple


class BreakpointBucket(str, Enum):
    ULTRA_SMALL = 'ultra-small'
    EXTRA_SMALL = 'extra-small'
    SMALL = 'small'
    MEDIUM = 'medium'
    LARGE = 'large'
    DESKTOP = 'desktop'


# Exclusive upper bounds, smallest first; anything wider is DESKTOP
BREAKPOINT_LIMITS: Tuple[Tuple[int, BreakpointBucket], ...] = (
    (360, BreakpointBucket.ULTRA_SMALL),
    (480, BreakpointBucket.EXTRA_SMALL),
    (640, BreakpointBucket.SMALL),
    (768, BreakpointBucket.MEDIUM),
    (1024, BreakpointBucket.LARGE),
)

# How far decorative blocks travel toward centre, relative to desktop
DISPLACEMENT_MULTIPLIERS: Dict[BreakpointBucket, float] = {
    BreakpointBucket.ULTRA_SMALL: 0.25,
    BreakpointBucket.EXTRA_SMALL: 0.4,
    BreakpointBucket.SMALL: 0.55,
    BreakpointBucket.MEDIUM: 0.7,
    BreakpointBucket.LARGE: 0.85,
    BreakpointBucket.DESKTOP: 1.0,
}


def classify_width(width: float) -> BreakpointBucket:
    """Map a viewport width in CSS pixels to its bucket"""
    for limit, bucket in BREAKPOINT_LIMITS:
        if width < limit:
            return bucket
    return BreakpointBucket.DESKTOP


def displacement_multiplier(bucket: BreakpointBucket) -> float:
    return DISPLACEMENT_MULTIPLIERS[bucket]
