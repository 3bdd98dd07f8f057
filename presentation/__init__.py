"""
Presentation Package - Scroll-driven state of the portfolio page

Pure mapping functions plus the small stateful pieces (controller,
typewriter) the frontend mirrors.
"""

from .breakpoints import BreakpointBucket, classify_width, displacement_multiplier
from .controller import PresentationController, PresentationFrame
from .scroll import (
    ScrollState,
    derive_scroll_state,
    is_welcome_visible,
    section_visibility,
    shrink_progress,
    shrink_start,
    welcome_opacity,
    welcome_scale
)
from .typewriter import Typewriter, TypewriterState, advance
from .welcome import AnimatedLetter, WelcomeFrame, compute_welcome_frame, letters_for, normalize_pointer

__all__ = [
    'BreakpointBucket',
    'classify_width',
    'displacement_multiplier',
    'PresentationController',
    'PresentationFrame',
    'ScrollState',
    'derive_scroll_state',
    'is_welcome_visible',
    'section_visibility',
    'shrink_progress',
    'shrink_start',
    'welcome_opacity',
    'welcome_scale',
    'Typewriter',
    'TypewriterState',
    'advance',
    'AnimatedLetter',
    'WelcomeFrame',
    'compute_welcome_frame',
    'letters_for',
    'normalize_pointer'
]
