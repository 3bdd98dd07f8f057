"""Scroll-progress mapping, breakpoints and the welcome frame."""

from __future__ import annotations

import pytest

from presentation import (
    AnimatedLetter,
    BreakpointBucket,
    PresentationController,
    classify_width,
    compute_welcome_frame,
    derive_scroll_state,
    is_welcome_visible,
    letters_for,
    normalize_pointer,
    section_visibility,
    shrink_progress,
    shrink_start,
    welcome_opacity,
    welcome_scale,
)

HIDE_WELCOME = 800.0


def test_shrink_start_is_thirty_percent_of_threshold():
    assert shrink_start(HIDE_WELCOME) == pytest.approx(240.0)


@pytest.mark.parametrize("offset", [0, 10, 120, 239.9])
def test_no_shrink_before_start(offset):
    progress = shrink_progress(offset, HIDE_WELCOME)

    assert progress == 0
    assert welcome_scale(progress) == 1
    assert welcome_opacity(progress) == 1


def test_fully_shrunk_at_threshold():
    progress = shrink_progress(HIDE_WELCOME, HIDE_WELCOME)

    assert progress == 1
    assert welcome_scale(progress) == pytest.approx(0.2)
    assert welcome_opacity(progress) == pytest.approx(0.3)


def test_progress_is_pinned_beyond_threshold():
    assert shrink_progress(5000, HIDE_WELCOME) == 1


def test_midpoint_progress():
    assert shrink_progress(520, HIDE_WELCOME) == pytest.approx(0.5)


def test_mapping_is_monotone_inside_shrink_range():
    offsets = [240 + step * 5.6 for step in range(101)]
    progresses = [shrink_progress(offset, HIDE_WELCOME) for offset in offsets]
    scales = [welcome_scale(p) for p in progresses]
    opacities = [welcome_opacity(p) for p in progresses]

    assert progresses == sorted(progresses)
    assert scales == sorted(scales, reverse=True)
    assert opacities == sorted(opacities, reverse=True)


def test_welcome_cutover_is_hard():
    assert is_welcome_visible(HIDE_WELCOME, HIDE_WELCOME)
    assert not is_welcome_visible(HIDE_WELCOME + 0.1, HIDE_WELCOME)
    assert compute_welcome_frame(HIDE_WELCOME + 0.1, HIDE_WELCOME, 1280) is None
    assert compute_welcome_frame(10_000, HIDE_WELCOME, 1280) is None


def test_scroll_state_flags():
    top = derive_scroll_state(0, HIDE_WELCOME, scrolled_offset=50)
    scrolled = derive_scroll_state(51, HIDE_WELCOME, scrolled_offset=50)
    past = derive_scroll_state(900, HIDE_WELCOME, scrolled_offset=50)

    assert (top.is_scrolled, top.show_main_content) == (False, False)
    assert (scrolled.is_scrolled, scrolled.show_main_content) == (True, False)
    assert (past.is_scrolled, past.show_main_content) == (True, True)
    assert past.to_dict() == {"scrollY": 900, "isScrolled": True, "showMainContent": True}


@pytest.mark.parametrize(
    ("width", "bucket"),
    [
        (320, BreakpointBucket.ULTRA_SMALL),
        (360, BreakpointBucket.EXTRA_SMALL),
        (479, BreakpointBucket.EXTRA_SMALL),
        (480, BreakpointBucket.SMALL),
        (700, BreakpointBucket.MEDIUM),
        (1000, BreakpointBucket.LARGE),
        (1024, BreakpointBucket.DESKTOP),
        (2560, BreakpointBucket.DESKTOP),
    ],
)
def test_classify_width(width, bucket):
    assert classify_width(width) is bucket


def test_displacement_scales_with_bucket():
    desktop = compute_welcome_frame(HIDE_WELCOME, HIDE_WELCOME, 1440)
    phone = compute_welcome_frame(HIDE_WELCOME, HIDE_WELCOME, 320)

    assert desktop.elements["top_left_video"].x == pytest.approx(200)
    assert desktop.elements["social_links"].y == pytest.approx(-100)
    assert phone.elements["top_left_video"].x == pytest.approx(50)
    assert phone.scale == desktop.scale


def test_frame_is_deterministic():
    first = compute_welcome_frame(400, HIDE_WELCOME, 768)
    second = compute_welcome_frame(400, HIDE_WELCOME, 768)

    assert first == second
    assert first.to_dict()["bucket"] == "large"


def test_sections_reveal_only_after_welcome():
    offsets = {"about": 0, "projects": 400}

    assert section_visibility(800, HIDE_WELCOME, offsets) == {"about": False, "projects": False}
    assert section_visibility(900, HIDE_WELCOME, offsets) == {"about": True, "projects": False}
    assert section_visibility(1200, HIDE_WELCOME, offsets) == {"about": True, "projects": True}


def test_controller_recomputes_on_scroll_and_resize():
    controller = PresentationController(HIDE_WELCOME, reveal_offsets={"about": 0}, width=1280)

    frame = controller.on_scroll(520)
    assert frame.welcome.shrink_progress == pytest.approx(0.5)
    assert controller.bucket is BreakpointBucket.DESKTOP

    frame = controller.on_resize(400)
    assert frame.bucket is BreakpointBucket.EXTRA_SMALL
    assert frame.welcome.shrink_progress == pytest.approx(0.5)

    frame = controller.on_scroll(900)
    assert frame.welcome is None
    assert controller.scroll_state.show_main_content
    assert frame.sections == {"about": True}


def test_controller_clamps_overscroll_to_top():
    controller = PresentationController(HIDE_WELCOME)

    frame = controller.on_scroll(-40)

    assert frame.scroll.scroll_y == 0
    assert frame.welcome.scale == 1


def test_controller_requires_positive_threshold():
    with pytest.raises(ValueError):
        PresentationController(0)


def test_letter_hover_is_local_to_each_letter():
    letters = letters_for("Sujeet")
    hovered = letters[0].enter()

    assert [letter.letter for letter in letters] == list("SUJEET")
    assert hovered.color == "white"
    assert letters[0].color == "stone-400"
    assert hovered.leave() == AnimatedLetter("S")


def test_pointer_normalisation():
    assert normalize_pointer(0, 0, 1000, 800) == (-1, -1)
    assert normalize_pointer(500, 400, 1000, 800) == (0, 0)
    assert normalize_pointer(10, 10, 0, 0) == (0.0, 0.0)
