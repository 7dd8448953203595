"""Tests for the threshold-segment gesture recognizer."""

import random

from gesture_nav.gestures.gesture_types import LR_REPEAT, UD_REPEAT
from gesture_nav.gestures.segment_recognizer import GestureRecognizer


def draw(recognizer, start, *points):
    """Run a whole session and return the gesture."""
    recognizer.start(*start)
    for x, y in points:
        recognizer.add_point(x, y)
    return recognizer.end()


def test_no_points_is_no_gesture():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    assert recognizer.end() is None


def test_small_motion_is_no_gesture():
    recognizer = GestureRecognizer()
    assert draw(recognizer, (0, 0), (30, 10), (50, 40), (74, 0)) is None


def test_single_right_swipe():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(100, 0)
    assert recognizer.segments == ('right',)
    assert recognizer.anchor == (100, 0)
    assert recognizer.end() == 'right'


def test_each_simple_direction():
    recognizer = GestureRecognizer()
    assert draw(recognizer, (500, 500), (400, 500)) == 'left'
    assert draw(recognizer, (500, 500), (600, 510)) == 'right'
    assert draw(recognizer, (500, 500), (490, 400)) == 'up'
    assert draw(recognizer, (500, 500), (500, 600)) == 'down'


def test_compound_measured_from_anchor():
    recognizer = GestureRecognizer()
    # dx for the second sample is only measured from the end of the up segment
    assert draw(recognizer, (0, 0), (0, -100), (100, -100)) == 'up+right'


def test_up_down_repeat():
    recognizer = GestureRecognizer()
    gesture = draw(recognizer, (0, 0), (0, -100), (0, 0), (0, -100), (0, 0))
    assert gesture == UD_REPEAT


def test_repeat_can_start_with_either_direction():
    recognizer = GestureRecognizer()
    assert draw(recognizer, (0, 0), (0, 100), (0, 0), (0, 100), (0, 0)) == UD_REPEAT
    assert draw(recognizer, (0, 0), (100, 0), (0, 0), (100, 0), (0, 0)) == LR_REPEAT
    assert draw(recognizer, (0, 0), (-100, 0), (0, 0), (-100, 0), (0, 0)) == LR_REPEAT


def test_longer_alternation_is_still_repeat():
    recognizer = GestureRecognizer()
    points = [(0, -100), (0, 0)] * 4
    assert draw(recognizer, (0, 0), *points) == UD_REPEAT


def test_short_alternation_is_compound():
    recognizer = GestureRecognizer()
    assert draw(recognizer, (0, 0), (0, -100), (0, 0)) == 'up+down'
    assert draw(recognizer, (0, 0), (0, -100), (0, 0), (0, -100)) == 'up+down'
    assert draw(recognizer, (0, 0), (100, 0), (0, 0), (100, 0)) == 'right+left'


def test_broken_alternation_is_not_repeat():
    recognizer = GestureRecognizer()
    points = [(0, -100), (0, 0), (0, -100), (0, 0), (-100, 0)]
    recognizer.start(0, 0)
    for x, y in points:
        recognizer.add_point(x, y)
    assert recognizer.segments == ('up', 'down', 'up', 'down', 'left')
    assert recognizer.end() == 'up+down'


def test_third_segment_is_ignored():
    recognizer = GestureRecognizer()
    full = draw(recognizer, (0, 0), (0, -100), (100, -100), (100, 0))
    truncated = draw(recognizer, (0, 0), (0, -100), (100, -100))
    assert full == truncated == 'up+right'


def test_diagonal_sample_adds_nothing():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(80, 80)
    assert recognizer.segments == ()
    assert recognizer.anchor == (0, 0)
    assert recognizer.end() is None


def test_threshold_is_exclusive():
    recognizer = GestureRecognizer()
    assert draw(recognizer, (0, 0), (75, 0)) is None
    # Perpendicular displacement equal to the threshold blocks both axes
    assert draw(recognizer, (0, 0), (100, 75)) is None


def test_same_direction_keeps_anchor():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(100, 0)
    recognizer.add_point(200, 0)
    recognizer.add_point(300, 10)
    assert recognizer.segments == ('right',)
    assert recognizer.anchor == (100, 0)
    # Still measured from (100, 0): dx=200 and dy=-100 is a diagonal
    recognizer.add_point(300, -100)
    assert recognizer.segments == ('right',)


def test_custom_threshold():
    recognizer = GestureRecognizer(threshold=100)
    assert draw(recognizer, (0, 0), (90, 0)) is None
    assert draw(recognizer, (0, 0), (101, 0)) == 'right'


def test_start_resets_session():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(100, 0)
    recognizer.start(5, 5)
    recognizer.start(5, 5)
    assert recognizer.segments == ()
    assert recognizer.anchor == (5, 5)
    assert recognizer.end() is None


def test_end_consumes_session():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(0, 100)
    assert recognizer.end() == 'down'
    assert recognizer.end() is None


def test_current_gesture_does_not_consume():
    recognizer = GestureRecognizer()
    recognizer.start(0, 0)
    recognizer.add_point(-100, 0)
    assert recognizer.current_gesture() == 'left'
    recognizer.add_point(-100, 100)
    assert recognizer.current_gesture() == 'left+down'
    assert recognizer.end() == 'left+down'


def test_no_adjacent_duplicate_segments():
    rng = random.Random(1234)
    recognizer = GestureRecognizer()
    for _ in range(20):
        x, y = 0.0, 0.0
        recognizer.start(x, y)
        for _ in range(300):
            x += rng.uniform(-60, 60)
            y += rng.uniform(-60, 60)
            recognizer.add_point(x, y)
            segments = recognizer.segments
            assert all(a != b for a, b in zip(segments, segments[1:]))
        recognizer.end()


def test_result_matches_segment_rules():
    rng = random.Random(99)
    recognizer = GestureRecognizer()
    for _ in range(50):
        recognizer.start(0, 0)
        for _ in range(rng.randint(0, 40)):
            recognizer.add_point(rng.uniform(-400, 400), rng.uniform(-400, 400))
        segments = recognizer.segments
        gesture = recognizer.end()
        if not segments:
            assert gesture is None
        elif len(segments) == 1:
            assert gesture == segments[0]
        elif gesture not in (UD_REPEAT, LR_REPEAT):
            assert gesture == f"{segments[0]}+{segments[1]}"
        else:
            assert len(segments) >= 4
