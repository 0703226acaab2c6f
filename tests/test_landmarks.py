"""Tests for the landmark topology helpers."""

import pytest

from Posture_Engine.core.landmarks import (
    KEY_LANDMARKS, POSE_CONNECTIONS, TOPOLOGY_SIZE, PoseLandmark, all_visible, get_landmark,
    is_visible, select_bilateral, to_pixels,
)
from Posture_Engine.core.types import Landmark, LandmarkIndexError


def lm(visibility, x=0.5, y=0.5):
    return Landmark(x=x, y=y, visibility=visibility)


class TestVisibilityGate:
    """Visibility must be strictly above 0.5."""

    def test_exactly_half_is_not_visible(self):
        assert not is_visible(lm(0.5))

    def test_above_half_is_visible(self):
        assert is_visible(lm(0.51))

    def test_all_visible(self):
        assert all_visible(lm(0.9), lm(0.6))
        assert not all_visible(lm(0.9), lm(0.5))


class TestBilateralSelection:

    def test_more_visible_left_wins(self):
        landmarks = [lm(0.9, x=0.1), lm(0.8, x=0.2)]
        assert select_bilateral(landmarks, 0, 1).x == 0.1

    def test_tie_picks_right(self):
        landmarks = [lm(0.8, x=0.1), lm(0.8, x=0.2)]
        assert select_bilateral(landmarks, 0, 1).x == 0.2


class TestBoundsChecking:

    def test_index_past_end_raises(self):
        with pytest.raises(LandmarkIndexError) as exc:
            get_landmark([lm(0.9)] * 5, PoseLandmark.LEFT_EAR)
        assert exc.value.index == 7
        assert exc.value.size == 5
        assert isinstance(exc.value, IndexError)

    def test_select_bilateral_on_short_list_raises(self):
        with pytest.raises(LandmarkIndexError):
            select_bilateral([lm(0.9)] * 12, PoseLandmark.LEFT_SHOULDER, PoseLandmark.RIGHT_SHOULDER)


class TestTopology:

    def test_topology_size(self):
        assert TOPOLOGY_SIZE == 33
        assert len(PoseLandmark) == 33

    def test_connections_stay_in_topology(self):
        for a, b in POSE_CONNECTIONS:
            assert 0 <= a < TOPOLOGY_SIZE and 0 <= b < TOPOLOGY_SIZE
        assert all(0 <= i < TOPOLOGY_SIZE for i in KEY_LANDMARKS)

    def test_to_pixels(self):
        assert to_pixels(Landmark(x=0.25, y=0.5, visibility=1.0), 640, 480) == (160.0, 240.0)
