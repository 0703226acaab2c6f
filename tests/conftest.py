"""Synthetic two-view landmark fixtures.

Coordinates are normalized; every view is 640x480 unless a test overrides it.
The frontal layout has level shoulders and hips; the sagittal layout stacks
each left/right pair on one vertical line with the ear directly above the
shoulder (CVA 90°, zero head translation).
"""

import math

import pytest

from Posture_Engine.core.types import DetectionResult, Landmark

WIDTH = 640
HEIGHT = 480
VISIBLE = 0.9

FRONTAL_LAYOUT = {
    0: (0.50, 0.12),
    1: (0.49, 0.10), 2: (0.48, 0.10), 3: (0.47, 0.10),
    4: (0.51, 0.10), 5: (0.52, 0.10), 6: (0.53, 0.10),
    7: (0.54, 0.12), 8: (0.46, 0.12),
    9: (0.49, 0.15), 10: (0.51, 0.15),
    11: (0.60, 0.25), 12: (0.40, 0.25),
    13: (0.63, 0.40), 14: (0.37, 0.40),
    15: (0.64, 0.52), 16: (0.36, 0.52),
    17: (0.65, 0.55), 18: (0.35, 0.55),
    19: (0.65, 0.56), 20: (0.35, 0.56),
    21: (0.63, 0.54), 22: (0.37, 0.54),
    23: (0.56, 0.55), 24: (0.44, 0.55),
    25: (0.56, 0.72), 26: (0.44, 0.72),
    27: (0.56, 0.90), 28: (0.44, 0.90),
    29: (0.56, 0.93), 30: (0.44, 0.93),
    31: (0.58, 0.95), 32: (0.42, 0.95),
}

SAGITTAL_LAYOUT = {
    0: (0.55, 0.13),
    1: (0.54, 0.11), 2: (0.54, 0.11), 3: (0.53, 0.11),
    4: (0.54, 0.11), 5: (0.54, 0.11), 6: (0.53, 0.11),
    7: (0.50, 0.12), 8: (0.50, 0.12),
    9: (0.54, 0.15), 10: (0.54, 0.15),
    11: (0.50, 0.25), 12: (0.50, 0.25),
    13: (0.50, 0.40), 14: (0.50, 0.40),
    15: (0.51, 0.52), 16: (0.51, 0.52),
    17: (0.52, 0.55), 18: (0.52, 0.55),
    19: (0.52, 0.56), 20: (0.52, 0.56),
    21: (0.52, 0.54), 22: (0.52, 0.54),
    23: (0.50, 0.55), 24: (0.50, 0.55),
    25: (0.50, 0.72), 26: (0.50, 0.72),
    27: (0.50, 0.90), 28: (0.50, 0.90),
    29: (0.48, 0.93), 30: (0.48, 0.93),
    31: (0.55, 0.95), 32: (0.55, 0.95),
}


def build_detection(layout, overrides=None, visibility=VISIBLE, width=WIDTH, height=HEIGHT):
    """Detection from a layout; overrides map index -> (x, y) or (x, y, visibility)."""
    points = dict(layout)
    points.update(overrides or {})
    landmarks = []
    for index in range(len(layout)):
        point = points[index]
        vis = point[2] if len(point) > 2 else visibility
        landmarks.append(Landmark(x=point[0], y=point[1], visibility=vis))
    return DetectionResult(landmarks=landmarks, confidence=visibility,
                           image_width=width, image_height=height)


def ear_for_cva(shoulder, cva, distance_px=100.0, width=WIDTH, height=HEIGHT):
    """Normalized ear position making `cva` degrees with the shoulder at `shoulder`."""
    radians = math.radians(cva)
    return (shoulder[0] + distance_px * math.cos(radians) / width,
            shoulder[1] - distance_px * math.sin(radians) / height)


@pytest.fixture
def make_frontal():
    def factory(overrides=None, **kwargs):
        return build_detection(FRONTAL_LAYOUT, overrides, **kwargs)
    return factory


@pytest.fixture
def make_sagittal():
    def factory(overrides=None, cva=None, distance_px=100.0, **kwargs):
        overrides = dict(overrides or {})
        if cva is not None:
            ear = ear_for_cva(SAGITTAL_LAYOUT[11], cva, distance_px)
            overrides.setdefault(7, ear)
            overrides.setdefault(8, ear)
        return build_detection(SAGITTAL_LAYOUT, overrides, **kwargs)
    return factory


@pytest.fixture
def frontal(make_frontal):
    return make_frontal()


@pytest.fixture
def sagittal(make_sagittal):
    return make_sagittal()
