"""
Landmark Topology

The fixed 33-point pose topology (MediaPipe Pose Landmarker order), the
visibility gate, bilateral selection, and bounds-checked landmark access.
Visualization collaborators import POSE_CONNECTIONS and is_visible from here
so overlays apply the same gate as the metrics.
"""

from enum import IntEnum
from typing import Sequence, Tuple

from .types import Landmark, LandmarkIndexError

TOPOLOGY_SIZE = 33

# A landmark is usable only when visibility is strictly above this value
VISIBILITY_THRESHOLD = 0.5


class PoseLandmark(IntEnum):
    """Landmark indices (MediaPipe Pose Landmarker)."""
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


# Skeleton line pairs for overlays
POSE_CONNECTIONS: Tuple[Tuple[int, int], ...] = (
    # Face
    (0, 1), (1, 2), (2, 3), (3, 7),
    (0, 4), (4, 5), (5, 6), (6, 8),
    (9, 10),
    # Arms
    (11, 12),
    (11, 13), (13, 15), (15, 17), (15, 19), (15, 21),
    (12, 14), (14, 16), (16, 18), (16, 20), (16, 22),
    # Body
    (11, 23), (12, 24), (23, 24),
    # Legs
    (23, 25), (25, 27), (27, 29), (29, 31),
    (24, 26), (26, 28), (28, 30), (30, 32),
)

# Landmarks labelled by index on overlays
KEY_LANDMARKS: Tuple[int, ...] = (0, 7, 8, 11, 12, 15, 16, 23, 24, 25, 26, 27, 28)


def is_visible(landmark: Landmark) -> bool:
    return landmark.visibility > VISIBILITY_THRESHOLD


def all_visible(*landmarks: Landmark) -> bool:
    return all(is_visible(lm) for lm in landmarks)


def get_landmark(landmarks: Sequence[Landmark], index: int) -> Landmark:
    """Return landmarks[index], raising LandmarkIndexError past the end of the list."""
    if index < 0 or index >= len(landmarks):
        raise LandmarkIndexError(int(index), len(landmarks))
    return landmarks[index]


def select_bilateral(landmarks: Sequence[Landmark], left_index: int, right_index: int) -> Landmark:
    """
    Pick the representative of a left/right pair.

    The left landmark wins only when strictly more visible; ties go right.
    """
    left = get_landmark(landmarks, left_index)
    right = get_landmark(landmarks, right_index)
    return left if left.visibility > right.visibility else right


def to_pixels(landmark: Landmark, width: int, height: int) -> Tuple[float, float]:
    return landmark.x * width, landmark.y * height
