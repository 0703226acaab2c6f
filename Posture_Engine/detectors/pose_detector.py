"""
Pose Detector Module
MediaPipe Pose Landmarker wrapper for still images.
Uses the MediaPipe Tasks API (0.10+) in IMAGE mode and returns the full
33-landmark topology as a DetectionResult.
"""

import logging
import ssl
import urllib.request
from pathlib import Path
from typing import Union

import certifi
import cv2
import numpy as np

# MediaPipe Tasks API
import mediapipe as mp
from mediapipe.tasks import python as mp_python
from mediapipe.tasks.python import vision

from ..core.types import DetectionResult, Landmark

logger = logging.getLogger(__name__)


class PoseNotDetectedError(RuntimeError):
    """No person was found in the image."""


class PoseDetector:
    """
    MediaPipe Pose Landmarker for single frontal or sagittal photographs.

    Usage:
        with PoseDetector() as detector:
            frontal = detector.detect_file("front.jpg")
    """

    MODEL_URL = "https://storage.googleapis.com/mediapipe-models/pose_landmarker/pose_landmarker_lite/float16/latest/pose_landmarker_lite.task"
    MODEL_PATH = Path(__file__).parent.parent.parent / "models" / "pose_landmarker.task"

    def __init__(self, min_detection_confidence: float = 0.5,
                 min_presence_confidence: float = 0.5):
        """
        Initialize the pose detector using MediaPipe Tasks API.

        Args:
            min_detection_confidence: Minimum confidence for pose detection
            min_presence_confidence: Minimum confidence for pose presence
        """
        self._ensure_model()

        base_options = mp_python.BaseOptions(
            model_asset_path=str(self.MODEL_PATH)
        )

        options = vision.PoseLandmarkerOptions(
            base_options=base_options,
            running_mode=vision.RunningMode.IMAGE,
            num_poses=1,
            min_pose_detection_confidence=min_detection_confidence,
            min_pose_presence_confidence=min_presence_confidence,
            output_segmentation_masks=False
        )

        self.landmarker = vision.PoseLandmarker.create_from_options(options)
        self._detection_count = 0
        logger.info("Pose landmarker ready (%s)", self.MODEL_PATH.name)

    def _ensure_model(self):
        """Download model if not present."""
        if self.MODEL_PATH.exists():
            return

        logger.info("Downloading pose model from %s", self.MODEL_URL)
        self.MODEL_PATH.parent.mkdir(parents=True, exist_ok=True)

        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            self._download(ssl_context)
        except OSError as e:
            raise RuntimeError(f"Failed to download model: {e}\n"
                               f"Please manually download from:\n{self.MODEL_URL}\n"
                               f"And save to: {self.MODEL_PATH}") from e

        logger.info("Model saved to %s", self.MODEL_PATH)

    def _download(self, ssl_context: ssl.SSLContext):
        with urllib.request.urlopen(self.MODEL_URL, context=ssl_context) as response:
            data = response.read()
        # Written only after a complete read so a failed transfer leaves no file
        with open(self.MODEL_PATH, 'wb') as f:
            f.write(data)

    def detect(self, image: np.ndarray) -> DetectionResult:
        """
        Detect one pose in a BGR image.

        Raises:
            PoseNotDetectedError: if no pose is found
        """
        height, width = image.shape[:2]
        rgb_image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb_image)

        result = self.landmarker.detect(mp_image)

        if not result.pose_landmarks:
            raise PoseNotDetectedError(
                "No pose landmarks detected. Ensure the person is fully visible and try again."
            )

        self._detection_count += 1
        landmarks = tuple(
            Landmark(x=lm.x, y=lm.y, z=lm.z, visibility=lm.visibility or 0.0)
            for lm in result.pose_landmarks[0]  # First person
        )

        return DetectionResult(
            landmarks=landmarks,
            confidence=self.average_confidence(landmarks),
            image_width=width,
            image_height=height,
        )

    def detect_file(self, path: Union[str, Path]) -> DetectionResult:
        """Read an image from disk and detect one pose in it."""
        image = cv2.imread(str(path))
        if image is None:
            raise FileNotFoundError(f"Could not read image: {path}")
        logger.debug("Loaded %s (%dx%d)", path, image.shape[1], image.shape[0])
        return self.detect(image)

    @staticmethod
    def average_confidence(landmarks) -> float:
        """Mean of the positive visibility scores, 0 when none are positive."""
        scores = [lm.visibility for lm in landmarks if lm.visibility > 0]
        return float(np.mean(scores)) if scores else 0.0

    @property
    def detection_count(self) -> int:
        return self._detection_count

    def close(self):
        """Release resources."""
        if hasattr(self, 'landmarker'):
            self.landmarker.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
