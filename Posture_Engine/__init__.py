"""
Posture Engine
Two-view Kendall posture metrics, syndrome classification and narrative
synthesis from pose landmarks.
"""

from .core.analysis_orchestrator import PostureAnalyzer, analyze_posture
from .core.types import AnalysisResult, DetectionResult, Landmark, LandmarkIndexError

# Detector needs mediapipe; import when needed
# from .detectors.pose_detector import PoseDetector
