"""Core analysis algorithms."""
from .types import (
    AnalysisResult, DetailedPostureMetrics, DetectionResult, Landmark, LandmarkIndexError,
    PostureClassification, Severity, Prognosis,
)
from .estimators import RegionEstimator, PlaceholderEstimator, LandmarkGeometryEstimator
from .metrics_calculator import calculate_detailed_metrics
from .classification_engine import SyndromeRule, SYNDROME_RULES, classify_posture
from .dysfunction_synthesizer import (
    identify_primary_dysfunction, analyze_compensatory_chain, assess_risk_factors,
    evaluate_functional_limitations,
)
from .plane_analysis import analyze_frontal_plane, analyze_sagittal_plane
from .analysis_orchestrator import PostureAnalyzer, analyze_posture
