"""
Analysis Orchestrator Module
Runs metrics -> classification -> synthesis over a frontal and a sagittal
detection and assembles the AnalysisResult.
"""

import logging
import time
from typing import Optional

from .classification_engine import classify_posture
from .dysfunction_synthesizer import (
    analyze_compensatory_chain, assess_risk_factors, evaluate_functional_limitations,
    identify_primary_dysfunction,
)
from .estimators import PlaceholderEstimator, RegionEstimator
from .metrics_calculator import calculate_detailed_metrics
from .plane_analysis import analyze_frontal_plane, analyze_sagittal_plane
from .types import AnalysisResult, DetectionResult

logger = logging.getLogger(__name__)


class PostureAnalyzer:
    """
    Two-view posture analysis.

    Holds only the region estimator; each analyze() call is independent.

    The sagittal photograph must show the subject facing image-right (+x).
    The craniovertebral angle is measured against a horizontal ray pointing
    right, so a left-facing subject with a forward head reads a CVA above 90
    and never triggers Forward Head Posture. Mirror left-facing images before
    detection.

    Usage:
        analyzer = PostureAnalyzer()
        result = analyzer.analyze(frontal_detection, sagittal_detection)
        print(result.primary_dysfunction)
    """

    def __init__(self, estimator: Optional[RegionEstimator] = None):
        self.estimator = estimator or PlaceholderEstimator()

    def analyze(self, frontal: DetectionResult, sagittal: DetectionResult) -> AnalysisResult:
        """
        Analyze one subject from two views.

        Args:
            frontal: Front-facing detection
            sagittal: Side-view detection

        Returns:
            AnalysisResult stamped with the completion time (epoch ms)

        Raises:
            LandmarkIndexError: if either view has fewer than 33 landmarks
        """
        metrics = calculate_detailed_metrics(frontal, sagittal, self.estimator)
        classifications = classify_posture(metrics)

        result = AnalysisResult(
            metrics=metrics,
            classifications=tuple(classifications),
            primary_dysfunction=identify_primary_dysfunction(classifications),
            compensatory_chain=tuple(analyze_compensatory_chain(metrics)),
            risk_factors=tuple(assess_risk_factors(metrics, classifications)),
            functional_limitations=tuple(evaluate_functional_limitations(metrics)),
            frontal_plane=analyze_frontal_plane(frontal),
            sagittal_plane=analyze_sagittal_plane(sagittal),
            timestamp=int(time.time() * 1000),
        )

        logger.debug("Posture analysis complete: primary=%s, %d classification(s), estimated=%s",
                     result.primary_dysfunction, len(classifications), self.estimator.is_estimated)
        if metrics.unmeasured:
            logger.debug("Fallback values used for: %s", ", ".join(metrics.unmeasured))
        return result


def analyze_posture(frontal: DetectionResult, sagittal: DetectionResult,
                    estimator: Optional[RegionEstimator] = None) -> AnalysisResult:
    """Convenience wrapper around PostureAnalyzer.analyze()."""
    return PostureAnalyzer(estimator).analyze(frontal, sagittal)
