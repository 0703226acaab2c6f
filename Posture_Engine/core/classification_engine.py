"""
Classification Engine Module

Ordered Kendall/Janda syndrome rules evaluated independently against
DetailedPostureMetrics. Each rule pairs a predicate with a builder; every
triggered rule contributes one PostureClassification and the rule order is
the reporting priority. When nothing triggers the result is the single
ideal-posture classification.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from Clinical_Reference.kendall_norms import (
    CVA, LATERAL_DEVIATION, LUMBAR_LORDOSIS, PELVIC_TILT, SHOULDER_LEVEL, THORACIC_KYPHOSIS,
    RangeNorm,
)
from . import syndrome_catalog as catalog
from .types import (
    DetailedPostureMetrics, IliacCrestLevel, PostureClassification, Severity, SpinalBalance,
)

logger = logging.getLogger(__name__)

# Deviation ratio cut-offs: below MILD -> mild, below MODERATE -> moderate
SEVERITY_RATIO_MILD = 0.3
SEVERITY_RATIO_MODERATE = 0.6

CONFIDENCE_FLOOR = 0.6
IDEAL_CONFIDENCE = 0.95
IDEAL_SEVERITY = Severity.MILD

# Upper Crossed trigger on left protraction
PROTRACTION_LIMIT = 20.0


# -----------------------------------------------------------------------------
# Scoring
# -----------------------------------------------------------------------------

def determine_severity(value: float, normal_range: Tuple[float, float]) -> Severity:
    """Grade by distance to the nearer range bound relative to the range width."""
    low, high = normal_range
    deviation = min(abs(value - low), abs(value - high))
    ratio = deviation / (high - low)

    if ratio < SEVERITY_RATIO_MILD:
        return Severity.MILD
    if ratio < SEVERITY_RATIO_MODERATE:
        return Severity.MODERATE
    return Severity.SEVERE


def calculate_confidence(value: float, normal_range: Tuple[float, float]) -> float:
    """Confidence from distance to the range centre, floored at 0.6."""
    low, high = normal_range
    center = (low + high) / 2
    max_deviation = max(abs(low - center), abs(high - center))
    return max(CONFIDENCE_FLOOR, 1 - abs(value - center) / (max_deviation * 2))


def build_classification(profile: catalog.SyndromeProfile, value: float,
                         norm: RangeNorm) -> PostureClassification:
    """Attach severity, confidence and prognosis for `value` to a catalog profile."""
    severity = determine_severity(value, norm.range)
    return PostureClassification(
        classification=profile.name,
        subtype=profile.subtype,
        description=profile.description,
        musculoskeletal_implications=profile.musculoskeletal_implications,
        compensatory_patterns=profile.compensatory_patterns,
        clinical_symptoms=profile.clinical_symptoms,
        exercise_recommendations=profile.exercise_recommendations,
        ergonomic_considerations=profile.ergonomic_considerations,
        prognosis=profile.prognosis[severity],
        severity=severity,
        confidence=calculate_confidence(value, norm.range),
    )


def ideal_posture() -> PostureClassification:
    profile = catalog.IDEAL_POSTURE
    return PostureClassification(
        classification=profile.name,
        description=profile.description,
        musculoskeletal_implications=profile.musculoskeletal_implications,
        compensatory_patterns=profile.compensatory_patterns,
        clinical_symptoms=profile.clinical_symptoms,
        exercise_recommendations=profile.exercise_recommendations,
        ergonomic_considerations=profile.ergonomic_considerations,
        prognosis=profile.prognosis[IDEAL_SEVERITY],
        severity=IDEAL_SEVERITY,
        confidence=IDEAL_CONFIDENCE,
    )


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SyndromeRule:
    """Named trigger over metrics and the builder for its classification."""
    name: str
    predicate: Callable[[DetailedPostureMetrics], bool]
    build: Callable[[DetailedPostureMetrics], PostureClassification]


def _scored(profile: catalog.SyndromeProfile, norm: RangeNorm,
            metric: Callable[[DetailedPostureMetrics], float]
            ) -> Callable[[DetailedPostureMetrics], PostureClassification]:
    return lambda m: build_classification(profile, metric(m), norm)


def _cva(m: DetailedPostureMetrics) -> float:
    return m.head_posture.cva


def _pelvic_tilt(m: DetailedPostureMetrics) -> float:
    return m.pelvis.pelvic_tilt


def _thoracic_kyphosis(m: DetailedPostureMetrics) -> float:
    return m.spinal_curvature.thoracic_kyphosis


def _lumbar_lordosis(m: DetailedPostureMetrics) -> float:
    return m.spinal_curvature.lumbar_lordosis


def _lateral_deviation(m: DetailedPostureMetrics) -> float:
    return m.spinal_curvature.lateral_deviation


def _shoulder_elevation(m: DetailedPostureMetrics) -> float:
    return m.shoulder_girdle.shoulder_elevation.left


def has_forward_head_posture(m: DetailedPostureMetrics) -> bool:
    return _cva(m) < CVA.low


def has_upper_crossed_syndrome(m: DetailedPostureMetrics) -> bool:
    return (_cva(m) < CVA.low
            and m.shoulder_girdle.shoulder_protraction.left > PROTRACTION_LIMIT
            and _thoracic_kyphosis(m) > THORACIC_KYPHOSIS.high)


def has_lower_crossed_syndrome(m: DetailedPostureMetrics) -> bool:
    return _pelvic_tilt(m) > PELVIC_TILT.high and _lumbar_lordosis(m) > LUMBAR_LORDOSIS.high


def has_kyphosis_lordosis(m: DetailedPostureMetrics) -> bool:
    return _thoracic_kyphosis(m) > THORACIC_KYPHOSIS.high and _lumbar_lordosis(m) > LUMBAR_LORDOSIS.high


def has_flat_back(m: DetailedPostureMetrics) -> bool:
    return _lumbar_lordosis(m) < LUMBAR_LORDOSIS.low and _pelvic_tilt(m) < PELVIC_TILT.low


def has_sway_back(m: DetailedPostureMetrics) -> bool:
    return (m.spinal_curvature.spinal_balance is SpinalBalance.BACKWARD
            and _pelvic_tilt(m) < PELVIC_TILT.low)


def _has_lateral_shift(m: DetailedPostureMetrics) -> bool:
    return not LATERAL_DEVIATION.contains(_lateral_deviation(m))


def _has_frontal_asymmetry(m: DetailedPostureMetrics) -> bool:
    return (m.pelvis.iliac_crest_level is not IliacCrestLevel.LEVEL
            and SHOULDER_LEVEL.exceeds(_shoulder_elevation(m)))


def has_scoliotic_posture(m: DetailedPostureMetrics) -> bool:
    return _has_lateral_shift(m) or _has_frontal_asymmetry(m)


def build_scoliotic_posture(m: DetailedPostureMetrics) -> PostureClassification:
    """Score on lateral deviation when it triggered, otherwise on shoulder asymmetry."""
    if _has_lateral_shift(m):
        return build_classification(catalog.SCOLIOTIC, _lateral_deviation(m), LATERAL_DEVIATION)
    return build_classification(catalog.SCOLIOTIC, _shoulder_elevation(m), SHOULDER_LEVEL.as_range())


SYNDROME_RULES: Tuple[SyndromeRule, ...] = (
    SyndromeRule(catalog.FORWARD_HEAD_POSTURE.name, has_forward_head_posture,
                 _scored(catalog.FORWARD_HEAD_POSTURE, CVA, _cva)),
    SyndromeRule(catalog.UPPER_CROSSED_SYNDROME.name, has_upper_crossed_syndrome,
                 _scored(catalog.UPPER_CROSSED_SYNDROME, CVA, _cva)),
    SyndromeRule(catalog.LOWER_CROSSED_SYNDROME.name, has_lower_crossed_syndrome,
                 _scored(catalog.LOWER_CROSSED_SYNDROME, PELVIC_TILT, _pelvic_tilt)),
    SyndromeRule(catalog.KYPHOSIS_LORDOSIS.name, has_kyphosis_lordosis,
                 _scored(catalog.KYPHOSIS_LORDOSIS, THORACIC_KYPHOSIS, _thoracic_kyphosis)),
    SyndromeRule(catalog.FLAT_BACK.name, has_flat_back,
                 _scored(catalog.FLAT_BACK, LUMBAR_LORDOSIS, _lumbar_lordosis)),
    SyndromeRule(catalog.SWAY_BACK.name, has_sway_back,
                 _scored(catalog.SWAY_BACK, PELVIC_TILT, _pelvic_tilt)),
    SyndromeRule(catalog.SCOLIOTIC.name, has_scoliotic_posture, build_scoliotic_posture),
)


def classify_posture(metrics: DetailedPostureMetrics,
                     rules: Sequence[SyndromeRule] = SYNDROME_RULES) -> List[PostureClassification]:
    """
    Evaluate every rule in order.

    Returns:
        One classification per triggered rule, or [ideal posture] if none trigger
    """
    classifications = []
    for rule in rules:
        if rule.predicate(metrics):
            logger.debug("Syndrome rule triggered: %s", rule.name)
            classifications.append(rule.build(metrics))

    if not classifications:
        classifications.append(ideal_posture())
    return classifications
