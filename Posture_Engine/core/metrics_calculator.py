"""
Metrics Calculator Module
Two-view posture metrics from pose landmarks. Derives the craniovertebral
angle, head translation, suboccipital compression and shoulder elevation from
geometry, and takes the remaining regional measurements from a
RegionEstimator.

Head and spine use the sagittal view; shoulder girdle, pelvis and lower
extremity use the frontal view's image size. All distances are pixels.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from Clinical_Reference.kendall_norms import CVA
from .estimators import PlaceholderEstimator, RegionEstimator
from .landmarks import (
    PoseLandmark as PL, TOPOLOGY_SIZE, all_visible, get_landmark, select_bilateral, to_pixels,
)
from .types import (
    Bilateral, CompressionLevel, DetailedPostureMetrics, DetectionResult, HeadPostureMetrics,
    Landmark, LandmarkIndexError, LowerExtremityMetrics, PelvisMetrics,
    ShoulderGirdleMetrics, SpinalCurvatureMetrics,
)

logger = logging.getLogger(__name__)

# Suboccipital compression score: (66 - cva) + headTranslation / 10
COMPRESSION_PIVOT_CVA = 66.0
COMPRESSION_THRESHOLDS = {'normal': 5.0, 'mild': 10.0, 'moderate': 15.0}

# Pivots of the linear cervical segment proxies
UPPER_CERVICAL_PIVOT = 90.0
LOWER_CERVICAL_PIVOT = 45.0

# Head metrics that hold fallback values when the ear or shoulder is hidden
HEAD_FALLBACK_MEASUREMENTS = (
    'cva', 'headTranslation', 'suboccipitalCompression',
    'upperCervicalExtension', 'lowerCervicalFlexion',
)

# Length of the horizontal reference vector from the shoulder (pixels)
_HORIZONTAL_REFERENCE = 100.0


# -----------------------------------------------------------------------------
# Geometry
# -----------------------------------------------------------------------------

def calculate_angle(p1: Tuple[float, float], vertex: Tuple[float, float],
                    p3: Tuple[float, float]) -> float:
    """
    Angle at `vertex` between vertex->p1 and vertex->p3, in degrees [0, 180].

    A zero-length arm yields 0 rather than NaN.
    """
    v1 = np.array([p1[0] - vertex[0], p1[1] - vertex[1]], dtype=float)
    v2 = np.array([p3[0] - vertex[0], p3[1] - vertex[1]], dtype=float)

    mag1 = np.hypot(v1[0], v1[1])
    mag2 = np.hypot(v2[0], v2[1])
    if mag1 == 0 or mag2 == 0:
        return 0.0

    cos = np.dot(v1, v2) / (mag1 * mag2)
    return float(np.degrees(np.arccos(np.clip(cos, -1.0, 1.0))))


def calculate_cva(ear: Landmark, shoulder: Landmark, width: int, height: int) -> float:
    """Craniovertebral angle: shoulder->ear against +x (subject facing image-right)."""
    ear_point = to_pixels(ear, width, height)
    shoulder_point = to_pixels(shoulder, width, height)
    horizontal_ref = (shoulder_point[0] + _HORIZONTAL_REFERENCE, shoulder_point[1])
    return calculate_angle(ear_point, shoulder_point, horizontal_ref)


def calculate_head_translation(ear: Landmark, shoulder: Landmark, width: int) -> float:
    return float(abs((ear.x - shoulder.x) * width))


def evaluate_suboccipital_compression(cva: float, head_translation: float) -> CompressionLevel:
    score = (COMPRESSION_PIVOT_CVA - cva) + head_translation / 10
    if score < COMPRESSION_THRESHOLDS['normal']:
        return CompressionLevel.NORMAL
    if score < COMPRESSION_THRESHOLDS['mild']:
        return CompressionLevel.MILD
    if score < COMPRESSION_THRESHOLDS['moderate']:
        return CompressionLevel.MODERATE
    return CompressionLevel.SEVERE


def calculate_shoulder_elevation(left_shoulder: Landmark, right_shoulder: Landmark,
                                 height: int) -> Bilateral:
    """Signed vertical offset of each shoulder relative to the other (pixels)."""
    return Bilateral(
        left=float((left_shoulder.y - right_shoulder.y) * height),
        right=float((right_shoulder.y - left_shoulder.y) * height),
    )


# -----------------------------------------------------------------------------
# Region analyzers
# -----------------------------------------------------------------------------

def require_topology(landmarks: Sequence[Landmark]):
    """Fail before any computation when the list cannot hold the full topology."""
    if len(landmarks) < TOPOLOGY_SIZE:
        raise LandmarkIndexError(TOPOLOGY_SIZE - 1, len(landmarks))


def _head_pair(landmarks: Sequence[Landmark]) -> Tuple[Landmark, Landmark]:
    ear = select_bilateral(landmarks, PL.LEFT_EAR, PL.RIGHT_EAR)
    shoulder = select_bilateral(landmarks, PL.LEFT_SHOULDER, PL.RIGHT_SHOULDER)
    return ear, shoulder


def _shoulder_pair(landmarks: Sequence[Landmark]) -> Tuple[Landmark, Landmark]:
    return get_landmark(landmarks, PL.LEFT_SHOULDER), get_landmark(landmarks, PL.RIGHT_SHOULDER)


def analyze_head_posture(landmarks: Sequence[Landmark], width: int, height: int) -> HeadPostureMetrics:
    """
    Head/neck metrics from the sagittal view.

    Falls back to the optimal CVA and zero translation when the selected
    ear or shoulder is not visible.
    """
    ear, shoulder = _head_pair(landmarks)

    if all_visible(ear, shoulder):
        cva = calculate_cva(ear, shoulder, width, height)
        head_translation = calculate_head_translation(ear, shoulder, width)
    else:
        logger.debug("Ear/shoulder below visibility gate, using CVA optimum %.1f", CVA.optimal)
        cva = CVA.optimal
        head_translation = 0.0

    return HeadPostureMetrics(
        cva=cva,
        head_translation=head_translation,
        suboccipital_compression=evaluate_suboccipital_compression(cva, head_translation),
        upper_cervical_extension=max(0.0, UPPER_CERVICAL_PIVOT - cva),
        lower_cervical_flexion=max(0.0, cva - LOWER_CERVICAL_PIVOT),
    )


def analyze_shoulder_girdle(frontal: Sequence[Landmark], sagittal: Sequence[Landmark],
                            width: int, height: int,
                            estimator: RegionEstimator) -> ShoulderGirdleMetrics:
    left_shoulder, right_shoulder = _shoulder_pair(frontal)
    if all_visible(left_shoulder, right_shoulder):
        elevation = calculate_shoulder_elevation(left_shoulder, right_shoulder, height)
    else:
        elevation = Bilateral(left=0.0, right=0.0)

    # Protraction is read from the sagittal view
    sagittal_shoulder = select_bilateral(sagittal, PL.LEFT_SHOULDER, PL.RIGHT_SHOULDER)
    protraction = Bilateral(
        left=estimator.estimate_protraction(sagittal_shoulder, width),
        right=estimator.estimate_protraction(sagittal_shoulder, width),
    )

    return ShoulderGirdleMetrics(
        shoulder_elevation=elevation,
        shoulder_protraction=protraction,
        shoulder_rotation=estimator.evaluate_shoulder_rotation(frontal),
        scapular_winging=estimator.evaluate_scapular_winging(protraction),
        thoracic_outlet_compression=estimator.evaluate_thoracic_outlet_risk(elevation, protraction),
    )


def analyze_spinal_curvature(landmarks: Sequence[Landmark], width: int, height: int,
                             estimator: RegionEstimator) -> SpinalCurvatureMetrics:
    ear, shoulder = _head_pair(landmarks)
    hip = select_bilateral(landmarks, PL.LEFT_HIP, PL.RIGHT_HIP)

    return SpinalCurvatureMetrics(
        cervical_lordosis=estimator.estimate_cervical_lordosis(ear, shoulder, width, height),
        thoracic_kyphosis=estimator.estimate_thoracic_kyphosis(shoulder, hip, width, height),
        lumbar_lordosis=estimator.estimate_lumbar_lordosis(hip, landmarks, width, height),
        lateral_deviation=estimator.calculate_lateral_deviation(landmarks, width),
        spinal_balance=estimator.evaluate_spinal_balance(ear, hip, width),
    )


def analyze_pelvis(frontal: Sequence[Landmark], sagittal: Sequence[Landmark],
                   width: int, height: int, estimator: RegionEstimator) -> PelvisMetrics:
    left_hip = get_landmark(frontal, PL.LEFT_HIP)
    right_hip = get_landmark(frontal, PL.RIGHT_HIP)
    sagittal_hip = select_bilateral(sagittal, PL.LEFT_HIP, PL.RIGHT_HIP)

    pelvic_tilt = estimator.calculate_pelvic_tilt(sagittal_hip, sagittal, width, height)

    return PelvisMetrics(
        pelvic_tilt=pelvic_tilt,
        pelvic_rotation=estimator.calculate_pelvic_rotation(left_hip, right_hip, width),
        pelvic_shift=estimator.calculate_pelvic_shift(sagittal_hip, frontal, width, height),
        iliac_crest_level=estimator.evaluate_iliac_crest_level(left_hip, right_hip, height),
        sacral_angle=estimator.estimate_sacral_angle(pelvic_tilt),
    )


def analyze_lower_extremity(frontal: Sequence[Landmark], sagittal: Sequence[Landmark],
                            width: int, height: int,
                            estimator: RegionEstimator) -> LowerExtremityMetrics:
    left_hip, right_hip = get_landmark(frontal, PL.LEFT_HIP), get_landmark(frontal, PL.RIGHT_HIP)
    left_knee, right_knee = get_landmark(frontal, PL.LEFT_KNEE), get_landmark(frontal, PL.RIGHT_KNEE)
    left_ankle, right_ankle = get_landmark(frontal, PL.LEFT_ANKLE), get_landmark(frontal, PL.RIGHT_ANKLE)

    hip_flexion = Bilateral(
        left=estimator.calculate_hip_flexion(get_landmark(sagittal, PL.LEFT_HIP),
                                             get_landmark(sagittal, PL.LEFT_KNEE)),
        right=estimator.calculate_hip_flexion(get_landmark(sagittal, PL.RIGHT_HIP),
                                              get_landmark(sagittal, PL.RIGHT_KNEE)),
    )

    return LowerExtremityMetrics(
        hip_flexion=hip_flexion,
        knee_position=Bilateral(
            left=estimator.evaluate_knee_position(left_hip, left_knee, left_ankle),
            right=estimator.evaluate_knee_position(right_hip, right_knee, right_ankle),
        ),
        ankle_position=Bilateral(
            left=estimator.evaluate_ankle_position(left_knee, left_ankle),
            right=estimator.evaluate_ankle_position(right_knee, right_ankle),
        ),
        leg_length_discrepancy=estimator.calculate_leg_length_discrepancy(
            left_hip, right_hip, left_ankle, right_ankle, height),
        genu=estimator.evaluate_genu(left_knee, right_knee, left_ankle, right_ankle, width),
    )


def find_unmeasured(frontal: Sequence[Landmark], sagittal: Sequence[Landmark]) -> Tuple[str, ...]:
    """Names of geometric measurements that fell back because of the visibility gate."""
    unmeasured: List[str] = []
    if not all_visible(*_head_pair(sagittal)):
        unmeasured.extend(HEAD_FALLBACK_MEASUREMENTS)
    if not all_visible(*_shoulder_pair(frontal)):
        unmeasured.append('shoulderElevation')
    return tuple(unmeasured)


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------

def calculate_detailed_metrics(frontal: DetectionResult, sagittal: DetectionResult,
                               estimator: Optional[RegionEstimator] = None) -> DetailedPostureMetrics:
    """
    Run the five region analyzers over a frontal and a sagittal detection.

    Args:
        frontal: Front-facing detection (33-point topology)
        sagittal: Side-view detection (33-point topology)
        estimator: Source of the estimated measurements; defaults to the
            placeholder values

    Raises:
        LandmarkIndexError: if either view has fewer than 33 landmarks
    """
    estimator = estimator or PlaceholderEstimator()
    require_topology(frontal.landmarks)
    require_topology(sagittal.landmarks)

    f_lms, s_lms = frontal.landmarks, sagittal.landmarks
    f_w, f_h = frontal.image_width, frontal.image_height
    s_w, s_h = sagittal.image_width, sagittal.image_height

    return DetailedPostureMetrics(
        head_posture=analyze_head_posture(s_lms, s_w, s_h),
        shoulder_girdle=analyze_shoulder_girdle(f_lms, s_lms, f_w, f_h, estimator),
        spinal_curvature=analyze_spinal_curvature(s_lms, s_w, s_h, estimator),
        pelvis=analyze_pelvis(f_lms, s_lms, f_w, f_h, estimator),
        lower_extremity=analyze_lower_extremity(f_lms, s_lms, f_w, f_h, estimator),
        unmeasured=find_unmeasured(f_lms, s_lms),
    )
