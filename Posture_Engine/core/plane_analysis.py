"""
Plane Analysis Module
Per-view supplementary measurements: frontal-plane level angles and
bilateral asymmetries, sagittal-plane joint angles and horizontal alignment
offsets. A joint angle is reported only when all of its landmarks pass the
visibility gate; an asymmetry or offset with unusable landmarks is 0.
"""

from typing import List, Sequence

from Clinical_Reference.kendall_norms import CVA
from .landmarks import PoseLandmark as PL, all_visible, get_landmark, select_bilateral, to_pixels
from .metrics_calculator import calculate_angle, calculate_cva
from .types import (
    AngleDeviation, DetectionResult, FrontalAsymmetries, FrontalPlaneAnalysis, JointAngle,
    Landmark, SagittalAlignment, SagittalPlaneAnalysis,
)

SHOULDER_LEVEL_RANGE = (-5.0, 5.0)
PELVIC_LEVEL_RANGE = (-3.0, 3.0)
HIP_ANGLE_RANGE = (170.0, 185.0)
KNEE_ANGLE_RANGE = (170.0, 185.0)


def _deviation_from_range(angle: float, normal_range) -> AngleDeviation:
    low, high = normal_range
    if angle < low:
        return AngleDeviation.DECREASED
    if angle > high:
        return AngleDeviation.INCREASED
    return AngleDeviation.NORMAL


def _symmetric_deviation(angle: float, normal_range) -> AngleDeviation:
    """Deviation for ranges centred on a target; any excess counts as increased."""
    low, high = normal_range
    center = (low + high) / 2
    half_width = (high - low) / 2
    if abs(angle - center) > half_width:
        return AngleDeviation.INCREASED
    return AngleDeviation.NORMAL


def _level_angle(left: Landmark, right: Landmark, width: int, height: int) -> float:
    """Slope of the left-right line, measured at the right landmark against +x."""
    right_point = to_pixels(right, width, height)
    horizontal_ref = (right_point[0] + 100.0, right_point[1])
    return calculate_angle(to_pixels(left, width, height), right_point, horizontal_ref)


# -----------------------------------------------------------------------------
# Frontal plane
# -----------------------------------------------------------------------------

def _frontal_joint_angles(landmarks: Sequence[Landmark], width: int, height: int) -> List[JointAngle]:
    angles = []
    pairs = (
        ('Shoulder Level', PL.LEFT_SHOULDER, PL.RIGHT_SHOULDER, SHOULDER_LEVEL_RANGE),
        ('Pelvic Level', PL.LEFT_HIP, PL.RIGHT_HIP, PELVIC_LEVEL_RANGE),
    )
    for name, left_index, right_index, normal_range in pairs:
        left = get_landmark(landmarks, left_index)
        right = get_landmark(landmarks, right_index)
        if not all_visible(left, right):
            continue
        angle = _level_angle(left, right, width, height)
        angles.append(JointAngle(name, angle, normal_range, _symmetric_deviation(angle, normal_range)))
    return angles


def _level_difference(left: Landmark, right: Landmark, height: int) -> float:
    if not all_visible(left, right):
        return 0.0
    return abs(left.y - right.y) * height


def _head_tilt(landmarks: Sequence[Landmark], width: int) -> float:
    nose = get_landmark(landmarks, PL.NOSE)
    left_ear = get_landmark(landmarks, PL.LEFT_EAR)
    right_ear = get_landmark(landmarks, PL.RIGHT_EAR)
    if not all_visible(nose, left_ear, right_ear):
        return 0.0
    ear_mid_x = (left_ear.x + right_ear.x) / 2 * width
    return abs(nose.x * width - ear_mid_x)


def _leg_length_difference(landmarks: Sequence[Landmark], height: int) -> float:
    left_hip = get_landmark(landmarks, PL.LEFT_HIP)
    right_hip = get_landmark(landmarks, PL.RIGHT_HIP)
    left_ankle = get_landmark(landmarks, PL.LEFT_ANKLE)
    right_ankle = get_landmark(landmarks, PL.RIGHT_ANKLE)
    if not all_visible(left_hip, right_hip, left_ankle, right_ankle):
        return 0.0
    left_length = abs(left_hip.y - left_ankle.y) * height
    right_length = abs(right_hip.y - right_ankle.y) * height
    return abs(left_length - right_length)


def analyze_frontal_plane(detection: DetectionResult) -> FrontalPlaneAnalysis:
    lms = detection.landmarks
    width, height = detection.image_width, detection.image_height

    asymmetries = FrontalAsymmetries(
        shoulder_level=_level_difference(get_landmark(lms, PL.LEFT_SHOULDER),
                                         get_landmark(lms, PL.RIGHT_SHOULDER), height),
        pelvic_level=_level_difference(get_landmark(lms, PL.LEFT_HIP),
                                       get_landmark(lms, PL.RIGHT_HIP), height),
        head_tilt=_head_tilt(lms, width),
        leg_length=_leg_length_difference(lms, height),
    )
    return FrontalPlaneAnalysis(
        joint_angles=tuple(_frontal_joint_angles(lms, width, height)),
        asymmetries=asymmetries,
    )


# -----------------------------------------------------------------------------
# Sagittal plane
# -----------------------------------------------------------------------------

def _sagittal_joint_angles(landmarks: Sequence[Landmark], width: int, height: int) -> List[JointAngle]:
    ear = select_bilateral(landmarks, PL.LEFT_EAR, PL.RIGHT_EAR)
    shoulder = select_bilateral(landmarks, PL.LEFT_SHOULDER, PL.RIGHT_SHOULDER)
    hip = select_bilateral(landmarks, PL.LEFT_HIP, PL.RIGHT_HIP)
    knee = select_bilateral(landmarks, PL.LEFT_KNEE, PL.RIGHT_KNEE)
    ankle = select_bilateral(landmarks, PL.LEFT_ANKLE, PL.RIGHT_ANKLE)

    angles = []
    if all_visible(ear, shoulder):
        cva = calculate_cva(ear, shoulder, width, height)
        angles.append(JointAngle('Cranio-Vertebral Angle', cva, CVA.range,
                                 _deviation_from_range(cva, CVA.range)))

    if all_visible(shoulder, hip, knee):
        # Trunk-thigh angle; a straight shoulder-hip-knee line reads 180
        hip_angle = calculate_angle(to_pixels(shoulder, width, height),
                                    to_pixels(hip, width, height),
                                    to_pixels(knee, width, height))
        angles.append(JointAngle('Hip Angle', hip_angle, HIP_ANGLE_RANGE,
                                 _deviation_from_range(hip_angle, HIP_ANGLE_RANGE)))

    if all_visible(hip, knee, ankle):
        knee_angle = calculate_angle(to_pixels(hip, width, height),
                                     to_pixels(knee, width, height),
                                     to_pixels(ankle, width, height))
        angles.append(JointAngle('Knee Angle', knee_angle, KNEE_ANGLE_RANGE,
                                 _deviation_from_range(knee_angle, KNEE_ANGLE_RANGE)))
    return angles


def _horizontal_offset(upper: Landmark, lower: Landmark, width: int) -> float:
    if not all_visible(upper, lower):
        return 0.0
    return (upper.x - lower.x) * width


def analyze_sagittal_plane(detection: DetectionResult) -> SagittalPlaneAnalysis:
    lms = detection.landmarks
    width, height = detection.image_width, detection.image_height

    ear = select_bilateral(lms, PL.LEFT_EAR, PL.RIGHT_EAR)
    shoulder = select_bilateral(lms, PL.LEFT_SHOULDER, PL.RIGHT_SHOULDER)
    hip = select_bilateral(lms, PL.LEFT_HIP, PL.RIGHT_HIP)
    knee = select_bilateral(lms, PL.LEFT_KNEE, PL.RIGHT_KNEE)
    ankle = select_bilateral(lms, PL.LEFT_ANKLE, PL.RIGHT_ANKLE)

    alignment = SagittalAlignment(
        head_position=_horizontal_offset(ear, shoulder, width),
        shoulder_position=_horizontal_offset(shoulder, hip, width),
        pelvis_position=_horizontal_offset(hip, ankle, width),
        knee_position=_horizontal_offset(knee, ankle, width),
    )
    return SagittalPlaneAnalysis(
        joint_angles=tuple(_sagittal_joint_angles(lms, width, height)),
        alignment=alignment,
    )
