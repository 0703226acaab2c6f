"""
Posture Engine Value Types

Immutable inputs and outputs of the analysis pipeline: landmarks and
detections, the five regional metric records, syndrome classifications, and
the assembled analysis result. Every type serializes to JSON-compatible data
through to_dict(); enums are written by value and keys are camelCase.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------

class LandmarkIndexError(IndexError):
    """A required landmark index lies beyond the supplied landmark list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(
            f"Landmark index {index} out of bounds for list of {size} landmarks"
        )


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

class CompressionLevel(Enum):
    """Suboccipital compression grade."""
    NORMAL = "normal"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Severity(Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Prognosis(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    GUARDED = "guarded"


class ShoulderRotation(Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"
    NEUTRAL = "neutral"


class WingingGrade(Enum):
    NONE = "none"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ThoracicOutletRisk(Enum):
    NEGATIVE = "negative"
    POSITIVE = "positive"


class SpinalBalance(Enum):
    BALANCED = "balanced"
    FORWARD = "forward"
    BACKWARD = "backward"


class IliacCrestLevel(Enum):
    LEVEL = "level"
    LEFT_HIGH = "left_high"
    RIGHT_HIGH = "right_high"


class KneePosition(Enum):
    NORMAL = "normal"
    HYPEREXTENDED = "hyperextended"
    FLEXED = "flexed"


class AnklePosition(Enum):
    NEUTRAL = "neutral"
    PLANTARFLEXED = "plantarflexed"
    DORSIFLEXED = "dorsiflexed"


class Genu(Enum):
    NORMAL = "normal"
    VALGUM = "valgum"
    VARUM = "varum"


class AngleDeviation(Enum):
    """Joint angle position relative to its normal range."""
    NORMAL = "normal"
    INCREASED = "increased"
    DECREASED = "decreased"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


# -----------------------------------------------------------------------------
# Detection input
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Landmark:
    """Single pose landmark, position normalized to image dimensions."""
    x: float
    y: float
    visibility: float
    z: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'z': self.z, 'visibility': self.visibility}


@dataclass(frozen=True)
class DetectionResult:
    """One view's landmarks (33-point topology) plus image size in pixels."""
    landmarks: Tuple[Landmark, ...]
    confidence: float
    image_width: int
    image_height: int

    def __post_init__(self):
        object.__setattr__(self, 'landmarks', tuple(self.landmarks))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'landmarks': [lm.to_dict() for lm in self.landmarks],
            'confidence': self.confidence,
            'imageWidth': self.image_width,
            'imageHeight': self.image_height,
        }


# -----------------------------------------------------------------------------
# Regional metrics
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Bilateral:
    """Left/right pair of a measurement or grade."""
    left: Any
    right: Any

    def to_dict(self) -> Dict[str, Any]:
        return {'left': _plain(self.left), 'right': _plain(self.right)}


@dataclass(frozen=True)
class HeadPostureMetrics:
    cva: float
    head_translation: float
    suboccipital_compression: CompressionLevel
    upper_cervical_extension: float
    lower_cervical_flexion: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cva': self.cva,
            'headTranslation': self.head_translation,
            'suboccipitalCompression': self.suboccipital_compression.value,
            'upperCervicalExtension': self.upper_cervical_extension,
            'lowerCervicalFlexion': self.lower_cervical_flexion,
        }


@dataclass(frozen=True)
class ShoulderGirdleMetrics:
    shoulder_elevation: Bilateral
    shoulder_protraction: Bilateral
    shoulder_rotation: Bilateral
    scapular_winging: Bilateral
    thoracic_outlet_compression: ThoracicOutletRisk

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shoulderElevation': self.shoulder_elevation.to_dict(),
            'shoulderProtraction': self.shoulder_protraction.to_dict(),
            'shoulderRotation': self.shoulder_rotation.to_dict(),
            'scapularWinging': self.scapular_winging.to_dict(),
            'thoracicOutletCompression': self.thoracic_outlet_compression.value,
        }


@dataclass(frozen=True)
class SpinalCurvatureMetrics:
    cervical_lordosis: float
    thoracic_kyphosis: float
    lumbar_lordosis: float
    lateral_deviation: float
    spinal_balance: SpinalBalance

    def to_dict(self) -> Dict[str, Any]:
        return {
            'cervicalLordosis': self.cervical_lordosis,
            'thoracicKyphosis': self.thoracic_kyphosis,
            'lumbarLordosis': self.lumbar_lordosis,
            'lateralDeviation': self.lateral_deviation,
            'spinalBalance': self.spinal_balance.value,
        }


@dataclass(frozen=True)
class PelvicShift:
    lateral: float
    anteroposterior: float

    def to_dict(self) -> Dict[str, float]:
        return {'lateral': self.lateral, 'anteroposterior': self.anteroposterior}


@dataclass(frozen=True)
class PelvisMetrics:
    pelvic_tilt: float
    pelvic_rotation: float
    pelvic_shift: PelvicShift
    iliac_crest_level: IliacCrestLevel
    sacral_angle: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pelvicTilt': self.pelvic_tilt,
            'pelvicRotation': self.pelvic_rotation,
            'pelvicShift': self.pelvic_shift.to_dict(),
            'iliacCrestLevel': self.iliac_crest_level.value,
            'sacralAngle': self.sacral_angle,
        }


@dataclass(frozen=True)
class LowerExtremityMetrics:
    hip_flexion: Bilateral
    knee_position: Bilateral
    ankle_position: Bilateral
    leg_length_discrepancy: float
    genu: Genu

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hipFlexion': self.hip_flexion.to_dict(),
            'kneePosition': self.knee_position.to_dict(),
            'anklePosition': self.ankle_position.to_dict(),
            'legLengthDiscrepancy': self.leg_length_discrepancy,
            'genu': self.genu.value,
        }


@dataclass(frozen=True)
class DetailedPostureMetrics:
    """
    Aggregate of the five regional metric records.

    `unmeasured` names the measurements whose landmarks failed the
    visibility gate and therefore hold their documented fallback value.
    """
    head_posture: HeadPostureMetrics
    shoulder_girdle: ShoulderGirdleMetrics
    spinal_curvature: SpinalCurvatureMetrics
    pelvis: PelvisMetrics
    lower_extremity: LowerExtremityMetrics
    unmeasured: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'headPosture': self.head_posture.to_dict(),
            'shoulderGirdle': self.shoulder_girdle.to_dict(),
            'spinalCurvature': self.spinal_curvature.to_dict(),
            'pelvis': self.pelvis.to_dict(),
            'lowerExtremity': self.lower_extremity.to_dict(),
            'unmeasured': list(self.unmeasured),
        }


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ExerciseRecommendations:
    stretching: Tuple[str, ...] = ()
    strengthening: Tuple[str, ...] = ()
    postural: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            'stretching': list(self.stretching),
            'strengthening': list(self.strengthening),
            'postural': list(self.postural),
        }


@dataclass(frozen=True)
class PostureClassification:
    """A named postural syndrome with its clinical picture and scores."""
    classification: str
    description: str
    musculoskeletal_implications: Tuple[str, ...]
    compensatory_patterns: Tuple[str, ...]
    clinical_symptoms: Tuple[str, ...]
    exercise_recommendations: ExerciseRecommendations
    ergonomic_considerations: Tuple[str, ...]
    prognosis: Prognosis
    severity: Severity
    confidence: float
    subtype: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'classification': self.classification,
            'description': self.description,
            'musculoskeletalImplications': list(self.musculoskeletal_implications),
            'compensatoryPatterns': list(self.compensatory_patterns),
            'clinicalSymptoms': list(self.clinical_symptoms),
            'exerciseRecommendations': self.exercise_recommendations.to_dict(),
            'ergonomicConsiderations': list(self.ergonomic_considerations),
            'prognosis': self.prognosis.value,
            'severity': self.severity.value,
            'confidence': self.confidence,
        }
        if self.subtype is not None:
            data['subtype'] = self.subtype
        return data


# -----------------------------------------------------------------------------
# Plane analysis
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class JointAngle:
    name: str
    angle: float
    normal_range: Tuple[float, float]
    deviation: AngleDeviation

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'angle': self.angle,
            'normalRange': list(self.normal_range),
            'deviation': self.deviation.value,
        }


@dataclass(frozen=True)
class FrontalAsymmetries:
    shoulder_level: float
    pelvic_level: float
    head_tilt: float
    leg_length: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'shoulderLevel': self.shoulder_level,
            'pelvicLevel': self.pelvic_level,
            'headTilt': self.head_tilt,
            'legLength': self.leg_length,
        }


@dataclass(frozen=True)
class FrontalPlaneAnalysis:
    joint_angles: Tuple[JointAngle, ...]
    asymmetries: FrontalAsymmetries

    def to_dict(self) -> Dict[str, Any]:
        return {
            'jointAngles': [a.to_dict() for a in self.joint_angles],
            'asymmetries': self.asymmetries.to_dict(),
        }


@dataclass(frozen=True)
class SagittalAlignment:
    head_position: float
    shoulder_position: float
    pelvis_position: float
    knee_position: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'headPosition': self.head_position,
            'shoulderPosition': self.shoulder_position,
            'pelvisPosition': self.pelvis_position,
            'kneePosition': self.knee_position,
        }


@dataclass(frozen=True)
class SagittalPlaneAnalysis:
    joint_angles: Tuple[JointAngle, ...]
    alignment: SagittalAlignment

    def to_dict(self) -> Dict[str, Any]:
        return {
            'jointAngles': [a.to_dict() for a in self.joint_angles],
            'alignment': self.alignment.to_dict(),
        }


# -----------------------------------------------------------------------------
# Result
# -----------------------------------------------------------------------------

# All distance-type outputs are pixel-space approximations
MEASUREMENT_UNITS = "pixel"


@dataclass(frozen=True)
class AnalysisResult:
    """Complete two-view posture analysis."""
    metrics: DetailedPostureMetrics
    classifications: Tuple[PostureClassification, ...]
    primary_dysfunction: str
    compensatory_chain: Tuple[str, ...]
    risk_factors: Tuple[str, ...]
    functional_limitations: Tuple[str, ...]
    timestamp: int
    frontal_plane: Optional[FrontalPlaneAnalysis] = None
    sagittal_plane: Optional[SagittalPlaneAnalysis] = None
    units: str = field(default=MEASUREMENT_UNITS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'metrics': self.metrics.to_dict(),
            'classifications': [c.to_dict() for c in self.classifications],
            'primaryDysfunction': self.primary_dysfunction,
            'compensatoryChain': list(self.compensatory_chain),
            'riskFactors': list(self.risk_factors),
            'functionalLimitations': list(self.functional_limitations),
            'timestamp': self.timestamp,
            'frontalPlane': self.frontal_plane.to_dict() if self.frontal_plane else None,
            'sagittalPlane': self.sagittal_plane.to_dict() if self.sagittal_plane else None,
            'units': self.units,
        }


def landmarks_from_sequence(points: Sequence[Sequence[float]]) -> Tuple[Landmark, ...]:
    """Build landmarks from (x, y, z, visibility) tuples, as produced by the detector."""
    return tuple(Landmark(x=p[0], y=p[1], z=p[2], visibility=p[3]) for p in points)
