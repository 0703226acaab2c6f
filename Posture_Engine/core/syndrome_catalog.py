"""
Syndrome Catalog
Fixed clinical text for each Kendall/Janda posture syndrome: description,
musculoskeletal implications, compensations, symptoms, the three-part
exercise plan, ergonomic notes and the severity -> prognosis map.

Numeric fields (severity, confidence) are filled in by the classification
engine; this module is text only.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .types import ExerciseRecommendations, Prognosis, Severity


@dataclass(frozen=True)
class SyndromeProfile:
    """Clinical picture of one syndrome, independent of any measurement."""
    name: str
    description: str
    musculoskeletal_implications: Tuple[str, ...]
    compensatory_patterns: Tuple[str, ...]
    clinical_symptoms: Tuple[str, ...]
    exercise_recommendations: ExerciseRecommendations
    ergonomic_considerations: Tuple[str, ...]
    prognosis: Dict[Severity, Prognosis]
    subtype: Optional[str] = None


def _fixed(prognosis: Prognosis) -> Dict[Severity, Prognosis]:
    return {severity: prognosis for severity in Severity}


def _graded(mild: Prognosis, moderate: Prognosis, severe: Prognosis) -> Dict[Severity, Prognosis]:
    return {Severity.MILD: mild, Severity.MODERATE: moderate, Severity.SEVERE: severe}


# =============================================================================
# Upper body
# =============================================================================

FORWARD_HEAD_POSTURE = SyndromeProfile(
    name="Forward Head Posture",
    description=(
        "The head sits anterior to its ideal position over the shoulders. "
        "One of the most common postural faults in desk-based work."
    ),
    musculoskeletal_implications=(
        "Shortening and increased tone of the suboccipital muscles",
        "Weakness of the deep cervical flexors (longus colli, longus capitis)",
        "Overactivity of sternocleidomastoid and the scalenes",
        "Tension in upper trapezius and levator scapulae",
        "Weakness of middle and lower trapezius",
        "Upper thoracic spine held in excessive flexion",
    ),
    compensatory_patterns=(
        "Compensatory hyperextension of the upper cervical spine (C0-C2)",
        "Excessive flexion of the lower cervical spine (C3-C7)",
        "Scapular protraction and elevation",
        "Anterior shift of the rib cage",
        "Overuse of accessory respiratory muscles",
    ),
    clinical_symptoms=(
        "Neck pain and headache, particularly occipital",
        "Shoulder and upper back stiffness",
        "Increased risk of temporomandibular dysfunction",
        "Thoracic outlet-like symptoms",
        "Sensation of breathlessness",
        "Eye strain",
        "Reduced concentration",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Suboccipital stretch",
            "Sternocleidomastoid stretch",
            "Upper trapezius and levator scapulae stretch",
            "Thoracic extension mobility work",
            "Pectoralis major and minor stretch",
        ),
        strengthening=(
            "Deep cervical flexor training",
            "Middle and lower trapezius strengthening",
            "Rhomboid strengthening",
            "Serratus anterior strengthening",
            "Thoracic extensor strengthening",
        ),
        postural=(
            "Chin tuck practice",
            "Wall-supported posture correction",
            "Bracing practice",
            "Breathing pattern re-education",
            "Work posture coaching",
        ),
    ),
    ergonomic_considerations=(
        "Raise the monitor to eye level",
        "Position keyboard and mouse within easy reach",
        "Change posture at regular intervals",
        "Use a supportive cervical pillow",
        "Adjust the chair headrest",
    ),
    prognosis=_graded(Prognosis.EXCELLENT, Prognosis.GOOD, Prognosis.FAIR),
)

UPPER_CROSSED_SYNDROME = SyndromeProfile(
    name="Upper Crossed Syndrome",
    subtype="Janda",
    description=(
        "Upper-body muscle imbalance described by Vladimir Janda: overactive "
        "and inhibited muscle groups form a crossed pattern."
    ),
    musculoskeletal_implications=(
        "Overactive: upper trapezius, levator scapulae, sternocleidomastoid, "
        "suboccipitals, pectoralis major and minor",
        "Inhibited: deep cervical flexors, middle and lower trapezius, rhomboids, serratus anterior",
        "Joint dysfunction at the atlanto-occipital joint, cervicothoracic junction, "
        "costosternal joints and glenohumeral joint",
        "Adaptive fascial shortening",
    ),
    compensatory_patterns=(
        "Forward head with cervical extension",
        "Increased upper thoracic kyphosis",
        "Scapular protraction, elevation and downward rotation",
        "Shoulder held in internal rotation",
    ),
    clinical_symptoms=(
        "Chronic neck and shoulder pain",
        "Tension-type headache",
        "Upper limb neural symptoms",
        "Reduced respiratory function",
        "Reduced athletic performance",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Inhibition techniques for upper trapezius and levator scapulae",
            "Post-isometric relaxation stretch of pectoralis major and minor",
            "Suboccipital release",
            "Muscle energy technique for sternocleidomastoid",
        ),
        strengthening=(
            "Progressive deep cervical flexor training",
            "Selective middle and lower trapezius strengthening",
            "Rhomboid and serratus anterior coordination training",
            "Thoracic extensor strengthening",
        ),
        postural=(
            "Integrated postural re-education",
            "Kinetic chain normalization",
            "Breathing pattern improvement",
            "Modification of daily activities",
        ),
    ),
    ergonomic_considerations=(
        "Comprehensive review of the work environment",
        "Stress management",
        "Regular exercise habit",
        "Improved sleep environment",
    ),
    prognosis=_fixed(Prognosis.GOOD),
)

# =============================================================================
# Lumbopelvic
# =============================================================================

LOWER_CROSSED_SYNDROME = SyndromeProfile(
    name="Lower Crossed Syndrome",
    subtype="Janda",
    description=(
        "Muscle imbalance of the lumbo-pelvic-hip complex, common with "
        "prolonged sitting."
    ),
    musculoskeletal_implications=(
        "Overactive: lumbar extensors, hip flexors, tensor fasciae latae",
        "Inhibited: abdominals, gluteus maximus, gluteus medius, hamstrings",
        "Sacroiliac joint dysfunction",
        "Increased lumbar lordosis",
    ),
    compensatory_patterns=(
        "Pelvis fixed in anterior tilt",
        "Lumbar hyperlordosis",
        "Hip flexor shortening",
        "Reduced intra-abdominal pressure",
    ),
    clinical_symptoms=(
        "Low back pain, particularly on extension",
        "Anterior hip pain",
        "Sacroiliac pain",
        "Lower limb weakness",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Iliopsoas stretch",
            "Tensor fasciae latae stretch",
            "Quadratus lumborum release",
            "Thoracolumbar fascia mobilization",
        ),
        strengthening=(
            "Selective transversus abdominis training",
            "Gluteus maximus and medius strengthening",
            "Hamstring strengthening",
            "Multifidus stabilization",
        ),
        postural=(
            "Neutral pelvis awareness",
            "Core stabilization",
            "Hip dissociation exercises",
            "Correct standing and sitting posture",
        ),
    ),
    ergonomic_considerations=(
        "Adjust chair height and backrest",
        "Use a footrest",
        "Introduce standing work periods",
        "Use lumbar support",
    ),
    prognosis=_fixed(Prognosis.GOOD),
)

KYPHOSIS_LORDOSIS = SyndromeProfile(
    name="Kyphosis-Lordosis Posture",
    description=(
        "Increased thoracic kyphosis combined with increased lumbar lordosis "
        "and anterior pelvic tilt."
    ),
    musculoskeletal_implications=(
        "Short and strong: neck extensors, hip flexors, lumbar extensors",
        "Elongated and weak: neck flexors, upper back erector spinae, external oblique",
        "Hamstrings slightly elongated",
    ),
    compensatory_patterns=(
        "Forward head position",
        "Scapular abduction",
        "Anterior pelvic tilt",
        "Hip flexion",
    ),
    clinical_symptoms=(
        "Low back pain",
        "Upper back fatigue",
        "Neck discomfort",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Hip flexor stretch",
            "Lumbar extensor stretch",
            "Pectoral stretch",
        ),
        strengthening=(
            "External oblique strengthening",
            "Upper back extensor strengthening",
            "Gluteal strengthening",
        ),
        postural=(
            "Posterior pelvic tilt awareness",
            "Thoracic extension practice",
        ),
    ),
    ergonomic_considerations=(
        "Lumbar-supported seating",
        "Avoid prolonged static standing",
    ),
    prognosis=_graded(Prognosis.GOOD, Prognosis.FAIR, Prognosis.GUARDED),
)

FLAT_BACK = SyndromeProfile(
    name="Flat Back Posture",
    description="Reduced lumbar lordosis with posterior pelvic tilt and a straightened spine.",
    musculoskeletal_implications=(
        "Short and strong: hamstrings, abdominals",
        "Elongated and weak: hip flexors, lumbar extensors",
    ),
    compensatory_patterns=(
        "Posterior pelvic tilt",
        "Hip extension",
        "Slight knee flexion",
    ),
    clinical_symptoms=(
        "Low back pain with prolonged standing",
        "Reduced shock absorption of the spine",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Hamstring stretch",
            "Abdominal lengthening",
        ),
        strengthening=(
            "Hip flexor strengthening",
            "Lumbar extensor strengthening",
        ),
        postural=(
            "Neutral lumbar curve awareness",
        ),
    ),
    ergonomic_considerations=(
        "Seating that supports the lumbar curve",
    ),
    prognosis=_fixed(Prognosis.FAIR),
)

SWAY_BACK = SyndromeProfile(
    name="Sway Back Posture",
    description=(
        "Pelvis displaced anteriorly with the trunk swayed backward and a "
        "long thoracic kyphosis."
    ),
    musculoskeletal_implications=(
        "Short and strong: hamstrings, upper fibres of internal oblique",
        "Elongated and weak: hip flexors, external oblique, upper back extensors",
    ),
    compensatory_patterns=(
        "Posterior pelvic tilt with anterior pelvic displacement",
        "Hip hyperextension",
        "Knee hyperextension",
        "Forward head position",
    ),
    clinical_symptoms=(
        "Low back pain",
        "Anterior hip discomfort",
        "Knee discomfort",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Hamstring stretch",
            "Internal oblique release",
        ),
        strengthening=(
            "Hip flexor strengthening",
            "External oblique strengthening",
            "Upper back extensor strengthening",
        ),
        postural=(
            "Weight shift over the midfoot",
            "Soft knee standing practice",
        ),
    ),
    ergonomic_considerations=(
        "Avoid standing with locked knees",
        "Alternate standing and sitting",
    ),
    prognosis=_fixed(Prognosis.GOOD),
)

SCOLIOTIC = SyndromeProfile(
    name="Scoliotic Posture",
    description="Lateral spinal deviation with asymmetry of the shoulders and pelvis.",
    musculoskeletal_implications=(
        "Asymmetric trunk muscle length",
        "Unilateral shortening of quadratus lumborum",
        "Asymmetric loading of the hip abductors",
    ),
    compensatory_patterns=(
        "Shoulder height asymmetry",
        "Iliac crest height asymmetry",
        "Lateral trunk shift",
    ),
    clinical_symptoms=(
        "Unilateral back pain",
        "Muscle fatigue on the convex side",
    ),
    exercise_recommendations=ExerciseRecommendations(
        stretching=(
            "Concave-side trunk stretch",
        ),
        strengthening=(
            "Convex-side trunk strengthening",
            "Hip abductor strengthening",
        ),
        postural=(
            "Symmetric weight bearing",
            "Mirror feedback posture training",
        ),
    ),
    ergonomic_considerations=(
        "Avoid one-sided carrying",
        "Symmetric workstation layout",
    ),
    prognosis=_graded(Prognosis.GOOD, Prognosis.FAIR, Prognosis.GUARDED),
)

# =============================================================================
# Fallback
# =============================================================================

IDEAL_POSTURE = SyndromeProfile(
    name="Ideal Posture",
    description="Good postural alignment by Kendall standards.",
    musculoskeletal_implications=(),
    compensatory_patterns=(),
    clinical_symptoms=(),
    exercise_recommendations=ExerciseRecommendations(
        stretching=("Regular range-of-motion maintenance",),
        strengthening=("Maintain whole-body strength balance",),
        postural=("Maintain current good posture",),
    ),
    ergonomic_considerations=("Keep the current environment",),
    prognosis=_fixed(Prognosis.EXCELLENT),
)
