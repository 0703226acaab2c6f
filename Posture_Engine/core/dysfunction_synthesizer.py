"""
Narrative synthesis over metrics and classifications: primary dysfunction,
compensatory chain, risk factors and functional limitations. Every list has
a sentinel entry when nothing triggers.
"""

from typing import List, Sequence

from Clinical_Reference.kendall_norms import CVA, PELVIC_TILT
from .types import DetailedPostureMetrics, PostureClassification, Severity

NO_DYSFUNCTION = "No dysfunction identified"
NO_COMPENSATORY_PATTERN = "No compensatory pattern"
NO_RISK_FACTORS = "No notable risk factors"
NO_FUNCTIONAL_LIMITATIONS = "No functional limitations"

FORWARD_HEAD_CHAIN = (
    "Forward head posture → upper cervical hyperextension → "
    "scapular protraction → increased thoracic flexion"
)
ANTERIOR_PELVIC_CHAIN = (
    "Anterior pelvic tilt → lumbar hyperlordosis → "
    "hip flexor shortening → abdominal weakness"
)

# Trigger thresholds
RADICULOPATHY_HEAD_TRANSLATION = 30.0
DISC_RISK_PELVIC_TILT = 20.0
CERVICAL_LIMITATION_CVA = 45.0

CERVICAL_RADICULOPATHY_RISK = "Cervical radiculopathy risk"
LUMBAR_DISC_RISK = "Lumbar disc disorder risk"
CERVICAL_LIMITATIONS = ("Restricted cervical range of motion", "Reduced visual attention")
LUMBOPELVIC_LIMITATIONS = ("Restricted hip extension", "Reduced trunk stability")


def identify_primary_dysfunction(classifications: Sequence[PostureClassification]) -> str:
    if not classifications:
        return NO_DYSFUNCTION
    return classifications[0].classification


def analyze_compensatory_chain(metrics: DetailedPostureMetrics) -> List[str]:
    chain = []
    if metrics.head_posture.cva < CVA.low:
        chain.append(FORWARD_HEAD_CHAIN)
    if metrics.pelvis.pelvic_tilt > PELVIC_TILT.high:
        chain.append(ANTERIOR_PELVIC_CHAIN)
    return chain or [NO_COMPENSATORY_PATTERN]


def assess_risk_factors(metrics: DetailedPostureMetrics,
                        classifications: Sequence[PostureClassification]) -> List[str]:
    risks = [
        f"{c.classification} — severe dysfunction"
        for c in classifications if c.severity is Severity.SEVERE
    ]
    if metrics.head_posture.head_translation > RADICULOPATHY_HEAD_TRANSLATION:
        risks.append(CERVICAL_RADICULOPATHY_RISK)
    if metrics.pelvis.pelvic_tilt > DISC_RISK_PELVIC_TILT:
        risks.append(LUMBAR_DISC_RISK)
    return risks or [NO_RISK_FACTORS]


def evaluate_functional_limitations(metrics: DetailedPostureMetrics) -> List[str]:
    limitations = []
    if metrics.head_posture.cva < CERVICAL_LIMITATION_CVA:
        limitations.extend(CERVICAL_LIMITATIONS)
    if metrics.pelvis.pelvic_tilt > DISC_RISK_PELVIC_TILT:
        limitations.extend(LUMBOPELVIC_LIMITATIONS)
    return limitations or [NO_FUNCTIONAL_LIMITATIONS]
