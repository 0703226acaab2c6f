"""Tests for the narrative synthesis."""

from Posture_Engine.core.classification_engine import classify_posture, ideal_posture
from Posture_Engine.core.dysfunction_synthesizer import (
    ANTERIOR_PELVIC_CHAIN, CERVICAL_RADICULOPATHY_RISK, FORWARD_HEAD_CHAIN, LUMBAR_DISC_RISK,
    NO_COMPENSATORY_PATTERN, NO_DYSFUNCTION, NO_FUNCTIONAL_LIMITATIONS, NO_RISK_FACTORS,
    analyze_compensatory_chain, assess_risk_factors, evaluate_functional_limitations,
    identify_primary_dysfunction,
)
from Posture_Engine.core.estimators import PlaceholderEstimator
from Posture_Engine.core.metrics_calculator import calculate_detailed_metrics


class SteepPelvisEstimator(PlaceholderEstimator):
    PELVIC_TILT = 22.0
    LUMBAR_LORDOSIS = 55.0


class TestSentinels:
    """Every narrative list is non-empty."""

    def test_neutral_posture(self, frontal, sagittal):
        metrics = calculate_detailed_metrics(frontal, sagittal)
        classifications = classify_posture(metrics)
        assert identify_primary_dysfunction(classifications) == "Ideal Posture"
        assert analyze_compensatory_chain(metrics) == [NO_COMPENSATORY_PATTERN]
        assert assess_risk_factors(metrics, classifications) == [NO_RISK_FACTORS]
        assert evaluate_functional_limitations(metrics) == [NO_FUNCTIONAL_LIMITATIONS]

    def test_empty_classifications(self):
        assert identify_primary_dysfunction([]) == NO_DYSFUNCTION


class TestForwardHead:

    def test_cva_40_narrative(self, frontal, make_sagittal):
        metrics = calculate_detailed_metrics(frontal, make_sagittal(cva=40))
        classifications = classify_posture(metrics)

        assert identify_primary_dysfunction(classifications) == "Forward Head Posture"
        assert analyze_compensatory_chain(metrics) == [FORWARD_HEAD_CHAIN]
        assert assess_risk_factors(metrics, classifications) == [
            "Forward Head Posture — severe dysfunction",
            CERVICAL_RADICULOPATHY_RISK,
        ]
        assert evaluate_functional_limitations(metrics) == [
            "Restricted cervical range of motion", "Reduced visual attention",
        ]

    def test_mild_forward_head_has_no_limitations(self, frontal, make_sagittal):
        # CVA 50 with a short neck vector: translation under 30 px
        metrics = calculate_detailed_metrics(frontal, make_sagittal(cva=50, distance_px=40))
        classifications = classify_posture(metrics)
        assert assess_risk_factors(metrics, classifications) == [NO_RISK_FACTORS]
        assert evaluate_functional_limitations(metrics) == [NO_FUNCTIONAL_LIMITATIONS]


class TestPelvis:

    def test_steep_tilt(self, frontal, sagittal):
        metrics = calculate_detailed_metrics(frontal, sagittal, SteepPelvisEstimator())
        classifications = classify_posture(metrics)

        assert analyze_compensatory_chain(metrics) == [ANTERIOR_PELVIC_CHAIN]
        assert LUMBAR_DISC_RISK in assess_risk_factors(metrics, classifications)
        assert evaluate_functional_limitations(metrics) == [
            "Restricted hip extension", "Reduced trunk stability",
        ]

    def test_chains_co_occur(self, frontal, make_sagittal):
        metrics = calculate_detailed_metrics(frontal, make_sagittal(cva=40), SteepPelvisEstimator())
        assert analyze_compensatory_chain(metrics) == [FORWARD_HEAD_CHAIN, ANTERIOR_PELVIC_CHAIN]

    def test_risks_list_only_severe_classifications(self, frontal, sagittal):
        metrics = calculate_detailed_metrics(frontal, sagittal)
        assert assess_risk_factors(metrics, [ideal_posture()]) == [NO_RISK_FACTORS]
