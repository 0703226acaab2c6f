"""Tests for two-view metric derivation."""

import pytest

from Posture_Engine.core.estimators import PlaceholderEstimator
from Posture_Engine.core.metrics_calculator import (
    calculate_angle, calculate_cva, calculate_detailed_metrics, calculate_head_translation,
    evaluate_suboccipital_compression,
)
from Posture_Engine.core.types import (
    CompressionLevel, DetectionResult, Landmark, LandmarkIndexError,
)

HIDDEN = 0.5


class TestAngleGeometry:
    """Tests for the generic angle and the craniovertebral angle."""

    def test_right_angle(self):
        assert calculate_angle((0, 10), (0, 0), (10, 0)) == pytest.approx(90.0)

    def test_zero_length_arm_is_zero(self):
        assert calculate_angle((5, 5), (5, 5), (10, 5)) == 0.0

    def test_collinear_opposite_is_180(self):
        assert calculate_angle((-1, 0), (0, 0), (1, 0)) == pytest.approx(180.0)

    def test_ear_directly_above_shoulder_is_90(self):
        ear = Landmark(x=0.5, y=0.1, visibility=0.9)
        shoulder = Landmark(x=0.5, y=0.3, visibility=0.9)
        assert calculate_cva(ear, shoulder, 640, 480) == pytest.approx(90.0)

    def test_coincident_ear_and_shoulder_is_zero(self):
        point = Landmark(x=0.5, y=0.3, visibility=0.9)
        assert calculate_cva(point, point, 640, 480) == 0.0

    @pytest.mark.parametrize("dx,dy", [(1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (1, 1)])
    def test_cva_stays_in_range(self, dx, dy):
        shoulder = Landmark(x=0.5, y=0.5, visibility=0.9)
        ear = Landmark(x=0.5 + dx * 0.1, y=0.5 + dy * 0.1, visibility=0.9)
        assert 0.0 <= calculate_cva(ear, shoulder, 640, 480) <= 180.0

    def test_head_translation_is_absolute_pixels(self):
        ear = Landmark(x=0.40, y=0.1, visibility=0.9)
        shoulder = Landmark(x=0.50, y=0.3, visibility=0.9)
        assert calculate_head_translation(ear, shoulder, 640) == pytest.approx(64.0)


class TestSuboccipitalCompression:

    def test_score_41_is_severe(self):
        # (66 - 30) + 50 / 10 = 41
        assert evaluate_suboccipital_compression(30, 50) is CompressionLevel.SEVERE

    def test_ear_above_shoulder_is_normal(self):
        # (66 - 90) + 0 = -24
        assert evaluate_suboccipital_compression(90, 0) is CompressionLevel.NORMAL

    def test_optimal_cva_without_translation_is_mild(self):
        # (66 - 59) + 0 = 7
        assert evaluate_suboccipital_compression(59, 0) is CompressionLevel.MILD

    @pytest.mark.parametrize("cva,expected", [
        (61.01, CompressionLevel.NORMAL),
        (61, CompressionLevel.MILD),
        (56, CompressionLevel.MODERATE),
        (51, CompressionLevel.SEVERE),
    ])
    def test_thresholds(self, cva, expected):
        assert evaluate_suboccipital_compression(cva, 0) is expected


class TestHeadPosture:
    """Head metrics come from the sagittal view."""

    def test_cva_40(self, frontal, make_sagittal):
        metrics = calculate_detailed_metrics(frontal, make_sagittal(cva=40))
        head = metrics.head_posture
        assert head.cva == pytest.approx(40.0)
        assert head.head_translation == pytest.approx(76.604, abs=1e-3)
        assert head.upper_cervical_extension == pytest.approx(50.0)
        assert head.lower_cervical_flexion == 0.0

    def test_ear_above_shoulder(self, frontal, sagittal):
        head = calculate_detailed_metrics(frontal, sagittal).head_posture
        assert head.cva == pytest.approx(90.0)
        assert head.head_translation == 0.0
        assert head.suboccipital_compression is CompressionLevel.NORMAL
        assert head.upper_cervical_extension == 0.0
        assert head.lower_cervical_flexion == pytest.approx(45.0)

    def test_hidden_ears_fall_back_to_optimal(self, frontal, make_sagittal):
        sagittal = make_sagittal({7: (0.2, 0.1, HIDDEN), 8: (0.2, 0.1, HIDDEN)})
        metrics = calculate_detailed_metrics(frontal, sagittal)
        assert metrics.head_posture.cva == 59.0
        assert metrics.head_posture.head_translation == 0.0
        assert metrics.head_posture.suboccipital_compression is CompressionLevel.MILD
        assert metrics.unmeasured == (
            'cva', 'headTranslation', 'suboccipitalCompression',
            'upperCervicalExtension', 'lowerCervicalFlexion',
        )

    def test_more_visible_ear_is_used(self, frontal, make_sagittal):
        # Left ear hidden behind the head; right ear forward of the shoulder
        sagittal = make_sagittal({7: (0.50, 0.12, 0.3), 8: (0.60, 0.12, 0.9)})
        head = calculate_detailed_metrics(frontal, sagittal).head_posture
        assert head.head_translation == pytest.approx(64.0)


class TestShoulderGirdle:
    """Elevation comes from the frontal view."""

    def test_elevation_scenario(self, make_frontal, sagittal):
        frontal = make_frontal({11: (0.60, 0.40), 12: (0.40, 0.42)})
        elevation = calculate_detailed_metrics(frontal, sagittal).shoulder_girdle.shoulder_elevation
        assert elevation.left == pytest.approx(-9.6)
        assert elevation.right == pytest.approx(9.6)

    def test_hidden_shoulder_zeroes_elevation(self, make_frontal, sagittal):
        frontal = make_frontal({11: (0.60, 0.40, HIDDEN), 12: (0.40, 0.42)})
        metrics = calculate_detailed_metrics(frontal, sagittal)
        elevation = metrics.shoulder_girdle.shoulder_elevation
        assert (elevation.left, elevation.right) == (0.0, 0.0)
        assert metrics.unmeasured == ('shoulderElevation',)

    def test_placeholder_protraction(self, frontal, sagittal):
        girdle = calculate_detailed_metrics(frontal, sagittal).shoulder_girdle
        assert girdle.shoulder_protraction.left == PlaceholderEstimator.PROTRACTION
        assert girdle.shoulder_protraction.right == PlaceholderEstimator.PROTRACTION


class TestInputContract:

    def test_short_landmark_list_raises(self, frontal):
        short = DetectionResult(landmarks=frontal.landmarks[:20], confidence=0.9,
                                image_width=640, image_height=480)
        with pytest.raises(LandmarkIndexError):
            calculate_detailed_metrics(frontal, short)
        with pytest.raises(IndexError):
            calculate_detailed_metrics(short, frontal)

    def test_all_visible_records_nothing_unmeasured(self, frontal, sagittal):
        assert calculate_detailed_metrics(frontal, sagittal).unmeasured == ()

    def test_pure_function(self, frontal, sagittal):
        assert calculate_detailed_metrics(frontal, sagittal) == calculate_detailed_metrics(frontal, sagittal)
