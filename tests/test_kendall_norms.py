"""Tests for the Kendall norm reference table."""

import pytest

from Clinical_Reference import (
    CVA, KENDALL_NORMS, LATERAL_DEVIATION, PELVIC_LEVEL, PELVIC_TILT, SHOULDER_LEVEL,
    DifferenceNorm, RangeNorm, get_norm, get_range_norm,
)


class TestRangeNorm:
    """Tests for optimal/range norms."""

    def test_cva_values(self):
        assert CVA.optimal == 59
        assert (CVA.low, CVA.high) == (52, 66)
        assert CVA.center == 59

    def test_contains_is_closed(self):
        assert PELVIC_TILT.contains(8)
        assert PELVIC_TILT.contains(15)
        assert not PELVIC_TILT.contains(15.01)

    def test_lateral_deviation_is_symmetric(self):
        assert LATERAL_DEVIATION.center == 0
        assert LATERAL_DEVIATION.contains(-10)
        assert not LATERAL_DEVIATION.contains(-10.5)

    def test_to_dict(self):
        assert CVA.to_dict() == {'optimal': 59.0, 'range': [52.0, 66.0]}


class TestDifferenceNorm:
    """Tests for maximum-difference thresholds."""

    def test_exceeds_uses_absolute_value(self):
        assert SHOULDER_LEVEL.exceeds(-9.6)
        assert SHOULDER_LEVEL.exceeds(9.6)
        assert not SHOULDER_LEVEL.exceeds(5)

    def test_pelvic_level(self):
        assert PELVIC_LEVEL.max_difference == 3


class TestLookup:
    """Tests for get_norm / get_range_norm."""

    def test_table_keys(self):
        assert set(KENDALL_NORMS) == {
            'cva', 'cervical_lordosis', 'thoracic_kyphosis', 'lumbar_lordosis', 'pelvic_tilt',
            'lateral_deviation', 'shoulder_level', 'pelvic_level', 'head_translation', 'leg_length',
        }

    def test_get_norm(self):
        assert get_norm('thoracic_kyphosis') == RangeNorm(optimal=35, range=(25, 45))
        assert get_norm('leg_length') == DifferenceNorm(max_difference=6)

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            get_norm('knee_valgus')

    def test_range_norm_rejects_difference(self):
        with pytest.raises(TypeError):
            get_range_norm('head_translation')
        assert get_range_norm('lumbar_lordosis').range == (30, 50)


class TestDifferenceNormRange:

    def test_as_range_is_symmetric(self):
        assert SHOULDER_LEVEL.as_range() == RangeNorm(optimal=0.0, range=(-5.0, 5.0))
        assert PELVIC_LEVEL.as_range().center == 0
