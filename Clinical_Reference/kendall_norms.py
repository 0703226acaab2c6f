"""
Kendall Norm Reference Values
Based on "Muscles: Testing and Function, with Posture and Pain"
(Kendall, McCreary, Provance, 2005) and Janda's crossed-syndrome work.

This module defines the norm ranges used throughout the posture engine.
Pixel-space thresholds are image approximations, not calibrated millimeters.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class RangeNorm:
    """
    Norm with an optimal value and an accepted range.

    The range is closed; values outside it are deviations scored by the
    classification engine.
    """
    optimal: float
    range: Tuple[float, float]

    @property
    def low(self) -> float:
        return self.range[0]

    @property
    def high(self) -> float:
        return self.range[1]

    @property
    def center(self) -> float:
        return (self.range[0] + self.range[1]) / 2

    def contains(self, value: float) -> bool:
        return self.range[0] <= value <= self.range[1]

    def to_dict(self) -> Dict[str, object]:
        return {'optimal': self.optimal, 'range': list(self.range)}


@dataclass(frozen=True)
class DifferenceNorm:
    """Norm expressed as a maximum tolerated bilateral difference or offset."""
    max_difference: float

    def exceeds(self, value: float) -> bool:
        return abs(value) > self.max_difference

    def as_range(self) -> RangeNorm:
        """Symmetric range around zero, for severity and confidence scoring."""
        return RangeNorm(optimal=0.0, range=(-self.max_difference, self.max_difference))

    def to_dict(self) -> Dict[str, object]:
        return {'maxDifference': self.max_difference}


# -----------------------------------------------------------------------------
# Angular norms (degrees)
# -----------------------------------------------------------------------------

# Craniovertebral angle. Below 52° is the forward head threshold
# (Yip et al. 2008; Nejati et al. 2015).
CVA = RangeNorm(optimal=59.0, range=(52.0, 66.0))

CERVICAL_LORDOSIS = RangeNorm(optimal=30.0, range=(20.0, 40.0))
THORACIC_KYPHOSIS = RangeNorm(optimal=35.0, range=(25.0, 45.0))
LUMBAR_LORDOSIS = RangeNorm(optimal=40.0, range=(30.0, 50.0))

# Anterior pelvic tilt, 8-15° in standing
PELVIC_TILT = RangeNorm(optimal=11.0, range=(8.0, 15.0))

# Frontal-plane spinal deviation (pixels), symmetric around zero
LATERAL_DEVIATION = RangeNorm(optimal=0.0, range=(-10.0, 10.0))


# -----------------------------------------------------------------------------
# Displacement norms (pixel-space approximations of millimeter norms)
# -----------------------------------------------------------------------------

SHOULDER_LEVEL = DifferenceNorm(max_difference=5.0)
PELVIC_LEVEL = DifferenceNorm(max_difference=3.0)
HEAD_TRANSLATION = DifferenceNorm(max_difference=15.0)  # max forward
LEG_LENGTH = DifferenceNorm(max_difference=6.0)


Norm = Union[RangeNorm, DifferenceNorm]

# Aggregate all norms
KENDALL_NORMS: Dict[str, Norm] = {
    'cva': CVA,
    'cervical_lordosis': CERVICAL_LORDOSIS,
    'thoracic_kyphosis': THORACIC_KYPHOSIS,
    'lumbar_lordosis': LUMBAR_LORDOSIS,
    'pelvic_tilt': PELVIC_TILT,
    'lateral_deviation': LATERAL_DEVIATION,
    'shoulder_level': SHOULDER_LEVEL,
    'pelvic_level': PELVIC_LEVEL,
    'head_translation': HEAD_TRANSLATION,
    'leg_length': LEG_LENGTH,
}


def get_norm(key: str) -> Norm:
    """
    Look up a norm by metric key.

    Args:
        key: Metric key, e.g. 'cva' or 'pelvic_tilt'

    Returns:
        The RangeNorm or DifferenceNorm for that metric

    Raises:
        KeyError: if the metric has no norm
    """
    try:
        return KENDALL_NORMS[key]
    except KeyError:
        raise KeyError(f"No Kendall norm defined for metric '{key}'") from None


def get_range_norm(key: str) -> RangeNorm:
    """Look up a norm that must carry an optimal value and range."""
    norm = get_norm(key)
    if not isinstance(norm, RangeNorm):
        raise TypeError(f"Norm '{key}' is a difference threshold, not a range")
    return norm
