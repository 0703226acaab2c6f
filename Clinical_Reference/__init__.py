"""Kendall clinical norm reference data."""
from .kendall_norms import (
    KENDALL_NORMS, RangeNorm, DifferenceNorm, get_norm, get_range_norm,
    CVA, CERVICAL_LORDOSIS, THORACIC_KYPHOSIS, LUMBAR_LORDOSIS, PELVIC_TILT,
    LATERAL_DEVIATION, SHOULDER_LEVEL, PELVIC_LEVEL, HEAD_TRANSLATION, LEG_LENGTH,
)
