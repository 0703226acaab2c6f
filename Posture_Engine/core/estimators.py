"""
Region Estimators

Geometry the metrics calculator cannot yet derive from two 2D views
(scapular protraction, spinal curves, pelvic tilt, lower-limb positions) is
delegated to a RegionEstimator. The default PlaceholderEstimator returns fixed
values inside the Kendall norm ranges. A calibrated estimator can be swapped
in behind the same interface without touching classification.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from Clinical_Reference.kendall_norms import PELVIC_LEVEL
from .landmarks import all_visible
from .types import (
    AnklePosition, Bilateral, Genu, IliacCrestLevel, KneePosition, Landmark,
    PelvicShift, ShoulderRotation, SpinalBalance, ThoracicOutletRisk, WingingGrade,
)

logger = logging.getLogger(__name__)


class RegionEstimator(ABC):
    """Abstract capability for the estimated regional measurements."""

    # True when at least part of the output is derived from landmark geometry
    is_estimated: bool = False

    # -------------------------------------------------------------------------
    # Shoulder girdle
    # -------------------------------------------------------------------------

    @abstractmethod
    def estimate_protraction(self, shoulder: Landmark, width: int) -> float:
        """Scapular protraction from the sagittal shoulder."""

    @abstractmethod
    def evaluate_shoulder_rotation(self, landmarks: Sequence[Landmark]) -> Bilateral:
        """Internal/external rotation from elbow and wrist placement (frontal view)."""

    @abstractmethod
    def evaluate_scapular_winging(self, protraction: Bilateral) -> Bilateral:
        pass

    @abstractmethod
    def evaluate_thoracic_outlet_risk(self, elevation: Bilateral,
                                      protraction: Bilateral) -> ThoracicOutletRisk:
        pass

    # -------------------------------------------------------------------------
    # Spine
    # -------------------------------------------------------------------------

    @abstractmethod
    def estimate_cervical_lordosis(self, ear: Landmark, shoulder: Landmark,
                                   width: int, height: int) -> float:
        pass

    @abstractmethod
    def estimate_thoracic_kyphosis(self, shoulder: Landmark, hip: Landmark,
                                   width: int, height: int) -> float:
        pass

    @abstractmethod
    def estimate_lumbar_lordosis(self, hip: Landmark, landmarks: Sequence[Landmark],
                                 width: int, height: int) -> float:
        pass

    @abstractmethod
    def calculate_lateral_deviation(self, landmarks: Sequence[Landmark], width: int) -> float:
        pass

    @abstractmethod
    def evaluate_spinal_balance(self, ear: Landmark, hip: Landmark, width: int) -> SpinalBalance:
        pass

    # -------------------------------------------------------------------------
    # Pelvis
    # -------------------------------------------------------------------------

    @abstractmethod
    def calculate_pelvic_tilt(self, hip: Landmark, landmarks: Sequence[Landmark],
                              width: int, height: int) -> float:
        pass

    @abstractmethod
    def calculate_pelvic_rotation(self, left_hip: Landmark, right_hip: Landmark,
                                  width: int) -> float:
        pass

    @abstractmethod
    def calculate_pelvic_shift(self, hip: Landmark, landmarks: Sequence[Landmark],
                               width: int, height: int) -> PelvicShift:
        pass

    @abstractmethod
    def evaluate_iliac_crest_level(self, left_hip: Landmark, right_hip: Landmark,
                                   height: int) -> IliacCrestLevel:
        pass

    @abstractmethod
    def estimate_sacral_angle(self, pelvic_tilt: float) -> float:
        pass

    # -------------------------------------------------------------------------
    # Lower extremity
    # -------------------------------------------------------------------------

    @abstractmethod
    def calculate_hip_flexion(self, hip: Landmark, knee: Landmark) -> float:
        pass

    @abstractmethod
    def evaluate_knee_position(self, hip: Landmark, knee: Landmark,
                               ankle: Landmark) -> KneePosition:
        pass

    @abstractmethod
    def evaluate_ankle_position(self, knee: Landmark, ankle: Landmark) -> AnklePosition:
        pass

    @abstractmethod
    def calculate_leg_length_discrepancy(self, left_hip: Landmark, right_hip: Landmark,
                                         left_ankle: Landmark, right_ankle: Landmark,
                                         height: int) -> float:
        pass

    @abstractmethod
    def evaluate_genu(self, left_knee: Landmark, right_knee: Landmark,
                      left_ankle: Landmark, right_ankle: Landmark, width: int) -> Genu:
        pass


class PlaceholderEstimator(RegionEstimator):
    """
    Unestimated geometry: fixed reference values for every region.

    These constants sit inside the Kendall norm ranges, so no syndrome rule
    depending only on them can trigger.
    """

    PROTRACTION = 15.0
    CERVICAL_LORDOSIS = 30.0
    THORACIC_KYPHOSIS = 35.0
    LUMBAR_LORDOSIS = 40.0
    PELVIC_TILT = 11.0
    SACRAL_ANGLE = 30.0

    def estimate_protraction(self, shoulder, width):
        return self.PROTRACTION

    def evaluate_shoulder_rotation(self, landmarks):
        return Bilateral(left=ShoulderRotation.NEUTRAL, right=ShoulderRotation.NEUTRAL)

    def evaluate_scapular_winging(self, protraction):
        return Bilateral(left=WingingGrade.NONE, right=WingingGrade.NONE)

    def evaluate_thoracic_outlet_risk(self, elevation, protraction):
        return ThoracicOutletRisk.NEGATIVE

    def estimate_cervical_lordosis(self, ear, shoulder, width, height):
        return self.CERVICAL_LORDOSIS

    def estimate_thoracic_kyphosis(self, shoulder, hip, width, height):
        return self.THORACIC_KYPHOSIS

    def estimate_lumbar_lordosis(self, hip, landmarks, width, height):
        return self.LUMBAR_LORDOSIS

    def calculate_lateral_deviation(self, landmarks, width):
        return 0.0

    def evaluate_spinal_balance(self, ear, hip, width):
        return SpinalBalance.BALANCED

    def calculate_pelvic_tilt(self, hip, landmarks, width, height):
        return self.PELVIC_TILT

    def calculate_pelvic_rotation(self, left_hip, right_hip, width):
        return 0.0

    def calculate_pelvic_shift(self, hip, landmarks, width, height):
        return PelvicShift(lateral=0.0, anteroposterior=0.0)

    def evaluate_iliac_crest_level(self, left_hip, right_hip, height):
        return IliacCrestLevel.LEVEL

    def estimate_sacral_angle(self, pelvic_tilt):
        return self.SACRAL_ANGLE

    def calculate_hip_flexion(self, hip, knee):
        return 0.0

    def evaluate_knee_position(self, hip, knee, ankle):
        return KneePosition.NORMAL

    def evaluate_ankle_position(self, knee, ankle):
        return AnklePosition.NEUTRAL

    def calculate_leg_length_discrepancy(self, left_hip, right_hip, left_ankle, right_ankle, height):
        return 0.0

    def evaluate_genu(self, left_knee, right_knee, left_ankle, right_ankle, width):
        return Genu.NORMAL


class LandmarkGeometryEstimator(PlaceholderEstimator):
    """
    Derives the frontal-plane pelvic measurements from hip and ankle landmarks.

    Iliac crest level and leg-length discrepancy come from vertical pixel
    differences; every other region keeps the placeholder values.
    """

    is_estimated = True

    def evaluate_iliac_crest_level(self, left_hip, right_hip, height):
        if not all_visible(left_hip, right_hip):
            logger.debug("Hips not visible, iliac crest assumed level")
            return IliacCrestLevel.LEVEL

        # Image y grows downward: a smaller y is the higher crest
        difference = (left_hip.y - right_hip.y) * height
        if not PELVIC_LEVEL.exceeds(difference):
            return IliacCrestLevel.LEVEL
        return IliacCrestLevel.LEFT_HIGH if difference < 0 else IliacCrestLevel.RIGHT_HIGH

    def calculate_leg_length_discrepancy(self, left_hip, right_hip, left_ankle, right_ankle, height):
        if not all_visible(left_hip, right_hip, left_ankle, right_ankle):
            return 0.0

        left_length = abs(left_hip.y - left_ankle.y) * height
        right_length = abs(right_hip.y - right_ankle.y) * height
        return abs(left_length - right_length)
