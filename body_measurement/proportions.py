# body_measurement/proportions.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, MeasurementConfig
from .errors import MeasurementError
from .measurements import LandmarkMeasurements, extract_landmark_measurements, round_half_up

logger = logging.getLogger(__name__)

RATIO_DIGITS = 2


@dataclass(frozen=True)
class BodyProportions:
    """
    Unit-free body ratios, rounded to two decimals.

    shr                       : shoulder width / hip width (silhouette, e.g.
                                inverted triangle > 1 > pear)
    upper_lower_ratio         : upper body length / lower body length
    leg_ratio                 : lower body length / total height
    estimated_waist_hip_ratio : waist width / hip width. Waist width is itself
                                0.8 x hip width, so this is always 0.8; it is
                                not a measured WHR.
    measurements              : the measurements the ratios were derived from
    """
    shr                       : float
    upper_lower_ratio         : float
    leg_ratio                 : float
    estimated_waist_hip_ratio : float
    measurements              : LandmarkMeasurements


def _ratio(numerator: float, denominator: float, name: str) -> float:
    if not math.isfinite(denominator) or denominator <= 0:
        raise MeasurementError(f"Cannot compute {name}: denominator is {denominator}")
    value = numerator / denominator
    if not math.isfinite(value):
        raise MeasurementError(f"Cannot compute {name}: result is {value}")
    return round_half_up(value, RATIO_DIGITS)


def calculate_body_proportions(
    landmarks,
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> BodyProportions:
    """
    Essential-landmark gate, then body ratios for body-type classification.

    Raises
    ------
    UnreliableLandmarksError
        An essential landmark is missing or below the reliability threshold.
    MeasurementError
        The pose is degenerate (zero hip width, leg length or height) or a
        coordinate is not finite.
    """
    m = extract_landmark_measurements(landmarks, config)
    proportions = BodyProportions(
        shr=_ratio(m.shoulder_width, m.hip_width, "shoulder-hip ratio"),
        upper_lower_ratio=_ratio(m.upper_body_length, m.lower_body_length, "upper-lower ratio"),
        leg_ratio=_ratio(m.lower_body_length, m.total_height, "leg ratio"),
        estimated_waist_hip_ratio=_ratio(m.waist_width, m.hip_width, "waist-hip ratio"),
        measurements=m,
    )
    logger.debug(
        "Proportions: shr=%.2f upper/lower=%.2f leg=%.2f whr=%.2f",
        proportions.shr,
        proportions.upper_lower_ratio,
        proportions.leg_ratio,
        proportions.estimated_waist_hip_ratio,
    )
    return proportions
