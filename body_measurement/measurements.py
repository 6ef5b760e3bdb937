# body_measurement/measurements.py

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .config import DEFAULT_CONFIG, MeasurementConfig
from .estimators import (
    estimate_hip_width,
    estimate_lower_body_length,
    estimate_shoulder_width,
    estimate_total_height,
    estimate_upper_body_length,
    estimate_waist_position,
    estimate_waist_width,
)
from .landmarks import ESSENTIAL_LANDMARKS, Point2D, as_pose_landmarks
from .reliability import require_reliable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LandmarkMeasurements:
    """
    Body measurements in normalised image units.

    shoulder_width    : left <-> right shoulder
    hip_width         : left <-> right hip
    waist_width       : 0.8 x hip_width (estimate, no waist landmark exists)
    waist_position    : estimated waist centre
    upper_body_length : shoulder midpoint <-> hip midpoint
    lower_body_length : left hip -> knee -> ankle
    total_height      : nose <-> ankle midpoint, head-corrected
    """
    shoulder_width    : float
    hip_width         : float
    waist_width       : float
    waist_position    : Point2D
    upper_body_length : float
    lower_body_length : float
    total_height      : float


def round_half_up(value: float, digits: int) -> float:
    """Round .5 away from the floor, so 0.625 -> 0.63 (not banker's rounding)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def extract_landmark_measurements(
    landmarks,
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> LandmarkMeasurements:
    """
    Compute every body measurement from a 33-point pose.

    Raises UnreliableLandmarksError (listing the failing indices) before
    computing anything if an essential landmark is missing or unreliable.
    """
    lm = as_pose_landmarks(landmarks)
    require_reliable(lm, ESSENTIAL_LANDMARKS, config)

    measurements = LandmarkMeasurements(
        shoulder_width=estimate_shoulder_width(lm, config),
        hip_width=estimate_hip_width(lm, config),
        waist_width=estimate_waist_width(lm, config),
        waist_position=estimate_waist_position(lm, config=config),
        upper_body_length=estimate_upper_body_length(lm, config),
        lower_body_length=estimate_lower_body_length(lm, config=config),
        total_height=estimate_total_height(lm, config),
    )
    logger.debug("Extracted measurements: %s", measurements)
    return measurements
