# body_measurement/pipeline.py
"""
Single entry point for measuring a pose.

The caller (analysis feature, CLI, API handler) only needs measure_body():
reliability gate -> measurements -> proportions -> optional cm conversion.

Usage
-----
    from body_measurement import measure_body, HeightReference

    result = measure_body(landmarks, HeightReference(height_cm=170,
                                                     total_height_pixels=0.88))
    print(result.proportions.shr)
    print(result.measurements_cm.shoulder_width_cm)
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Mapping

from .config import DEFAULT_CONFIG, MeasurementConfig
from .proportions import BodyProportions, calculate_body_proportions
from .scale import (
    CmMeasurements,
    ScaleReference,
    calculate_pixel_to_cm_ratio,
    convert_measurements_to_cm,
)

logger = logging.getLogger(__name__)

CM_DIGITS = 1


@dataclass(frozen=True)
class BodyMeasurementResult:
    """
    proportions       : ratios plus the normalised measurements
    measurements_cm   : centimetre values, or None without a scale reference
    pixel_to_cm_ratio : the ratio used, or None without a scale reference
    """
    proportions       : BodyProportions
    measurements_cm   : CmMeasurements | None = None
    pixel_to_cm_ratio : float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def measure_body(
    landmarks,
    reference: ScaleReference | Mapping[str, Any] | None = None,
    config: MeasurementConfig = DEFAULT_CONFIG,
    precision: int | None = CM_DIGITS,
) -> BodyMeasurementResult:
    """
    Measure a 33-point pose and, if a scale reference is given, convert the
    measurements to centimetres.

    Parameters
    ----------
    landmarks : sequence of PoseLandmark | np.ndarray [33, 5]
        Pose in the MediaPipe 33-point layout.
    reference : HeightReference | HeadReference | dict | None
        Scale for the cm conversion. The pixel values in the reference must
        be in the same units as the landmark coordinates.
    precision : int | None
        Decimals for the cm values (default 1). None keeps full precision.

    Raises
    ------
    UnreliableLandmarksError
        An essential landmark is missing or unreliable. Nothing is returned.
    InvalidScaleReferenceError
        The reference cannot produce a finite positive ratio.
    """
    proportions = calculate_body_proportions(landmarks, config)

    if reference is None:
        return BodyMeasurementResult(proportions=proportions)

    ratio = calculate_pixel_to_cm_ratio(reference, config)
    measurements_cm = convert_measurements_to_cm(proportions.measurements, ratio, precision)
    logger.info(
        "Body measured | shr=%.2f | height=%.1fcm",
        proportions.shr,
        measurements_cm.total_height_cm,
    )
    return BodyMeasurementResult(
        proportions=proportions,
        measurements_cm=measurements_cm,
        pixel_to_cm_ratio=ratio,
    )
