# body_measurement/scale.py
"""
Pixel -> centimetre conversion.

Two ways to get a scale:
    1. HeightReference : the user's height in cm and the measured total
                         height in pixels (most accurate)
    2. HeadReference   : measured head size in pixels and a known head size
                         (defaults to the 22 cm adult average)

Usage
-----
    ratio = calculate_pixel_to_cm_ratio(HeightReference(170, 1000))   # 0.17
    cm = convert_measurements_to_cm(measurements, ratio)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Union

from .config import DEFAULT_CONFIG, MeasurementConfig
from .errors import InvalidScaleReferenceError
from .landmarks import Point2D
from .measurements import LandmarkMeasurements, round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeightReference:
    height_cm: float
    total_height_pixels: float
    reference_type: ClassVar[str] = "height"


@dataclass(frozen=True)
class HeadReference:
    head_size_pixels: float
    head_size_cm: float | None = None  # None = config.default_head_size_cm
    reference_type: ClassVar[str] = "head"


ScaleReference = Union[HeightReference, HeadReference]


@dataclass(frozen=True)
class CmMeasurements:
    shoulder_width_cm    : float
    hip_width_cm         : float
    waist_width_cm       : float
    waist_position_cm    : Point2D
    upper_body_length_cm : float
    lower_body_length_cm : float
    total_height_cm      : float


# wire keys (camelCase as sent by clients) -> field names
_KEY_ALIASES = {
    "referenceType": "reference_type",
    "heightCm": "height_cm",
    "totalHeightPixels": "total_height_pixels",
    "headSizePixels": "head_size_pixels",
    "headSizeCm": "head_size_cm",
}


def scale_reference_from_dict(data: Mapping[str, Any]) -> ScaleReference:
    """
    Build a reference from its wire form, e.g.
    {"referenceType": "height", "heightCm": 170, "totalHeightPixels": 1000}.
    snake_case keys are accepted too.
    """
    values = {_KEY_ALIASES.get(k, k): v for k, v in data.items()}
    kind = values.get("reference_type")

    try:
        if kind == HeightReference.reference_type:
            return HeightReference(
                height_cm=float(values["height_cm"]),
                total_height_pixels=float(values["total_height_pixels"]),
            )
        if kind == HeadReference.reference_type:
            head_cm = values.get("head_size_cm")
            return HeadReference(
                head_size_pixels=float(values["head_size_pixels"]),
                head_size_cm=None if head_cm is None else float(head_cm),
            )
    except KeyError as exc:
        raise InvalidScaleReferenceError(
            f"Scale reference of type {kind!r} is missing {exc.args[0]!r}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise InvalidScaleReferenceError(f"Non-numeric scale reference value: {exc}") from exc

    raise InvalidScaleReferenceError(
        f"referenceType must be 'height' or 'head', got {kind!r}"
    )


def _require_positive(value: float, name: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidScaleReferenceError(f"{name} must be a positive number, got {value}")
    return value


def calculate_pixel_to_cm_ratio(
    reference: ScaleReference | Mapping[str, Any],
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> float:
    """
    Centimetres per pixel (or per normalised unit) for the given reference.

    Raises InvalidScaleReferenceError for a zero/negative size or an
    unknown reference type; never returns inf.
    """
    if isinstance(reference, Mapping):
        reference = scale_reference_from_dict(reference)

    if isinstance(reference, HeightReference):
        pixels = _require_positive(reference.total_height_pixels, "total_height_pixels")
        cm = _require_positive(reference.height_cm, "height_cm")
    elif isinstance(reference, HeadReference):
        pixels = _require_positive(reference.head_size_pixels, "head_size_pixels")
        head_cm = reference.head_size_cm
        if head_cm is None:
            head_cm = config.default_head_size_cm
        cm = _require_positive(head_cm, "head_size_cm")
    else:
        raise InvalidScaleReferenceError(f"Unknown scale reference: {reference!r}")

    ratio = cm / pixels
    logger.debug("Pixel-to-cm ratio from %s reference: %s", reference.reference_type, ratio)
    return ratio


def convert_measurements_to_cm(
    measurements: LandmarkMeasurements,
    pixel_to_cm_ratio: float,
    precision: int | None = None,
) -> CmMeasurements:
    """
    Multiply every measurement (and both waist coordinates) by the ratio.

    With `precision` set, values are rounded half-up to that many decimals
    (1 gives the 0.1 cm display resolution).
    """
    if not math.isfinite(pixel_to_cm_ratio):
        raise InvalidScaleReferenceError(f"Ratio must be finite, got {pixel_to_cm_ratio}")

    def cm(value: float) -> float:
        converted = value * pixel_to_cm_ratio
        if precision is None:
            return converted
        return round_half_up(converted, precision)

    return CmMeasurements(
        shoulder_width_cm=cm(measurements.shoulder_width),
        hip_width_cm=cm(measurements.hip_width),
        waist_width_cm=cm(measurements.waist_width),
        waist_position_cm=Point2D(
            cm(measurements.waist_position.x),
            cm(measurements.waist_position.y),
        ),
        upper_body_length_cm=cm(measurements.upper_body_length),
        lower_body_length_cm=cm(measurements.lower_body_length),
        total_height_cm=cm(measurements.total_height),
    )
