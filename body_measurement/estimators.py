# body_measurement/estimators.py
"""
Geometric body estimators over a 33-point pose.

All values are in normalised image units (the same units as the landmark
x/y). Every estimator checks the landmarks it reads and raises
UnreliableLandmarksError rather than measure low-confidence points.

Known approximations (there is no waist landmark in the 33-point model):
  - waist position : 60% of the way from shoulder midpoint to hip midpoint
  - waist width    : 0.8 x hip width
  - total height   : nose-to-ankle distance x 1.1 (top of head is above the nose)
  - head size      : ear-to-ear distance x 1.2 (head length from head width)
"""

from __future__ import annotations

import math

from .config import DEFAULT_CONFIG, MeasurementConfig
from .landmarks import Landmark, Point2D, as_pose_landmarks
from .reliability import require_reliable

_SIDES = {
    "left":  (Landmark.LEFT_HIP,  Landmark.LEFT_KNEE,  Landmark.LEFT_ANKLE),
    "right": (Landmark.RIGHT_HIP, Landmark.RIGHT_KNEE, Landmark.RIGHT_ANKLE),
}

_TORSO = (
    Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER,
    Landmark.LEFT_HIP, Landmark.RIGHT_HIP,
)


def _distance(a, b) -> float:
    # 2D only: z is too noisy for front-facing photos
    return math.hypot(b.x - a.x, b.y - a.y)


def _midpoint(a, b) -> Point2D:
    return Point2D((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def _checked(landmarks, indices, config: MeasurementConfig):
    points = as_pose_landmarks(landmarks)
    require_reliable(points, indices, config)
    return points


def _torso_midpoints(landmarks, config: MeasurementConfig) -> tuple[Point2D, Point2D]:
    lm = _checked(landmarks, _TORSO, config)
    shoulder_mid = _midpoint(lm[Landmark.LEFT_SHOULDER], lm[Landmark.RIGHT_SHOULDER])
    hip_mid = _midpoint(lm[Landmark.LEFT_HIP], lm[Landmark.RIGHT_HIP])
    return shoulder_mid, hip_mid


def estimate_shoulder_width(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    """Distance between landmarks 11 and 12."""
    lm = _checked(landmarks, (Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER), config)
    return _distance(lm[Landmark.LEFT_SHOULDER], lm[Landmark.RIGHT_SHOULDER])


def estimate_hip_width(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    """Distance between landmarks 23 and 24."""
    lm = _checked(landmarks, (Landmark.LEFT_HIP, Landmark.RIGHT_HIP), config)
    return _distance(lm[Landmark.LEFT_HIP], lm[Landmark.RIGHT_HIP])


def estimate_waist_position(
    landmarks,
    ratio: float | None = None,
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> Point2D:
    """
    Point `ratio` of the way from the shoulder midpoint to the hip midpoint
    (default 0.6, i.e. closer to the hips).
    """
    if ratio is None:
        ratio = config.waist_position_ratio
    shoulder_mid, hip_mid = _torso_midpoints(landmarks, config)
    return Point2D(
        shoulder_mid.x + (hip_mid.x - shoulder_mid.x) * ratio,
        shoulder_mid.y + (hip_mid.y - shoulder_mid.y) * ratio,
    )


def estimate_waist_width(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    return estimate_hip_width(landmarks, config) * config.waist_width_ratio


def estimate_upper_body_length(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    """Shoulder midpoint to hip midpoint."""
    shoulder_mid, hip_mid = _torso_midpoints(landmarks, config)
    return _distance(shoulder_mid, hip_mid)


def estimate_lower_body_length(
    landmarks,
    side: str = "left",
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> float:
    """
    Hip to ankle on one side, measured along the leg (hip -> knee -> ankle)
    so a bent knee does not shorten the result.
    """
    if side not in _SIDES:
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")
    hip_idx, knee_idx, ankle_idx = _SIDES[side]
    lm = _checked(landmarks, (hip_idx, knee_idx, ankle_idx), config)
    hip, knee, ankle = lm[hip_idx], lm[knee_idx], lm[ankle_idx]
    return _distance(hip, knee) + _distance(knee, ankle)


def estimate_total_height(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    """Nose to ankle midpoint, scaled up by the head correction factor."""
    lm = _checked(
        landmarks,
        (Landmark.NOSE, Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE),
        config,
    )
    ankle_mid = _midpoint(lm[Landmark.LEFT_ANKLE], lm[Landmark.RIGHT_ANKLE])
    return _distance(lm[Landmark.NOSE], ankle_mid) * config.head_correction_ratio


def estimate_head_size_pixels(landmarks, config: MeasurementConfig = DEFAULT_CONFIG) -> float:
    """
    Head length estimate from the ear-to-ear width, for use as a scale
    reference. Same units as the input coordinates: pass pixel-space
    landmarks to get pixels.
    """
    lm = _checked(landmarks, (Landmark.LEFT_EAR, Landmark.RIGHT_EAR), config)
    return _distance(lm[Landmark.LEFT_EAR], lm[Landmark.RIGHT_EAR]) * config.head_length_ratio
