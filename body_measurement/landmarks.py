# body_measurement/landmarks.py
"""
MediaPipe Pose 33-landmark index table, landmark types and input adapters.

Landmarks arrive from an external pose model in normalised image
coordinates (x, y in [0, 1]) with per-point visibility and presence scores.
Everything here is read-only: adapters build new tuples, never mutate input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Sequence

import numpy as np

NUM_LANDMARKS = 33
_COLUMNS = ("x", "y", "z", "visibility", "presence")


class Landmark(IntEnum):
    # face
    NOSE             = 0
    LEFT_EYE_INNER   = 1
    LEFT_EYE         = 2
    LEFT_EYE_OUTER   = 3
    RIGHT_EYE_INNER  = 4
    RIGHT_EYE        = 5
    RIGHT_EYE_OUTER  = 6
    LEFT_EAR         = 7
    RIGHT_EAR        = 8
    MOUTH_LEFT       = 9
    MOUTH_RIGHT      = 10

    # upper body
    LEFT_SHOULDER    = 11
    RIGHT_SHOULDER   = 12
    LEFT_ELBOW       = 13
    RIGHT_ELBOW      = 14
    LEFT_WRIST       = 15
    RIGHT_WRIST      = 16
    LEFT_PINKY       = 17
    RIGHT_PINKY      = 18
    LEFT_INDEX       = 19
    RIGHT_INDEX      = 20
    LEFT_THUMB       = 21
    RIGHT_THUMB      = 22

    # lower body
    LEFT_HIP         = 23
    RIGHT_HIP        = 24
    LEFT_KNEE        = 25
    RIGHT_KNEE       = 26
    LEFT_ANKLE       = 27
    RIGHT_ANKLE      = 28
    LEFT_HEEL        = 29
    RIGHT_HEEL       = 30
    LEFT_FOOT_INDEX  = 31
    RIGHT_FOOT_INDEX = 32


# name -> index, read-only
LANDMARK_INDEX: Mapping[str, int] = MappingProxyType(
    {member.name: int(member) for member in Landmark}
)

# Landmarks that must be reliable before any body measurement is trusted.
ESSENTIAL_LANDMARKS: tuple[int, ...] = (
    Landmark.LEFT_SHOULDER,
    Landmark.RIGHT_SHOULDER,
    Landmark.LEFT_HIP,
    Landmark.RIGHT_HIP,
    Landmark.LEFT_KNEE,
    Landmark.RIGHT_KNEE,
    Landmark.LEFT_ANKLE,
    Landmark.RIGHT_ANKLE,
)


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class PoseLandmark:
    """One pose point: normalised x/y, relative depth z, confidence scores."""
    x: float
    y: float
    z: float = 0.0
    visibility: float = 0.0  # is the point in frame
    presence: float = 0.0    # does the point exist in the pose at all


def _coerce(value: Any) -> float:
    # MediaPipe leaves unset scores as None
    return 0.0 if value is None else float(value)


def _to_pose_landmark(item: Any) -> PoseLandmark:
    if isinstance(item, PoseLandmark):
        return item
    if isinstance(item, (Sequence, np.ndarray)) and not isinstance(item, str):
        if len(item) != len(_COLUMNS):
            raise ValueError(f"Expected {len(_COLUMNS)} values per landmark, got {len(item)}")
        return PoseLandmark(*(_coerce(v) for v in item))

    if isinstance(item, Mapping):
        values = [item.get(col) for col in _COLUMNS]
    else:
        values = [getattr(item, col, None) for col in _COLUMNS]
    # scores may be unset, coordinates may not
    if values[0] is None or values[1] is None:
        raise ValueError(f"Landmark has no x/y coordinates: {item!r}")
    return PoseLandmark(*(_coerce(v) for v in values))


def as_pose_landmarks(landmarks) -> tuple[PoseLandmark, ...]:
    """
    Normalise landmark input into a tuple of PoseLandmark.

    Accepts a sequence of PoseLandmark, of objects with x/y/z/visibility/
    presence attributes (MediaPipe NormalizedLandmark), of mappings with
    those keys, of [x, y, z, visibility, presence] rows (lists, tuples or
    1-D arrays), or an np.ndarray of shape (N, 5). A landmark without x/y
    coordinates raises ValueError; missing scores count as 0.
    """
    if isinstance(landmarks, np.ndarray):
        if landmarks.ndim != 2 or landmarks.shape[1] != len(_COLUMNS):
            raise ValueError(
                f"Expected landmark array of shape (N, {len(_COLUMNS)}) "
                f"(x, y, z, visibility, presence), got {landmarks.shape}"
            )
        return tuple(PoseLandmark(*(float(v) for v in row)) for row in landmarks)
    return tuple(_to_pose_landmark(item) for item in landmarks)


def landmarks_to_array(landmarks) -> np.ndarray:
    """Returns np.ndarray [N, 5] (x, y, z, visibility, presence)."""
    points = as_pose_landmarks(landmarks)
    return np.array(
        [[p.x, p.y, p.z, p.visibility, p.presence] for p in points],
        dtype=np.float64,
    ).reshape(-1, len(_COLUMNS))


def landmarks_from_mediapipe(pose_landmarks) -> tuple[PoseLandmark, ...]:
    """
    Pull the landmark list out of a MediaPipe result without importing
    mediapipe.

    Works with the legacy solutions API (`results.pose_landmarks`, which
    has a `.landmark` list) and the Tasks API (`result.pose_landmarks`, a
    list of per-person lists; the first person is used).
    """
    if pose_landmarks is None:
        raise ValueError("No pose landmarks in result")
    if hasattr(pose_landmarks, "landmark"):
        return as_pose_landmarks(pose_landmarks.landmark)
    if isinstance(pose_landmarks, Sequence) and pose_landmarks \
            and isinstance(pose_landmarks[0], Sequence):
        return as_pose_landmarks(pose_landmarks[0])
    return as_pose_landmarks(pose_landmarks)
