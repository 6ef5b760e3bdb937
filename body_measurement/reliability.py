# body_measurement/reliability.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .config import DEFAULT_CONFIG, MeasurementConfig
from .errors import UnreliableLandmarksError
from .landmarks import ESSENTIAL_LANDMARKS, PoseLandmark, as_pose_landmarks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReliabilitySummary:
    """
    total_count        : number of landmarks supplied
    reliable_count     : how many of them pass the threshold
    essential_reliable : True when every essential landmark is present and reliable
    unreliable_indices : essential indices that are missing or unreliable
    """
    total_count        : int
    reliable_count     : int
    essential_reliable : bool
    unreliable_indices : tuple[int, ...]


def is_reliable_landmark(point: PoseLandmark, threshold: float | None = None) -> bool:
    """True iff both visibility and presence exceed the threshold (default 0.5)."""
    if threshold is None:
        threshold = DEFAULT_CONFIG.reliability_threshold
    return point.visibility > threshold and point.presence > threshold


def _unreliable(landmarks: Sequence[PoseLandmark], indices: Iterable[int],
                threshold: float | None) -> list[int]:
    bad = []
    for idx in indices:
        if idx >= len(landmarks) or not is_reliable_landmark(landmarks[idx], threshold):
            bad.append(int(idx))
    return sorted(bad)


def are_essential_landmarks_reliable(
    landmarks: Sequence[PoseLandmark],
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> bool:
    landmarks = as_pose_landmarks(landmarks)
    return not _unreliable(landmarks, ESSENTIAL_LANDMARKS, config.reliability_threshold)


def get_landmark_reliability_summary(
    landmarks: Sequence[PoseLandmark],
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> ReliabilitySummary:
    landmarks = as_pose_landmarks(landmarks)
    threshold = config.reliability_threshold
    reliable_count = sum(1 for p in landmarks if is_reliable_landmark(p, threshold))
    unreliable = _unreliable(landmarks, ESSENTIAL_LANDMARKS, threshold)
    return ReliabilitySummary(
        total_count=len(landmarks),
        reliable_count=reliable_count,
        essential_reliable=not unreliable,
        unreliable_indices=tuple(unreliable),
    )


def require_reliable(
    landmarks: Sequence[PoseLandmark],
    indices: Iterable[int] = ESSENTIAL_LANDMARKS,
    config: MeasurementConfig = DEFAULT_CONFIG,
) -> None:
    """Raise UnreliableLandmarksError if any of `indices` is missing or unreliable."""
    landmarks = as_pose_landmarks(landmarks)
    bad = _unreliable(landmarks, indices, config.reliability_threshold)
    if bad:
        logger.warning("Unreliable landmarks: %s", bad)
        raise UnreliableLandmarksError(bad)
