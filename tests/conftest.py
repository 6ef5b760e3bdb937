# tests/conftest.py

import os
from dataclasses import replace

import pytest

from body_measurement import Landmark, PoseLandmark

# Front-facing standing pose, normalised coordinates.
#   shoulder width 0.3, hip width 0.2, upper body 0.25, leg 0.4,
#   nose -> ankle 0.8 (x1.1 = 0.88), ear-to-ear 0.1
SAMPLE_POSITIONS = {
    Landmark.NOSE:           (0.50, 0.10),
    Landmark.LEFT_EAR:       (0.55, 0.10),
    Landmark.RIGHT_EAR:      (0.45, 0.10),
    Landmark.LEFT_SHOULDER:  (0.65, 0.25),
    Landmark.RIGHT_SHOULDER: (0.35, 0.25),
    Landmark.LEFT_HIP:       (0.60, 0.50),
    Landmark.RIGHT_HIP:      (0.40, 0.50),
    Landmark.LEFT_KNEE:      (0.60, 0.70),
    Landmark.RIGHT_KNEE:     (0.40, 0.70),
    Landmark.LEFT_ANKLE:     (0.60, 0.90),
    Landmark.RIGHT_ANKLE:    (0.40, 0.90),
}


def make_pose(positions=None, visibility=0.9, presence=0.9):
    positions = SAMPLE_POSITIONS if positions is None else positions
    pose = []
    for idx in range(33):
        x, y = positions.get(idx, (0.5, 0.5))
        pose.append(PoseLandmark(x=x, y=y, z=0.0, visibility=visibility, presence=presence))
    return pose


def with_landmark(pose, idx, **changes):
    """Copy of pose with one landmark's fields replaced."""
    updated = list(pose)
    updated[idx] = replace(updated[idx], **changes)
    return updated


@pytest.fixture
def sample_pose():
    return make_pose()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # keep developer .env overrides out of the tests
    for name in list(os.environ):
        if name.startswith("BODY_MEASUREMENT_"):
            monkeypatch.delenv(name)
