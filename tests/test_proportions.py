# tests/test_proportions.py

import logging

import numpy as np
import pytest

from body_measurement import (
    ESSENTIAL_LANDMARKS,
    BodyProportions,
    Landmark,
    LandmarkMeasurements,
    MeasurementError,
    UnreliableLandmarksError,
    calculate_body_proportions,
    extract_landmark_measurements,
    landmarks_to_array,
)
from body_measurement.measurements import round_half_up

from conftest import SAMPLE_POSITIONS, make_pose, with_landmark


def test_extract_sample_measurements(sample_pose):
    m = extract_landmark_measurements(sample_pose)
    assert isinstance(m, LandmarkMeasurements)
    assert m.shoulder_width == pytest.approx(0.3)
    assert m.hip_width == pytest.approx(0.2)
    assert m.waist_width == pytest.approx(0.16)
    assert m.waist_position.x == pytest.approx(0.5)
    assert m.waist_position.y == pytest.approx(0.4)
    assert m.upper_body_length == pytest.approx(0.25)
    assert m.lower_body_length == pytest.approx(0.4)
    assert m.total_height == pytest.approx(0.88)


def test_extract_is_idempotent(sample_pose):
    frozen = tuple(sample_pose)
    assert extract_landmark_measurements(frozen) == extract_landmark_measurements(frozen)


def test_extract_accepts_numpy(sample_pose):
    from_array = extract_landmark_measurements(landmarks_to_array(sample_pose))
    assert from_array == extract_landmark_measurements(sample_pose)


@pytest.mark.parametrize("idx", ESSENTIAL_LANDMARKS)
@pytest.mark.parametrize("entry_point", [extract_landmark_measurements, calculate_body_proportions])
def test_entry_points_reject_low_visibility_essentials(sample_pose, idx, entry_point):
    pose = with_landmark(sample_pose, idx, visibility=0.3)
    with pytest.raises(UnreliableLandmarksError) as excinfo:
        entry_point(pose)
    assert idx in excinfo.value.unreliable_indices


def test_proportions_gate_warns_once(sample_pose, caplog):
    pose = with_landmark(sample_pose, Landmark.RIGHT_KNEE, visibility=0.3)
    with caplog.at_level(logging.WARNING, logger="body_measurement"):
        with pytest.raises(UnreliableLandmarksError):
            calculate_body_proportions(pose)
    warnings = [r for r in caplog.records if "Unreliable landmarks" in r.getMessage()]
    assert len(warnings) == 1


def test_extract_reports_every_unreliable_essential(sample_pose):
    pose = with_landmark(sample_pose, Landmark.LEFT_KNEE, visibility=0.3)
    pose = with_landmark(pose, Landmark.RIGHT_SHOULDER, presence=0.2)
    with pytest.raises(UnreliableLandmarksError) as excinfo:
        extract_landmark_measurements(pose)
    assert excinfo.value.unreliable_indices == (12, 25)


def test_extract_rejects_truncated_pose(sample_pose):
    with pytest.raises(UnreliableLandmarksError):
        extract_landmark_measurements(sample_pose[:12])


def test_sample_proportions(sample_pose):
    p = calculate_body_proportions(sample_pose)
    assert isinstance(p, BodyProportions)
    assert p.shr == pytest.approx(1.5)
    assert p.upper_lower_ratio == pytest.approx(0.63)
    assert p.leg_ratio == pytest.approx(0.45)
    assert p.estimated_waist_hip_ratio == 0.8
    assert p.measurements == extract_landmark_measurements(sample_pose)


def test_waist_hip_ratio_is_constant_for_any_pose():
    positions = dict(SAMPLE_POSITIONS)
    positions[Landmark.LEFT_HIP] = (0.73, 0.52)
    positions[Landmark.RIGHT_HIP] = (0.29, 0.47)
    assert calculate_body_proportions(make_pose(positions)).estimated_waist_hip_ratio == 0.8


def test_inverted_triangle_has_high_shr():
    positions = dict(SAMPLE_POSITIONS)
    positions[Landmark.LEFT_SHOULDER] = (0.75, 0.25)
    positions[Landmark.RIGHT_SHOULDER] = (0.25, 0.25)
    assert calculate_body_proportions(make_pose(positions)).shr == pytest.approx(2.5)


def test_degenerate_hips_raise_instead_of_dividing_by_zero():
    positions = dict(SAMPLE_POSITIONS)
    positions[Landmark.RIGHT_HIP] = positions[Landmark.LEFT_HIP]
    with pytest.raises(MeasurementError, match="shoulder-hip"):
        calculate_body_proportions(make_pose(positions))


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_non_finite_coordinate_raises_measurement_error(sample_pose, value):
    pose = with_landmark(sample_pose, Landmark.LEFT_HIP, x=value)
    with pytest.raises(MeasurementError, match="shoulder-hip"):
        calculate_body_proportions(pose)


@pytest.mark.parametrize("value, digits, expected", [
    (0.625, 2, 0.63),
    (1.5000000000000004, 2, 1.5),
    (0.7999999999999999, 2, 0.8),
    (12.25, 1, 12.3),
    (3.14159, 0, 3.0),
])
def test_round_half_up(value, digits, expected):
    assert round_half_up(value, digits) == pytest.approx(expected)


def test_proportions_do_not_modify_input(sample_pose):
    arr = landmarks_to_array(sample_pose)
    before = arr.copy()
    calculate_body_proportions(arr)
    np.testing.assert_array_equal(arr, before)
