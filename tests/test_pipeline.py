# tests/test_pipeline.py

import logging

import pytest

from body_measurement import (
    HeadReference,
    HeightReference,
    InvalidScaleReferenceError,
    Landmark,
    UnreliableLandmarksError,
    calculate_body_proportions,
    measure_body,
)

from conftest import with_landmark


def test_measure_without_reference(sample_pose):
    result = measure_body(sample_pose)
    assert result.proportions == calculate_body_proportions(sample_pose)
    assert result.measurements_cm is None
    assert result.pixel_to_cm_ratio is None


def test_measure_with_height_reference(sample_pose):
    result = measure_body(sample_pose, HeightReference(height_cm=170, total_height_pixels=0.88))
    assert result.pixel_to_cm_ratio == pytest.approx(170 / 0.88)
    assert result.measurements_cm.total_height_cm == 170.0
    assert result.measurements_cm.hip_width_cm == pytest.approx(38.6)
    assert result.measurements_cm.waist_width_cm == pytest.approx(30.9)


def test_measure_with_head_reference_in_wire_form(sample_pose):
    result = measure_body(sample_pose, {"referenceType": "head", "headSizePixels": 0.12})
    # 22 cm / 0.12 units
    assert result.measurements_cm.shoulder_width_cm == pytest.approx(55.0)


def test_measure_full_precision(sample_pose):
    result = measure_body(sample_pose, HeadReference(0.12, 22), precision=None)
    assert result.measurements_cm.shoulder_width_cm == pytest.approx(0.3 * 22 / 0.12)


def test_measure_fails_fast_on_unreliable_pose(sample_pose):
    pose = with_landmark(sample_pose, Landmark.RIGHT_KNEE, visibility=0.3)
    with pytest.raises(UnreliableLandmarksError):
        measure_body(pose, HeightReference(170, 0.88))


def test_measure_rejects_zero_reference(sample_pose):
    with pytest.raises(InvalidScaleReferenceError):
        measure_body(sample_pose, HeightReference(170, 0))


def test_unreliable_pose_is_logged(sample_pose, caplog):
    pose = with_landmark(sample_pose, Landmark.LEFT_ANKLE, presence=0.1)
    with caplog.at_level(logging.WARNING, logger="body_measurement"):
        with pytest.raises(UnreliableLandmarksError):
            measure_body(pose)
    assert "27" in caplog.text


def test_to_dict_is_plain_data(sample_pose):
    data = measure_body(sample_pose, HeightReference(170, 0.88)).to_dict()
    assert data["proportions"]["shr"] == pytest.approx(1.5)
    assert data["proportions"]["measurements"]["waist_position"]["y"] == pytest.approx(0.4)
    assert data["measurements_cm"]["total_height_cm"] == 170.0
