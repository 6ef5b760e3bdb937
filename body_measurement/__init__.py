# body_measurement/__init__.py
"""
body_measurement
================
Body-shape measurements from 33-point MediaPipe pose landmarks.

Public API
----------
measure_body                   — main entry point; landmarks (+ scale) in, result out
extract_landmark_measurements  — normalised widths/lengths of the body
calculate_body_proportions     — SHR, upper/lower, leg and waist-hip ratios
calculate_pixel_to_cm_ratio    — cm per pixel from a height or head reference
convert_measurements_to_cm     — apply a ratio to LandmarkMeasurements

Individual estimators and reliability checks are exported too, for callers
that need fine-grained control.

Typical usage
-------------
    from body_measurement import measure_body, HeightReference
    from body_measurement import UnreliableLandmarksError

    try:
        result = measure_body(landmarks, HeightReference(170, total_px))
    except UnreliableLandmarksError as exc:
        print(f'Please retake the photo (indices {exc.unreliable_indices})')
    else:
        print(result.proportions.shr, result.measurements_cm.hip_width_cm)
"""

from .config       import DEFAULT_CONFIG, MeasurementConfig
from .errors       import InvalidScaleReferenceError, MeasurementError, UnreliableLandmarksError
from .landmarks    import (
    ESSENTIAL_LANDMARKS, LANDMARK_INDEX, NUM_LANDMARKS, Landmark, Point2D, PoseLandmark,
    as_pose_landmarks, landmarks_from_mediapipe, landmarks_to_array,
)
from .reliability  import (
    ReliabilitySummary, are_essential_landmarks_reliable,
    get_landmark_reliability_summary, is_reliable_landmark, require_reliable,
)
from .estimators   import (
    estimate_head_size_pixels, estimate_hip_width, estimate_lower_body_length,
    estimate_shoulder_width, estimate_total_height, estimate_upper_body_length,
    estimate_waist_position, estimate_waist_width,
)
from .measurements import LandmarkMeasurements, extract_landmark_measurements
from .proportions  import BodyProportions, calculate_body_proportions
from .scale        import (
    CmMeasurements, HeadReference, HeightReference, ScaleReference,
    calculate_pixel_to_cm_ratio, convert_measurements_to_cm, scale_reference_from_dict,
)
from .pipeline     import BodyMeasurementResult, measure_body

__all__ = [
    # Primary entry points
    'measure_body',
    'BodyMeasurementResult',
    'extract_landmark_measurements',
    'calculate_body_proportions',
    'calculate_pixel_to_cm_ratio',
    'convert_measurements_to_cm',
    # Data types
    'PoseLandmark',
    'Point2D',
    'Landmark',
    'LANDMARK_INDEX',
    'ESSENTIAL_LANDMARKS',
    'NUM_LANDMARKS',
    'LandmarkMeasurements',
    'BodyProportions',
    'CmMeasurements',
    'HeightReference',
    'HeadReference',
    'ScaleReference',
    'ReliabilitySummary',
    'MeasurementConfig',
    'DEFAULT_CONFIG',
    # Errors
    'MeasurementError',
    'UnreliableLandmarksError',
    'InvalidScaleReferenceError',
    # Lower-level helpers
    'as_pose_landmarks',
    'landmarks_to_array',
    'landmarks_from_mediapipe',
    'scale_reference_from_dict',
    'is_reliable_landmark',
    'are_essential_landmarks_reliable',
    'get_landmark_reliability_summary',
    'require_reliable',
    'estimate_shoulder_width',
    'estimate_hip_width',
    'estimate_waist_position',
    'estimate_waist_width',
    'estimate_upper_body_length',
    'estimate_lower_body_length',
    'estimate_total_height',
    'estimate_head_size_pixels',
]

__version__ = '0.1.0'
