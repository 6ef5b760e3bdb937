# measure_landmarks.py
"""
Measure a saved pose from the command line.

Usage
-----
    python measure_landmarks.py pose.json
    python measure_landmarks.py pose.json --height-cm 170
    python measure_landmarks.py pose.npy --head-reference --head-cm 23
    python measure_landmarks.py pose.json --env-file config/.env -v

pose.json is either a list of 33 {x, y, z, visibility, presence} objects or
{"landmarks": [...], "scale": {"referenceType": "height", ...}}.
pose.npy is an array of shape (33, 5).

Without --height-pixels / --head-pixels the reference size is measured
from the pose itself, so --height-cm alone is enough.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from body_measurement import (
    HeadReference,
    HeightReference,
    MeasurementConfig,
    MeasurementError,
    as_pose_landmarks,
    estimate_head_size_pixels,
    estimate_total_height,
    measure_body,
    scale_reference_from_dict,
)

logger = logging.getLogger("measure_landmarks")


def load_pose_file(path: Path):
    """Returns (landmarks, scale dict or None)."""
    if path.suffix == ".npy":
        return as_pose_landmarks(np.load(path)), None

    with path.open(encoding="utf-8") as fh:
        data = json.load(fh)

    if isinstance(data, dict):
        if "landmarks" not in data:
            raise ValueError(f"{path}: JSON object has no 'landmarks' key")
        return as_pose_landmarks(data["landmarks"]), data.get("scale")
    return as_pose_landmarks(data), None


def build_reference(args, landmarks, scale, config):
    if args.height_cm is not None:
        pixels = args.height_pixels
        if pixels is None:
            pixels = estimate_total_height(landmarks, config)
        return HeightReference(height_cm=args.height_cm, total_height_pixels=pixels)

    if args.head_reference:
        pixels = args.head_pixels
        if pixels is None:
            pixels = estimate_head_size_pixels(landmarks, config)
        return HeadReference(head_size_pixels=pixels, head_size_cm=args.head_cm)

    if scale is not None:
        return scale_reference_from_dict(scale)
    return None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Body measurements from pose landmarks")
    parser.add_argument("pose", type=Path, help=".json or .npy landmark file")

    ref = parser.add_mutually_exclusive_group()
    ref.add_argument("--height-cm", type=float, help="known body height in cm")
    ref.add_argument("--head-reference", action="store_true",
                     help="scale from head size (default head 22 cm)")
    parser.add_argument("--height-pixels", type=float,
                        help="measured body height; default: estimated from the pose")
    parser.add_argument("--head-pixels", type=float,
                        help="measured head size; default: estimated from the ears")
    parser.add_argument("--head-cm", type=float, help="known head size in cm")

    parser.add_argument("--precision", type=int, default=1,
                        help="decimals for cm values (default 1)")
    parser.add_argument("--env-file", default=None,
                        help="path to a .env file with BODY_MEASUREMENT_* overrides")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    if args.height_pixels is not None and args.height_cm is None:
        parser.error("--height-pixels requires --height-cm")
    if not args.head_reference:
        orphaned = [opt for opt, value in (("--head-pixels", args.head_pixels),
                                           ("--head-cm", args.head_cm))
                    if value is not None]
        if orphaned:
            parser.error(f"{', '.join(orphaned)} requires --head-reference")
    return parser, args


def main(argv=None) -> int:
    parser, args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = MeasurementConfig.from_env(args.env_file)
        landmarks, scale = load_pose_file(args.pose)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    try:
        reference = build_reference(args, landmarks, scale, config)
        result = measure_body(landmarks, reference, config, precision=args.precision)
    except MeasurementError as exc:
        logger.error("Measurement failed: %s", exc)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
