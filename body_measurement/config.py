# body_measurement/config.py
"""
Tunable constants for landmark measurement.

The defaults are the anthropometric heuristics the measurements were
calibrated with. Override them through the environment (or a .env file):

    BODY_MEASUREMENT_RELIABILITY_THRESHOLD=0.5
    BODY_MEASUREMENT_WAIST_POSITION_RATIO=0.6
    BODY_MEASUREMENT_WAIST_WIDTH_RATIO=0.8
    BODY_MEASUREMENT_HEAD_CORRECTION_RATIO=1.1
    BODY_MEASUREMENT_HEAD_LENGTH_RATIO=1.2
    BODY_MEASUREMENT_DEFAULT_HEAD_SIZE_CM=22
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "BODY_MEASUREMENT_"


@dataclass(frozen=True)
class MeasurementConfig:
    reliability_threshold: float = 0.5   # visibility AND presence must exceed this
    waist_position_ratio: float = 0.6    # shoulder-mid -> hip-mid fraction where the waist sits
    waist_width_ratio: float = 0.8       # waist width = hip width x this (no waist landmark)
    head_correction_ratio: float = 1.1   # nose-to-ankle x this = full height
    head_length_ratio: float = 1.2       # ear-to-ear x this = head length
    default_head_size_cm: float = 22.0   # adult head length used when none is given

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "MeasurementConfig":
        """
        Build a config from BODY_MEASUREMENT_* environment variables.

        Parameters
        ----------
        dotenv_path : str | None
            Optional explicit path to a .env file.
            If None, python-dotenv searches upward from the current directory.

        Raises
        ------
        EnvironmentError
            If any variable is not a number or is out of range.
        """
        load_dotenv(dotenv_path=dotenv_path)

        values = {}
        invalid = []
        for f in fields(cls):
            name = ENV_PREFIX + f.name.upper()
            raw = os.environ.get(name)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[f.name] = float(raw)
            except ValueError:
                invalid.append(name)

        if invalid:
            raise EnvironmentError(
                f"Non-numeric value for variable(s): {', '.join(invalid)}"
            )

        config = cls(**values)
        out_of_range = config._out_of_range()
        if out_of_range:
            raise EnvironmentError(
                "Out-of-range value for variable(s): "
                + ", ".join(ENV_PREFIX + name.upper() for name in out_of_range)
            )

        if values:
            logger.info("Measurement config overrides loaded: %s", sorted(values))
        return config

    def _out_of_range(self) -> list[str]:
        bad = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                bad.append(f.name)
            elif f.name == "reliability_threshold":
                if not 0.0 <= value < 1.0:
                    bad.append(f.name)
            elif f.name == "waist_position_ratio":
                if not 0.0 <= value <= 1.0:
                    bad.append(f.name)
            elif value <= 0:
                bad.append(f.name)
        return bad


DEFAULT_CONFIG = MeasurementConfig()
