# body_measurement/errors.py

from __future__ import annotations

from typing import Iterable


class MeasurementError(Exception):
    """Base class for every error raised while measuring a pose."""


class UnreliableLandmarksError(MeasurementError):
    """
    One or more landmarks needed for a measurement are missing or fall
    below the visibility/presence threshold.

    Attributes
    ----------
    unreliable_indices : tuple[int, ...]
        Landmark indices that failed the check, ascending.
    """

    def __init__(self, unreliable_indices: Iterable[int], message: str | None = None):
        self.unreliable_indices = tuple(sorted(int(i) for i in unreliable_indices))
        if message is None:
            joined = ", ".join(str(i) for i in self.unreliable_indices)
            message = f"Landmarks below reliability threshold. Unreliable indices: {joined}"
        super().__init__(message)


class InvalidScaleReferenceError(MeasurementError, ValueError):
    """A scale reference cannot produce a finite, positive pixel-to-cm ratio."""
