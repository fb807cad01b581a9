"""Load-and-filter step shared by the CLI and the web app."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .filtering import split_outliers
from .loader import read_journey
from .models import Trajectory

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class Journey:
    """A loaded trajectory together with its filtered form."""

    raw: Trajectory
    filtered: Trajectory
    outlier_indices: List[int] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return len(self.outlier_indices)


def clean_trajectory(raw: Trajectory, speed_threshold_mph: float) -> Journey:
    """Run the outlier filter and keep the removed indices for reporting."""

    filtered, outliers = split_outliers(raw, speed_threshold_mph)
    _LOG.debug(
        "Kept %d of %d points (threshold %.1f mph)",
        len(filtered),
        len(raw),
        speed_threshold_mph,
    )
    return Journey(raw=raw, filtered=filtered, outlier_indices=outliers)


def load_journey(path: str | Path, speed_threshold_mph: float) -> Journey:
    """Read the journey file and drop speed outliers."""

    return clean_trajectory(read_journey(path), speed_threshold_mph)


__all__ = ["Journey", "clean_trajectory", "load_journey"]
