"""Typed models for activity samples and computed reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ActivityType(Enum):
    """Closed set of activities the calculator knows how to score.

    ``UNKNOWN`` carries no payload: the raw label stays with the caller,
    ``build_report`` returns ``None`` for it and logs the label at DEBUG.
    """

    RUNNING = "running"
    WALKING = "walking"
    SWIMMING = "swimming"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ActivitySample:
    """Raw counters of one training session."""

    action: int
    duration_h: float
    weight_kg: float
    height_cm: float = 0.0
    pool_length_m: int = 0
    pool_count: int = 0


@dataclass(frozen=True)
class ActivityReport:
    """Computed metrics of one training session."""

    activity_type: ActivityType
    # Raw label as given by the caller, used for display.
    label: str
    duration_h: float
    distance_km: float
    speed_kmh: float
    calories_kcal: float
