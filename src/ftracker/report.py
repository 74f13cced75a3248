"""Activity dispatch and summary formatting."""

from __future__ import annotations

import logging

from ftracker.calculator import (
    distance,
    mean_speed,
    running_calories,
    swimming_calories,
    swimming_mean_speed,
    walking_calories,
)
from ftracker.labels import RUSSIAN_LABELS, TrainingLabels
from ftracker.model import ActivityReport, ActivitySample, ActivityType

logger = logging.getLogger(__name__)


def build_report(
    sample: ActivitySample,
    label: str,
    labels: TrainingLabels = RUSSIAN_LABELS,
) -> ActivityReport | None:
    """Compute distance, speed and calories for one session.

    Args:
        sample: Raw session counters.
        label: Activity name as given by the caller.
        labels: Label set used to resolve ``label``.

    Returns:
        The computed report, or ``None`` when ``label`` is not a known
        activity in ``labels``.
    """
    activity_type = labels.activity_type(label)

    if activity_type is ActivityType.RUNNING:
        dist = distance(sample.action)
        speed = mean_speed(sample.action, sample.duration_h)
        calories = running_calories(sample.action, sample.weight_kg, sample.duration_h)
    elif activity_type is ActivityType.WALKING:
        dist = distance(sample.action)
        speed = mean_speed(sample.action, sample.duration_h)
        calories = walking_calories(
            sample.action, sample.duration_h, sample.weight_kg, sample.height_cm
        )
    elif activity_type is ActivityType.SWIMMING:
        # Distance stays stroke based; speed and calories use the pool laps.
        dist = distance(sample.action)
        speed = swimming_mean_speed(
            sample.pool_length_m, sample.pool_count, sample.duration_h
        )
        calories = swimming_calories(
            sample.pool_length_m,
            sample.pool_count,
            sample.duration_h,
            sample.weight_kg,
        )
    else:
        logger.debug("Unknown training type %r", label)
        return None

    return ActivityReport(
        activity_type=activity_type,
        label=label,
        duration_h=sample.duration_h,
        distance_km=dist,
        speed_kmh=speed,
        calories_kcal=calories,
    )


def render_report(
    report: ActivityReport, labels: TrainingLabels = RUSSIAN_LABELS
) -> str:
    """Render a report as a multi-line summary with two decimals per value."""
    return labels.template.format(
        label=report.label,
        duration=report.duration_h,
        distance=report.distance_km,
        speed=report.speed_kmh,
        calories=report.calories_kcal,
    )


def format_report(
    action: int,
    training_type: str,
    duration_h: float,
    weight_kg: float,
    height_cm: float,
    pool_length_m: int,
    pool_count: int,
    *,
    labels: TrainingLabels = RUSSIAN_LABELS,
) -> str:
    """Return the training summary, or the unknown-type marker.

    An unrecognized ``training_type`` is not an error: the label set's
    ``unknown_marker`` is returned instead of a summary.
    """
    sample = ActivitySample(
        action=action,
        duration_h=duration_h,
        weight_kg=weight_kg,
        height_cm=height_cm,
        pool_length_m=pool_length_m,
        pool_count=pool_count,
    )
    report = build_report(sample, training_type, labels)
    if report is None:
        return labels.unknown_marker
    return render_report(report, labels)
