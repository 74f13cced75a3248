"""Distance, speed and calorie formulas for running, walking and swimming.

Every function here is pure: the result depends only on the arguments, so the
helpers can be called from anywhere without coordination.
"""

from __future__ import annotations

import numpy as np

STEP_LENGTH_M = 0.65
METERS_PER_KM = 1000
MINUTES_PER_HOUR = 60
KMH_TO_MS = 0.278
CM_PER_M = 100

RUNNING_SPEED_MULTIPLIER = 18
RUNNING_SPEED_SHIFT = 1.79

WALKING_WEIGHT_MULTIPLIER = 0.035
WALKING_SPEED_HEIGHT_MULTIPLIER = 0.029

SWIMMING_SPEED_SHIFT = 1.1
SWIMMING_WEIGHT_MULTIPLIER = 2


def distance(action: int) -> float:
    """Return the covered distance in kilometers for a step/stroke count."""
    return action * STEP_LENGTH_M / METERS_PER_KM


def mean_speed(action: int, duration_h: float) -> float:
    """Return the mean speed in km/h.

    A zero duration yields a speed of ``0`` instead of dividing by zero.
    """
    if duration_h == 0:
        return 0.0
    return distance(action) / duration_h


def running_calories(action: int, weight_kg: float, duration_h: float) -> float:
    """Return calories (kcal) spent while running.

    The division by :data:`METERS_PER_KM` is part of the coefficient
    calibration and not a unit conversion.
    """
    speed = mean_speed(action, duration_h)
    return (
        (RUNNING_SPEED_MULTIPLIER * speed * RUNNING_SPEED_SHIFT)
        * weight_kg
        / METERS_PER_KM
        * duration_h
        * MINUTES_PER_HOUR
    )


def walking_calories(
    action: int, duration_h: float, weight_kg: float, height_cm: float
) -> float:
    """Return calories (kcal) spent while walking.

    Args:
        action: Number of steps.
        duration_h: Session duration in hours.
        weight_kg: Body weight in kilograms.
        height_cm: Body height in centimeters. Must be positive; ``0`` is not
            rejected and produces ``inf`` (or ``nan`` when the speed is also
            zero) following IEEE float division.

    Returns:
        Spent calories.
    """
    speed_ms = mean_speed(action, duration_h) * KMH_TO_MS
    with np.errstate(divide="ignore", invalid="ignore"):
        height_term = np.divide(
            np.float64(speed_ms) ** 2, np.float64(height_cm) / CM_PER_M
        )
        calories = (
            WALKING_WEIGHT_MULTIPLIER * weight_kg
            + height_term * WALKING_SPEED_HEIGHT_MULTIPLIER * weight_kg
        ) * duration_h * MINUTES_PER_HOUR
    return float(calories)


def swimming_mean_speed(
    pool_length_m: int, pool_count: int, duration_h: float
) -> float:
    """Return the mean swimming speed in km/h from pool length and lap count."""
    if duration_h == 0:
        return 0.0
    distance_km = (pool_length_m * pool_count) / METERS_PER_KM
    return distance_km / duration_h


def swimming_calories(
    pool_length_m: int, pool_count: int, duration_h: float, weight_kg: float
) -> float:
    """Return calories (kcal) spent while swimming."""
    speed = swimming_mean_speed(pool_length_m, pool_count, duration_h)
    return (
        (speed + SWIMMING_SPEED_SHIFT)
        * SWIMMING_WEIGHT_MULTIPLIER
        * weight_kg
        * duration_h
    )
