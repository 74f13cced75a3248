"""Batch scoring of training sessions and daily aggregation."""

from __future__ import annotations

import logging
from datetime import date, tzinfo

import pandas as pd
from dateutil import tz

from ftracker.labels import RUSSIAN_LABELS, TrainingLabels
from ftracker.model import ActivitySample, ActivityType
from ftracker.report import build_report

logger = logging.getLogger(__name__)

_LOCAL_TZ = tz.tzlocal()

SESSION_COLUMNS: list[str] = [
    "started_at",
    "activity",
    "action",
    "duration_h",
    "weight_kg",
    "height_cm",
    "pool_length_m",
    "pool_count",
]

METRIC_COLUMNS: list[str] = [
    "activity_type",
    "distance_km",
    "speed_kmh",
    "calories_kcal",
]

DAILY_COLUMNS: list[str] = [
    "date",
    "sessions",
    "duration_h",
    "distance_km",
    "calories_kcal",
]


def _number(row: pd.Series, column: str) -> float:
    value = row.get(column)
    if value is None or pd.isna(value):
        return 0.0
    return float(value)


def sample_from_row(row: pd.Series) -> ActivitySample:
    """Build a typed sample from one session row (missing values become 0)."""
    return ActivitySample(
        action=int(_number(row, "action")),
        duration_h=_number(row, "duration_h"),
        weight_kg=_number(row, "weight_kg"),
        height_cm=_number(row, "height_cm"),
        pool_length_m=int(_number(row, "pool_length_m")),
        pool_count=int(_number(row, "pool_count")),
    )


def sessions_metrics(
    sessions: pd.DataFrame, labels: TrainingLabels = RUSSIAN_LABELS
) -> pd.DataFrame:
    """Score every session of a table.

    Args:
        sessions: One row per session with :data:`SESSION_COLUMNS`.
        labels: Label set used to resolve the ``activity`` column.

    Returns:
        The session columns plus ``activity_type``, ``distance_km``,
        ``speed_kmh`` and ``calories_kcal``. Sessions with an unknown
        activity keep their row with ``activity_type == "unknown"`` and NaN
        metrics. Walking sessions without a positive ``height_cm`` keep their
        type but get NaN metrics.
    """
    expected_cols = SESSION_COLUMNS + METRIC_COLUMNS
    if sessions.empty:
        return pd.DataFrame(columns=expected_cols)

    rows: list[dict[str, object]] = []
    for _, row in sessions.iterrows():
        label = "" if pd.isna(row.get("activity")) else str(row.get("activity"))
        sample = sample_from_row(row)
        activity_type = labels.activity_type(label)
        out_row = {col: row.get(col) for col in SESSION_COLUMNS}
        if activity_type is ActivityType.WALKING and sample.height_cm <= 0:
            logger.warning(
                "Walking session %s has no positive height, not scored",
                row.get("started_at"),
            )
            report = None
        else:
            report = build_report(sample, label, labels)
        if report is None:
            out_row.update(
                {
                    "activity_type": activity_type.value,
                    "distance_km": float("nan"),
                    "speed_kmh": float("nan"),
                    "calories_kcal": float("nan"),
                }
            )
        else:
            out_row.update(
                {
                    "activity_type": report.activity_type.value,
                    "distance_km": report.distance_km,
                    "speed_kmh": report.speed_kmh,
                    "calories_kcal": report.calories_kcal,
                }
            )
        rows.append(out_row)

    return pd.DataFrame(rows, columns=expected_cols)


def _local_day(value: object, zone: tzinfo) -> date | None:
    """Calendar day of a timestamp; aware stamps are converted to ``zone``."""
    stamp = pd.to_datetime(value, errors="coerce")
    if pd.isna(stamp):
        return None
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert(zone)
    return stamp.date()


def daily_totals(
    metrics: pd.DataFrame, local_tz: tzinfo | None = None
) -> pd.DataFrame:
    """Aggregate scored sessions by day (count/duration/distance/calories).

    Unscored sessions (unknown activity or NaN calories) and sessions with an
    unparseable ``started_at`` are left out.
    """
    if metrics.empty:
        return pd.DataFrame(columns=DAILY_COLUMNS)

    zone = local_tz or _LOCAL_TZ
    known = metrics[
        (metrics["activity_type"] != ActivityType.UNKNOWN.value)
        & metrics["calories_kcal"].notna()
    ].copy()
    known["date"] = [_local_day(v, zone) for v in known["started_at"]]
    known = known[known["date"].notna()]
    if known.empty:
        return pd.DataFrame(columns=DAILY_COLUMNS)

    g = known.groupby("date", as_index=False).agg(
        sessions=("activity_type", "count"),
        duration_h=("duration_h", "sum"),
        distance_km=("distance_km", "sum"),
        calories_kcal=("calories_kcal", "sum"),
    )
    for col in ("duration_h", "distance_km", "calories_kcal"):
        g[col] = g[col].astype(float).round(2)
    return g[DAILY_COLUMNS].sort_values("date").reset_index(drop=True)
