from __future__ import annotations

import math
from datetime import date

import pandas as pd
import pytest
from dateutil import tz

from ftracker.consolidate import (
    DAILY_COLUMNS,
    METRIC_COLUMNS,
    SESSION_COLUMNS,
    daily_totals,
    sample_from_row,
    sessions_metrics,
)
from ftracker.labels import ENGLISH_LABELS
from ftracker.model import ActivitySample


def _sessions() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "started_at": [
                "2025-12-15 07:00",
                "2025-12-15 18:30",
                "2025-12-16 09:00",
                "2025-12-16 10:00",
            ],
            "activity": ["Бег", "Плавание", "Ходьба", "Йога"],
            "action": [1000, 1000, 1000, 500],
            "duration_h": [1.0, 1.0, 1.0, 1.0],
            "weight_kg": [70.0, 70.0, 70.0, 70.0],
            "height_cm": [170.0, 0.0, 170.0, 170.0],
            "pool_length_m": [0, 25, 0, 0],
            "pool_count": [0, 40, 0, 0],
        }
    )


def test_sample_from_row_fills_missing_with_zero() -> None:
    row = pd.Series({"action": 1200.0, "duration_h": 0.5, "weight_kg": None})
    assert sample_from_row(row) == ActivitySample(
        action=1200, duration_h=0.5, weight_kg=0.0
    )


def test_sessions_metrics_empty() -> None:
    out = sessions_metrics(pd.DataFrame())
    assert list(out.columns) == SESSION_COLUMNS + METRIC_COLUMNS
    assert out.empty


def test_sessions_metrics_scores_each_row() -> None:
    out = sessions_metrics(_sessions())
    assert list(out["activity_type"]) == ["running", "swimming", "walking", "unknown"]
    assert out.loc[0, "calories_kcal"] == pytest.approx(87.9606)
    assert out.loc[1, "speed_kmh"] == pytest.approx(1.0)
    assert out.loc[1, "calories_kcal"] == pytest.approx(294.0)
    assert out.loc[2, "calories_kcal"] == pytest.approx(149.339454871765)
    assert math.isnan(out.loc[3, "distance_km"])
    assert math.isnan(out.loc[3, "calories_kcal"])


def test_sessions_metrics_uses_label_set() -> None:
    sessions = _sessions().assign(activity=["Running", "Swimming", "Walking", "Бег"])
    out = sessions_metrics(sessions, ENGLISH_LABELS)
    assert list(out["activity_type"]) == ["running", "swimming", "walking", "unknown"]


def test_daily_totals_groups_known_sessions() -> None:
    out = daily_totals(sessions_metrics(_sessions()))
    assert list(out.columns) == DAILY_COLUMNS
    assert list(out["date"]) == [date(2025, 12, 15), date(2025, 12, 16)]
    assert list(out["sessions"]) == [2, 1]
    assert list(out["duration_h"]) == [2.0, 1.0]
    assert list(out["distance_km"]) == [1.3, 0.65]
    assert list(out["calories_kcal"]) == [381.96, 149.34]


def test_daily_totals_converts_aware_timestamps() -> None:
    metrics = sessions_metrics(
        _sessions().iloc[:1].assign(started_at=["2025-12-16 01:00+00:00"])
    )
    out = daily_totals(metrics, local_tz=tz.gettz("America/Argentina/Buenos_Aires"))
    assert list(out["date"]) == [date(2025, 12, 15)]


def test_daily_totals_skips_bad_timestamps_and_empty() -> None:
    assert daily_totals(pd.DataFrame()).empty
    metrics = sessions_metrics(_sessions().assign(started_at="not a date"))
    out = daily_totals(metrics)
    assert list(out.columns) == DAILY_COLUMNS
    assert out.empty


def test_walking_without_height_is_not_scored(
    caplog: pytest.LogCaptureFixture,
) -> None:
    sessions = _sessions().assign(height_cm=[170.0, 0.0, 0.0, 170.0])
    with caplog.at_level("WARNING", logger="ftracker.consolidate"):
        out = sessions_metrics(sessions)
    assert out.loc[2, "activity_type"] == "walking"
    assert math.isnan(out.loc[2, "distance_km"])
    assert math.isnan(out.loc[2, "calories_kcal"])
    assert "no positive height" in caplog.text

    totals = daily_totals(out)
    assert list(totals["date"]) == [date(2025, 12, 15)]
    assert all(math.isfinite(v) for v in totals["calories_kcal"])
