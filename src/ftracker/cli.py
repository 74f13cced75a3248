"""CLI printing training summaries for one session or a directory of CSVs."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from ftracker.consolidate import daily_totals, sessions_metrics
from ftracker.labels import SUPPORTED_LOCALES, get_labels
from ftracker.logging_config import setup_logging
from ftracker.model import ActivityReport, ActivityType
from ftracker.report import format_report, render_report
from ftracker.sources.sessions_csv import SessionsCsvSource, SessionsPaths

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Distance, speed and calories summary for training sessions."
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--type",
        dest="training_type",
        help="Training type label of a single session (e.g. Бег, Ходьба, Плавание).",
    )
    mode.add_argument(
        "--sessions-dir",
        help="Directory with session CSV files to summarize.",
    )
    parser.add_argument("--action", type=int, default=0, help="Steps or strokes.")
    parser.add_argument(
        "--duration", type=float, default=0.0, help="Duration in hours."
    )
    parser.add_argument("--weight", type=float, default=0.0, help="Weight in kg.")
    parser.add_argument(
        "--height", type=float, default=0.0, help="Height in cm (walking)."
    )
    parser.add_argument(
        "--pool-length", type=int, default=0, help="Pool length in m (swimming)."
    )
    parser.add_argument(
        "--pool-count", type=int, default=0, help="Pool laps swum (swimming)."
    )
    parser.add_argument(
        "--locale",
        choices=SUPPORTED_LOCALES,
        default="ru",
        help="Label language for training types and the summary (default: ru).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO).",
    )
    ns = parser.parse_args(argv)
    if (
        ns.training_type is not None
        and get_labels(ns.locale).activity_type(ns.training_type)
        is ActivityType.WALKING
        and ns.height <= 0
    ):
        parser.error("walking sessions require a positive --height")
    return ns


def main(argv: list[str] | None = None) -> int:
    """Run the summary CLI.

    Returns:
        Exit code (0 on success).
    """
    ns = parse_args(argv)
    setup_logging(ns.log_level)
    labels = get_labels(ns.locale)

    if ns.training_type is not None:
        summary = format_report(
            ns.action,
            ns.training_type,
            ns.duration,
            ns.weight,
            ns.height,
            ns.pool_length,
            ns.pool_count,
            labels=labels,
        )
        if summary == labels.unknown_marker:
            print(summary)
        else:
            # The template already ends with a newline.
            print(summary, end="")
        return 0

    source = SessionsCsvSource(SessionsPaths(root=Path(ns.sessions_dir).expanduser()))
    source.validate()
    csv_files = source.session_files()
    sessions = source.load_sessions(csv_files)
    metrics = sessions_metrics(sessions, labels)
    logger.info("Loaded %d sessions from %d files", len(metrics), len(csv_files))

    for _, row in metrics.iterrows():
        if row["activity_type"] == ActivityType.UNKNOWN.value:
            print(labels.unknown_marker)
            continue
        if pd.isna(row["calories_kcal"]):
            continue
        report = ActivityReport(
            activity_type=ActivityType(row["activity_type"]),
            label=str(row["activity"]),
            duration_h=float(row["duration_h"]),
            distance_km=float(row["distance_km"]),
            speed_kmh=float(row["speed_kmh"]),
            calories_kcal=float(row["calories_kcal"]),
        )
        print(render_report(report, labels))

    totals = daily_totals(metrics)
    if not totals.empty:
        print(totals.to_string(index=False))
    return 0
