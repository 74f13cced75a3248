"""Reading of training sessions from CSV exports."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from ftracker.consolidate import SESSION_COLUMNS
from ftracker.sources.base import SessionSource, SourcePaths

logger = logging.getLogger(__name__)

# Header patterns per canonical column, Russian first then English.
_COLUMN_PATTERNS: dict[str, list[str]] = {
    "started_at": [r"\bначал", r"\bдата", r"\bstart", r"\bdate"],
    "activity": [r"\bтип", r"\bвид", r"\bactivity", r"\btype"],
    "action": [r"\bшаг", r"\bгреб", r"\bдейств", r"\baction", r"\bstep", r"\bstroke"],
    "duration_h": [r"\bдлительн", r"\bduration"],
    "weight_kg": [r"\bвес", r"\bweight"],
    "height_cm": [r"\bрост", r"\bheight"],
    "pool_length_m": [r"\bдлина бассейна", r"\bбассейн\b.*\bм\b", r"\bpool.?length"],
    "pool_count": [
        r"\bкол.*бассейн",
        r"\bбассейн(ов|ы)\b",
        r"\bpool.?count",
        r"\blaps?\b",
    ],
}

_NUMERIC_COLUMNS: tuple[str, ...] = (
    "action",
    "duration_h",
    "weight_kg",
    "height_cm",
    "pool_length_m",
    "pool_count",
)


@dataclass(frozen=True)
class SessionsPaths(SourcePaths):
    """Paths for session CSV exports."""

    # root: folder containing *.csv, one row per session


class SessionsCsvSource(SessionSource):
    """CSV session reader."""

    def session_files(self) -> list[Path]:
        """Return the session CSV files sorted by name."""
        files = sorted(self._paths.root.glob("*.csv"))
        if not files:
            raise FileNotFoundError(f"No *.csv in {self._paths.root}")
        return files

    def load_sessions(self, csv_paths: list[Path]) -> pd.DataFrame:
        """Load and normalize sessions from CSV files.

        Returns DataFrame columns:
            started_at, activity, action, duration_h, weight_kg, height_cm,
            pool_length_m, pool_count
        """
        frames: list[pd.DataFrame] = []
        for csv_path in csv_paths:
            df = _normalize_sessions(pd.read_csv(csv_path))
            if df is None:
                logger.warning("Skipping %s: no activity/action columns", csv_path)
                continue
            frames.append(df)

        if not frames:
            return pd.DataFrame(columns=SESSION_COLUMNS)
        return pd.concat(frames, ignore_index=True)


def _find_col(columns: list[str], patterns: list[str]) -> str | None:
    for pat in patterns:
        rx = re.compile(pat, re.IGNORECASE)
        for c in columns:
            if rx.search(c):
                return c
    return None


def _normalize_sessions(df: pd.DataFrame) -> pd.DataFrame | None:
    """Rename matched headers to canonical names and coerce numbers.

    Returns ``None`` when the frame has no activity or action column.
    """
    df = df.rename(columns={c: c.strip() for c in df.columns})
    remaining = list(df.columns)

    matched: dict[str, str] = {}
    # Pool length before pool count: both match a "pool"/"бассейн" header.
    order = ["pool_length_m"] + [c for c in SESSION_COLUMNS if c != "pool_length_m"]
    for canonical in order:
        col = _find_col(remaining, _COLUMN_PATTERNS[canonical])
        if col is not None:
            matched[canonical] = col
            remaining.remove(col)

    if "activity" not in matched or "action" not in matched:
        return None

    out = pd.DataFrame(index=df.index)
    for canonical in SESSION_COLUMNS:
        source_col = matched.get(canonical)
        if canonical in _NUMERIC_COLUMNS:
            values = (
                pd.to_numeric(df[source_col], errors="coerce")
                if source_col
                else pd.Series(0.0, index=df.index)
            )
            out[canonical] = values.fillna(0.0)
        elif source_col:
            out[canonical] = df[source_col].astype("string").str.strip()
        else:
            out[canonical] = pd.NA
    return out.reset_index(drop=True)
