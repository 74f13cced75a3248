"""Base classes for training session sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import pandas as pd


@dataclass(frozen=True)
class SourcePaths:
    """Root directory of a session export."""

    root: Path


class SessionSource(ABC):
    """Source producing a session table with ``SESSION_COLUMNS``."""

    def __init__(self, paths: SourcePaths) -> None:
        self._paths = paths

    def validate(self) -> None:
        """Check that the export directory exists.

        Raises:
            FileNotFoundError: If the root directory is missing.
        """
        if not self._paths.root.exists():
            raise FileNotFoundError(str(self._paths.root))

    @abstractmethod
    def session_files(self) -> list[Path]:
        """Return the files holding sessions, in load order."""

    @abstractmethod
    def load_sessions(self, paths: list[Path]) -> pd.DataFrame:
        """Load and normalize sessions from ``paths``."""
