"""Label sets mapping user-facing activity names to activity types.

Labels arrive from the outside (CLI flags, CSV cells) in a given language, so
the formulas never look at them directly: a :class:`TrainingLabels` instance
resolves the raw string to an :class:`~ftracker.model.ActivityType` and holds
the captions used to render the summary.
"""

from __future__ import annotations

from dataclasses import dataclass

from ftracker.model import ActivityType

_RU_TEMPLATE = (
    "Тип тренировки: {label}\n"
    "Длительность: {duration:.2f} ч.\n"
    "Дистанция: {distance:.2f} км.\n"
    "Скорость: {speed:.2f} км/ч\n"
    "Сожгли калорий: {calories:.2f}\n"
)

_EN_TEMPLATE = (
    "Training type: {label}\n"
    "Duration: {duration:.2f} h.\n"
    "Distance: {distance:.2f} km.\n"
    "Speed: {speed:.2f} km/h\n"
    "Calories burned: {calories:.2f}\n"
)


@dataclass(frozen=True)
class TrainingLabels:
    """Activity names, unknown-type marker and report template of a locale."""

    running: str
    walking: str
    swimming: str
    unknown_marker: str
    template: str

    def activity_type(self, label: str) -> ActivityType:
        """Resolve a raw label (exact match) to an activity type."""
        mapping = {
            self.running: ActivityType.RUNNING,
            self.walking: ActivityType.WALKING,
            self.swimming: ActivityType.SWIMMING,
        }
        return mapping.get(label, ActivityType.UNKNOWN)


RUSSIAN_LABELS = TrainingLabels(
    running="Бег",
    walking="Ходьба",
    swimming="Плавание",
    unknown_marker="неизвестный тип тренировки",
    template=_RU_TEMPLATE,
)

ENGLISH_LABELS = TrainingLabels(
    running="Running",
    walking="Walking",
    swimming="Swimming",
    unknown_marker="unknown training type",
    template=_EN_TEMPLATE,
)

_LABELS_BY_LOCALE: dict[str, TrainingLabels] = {
    "ru": RUSSIAN_LABELS,
    "en": ENGLISH_LABELS,
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(_LABELS_BY_LOCALE)


def get_labels(locale: str) -> TrainingLabels:
    """Return the label set for ``locale``.

    Raises:
        ValueError: If the locale is not supported.
    """
    try:
        return _LABELS_BY_LOCALE[locale.lower()]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale!r}") from None
