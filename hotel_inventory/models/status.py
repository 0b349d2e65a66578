"""Configuration progress of a hotel against its maximum room count."""

from enum import Enum


class ConfigurationStatus(str, Enum):
    """How far a hotel's room inventory has been configured.

    - COMPLETE: every room up to the maximum is configured (100%)
    - IN_PROGRESS: at least half configured (50% to under 100%)
    - PENDING: under half configured
    """

    COMPLETE = "COMPLETE"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING = "PENDING"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    ConfigurationStatus.COMPLETE: "Completo",
    ConfigurationStatus.IN_PROGRESS: "En progreso",
    ConfigurationStatus.PENDING: "Pendiente",
}


def configuration_percentage(configured_total: int, max_rooms: int) -> float:
    """Percentage of the maximum room count that is already configured."""
    if max_rooms <= 0:
        return 0.0
    return configured_total / max_rooms * 100


def classify_configuration(configured_total: int, max_rooms: int) -> ConfigurationStatus:
    """Classify configuration progress.

    Args:
        configured_total: Sum of configured room quantities
        max_rooms: Hotel's maximum room count

    Returns:
        ConfigurationStatus for the given totals
    """
    if max_rooms > 0 and configured_total >= max_rooms:
        return ConfigurationStatus.COMPLETE
    if configuration_percentage(configured_total, max_rooms) >= 50:
        return ConfigurationStatus.IN_PROGRESS
    return ConfigurationStatus.PENDING
