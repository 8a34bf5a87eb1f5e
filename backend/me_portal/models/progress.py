"""Shared pieces of the target/actual tracked entities"""
import enum


class ProgressStatus(str, enum.Enum):
    """Reported delivery status of an objective or project"""
    ON_TRACK = "ON_TRACK"
    AT_RISK = "AT_RISK"
    DELAYED = "DELAYED"
    COMPLETED = "COMPLETED"


def progress_percentage(actual_value, target_value) -> float:
    """actual/target as a percentage; never stored, always derived on read"""
    if not target_value:
        return 0.0
    return (actual_value or 0) / target_value * 100


class TracksProgress:
    """Mixin for models that carry target_value/actual_value columns"""

    @property
    def progress_percentage(self) -> float:
        return progress_percentage(self.actual_value, self.target_value)
