from enum import Enum


class Granularity(str, Enum):
    """Time-series bucket size."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class Confidence(str, Enum):
    """Forecast confidence band, decaying with distance from the as-of date."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"
