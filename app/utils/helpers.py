"""
Helper utilities
"""
from datetime import datetime, timezone


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Safely divide two numbers"""
    try:
        return numerator / denominator if denominator != 0 else default
    except (TypeError, ZeroDivisionError):
        return default


def percentage(part: float, whole: float, digits: int = 1) -> float:
    """Share of ``whole`` as a percentage, 0.0 when ``whole`` is zero"""
    return round(safe_divide(part, whole) * 100, digits)


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound value to [lower, upper]"""
    return max(lower, min(upper, value))


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with a Z suffix"""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
