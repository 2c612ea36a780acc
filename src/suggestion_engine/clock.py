"""Time helpers. All engine arithmetic is done on timezone-aware UTC datetimes."""

from __future__ import annotations

from datetime import datetime, timezone

_SECONDS_PER_DAY = 86400.0


def as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as an aware UTC datetime; naive values are taken as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def resolve_now(now: datetime | None) -> datetime:
    """The caller's reference instant, or the current UTC time."""
    if now is None:
        return datetime.now(timezone.utc)
    return as_utc(now)


def days_between(earlier: datetime, later: datetime) -> float:
    """Fractional days from ``earlier`` to ``later`` (negative if reversed)."""
    return (as_utc(later) - as_utc(earlier)).total_seconds() / _SECONDS_PER_DAY
