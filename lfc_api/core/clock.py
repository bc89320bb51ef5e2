"""Time helpers.

Timestamps are stored as naive UTC datetimes, so anything compared with
them has to be normalised the same way first.
"""

from datetime import UTC, date, datetime


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def age_in_years(born: date, today: date | None = None) -> int:
    """Age as a plain difference of calendar years."""
    today = today or date.today()
    return today.year - born.year
