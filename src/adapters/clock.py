from datetime import UTC, date, datetime


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        """Invoice dates are stamped from the UTC calendar day."""
        return self.now_utc().date()


class FixedClock:
    """Clock pinned to a single day, used by seeding and tests."""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day
