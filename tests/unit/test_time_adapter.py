"""Time adapter tests."""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from src.adapters.time_local import FrozenTimeAdapter, LocalTimeAdapter, create_time_adapter


class TestFrozenTimeAdapter:
    def test_today_uses_local_zone(self) -> None:
        # 20:00 UTC is already the next day in Kolkata (+05:30)
        adapter = FrozenTimeAdapter(datetime(2024, 6, 15, 20, 0), tz_name="Asia/Kolkata")
        assert adapter.today() == date(2024, 6, 16)
        assert FrozenTimeAdapter(datetime(2024, 6, 15, 20, 0)).today() == date(2024, 6, 15)

    def test_on_day(self) -> None:
        adapter = FrozenTimeAdapter.on(date(2024, 3, 31), tz_name="Pacific/Auckland")
        assert adapter.today() == date(2024, 3, 31)

    def test_advance(self) -> None:
        adapter = FrozenTimeAdapter.on(date(2024, 6, 15))
        adapter.advance(timedelta(days=1))
        assert adapter.today() == date(2024, 6, 16)


class TestLocalTimeAdapter:
    def test_factory(self) -> None:
        adapter = create_time_adapter("Asia/Kolkata")
        assert isinstance(adapter, LocalTimeAdapter)

    def test_today_in_zone(self) -> None:
        before = datetime.now(ZoneInfo("Asia/Kolkata")).date()
        today = LocalTimeAdapter("Asia/Kolkata").today()
        after = datetime.now(ZoneInfo("Asia/Kolkata")).date()
        assert before <= today <= after
