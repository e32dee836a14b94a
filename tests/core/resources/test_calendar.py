"""Calendar tests"""

from trailsim.core.resources.calendar import MONTH_DAYS, advance, format_date, month_name


class TestAdvance:
    def test_starts_august_first(self, state):
        assert (state.month, state.day) == (5, 1)
        assert format_date(state) == "August 1"

    def test_single_day(self, state):
        advance(state, 1)
        assert (state.month, state.day) == (5, 2)
        assert state.days_elapsed == 2

    def test_month_rollover(self, state):
        advance(state, 31)  # August has 31 days
        assert (state.month, state.day) == (6, 1)
        assert format_date(state) == "September 1"

    def test_wraps_after_last_month(self, state):
        advance(state, 31 + 30)
        assert (state.month, state.day) == (0, 1)
        assert month_name(state.month) == "March"

    def test_multi_month_jump(self, state):
        state.month, state.day = 0, 1
        advance(state, sum(MONTH_DAYS[:3]))
        assert (state.month, state.day) == (3, 1)

    def test_zero_days(self, state):
        advance(state, 0)
        assert (state.month, state.day) == (5, 1)
