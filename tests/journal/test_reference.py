"""Tests for teatime.journal.reference."""

import pytest

from teatime.core.exceptions import ParseError, StoreError
from teatime.journal.periods import Category
from teatime.journal.reference import (
    NO_DAILY_ENTRIES,
    NO_SUMMARY,
    gather_reference,
)


class TestWeekly:
    def test_only_days_with_content(self, store):
        store.write_note("journal", Category.DAILY, "2025-01-15", "Wednesday notes")
        store.write_note("journal", Category.DAILY, "2025-01-13", "Monday notes")
        store.write_note("journal", Category.DAILY, "2025-01-14", "")

        ref = gather_reference(store, "journal", Category.WEEKLY, "2025-W03")

        assert ref == (
            "── 2025-01-13 (Monday) ──\nMonday notes\n\n"
            "── 2025-01-15 (Wednesday) ──\nWednesday notes"
        )
        for day in ("Tuesday", "Thursday", "Friday", "Saturday", "Sunday"):
            assert day not in ref

    def test_empty_week(self, store):
        assert gather_reference(store, "journal", Category.WEEKLY, "2025-W03") == NO_DAILY_ENTRIES

    def test_week_spanning_years(self, store):
        store.write_note("journal", Category.DAILY, "2024-12-31", "new year's eve")
        ref = gather_reference(store, "journal", Category.WEEKLY, "2025-W01")
        assert ref.startswith("── 2024-12-31 (Tuesday) ──")


class TestMonthly:
    def test_every_week_listed_with_placeholder(self, store):
        for week in ("2025-W02", "2025-W03", "2025-W04", "2025-W05"):
            store.write_note("journal", Category.WEEKLY, week, f"summary {week}")

        ref = gather_reference(store, "journal", Category.MONTHLY, "2025-01")
        blocks = ref.split("\n\n")

        assert len(blocks) == 5
        assert blocks[0] == f"── 2025-W01 ──\n{NO_SUMMARY}"
        assert blocks[1] == "── 2025-W02 ──\nsummary 2025-W02"
        assert blocks[4] == "── 2025-W05 ──\nsummary 2025-W05"

    def test_all_empty_still_lists_weeks(self, store):
        ref = gather_reference(store, "journal", Category.MONTHLY, "2025-02")
        assert ref.count(NO_SUMMARY) == 5
        assert ref.startswith("── 2025-W05 ──")


class TestQuarterly:
    def test_no_monthly_notes(self, store):
        ref = gather_reference(store, "journal", Category.QUARTERLY, "2025-Q1")
        assert ref == (
            f"── 2025-01 (January) ──\n{NO_SUMMARY}\n\n"
            f"── 2025-02 (February) ──\n{NO_SUMMARY}\n\n"
            f"── 2025-03 (March) ──\n{NO_SUMMARY}"
        )

    def test_mixed(self, store):
        store.write_note("journal", Category.MONTHLY, "2025-11", "busy month")
        ref = gather_reference(store, "journal", Category.QUARTERLY, "2025-Q4")
        assert "── 2025-11 (November) ──\nbusy month" in ref
        assert ref.count(NO_SUMMARY) == 2


class TestYearly:
    def test_four_quarters_always(self, store):
        store.write_note("journal", Category.QUARTERLY, "2025-Q2", "spring")
        ref = gather_reference(store, "journal", Category.YEARLY, "2025")
        blocks = ref.split("\n\n")
        assert [b.splitlines()[0] for b in blocks] == [
            "── 2025-Q1 ──",
            "── 2025-Q2 ──",
            "── 2025-Q3 ──",
            "── 2025-Q4 ──",
        ]
        assert blocks[1].endswith("spring")
        assert ref.count(NO_SUMMARY) == 3


class TestErrors:
    def test_daily_is_empty(self, store):
        assert gather_reference(store, "journal", Category.DAILY, "2025-01-15") == ""

    @pytest.mark.parametrize(
        "category,name",
        [
            (Category.WEEKLY, "2025-01"),
            (Category.MONTHLY, "2025-W03"),
            (Category.QUARTERLY, "2025-Q9"),
            (Category.YEARLY, "last year"),
        ],
    )
    def test_malformed_name(self, store, category, name):
        with pytest.raises(ParseError):
            gather_reference(store, "journal", category, name)

    def test_read_failure_aborts(self):
        class FlakyStore:
            def __init__(self):
                self.reads = 0

            def list_notes(self, project, category):
                return []

            def read_note(self, project, category, name):
                self.reads += 1
                if self.reads == 2:
                    raise StoreError("disk error")
                return "content"

            def note_exists(self, project, category, name):
                return True

        flaky = FlakyStore()
        with pytest.raises(StoreError, match="disk error"):
            gather_reference(flaky, "journal", Category.YEARLY, "2025")
        assert flaky.reads == 2


class TestCalendarLimits:
    def test_monthly_for_last_month_of_calendar(self, store):
        ref = gather_reference(store, "journal", Category.MONTHLY, "9999-12")
        assert ref.count(NO_SUMMARY) == 5
        assert ref.startswith("── 9999-W")

    def test_weekly_past_last_date_is_parse_error(self, store):
        with pytest.raises(ParseError):
            gather_reference(store, "journal", Category.WEEKLY, "9999-W52")
