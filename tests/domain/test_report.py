"""Tests for DrawerSnapshot and the report text."""

from lemonctl.domain.report import DrawerSnapshot, format_report


class TestDrawerSnapshot:
    def test_profit_is_derived(self) -> None:
        snap = DrawerSnapshot(bills={5: 0, 10: 0, 20: 0}, lemonades_sold=7)
        assert snap.profit == 35

    def test_cash_value(self) -> None:
        snap = DrawerSnapshot(bills={5: 2, 10: 1, 20: 3})
        assert snap.cash_value == 80

    def test_count_missing_denomination(self) -> None:
        assert DrawerSnapshot(bills={5: 1}).count(20) == 0


class TestFormatReport:
    def test_exact_text(self) -> None:
        snap = DrawerSnapshot(bills={5: 1, 10: 1, 20: 0}, lemonades_sold=2)
        assert format_report(snap) == (
            "Total Lemonades sold so far - 2\n"
            "Total Profit Made - 10\n"
            "Total 5 Bills Remaining - 1\n"
            "Total 10 Bills Remaining - 1\n"
            "Total 20 Bills Remaining - 0\n"
        )

    def test_empty_drawer(self) -> None:
        snap = DrawerSnapshot(bills={5: 0, 10: 0, 20: 0}, lemonades_sold=0)
        text = format_report(snap)
        assert text.startswith("Total Lemonades sold so far - 0\nTotal Profit Made - 0\n")
        assert text.endswith("Total 20 Bills Remaining - 0\n")
        assert text.count("\n") == 5
