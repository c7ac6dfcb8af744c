"""Tests for the reading guide."""

from berlinclock.services.info import describe_clock


class TestDescribeClock:
    def test_rows(self) -> None:
        result = describe_clock()
        assert result.ok
        assert result.op == "info"
        rows = result.data["rows"]
        assert [r["row"] for r in rows] == [
            "seconds",
            "five_hours",
            "single_hours",
            "five_minutes",
            "single_minutes",
        ]
        assert [r["lamps"] for r in rows] == [1, 4, 4, 11, 4]

    def test_quarter_markers(self) -> None:
        assert describe_clock().data["quarter_markers"] == [2, 5, 8]

    def test_example(self) -> None:
        example = describe_clock().data["example"]
        assert example["time"] == "13:32:01"
        assert example["clock"]["fiveMinutesRow"] == "YYRYYROOOOO"
