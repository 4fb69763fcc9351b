"""Tests for report helpers and rubric statistics."""

from mcp_servers.servers.canvas.formatting import (
    format_date,
    format_number,
    format_timestamp,
    render_list,
    tool_errors,
    without_none,
)
from mcp_servers.servers.canvas.rubric_stats import average, compute_rubric_stats, median


class TestRenderList:
    def test_paragraphs_separator_and_total(self):
        report = render_list("Things:", ["a\nb", "c"], "No things found.")
        assert report == "Things:\n\na\nb\n---\nc\n\nTotal: 2"

    def test_empty_result_message(self):
        assert render_list("Things:", [], "No things found.") == "No things found."

    def test_total_can_be_omitted(self):
        assert "Total" not in render_list("Things:", ["a"], "none", show_total=False)


class TestValueFormatting:
    def test_timestamp_utc(self):
        assert format_timestamp("2024-03-01T14:05:00Z") == "2024-03-01 14:05 UTC"

    def test_timestamp_with_offset_is_converted(self):
        assert format_timestamp("2024-03-01T16:05:00+02:00") == "2024-03-01 14:05 UTC"

    def test_timestamp_missing_and_unparseable(self):
        assert format_timestamp(None, "No due date") == "No due date"
        assert format_timestamp("next week") == "next week"

    def test_date_with_offset_uses_utc_day(self):
        assert format_date("2024-03-02T01:30:00+03:00") == "2024-03-01"
        assert format_date("2024-03-01T23:30:00Z") == "2024-03-01"
        assert format_date(None) == "N/A"

    def test_number(self):
        assert format_number(10.0) == "10"
        assert format_number(7.5) == "7.5"
        assert format_number(None) == "N/A"

    def test_without_none(self):
        assert without_none(a=1, b=None, c=False) == {"a": 1, "c": False}


class TestToolErrors:
    async def test_exception_becomes_error_text(self, capsys):
        @tool_errors("fetch widgets")
        async def failing():
            raise ValueError("widget store offline")

        result = await failing()

        assert result == "Error: Failed to fetch widgets: widget store offline"
        assert "[CANVAS] ERROR: Failed to fetch widgets" in capsys.readouterr().err

    async def test_success_passes_through(self):
        @tool_errors("fetch widgets")
        async def working(n):
            return f"{n} widgets"

        assert await working(3) == "3 widgets"
        assert working.__name__ == "working"


class TestRubricStats:
    criteria = [
        {"id": "c1", "description": "Clarity", "points": 5},
        {"id": "c2", "description": "Evidence", "points": 3},
    ]
    submissions = [
        {"user_id": 1, "rubric_assessment": {"c1": {"points": 5}, "c2": {"points": 3}}},
        {"user_id": 2, "rubric_assessment": {"c1": {"points": 3}, "c2": {"points": 1}}},
        {"user_id": 3, "rubric_assessment": {"c1": {"points": 5}}},
        {"user_id": 4, "rubric_assessment": None},
    ]

    def test_median_and_average(self):
        assert median([3, 1, 2]) == 2
        assert median([4, 1, 2, 3]) == 2.5
        assert median([]) == 0
        assert average([1, 2, 2]) == 1.67

    def test_per_criterion(self):
        stats = compute_rubric_stats(self.criteria, self.submissions)
        clarity, evidence = stats.criteria

        assert clarity.description == "Clarity"
        assert clarity.scores.count == 3
        assert clarity.scores.average == 4.33
        assert clarity.scores.median == 5
        assert clarity.scores.minimum == 3
        assert clarity.distribution == {5: 2, 3: 1}

        assert evidence.scores.count == 2
        assert evidence.scores.average == 2

    def test_overall(self):
        stats = compute_rubric_stats(self.criteria, self.submissions)

        assert stats.total_submissions == 4
        assert stats.overall.count == 3
        assert stats.overall.average == 5.67
        assert stats.overall.median == 5
        assert stats.overall.maximum == 8

    def test_no_assessments(self):
        stats = compute_rubric_stats(self.criteria, [{"user_id": 1}])

        assert stats.overall.count == 0
        assert stats.criteria[0].scores.average == 0
        assert stats.criteria[0].distribution == {}
