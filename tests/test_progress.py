"""
Tests for planning progress computation.
"""
from types import SimpleNamespace

from app.domain.planning.progress import (
    completion_percentage,
    overall_progress,
    refresh_progress,
)


def _planning(**sections):
    planning = SimpleNamespace(
        budget_items=sections.get("budget", []),
        guests=sections.get("guests", []),
        timeline_items=sections.get("timeline", []),
        checklist_items=sections.get("checklist", []),
        progress_budget=0,
        progress_guests=0,
        progress_timeline=0,
        progress_checklist=0,
    )
    return planning


class TestCompletionPercentage:

    def test_empty_is_zero(self):
        assert completion_percentage([], bool) == 0

    def test_all_done(self):
        assert completion_percentage([1, 1], bool) == 100

    def test_rounds_half_up(self):
        # 1 of 8 = 12.5%
        assert completion_percentage([1, 0, 0, 0, 0, 0, 0, 0], bool) == 13

    def test_two_thirds(self):
        assert completion_percentage([1, 1, 0], bool) == 67


class TestRefreshProgress:

    def test_single_section(self):
        planning = _planning(
            budget=[SimpleNamespace(is_paid=True), SimpleNamespace(is_paid=False)],
            guests=[SimpleNamespace(rsvp_status="confirmed")],
        )
        assert refresh_progress(planning, "budget") == {"budget": 50}
        assert planning.progress_budget == 50
        # untouched sections keep their stored value
        assert planning.progress_guests == 0

    def test_one_of_four_budget_items_paid(self):
        planning = _planning(
            budget=[
                SimpleNamespace(is_paid=True),
                SimpleNamespace(is_paid=False),
                SimpleNamespace(is_paid=False),
                SimpleNamespace(is_paid=False),
            ]
        )
        refresh_progress(planning, "budget")
        assert planning.progress_budget == 25

    def test_guest_counts_only_confirmed(self):
        planning = _planning(
            guests=[
                SimpleNamespace(rsvp_status="confirmed"),
                SimpleNamespace(rsvp_status="declined"),
                SimpleNamespace(rsvp_status="pending"),
                SimpleNamespace(rsvp_status="maybe"),
            ]
        )
        refresh_progress(planning, "guests")
        assert planning.progress_guests == 25

    def test_all_sections(self):
        planning = _planning(
            timeline=[SimpleNamespace(status="completed"), SimpleNamespace(status="in_progress")],
            checklist=[SimpleNamespace(is_completed=True)],
        )
        result = refresh_progress(planning)
        assert result == {"budget": 0, "guests": 0, "timeline": 50, "checklist": 100}


class TestOverallProgress:

    def test_mean_of_sections(self):
        planning = _planning()
        planning.progress_budget = 50
        planning.progress_guests = 25
        planning.progress_timeline = 0
        planning.progress_checklist = 100
        assert overall_progress(planning) == 44  # 43.75 rounds up

    def test_missing_values_count_as_zero(self):
        planning = _planning()
        planning.progress_budget = None
        assert overall_progress(planning) == 0
