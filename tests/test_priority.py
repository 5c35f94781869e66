"""Tests for urgency triage."""

from datetime import date, timedelta

import pytest

from eventready.core.events import CoreTaskTemplate, Event, TaskCompletion
from eventready.core.priority import PriorityTier, classify_priority, event_priority, priority_summary


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestClassifyPriority:
    @pytest.mark.parametrize(
        "days, tier",
        [
            (0, PriorityTier.CRITICAL),
            (2, PriorityTier.CRITICAL),
            (3, PriorityTier.HIGH),
            (7, PriorityTier.HIGH),
            (8, PriorityTier.MEDIUM),
            (14, PriorityTier.MEDIUM),
            (15, PriorityTier.LOW),
            (30, PriorityTier.LOW),
            (31, PriorityTier.NONE),
            (-1, PriorityTier.NONE),
            (None, PriorityTier.NONE),
        ],
    )
    def test_tiers(self, days, tier):
        assert classify_priority(days) is tier


class TestEventPriority:
    def test_from_start_date(self, today):
        assert event_priority(Event(id="e", start_date=today + timedelta(days=5)), today) is PriorityTier.HIGH

    def test_undated(self, today):
        assert event_priority(Event(id="e"), today) is PriorityTier.NONE


class TestPrioritySummary:
    def test_groups_open_events_by_tier(self, today):
        templates = [CoreTaskTemplate(id="A", name="Confirm venue")]
        events = [
            Event(id="soon", start_date=today + timedelta(days=1)),
            Event(id="soon-done", start_date=today, task_completions=(TaskCompletion("A", True),)),
            Event(id="week", start_date=today + timedelta(days=6)),
            Event(id="far", start_date=today + timedelta(days=60)),
            Event(id="past", start_date=today - timedelta(days=1)),
            Event(id="also-soon", start_date=today + timedelta(days=2)),
        ]

        summary = priority_summary(events, templates, today)

        assert list(summary) == [PriorityTier.CRITICAL, PriorityTier.HIGH, PriorityTier.MEDIUM, PriorityTier.LOW]
        assert [e.id for e in summary[PriorityTier.CRITICAL]] == ["soon", "also-soon"]
        assert [e.id for e in summary[PriorityTier.HIGH]] == ["week"]
        assert summary[PriorityTier.MEDIUM] == []
        assert summary[PriorityTier.LOW] == []

    def test_no_templates_nothing_urgent(self, today):
        events = [Event(id="soon", start_date=today)]
        assert not any(priority_summary(events, [], today).values())
