# -*- coding: utf-8 -*-
"""
Tests for the ProjectDraft model.
"""

from datetime import date, timedelta

import pytest

from app.config import Config
from models.project_draft import ProjectDraft, ResearchField, Timeframe
from services.exceptions import ValidationException


class TestResearchField:

    def test_parse_accepts_value_string(self):
        assert ResearchField.parse("psychology") is ResearchField.PSYCHOLOGY

    def test_parse_accepts_member(self):
        assert ResearchField.parse(ResearchField.PHYSICS) is ResearchField.PHYSICS

    def test_parse_empty_is_unset(self):
        assert ResearchField.parse(None) is None
        assert ResearchField.parse("") is None

    def test_parse_rejects_free_text(self):
        with pytest.raises(ValidationException) as exc_info:
            ResearchField.parse("astrology")
        assert exc_info.value.field == "field"

    def test_enumerated_set_has_other(self):
        assert ResearchField.OTHER.value == "other"
        assert len(ResearchField) == 19


class TestTimeframe:

    def test_default_spans_configured_duration(self):
        start = date(2026, 1, 1)
        timeframe = Timeframe.default(start)

        assert timeframe.start_date == start
        assert timeframe.expected_completion == start + timedelta(
            days=Config.DEFAULT_PROJECT_DURATION_DAYS
        )
        assert timeframe.duration_days == Config.DEFAULT_PROJECT_DURATION_DAYS

    def test_default_starts_today(self):
        assert Timeframe.default().start_date == date.today()

    def test_dict_uses_iso_dates(self):
        timeframe = Timeframe(date(2026, 3, 1), date(2026, 9, 1))
        assert timeframe.to_dict() == {
            "start_date": "2026-03-01",
            "expected_completion": "2026-09-01",
        }
        assert Timeframe.from_dict(timeframe.to_dict()) == timeframe


class TestProjectDraft:

    def test_new_draft_is_empty_except_timeframe(self):
        draft = ProjectDraft()

        assert draft.title == ""
        assert draft.description == ""
        assert draft.field is None
        assert draft.initial_question == ""
        assert draft.objectives == []
        assert draft.significance == ""
        assert draft.prior_knowledge == ""
        assert draft.timeframe is not None
        assert draft.timeframe.start_date == date.today()

    def test_objectives_not_shared_between_drafts(self):
        first = ProjectDraft()
        second = ProjectDraft()
        first.objectives.append("Only mine")
        assert second.objectives == []

    def test_to_dict_serializes_field_value(self):
        draft = ProjectDraft(title="Sleep and Memory", field=ResearchField.PSYCHOLOGY)
        data = draft.to_dict()

        assert data["title"] == "Sleep and Memory"
        assert data["field"] == "psychology"
        assert data["timeframe"]["start_date"] == date.today().isoformat()

    def test_from_dict_restores_draft(self):
        data = {
            "title": "Coral bleaching",
            "description": "Reef monitoring",
            "field": "biology",
            "initial_question": "What drives bleaching events in shallow reefs?",
            "objectives": ["Measure temperature", "Count colonies"],
            "timeframe": {"start_date": "2026-01-10", "expected_completion": "2026-07-09"},
            "significance": "Conservation",
            "prior_knowledge": "Field trips",
        }
        draft = ProjectDraft.from_dict(data)

        assert draft.field is ResearchField.BIOLOGY
        assert draft.objectives == ["Measure temperature", "Count colonies"]
        assert draft.timeframe == Timeframe(date(2026, 1, 10), date(2026, 7, 9))
        assert draft.to_dict() == data

    def test_from_dict_without_timeframe(self):
        draft = ProjectDraft.from_dict({"title": "No dates"})
        assert draft.timeframe is None
        assert draft.to_dict()["timeframe"] is None
