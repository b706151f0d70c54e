# -*- coding: utf-8 -*-
"""
Project draft model.

The in-progress, not yet submitted state of the project creation wizard.
"""

from dataclasses import dataclass, field as dataclass_field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from app.config import Config
from services.exceptions import ValidationException
from utils.datetime_utils import add_days, parse_date, to_isoformat, today


class ResearchField(str, Enum):
    """Fixed set of research domains a project can belong to."""

    COMPUTER_SCIENCE = "computer-science"
    EDUCATIONAL_TECHNOLOGY = "educational-technology"
    ENGINEERING = "engineering"
    MATHEMATICS = "mathematics"
    PHYSICS = "physics"
    CHEMISTRY = "chemistry"
    BIOLOGY = "biology"
    MEDICINE = "medicine"
    PSYCHOLOGY = "psychology"
    ECONOMICS = "economics"
    SOCIOLOGY = "sociology"
    EDUCATION = "education"
    LINGUISTICS = "linguistics"
    HISTORY = "history"
    PHILOSOPHY = "philosophy"
    ENVIRONMENTAL_SCIENCE = "environmental-science"
    POLITICAL_SCIENCE = "political-science"
    ANTHROPOLOGY = "anthropology"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Union["ResearchField", str, None]) -> Optional["ResearchField"]:
        """
        Convert a stored or user-selected value to a ResearchField.

        None and "" stay unset. Anything outside the enumerated set raises
        ValidationException; free text is never accepted.
        """
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown research field: {value!r}",
                field="field",
                context="project_draft",
            ) from None


@dataclass
class Timeframe:
    """Planned start and expected completion of a project."""

    start_date: date
    expected_completion: date

    @classmethod
    def default(cls, start: Optional[date] = None) -> "Timeframe":
        """Start today (or on `start`), finish DEFAULT_PROJECT_DURATION_DAYS later."""
        start = start or today()
        return cls(
            start_date=start,
            expected_completion=add_days(start, Config.DEFAULT_PROJECT_DURATION_DAYS),
        )

    @property
    def duration_days(self) -> int:
        return (self.expected_completion - self.start_date).days

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_date": to_isoformat(self.start_date),
            "expected_completion": to_isoformat(self.expected_completion),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Timeframe":
        return cls(
            start_date=parse_date(data["start_date"]),
            expected_completion=parse_date(data["expected_completion"]),
        )


@dataclass
class ProjectDraft:
    """
    Project creation form state.

    Mutated in place by the wizard steps and handed by value to the
    completion callback. `objectives` keeps insertion order and may hold
    blank entries while the user is still editing.
    """

    title: str = ""
    description: str = ""
    field: Optional[ResearchField] = None
    initial_question: str = ""
    objectives: List[str] = dataclass_field(default_factory=list)
    timeframe: Optional[Timeframe] = dataclass_field(default_factory=Timeframe.default)
    significance: str = ""
    prior_knowledge: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "field": self.field.value if self.field else None,
            "initial_question": self.initial_question,
            "objectives": list(self.objectives),
            "timeframe": self.timeframe.to_dict() if self.timeframe else None,
            "significance": self.significance,
            "prior_knowledge": self.prior_knowledge,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectDraft":
        """Create from dictionary."""
        timeframe_data = data.get("timeframe")
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            field=ResearchField.parse(data.get("field")),
            initial_question=data.get("initial_question", ""),
            objectives=list(data.get("objectives", [])),
            timeframe=Timeframe.from_dict(timeframe_data) if timeframe_data else None,
            significance=data.get("significance", ""),
            prior_knowledge=data.get("prior_knowledge", ""),
        )


# Names accepted by a shallow merge into the draft
DRAFT_FIELDS = (
    "title",
    "description",
    "field",
    "initial_question",
    "objectives",
    "timeframe",
    "significance",
    "prior_knowledge",
)
