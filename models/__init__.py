# -*- coding: utf-8 -*-
"""
Research Project Wizard Data Models
"""

from .project_draft import ProjectDraft, ResearchField, Timeframe, DRAFT_FIELDS

__all__ = [
    "ProjectDraft",
    "ResearchField",
    "Timeframe",
    "DRAFT_FIELDS",
]
