# -*- coding: utf-8 -*-
"""
Centralized display mappings for research fields (DRY).

Labels and descriptions are translation keys so every view shows the
same wording.
"""

from typing import List, Optional, Tuple, Union

from models.project_draft import ResearchField
from services.translation_manager import tr


# Fields offered first in the wizard, in display order
FEATURED_RESEARCH_FIELDS = (
    ResearchField.COMPUTER_SCIENCE,
    ResearchField.ENGINEERING,
    ResearchField.MATHEMATICS,
    ResearchField.PHYSICS,
    ResearchField.CHEMISTRY,
    ResearchField.BIOLOGY,
    ResearchField.PSYCHOLOGY,
    ResearchField.ECONOMICS,
    ResearchField.SOCIOLOGY,
)


# ============ Research Field ============

def get_research_field_display(field: Union[ResearchField, str, None]) -> str:
    if not field:
        return tr("mapping.not_specified")
    value = field.value if isinstance(field, ResearchField) else str(field)
    return tr(f"mapping.research_field.{value}")


def get_research_field_description(field: Union[ResearchField, str, None]) -> Optional[str]:
    """Short description of the field, or None when there is none."""
    if not field:
        return None
    value = field.value if isinstance(field, ResearchField) else str(field)
    key = f"mapping.research_field_desc.{value}"
    text = tr(key)
    return None if text == key else text


def get_research_field_options() -> List[Tuple[ResearchField, str]]:
    """
    (field, label) pairs for a selector.

    Featured fields come first, the rest alphabetically by label,
    and OTHER is always last.
    """
    featured = [(f, get_research_field_display(f)) for f in FEATURED_RESEARCH_FIELDS]
    remaining = [
        (f, get_research_field_display(f))
        for f in ResearchField
        if f not in FEATURED_RESEARCH_FIELDS and f is not ResearchField.OTHER
    ]
    remaining.sort(key=lambda option: option[1])
    return featured + remaining + [(ResearchField.OTHER, get_research_field_display(ResearchField.OTHER))]
