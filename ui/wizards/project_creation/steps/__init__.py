# -*- coding: utf-8 -*-
"""
Project Creation Steps Package.

- Step 1: Project Basics
- Step 2: Research Question
- Step 3: Research Objectives
- Step 4: Timeline & Significance
- Step 5: Prior Knowledge
"""

from .basics_step import BasicsStep
from .question_step import QuestionStep
from .objectives_step import ObjectivesStep
from .timeline_step import TimelineStep
from .prior_knowledge_step import PriorKnowledgeStep

__all__ = [
    'BasicsStep',
    'QuestionStep',
    'ObjectivesStep',
    'TimelineStep',
    'PriorKnowledgeStep'
]
