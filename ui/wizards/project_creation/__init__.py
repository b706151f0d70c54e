# -*- coding: utf-8 -*-
"""
Project Creation Wizard Package.

This package contains:
- ProjectContext: Wizard context holding the project draft
- create_project_navigator: Five-step state machine without any widgets
- ProjectWizard: PyQt5 view over the state machine
- Steps: One widget per wizard step
"""

from .project_context import ProjectContext, PROJECT_STEPS, create_project_navigator
from .project_wizard import ProjectWizard

__all__ = [
    'ProjectContext',
    'PROJECT_STEPS',
    'create_project_navigator',
    'ProjectWizard'
]
