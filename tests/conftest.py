# -*- coding: utf-8 -*-
"""
Shared pytest configuration.

Widgets are created on Qt's offscreen platform so the suite runs without
a display. The `qapp` and `qtbot` fixtures come from pytest-qt.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def project_context():
    """Fresh project context with an empty draft."""
    from ui.wizards.project_creation.project_context import ProjectContext
    return ProjectContext()


@pytest.fixture
def filled_context(project_context):
    """Project context whose draft passes every step."""
    project_context.update_fields(
        title="Sleep and Memory",
        description="Study of sleep's effect on memory",
        field="psychology",
        initial_question="How does sleep duration affect memory consolidation?",
        objectives=["Determine the effect of REM sleep", "Compare nap lengths"],
        significance="Better study habits for students",
        prior_knowledge="Intro cognitive psychology coursework",
    )
    return project_context
