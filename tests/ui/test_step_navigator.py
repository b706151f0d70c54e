# -*- coding: utf-8 -*-
"""
Tests for the project creation state machine (StepNavigator + ProjectContext).

Tests cover:
- Forward gating
- Completion on the last step
- Back / cancel behaviour
- Terminal states
- Progress tracking
"""

import pytest

from ui.wizards.framework import StepNavigator, WizardContext
from ui.wizards.project_creation.project_context import (
    PROJECT_STEPS,
    ProjectContext,
    create_project_navigator,
)


class Recorder:
    """Collects callback invocations."""

    def __init__(self):
        self.completed = []
        self.cancelled = 0

    def on_complete(self, draft):
        self.completed.append(draft)

    def on_cancel(self):
        self.cancelled += 1


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def navigator(qapp, project_context, recorder):
    return create_project_navigator(
        on_complete=recorder.on_complete,
        on_cancel=recorder.on_cancel,
        context=project_context,
    )


@pytest.fixture
def filled_navigator(qapp, filled_context, recorder):
    return create_project_navigator(
        on_complete=recorder.on_complete,
        on_cancel=recorder.on_cancel,
        context=filled_context,
    )


def advance_to(navigator, step):
    while navigator.current_step < step:
        assert navigator.next_step() is True


class TestInitialState:

    def test_starts_at_step_one(self, navigator):
        assert navigator.current_step == 1
        assert navigator.get_step_key() == "basics"

    def test_five_steps_in_order(self, navigator):
        assert navigator.get_step_count() == 5
        assert [navigator.get_step_key(i) for i in range(1, 6)] == list(PROJECT_STEPS)

    def test_requires_steps(self, qapp, project_context):
        with pytest.raises(ValueError):
            StepNavigator(project_context, [])


class TestForwardNavigation:

    def test_next_is_noop_when_gate_closed(self, navigator, recorder):
        failures = []
        navigator.validation_failed.connect(failures.append)

        assert navigator.next_step() is False
        assert navigator.current_step == 1
        assert navigator.context.completed_steps == set()
        assert len(failures) == 1
        assert failures[0].errors
        assert recorder.completed == []

    def test_sleep_and_memory_scenario(self, navigator):
        navigator.context.update_fields(
            title="Sleep and Memory",
            description="Study of sleep's effect on memory",
            field="psychology",
        )
        assert navigator.can_proceed(1) is True

        assert navigator.next_step() is True
        assert navigator.current_step == 2
        assert navigator.context.is_step_completed(1)

    def test_step_changed_signal(self, filled_navigator):
        changes = []
        filled_navigator.step_changed.connect(lambda old, new: changes.append((old, new)))

        filled_navigator.next_step()
        filled_navigator.next_step()

        assert changes == [(1, 2), (2, 3)]

    def test_gate_reevaluated_after_mutation(self, navigator):
        navigator.context.update_fields(
            title="T", description="D", field="physics",
            initial_question="What is the mass of a neutrino?",
        )
        advance_to(navigator, 3)

        navigator.context.add_objective()
        assert navigator.can_go_next() is False

        navigator.context.update_objective(0, "Determine X")
        assert navigator.can_go_next() is True

    def test_no_jump_api(self, navigator):
        assert not hasattr(navigator, "goto_step")


class TestCompletion:

    def test_last_step_invokes_on_complete_once(self, filled_navigator, recorder):
        advance_to(filled_navigator, 5)
        assert filled_navigator.is_last_step()

        assert filled_navigator.next_step() is True

        assert len(recorder.completed) == 1
        draft = recorder.completed[0]
        assert draft.title == "Sleep and Memory"
        assert draft.description == "Study of sleep's effect on memory"
        assert draft.field.value == "psychology"
        assert draft.initial_question.startswith("How does sleep")
        assert draft.objectives == ["Determine the effect of REM sleep", "Compare nap lengths"]
        assert draft.timeframe is not None
        assert draft.significance == "Better study habits for students"
        assert draft.prior_knowledge == "Intro cognitive psychology coursework"

    def test_completion_does_not_change_step(self, filled_navigator):
        advance_to(filled_navigator, 5)
        filled_navigator.next_step()

        assert filled_navigator.current_step == 5
        assert filled_navigator.context.status == WizardContext.STATUS_COMPLETED

    def test_completion_is_terminal(self, filled_navigator, recorder):
        advance_to(filled_navigator, 5)
        filled_navigator.next_step()

        assert filled_navigator.next_step() is False
        assert filled_navigator.previous_step() is False
        assert filled_navigator.cancel() is False
        assert len(recorder.completed) == 1
        assert recorder.cancelled == 0

    def test_last_step_gate_blocks_completion(self, filled_navigator, recorder):
        advance_to(filled_navigator, 5)
        filled_navigator.context.update_fields(prior_knowledge="")

        assert filled_navigator.next_step() is False
        assert recorder.completed == []

    def test_completed_draft_is_detached(self, filled_navigator, recorder):
        advance_to(filled_navigator, 5)
        filled_navigator.next_step()

        filled_navigator.context.draft.title = "Edited afterwards"
        assert recorder.completed[0].title == "Sleep and Memory"

    def test_failing_on_complete_reaches_caller(self, qapp, filled_context):
        def persist(draft):
            raise RuntimeError("persist failed")

        navigator = create_project_navigator(on_complete=persist, context=filled_context)
        advance_to(navigator, 5)

        with pytest.raises(RuntimeError, match="persist failed"):
            navigator.next_step()

        assert navigator.context.status == WizardContext.STATUS_COMPLETED
        assert navigator.next_step() is False

    def test_completed_signal_and_callback_both_fire(self, filled_navigator, recorder):
        emitted = []
        filled_navigator.completed.connect(emitted.append)
        advance_to(filled_navigator, 5)
        filled_navigator.next_step()

        assert len(emitted) == 1
        assert len(recorder.completed) == 1


class TestBackAndCancel:

    def test_previous_decrements(self, filled_navigator):
        advance_to(filled_navigator, 3)
        assert filled_navigator.previous_step() is True
        assert filled_navigator.current_step == 2

    def test_previous_on_first_step_cancels_once(self, navigator, recorder):
        navigator.context.update_fields(title="Half typed")
        before = navigator.context.draft.to_dict()

        assert navigator.previous_step() is True

        assert recorder.cancelled == 1
        assert navigator.current_step == 1
        assert navigator.context.draft.to_dict() == before
        assert recorder.completed == []

    def test_explicit_cancel_from_any_step(self, filled_navigator, recorder):
        advance_to(filled_navigator, 4)
        assert filled_navigator.cancel() is True

        assert recorder.cancelled == 1
        assert filled_navigator.current_step == 4
        assert filled_navigator.context.status == WizardContext.STATUS_CANCELLED

    def test_cancel_is_terminal(self, navigator, recorder):
        navigator.cancel()
        assert navigator.cancel() is False
        assert navigator.previous_step() is False
        assert navigator.next_step() is False
        assert recorder.cancelled == 1

    def test_failing_on_cancel_reaches_caller(self, qapp, project_context):
        def close_window():
            raise RuntimeError("window already closed")

        navigator = create_project_navigator(on_cancel=close_window, context=project_context)

        with pytest.raises(RuntimeError):
            navigator.previous_step()
        assert navigator.context.status == WizardContext.STATUS_CANCELLED

    def test_can_go_previous(self, filled_navigator):
        assert filled_navigator.can_go_previous() is False
        filled_navigator.next_step()
        assert filled_navigator.can_go_previous() is True


class TestProgress:

    def test_progress_percentage(self, filled_navigator):
        assert filled_navigator.get_progress_percentage() == pytest.approx(20.0)
        advance_to(filled_navigator, 5)
        assert filled_navigator.get_progress_percentage() == pytest.approx(100.0)

    def test_completed_steps_count(self, filled_navigator):
        advance_to(filled_navigator, 4)
        assert filled_navigator.get_completed_steps_count() == 3

    def test_navigator_resets_restored_context_to_first_step(self, qapp, filled_context):
        filled_context.current_step = 4
        restored = ProjectContext.from_dict(filled_context.to_dict())
        navigator = create_project_navigator(context=restored)
        assert navigator.current_step == 1
