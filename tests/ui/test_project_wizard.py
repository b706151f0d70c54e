# -*- coding: utf-8 -*-
"""
Tests for the Project Creation Wizard view.

Tests cover:
- Wizard initialization
- Next button gating driven by form edits
- Objective rows
- Submission and cancellation callbacks
"""

import pytest

from models.project_draft import ResearchField
from ui.wizards.project_creation import ProjectWizard
from ui.wizards.project_creation.project_context import ProjectContext


class Calls:
    def __init__(self):
        self.completed = []
        self.cancelled = 0

    def on_complete(self, draft):
        self.completed.append(draft)

    def on_cancel(self):
        self.cancelled += 1


@pytest.fixture
def calls():
    return Calls()


@pytest.fixture
def wizard(qtbot, calls):
    """Create wizard instance with an empty draft."""
    wizard = ProjectWizard(on_complete=calls.on_complete, on_cancel=calls.on_cancel)
    qtbot.addWidget(wizard)
    return wizard


@pytest.fixture
def filled_wizard(qtbot, calls, filled_context):
    wizard = ProjectWizard(
        on_complete=calls.on_complete,
        on_cancel=calls.on_cancel,
        context=filled_context,
    )
    qtbot.addWidget(wizard)
    return wizard


class TestWizardInitialization:

    def test_wizard_has_five_steps(self, wizard):
        assert len(wizard.steps) == 5
        assert [step.STEP_NUMBER for step in wizard.steps] == [1, 2, 3, 4, 5]

    def test_wizard_starts_at_first_step(self, wizard):
        assert wizard.navigator.current_step == 1
        assert wizard.step_container.currentIndex() == 0

    def test_context_is_project_context(self, wizard):
        assert isinstance(wizard.context, ProjectContext)

    def test_header_shows_progress(self, wizard):
        assert wizard.header.progress_label.text() == "Step 1 of 5"
        assert wizard.header.percent_label.text() == "20% Complete"
        assert wizard.header.progress_bar.value() == 20

    def test_initial_button_states(self, wizard):
        assert not wizard.footer.btn_next.isEnabled()
        assert not wizard.footer.btn_previous.isEnabled()
        assert wizard.footer.btn_cancel.isEnabled()
        assert wizard.footer.btn_next.text() == "Next"


class TestBasicsStep:

    def test_typing_updates_draft_and_gate(self, wizard):
        step = wizard.steps[0]

        step.title_input.setText("Sleep and Memory")
        assert wizard.context.draft.title == "Sleep and Memory"
        assert not wizard.footer.btn_next.isEnabled()

        step.description_input.setPlainText("Study of sleep's effect on memory")
        assert not wizard.footer.btn_next.isEnabled()

        step.field_combo.setCurrentIndex(step.field_combo.findData("psychology"))
        assert wizard.context.draft.field is ResearchField.PSYCHOLOGY
        assert step.field_description.text() == "Cognitive, social, clinical psychology"
        assert wizard.footer.btn_next.isEnabled()

        wizard.footer.btn_next.click()
        assert wizard.navigator.current_step == 2
        assert wizard.step_container.currentIndex() == 1
        assert wizard.header.progress_label.text() == "Step 2 of 5"

    def test_disabled_next_does_not_advance(self, wizard):
        wizard.footer.btn_next.click()
        assert wizard.navigator.current_step == 1

    def test_field_selector_offers_every_field(self, wizard):
        combo = wizard.steps[0].field_combo
        # Blank placeholder plus one entry per field
        assert combo.count() == len(ResearchField) + 1
        assert combo.itemData(combo.count() - 1) == "other"


class TestObjectivesStep:

    @pytest.fixture
    def objectives_wizard(self, wizard):
        wizard.context.update_fields(
            title="T", description="D", field="physics",
            initial_question="What is the mass of a neutrino?",
        )
        wizard.navigator.next_step()
        wizard.navigator.next_step()
        assert wizard.navigator.current_step == 3
        return wizard

    def test_add_objective_row_keeps_gate_closed(self, objectives_wizard):
        step = objectives_wizard.steps[2]
        step.btn_add.click()

        assert objectives_wizard.context.draft.objectives == [""]
        assert len(step.objective_inputs) == 1
        assert not objectives_wizard.footer.btn_next.isEnabled()

    def test_typing_objective_opens_gate(self, objectives_wizard):
        step = objectives_wizard.steps[2]
        step.btn_add.click()
        step.objective_inputs[0].setText("Determine X")

        assert objectives_wizard.context.draft.objectives == ["Determine X"]
        assert objectives_wizard.footer.btn_next.isEnabled()

    def test_remove_row_rebinds_indices(self, objectives_wizard):
        step = objectives_wizard.steps[2]
        for _ in range(3):
            step.btn_add.click()
        step.objective_inputs[0].setText("A")
        step.objective_inputs[1].setText("B")
        step.objective_inputs[2].setText("C")

        step._remove_objective(0)
        assert objectives_wizard.context.draft.objectives == ["B", "C"]
        assert [line.text() for line in step.objective_inputs] == ["B", "C"]

        step.objective_inputs[1].setText("C2")
        assert objectives_wizard.context.draft.objectives == ["B", "C2"]


class TestSubmitAndCancel:

    def test_full_run_submits_once(self, filled_wizard, calls):
        created = []
        filled_wizard.project_created.connect(created.append)

        for _ in range(4):
            filled_wizard.footer.btn_next.click()
        assert filled_wizard.navigator.current_step == 5
        assert filled_wizard.footer.btn_next.text() == "Create Project"

        filled_wizard.footer.btn_next.click()
        filled_wizard.footer.btn_next.click()

        assert len(calls.completed) == 1
        assert len(created) == 1
        assert calls.completed[0].title == "Sleep and Memory"
        assert not filled_wizard.footer.btn_next.isEnabled()

    def test_previous_button_goes_back(self, filled_wizard):
        filled_wizard.footer.btn_next.click()
        assert filled_wizard.footer.btn_previous.isEnabled()

        filled_wizard.footer.btn_previous.click()
        assert filled_wizard.navigator.current_step == 1
        assert filled_wizard.steps[0].title_input.text() == "Sleep and Memory"

    def test_cancel_button(self, wizard, calls):
        cancelled = []
        wizard.project_cancelled.connect(lambda: cancelled.append(True))

        wizard.footer.btn_cancel.click()

        assert calls.cancelled == 1
        assert cancelled == [True]
        assert calls.completed == []

    def test_failing_callback_is_contained(self, qtbot, filled_context):
        def broken(draft):
            raise RuntimeError("backend unavailable")

        wizard = ProjectWizard(on_complete=broken, context=filled_context)
        qtbot.addWidget(wizard)
        created = []
        wizard.project_created.connect(created.append)

        for _ in range(5):
            wizard.footer.btn_next.click()

        assert len(created) == 1
        assert wizard.context.status == "completed"


class TestTimelineStep:

    def test_dates_shown_from_draft(self, filled_wizard):
        for _ in range(3):
            filled_wizard.navigator.next_step()
        step = filled_wizard.steps[3]
        timeframe = filled_wizard.context.draft.timeframe

        assert step.start_date_input.date().toPyDate() == timeframe.start_date
        assert step.completion_date_input.date().toPyDate() == timeframe.expected_completion

    def test_reversed_dates_show_warning(self, filled_wizard):
        for _ in range(3):
            filled_wizard.navigator.next_step()
        step = filled_wizard.steps[3]

        step.completion_date_input.setDate(step.start_date_input.date().addDays(-1))

        assert step.warning_label.text() != ""
        assert filled_wizard.footer.btn_next.isEnabled()

    def test_unset_timeframe_asks_for_dates(self, filled_wizard):
        filled_wizard.context.update_fields(timeframe=None)
        for _ in range(3):
            filled_wizard.navigator.next_step()
        step = filled_wizard.steps[3]

        assert step.warning_label.text() == (
            "Pick a start and completion date to set the project timeframe."
        )
        assert filled_wizard.context.draft.timeframe is None
        assert not filled_wizard.footer.btn_next.isEnabled()

        step.completion_date_input.setDate(step.completion_date_input.date().addDays(1))

        assert filled_wizard.context.draft.timeframe is not None
        assert step.warning_label.text() == ""
        assert filled_wizard.footer.btn_next.isEnabled()


class TestStepData:

    def test_collect_data_returns_step_slice(self, filled_wizard):
        basics, question, objectives, timeline, prior = filled_wizard.steps

        assert basics.collect_data() == {
            "title": "Sleep and Memory",
            "description": "Study of sleep's effect on memory",
            "field": "psychology",
        }
        assert question.collect_data() == {
            "initial_question": "How does sleep duration affect memory consolidation?",
        }
        assert objectives.collect_data() == {
            "objectives": ["Determine the effect of REM sleep", "Compare nap lengths"],
        }
        assert set(timeline.collect_data()) == {"timeframe", "significance"}
        assert prior.collect_data() == {
            "prior_knowledge": "Intro cognitive psychology coursework",
        }
