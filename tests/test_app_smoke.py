# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
import pytest


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.config import Config
        from models.project_draft import ProjectDraft, ResearchField, Timeframe
        from services.exceptions import ValidationException
        from ui.wizards.framework import BaseWizard, StepNavigator, WizardContext
        from ui.wizards.project_creation import ProjectWizard, create_project_navigator
        import main
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_config_defaults():
    from app.config import Config

    assert Config.QUESTION_MIN_LENGTH == 10
    assert Config.LOG_PATH.name == Config.LOG_FILE


def test_logger_writes_to_configured_file(tmp_path):
    from utils.logger import get_logger, setup_logger

    log_path = tmp_path / "logs" / "wizard.log"
    try:
        logger = setup_logger(log_path=log_path, console_level="WARNING")
        assert logger.name == "research_wizard"

        get_logger("smoke").info("wizard started")
        for handler in logger.handlers:
            handler.flush()

        assert "wizard started" in log_path.read_text(encoding="utf-8")
    finally:
        setup_logger()


def test_ui_components_import():
    """Test that UI components can be imported."""
    try:
        from ui.components import ActionButton, WizardFooter, WizardHeader
        assert True
    except ImportError as e:
        pytest.fail(f"UI component import failed: {e}")


def test_action_button_rejects_unknown_variant(qapp):
    from ui.components import ActionButton

    with pytest.raises(ValueError):
        ActionButton("Go", variant="rainbow")


def test_validation_exception_message():
    from services.exceptions import ValidationException

    error = ValidationException("Unknown research field", field="field")
    assert str(error) == "field: Unknown research field"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
