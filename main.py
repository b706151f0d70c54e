#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Research Assistant - Create Research Project
Main entry point for the project creation wizard
"""

import json
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from app.config import Config
from models.project_draft import ProjectDraft
from services.translation_manager import set_language
from ui.wizards.project_creation import ProjectWizard
from utils.logger import setup_logger


def main():
    """Main application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setOrganizationName(Config.ORGANIZATION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        set_language(Config.APP_LANGUAGE)

        def on_complete(draft: ProjectDraft):
            # Persistence belongs to the backend; hand the draft over as JSON
            logger.info("Project draft submitted:")
            logger.info(json.dumps(draft.to_dict(), indent=2, ensure_ascii=False))

        def on_cancel():
            logger.info("Project creation cancelled")

        wizard = ProjectWizard(on_complete=on_complete, on_cancel=on_cancel)
        wizard.show()

        exit_code = app.exec_()
        logger.info(f"Application closed with exit code: {exit_code}")
        sys.exit(exit_code)

    except Exception as e:
        error_msg = f"Fatal error during application startup: {e}"
        print(f"\n[ERROR] {error_msg}")
        print(f"\nPlease check {Config.LOG_PATH} for details")
        logger.exception(error_msg)
        sys.exit(1)


if __name__ == "__main__":
    main()
