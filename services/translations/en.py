# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",

    # Buttons
    "button.cancel": "Cancel",

    # Error boundary
    "error.boundary.title": "Error in {step}",
    "error.boundary.message": (
        "An error occurred while {operation}:\n\n{error}\n\n"
        "Please try again."
    ),

    # Wizard chrome
    "wizard.button.next": "Next",
    "wizard.button.previous": "Previous",
    "wizard.button.create_project": "Create Project",
    "wizard.progress.step": "Step {current} of {total}",
    "wizard.progress.percent": "{percent}% Complete",
    "wizard.project.title": "Create Research Project",

    # Step 1 - Basics
    "wizard.step.basics": "Project Basics",
    "wizard.basics.subtitle": "Let's start with the fundamentals of your research project",
    "wizard.basics.title_label": "Project Title *",
    "wizard.basics.title_placeholder": "Enter a descriptive title for your research project",
    "wizard.basics.description_label": "Project Description *",
    "wizard.basics.description_placeholder": (
        "Provide a brief overview of what you want to research and why"
    ),
    "wizard.basics.field_label": "Research Field *",

    # Step 2 - Question
    "wizard.step.question": "Research Question",
    "wizard.question.subtitle": "What specific question are you trying to answer?",
    "wizard.question.label": "Initial Research Question *",
    "wizard.question.placeholder": (
        "State your research question. Don't worry about perfection - "
        "your research mentor will help you refine it."
    ),
    "wizard.question.tip": (
        "Tip: Start with \"How does...\", \"What is the effect of...\", "
        "or \"To what extent...\""
    ),
    "wizard.question.good_title": "Good Research Questions Are:",
    "wizard.question.good_1": "Specific and focused",
    "wizard.question.good_2": "Answerable with available methods",
    "wizard.question.good_3": "Significant to your field",
    "wizard.question.good_4": "Clear and unambiguous",

    # Step 3 - Objectives
    "wizard.step.objectives": "Research Objectives",
    "wizard.objectives.subtitle": "What specific goals do you want to achieve?",
    "wizard.objectives.label": "Research Objectives *",
    "wizard.objectives.help": "List the specific, measurable goals of your research project.",
    "wizard.objectives.placeholder": "Objective {number}",
    "wizard.objectives.add": "+ Add Objective",
    "wizard.objectives.remove": "Remove",
    "wizard.objectives.examples_title": "Objective Examples:",
    "wizard.objectives.example_1": "To determine the relationship between X and Y",
    "wizard.objectives.example_2": "To evaluate the effectiveness of method Z",
    "wizard.objectives.example_3": "To develop a model for predicting outcome A",
    "wizard.objectives.example_4": "To compare approaches B and C in context D",

    # Step 4 - Timeline
    "wizard.step.timeline": "Project Timeline & Significance",
    "wizard.timeline.subtitle": "When will you work on this and why does it matter?",
    "wizard.timeline.start_label": "Start Date",
    "wizard.timeline.completion_label": "Expected Completion",
    "wizard.timeline.pick_dates": "Pick a start and completion date to set the project timeframe.",
    "wizard.timeline.significance_label": "Research Significance *",
    "wizard.timeline.significance_placeholder": (
        "Why is this research important? What impact could it have? "
        "Who would benefit from the results?"
    ),

    # Step 5 - Prior knowledge
    "wizard.step.prior_knowledge": "Prior Knowledge",
    "wizard.prior_knowledge.subtitle": "What do you already know about this topic?",
    "wizard.prior_knowledge.label": "Prior Knowledge & Experience *",
    "wizard.prior_knowledge.placeholder": (
        "Describe your current understanding of the topic, relevant coursework, "
        "previous research experience, or any initial reading you've done."
    ),
    "wizard.prior_knowledge.ready_title": "Ready to Start Your Research Journey!",
    "wizard.prior_knowledge.ready_text": (
        "Once you complete this step, your project is created and you can "
        "move on to each phase of the research process."
    ),

    # Validation
    "validation.check_data": "Please check the entered data.",
    "validation.title_required": "Project title is required.",
    "validation.description_required": "Project description is required.",
    "validation.field_required": "Select a research field.",
    "validation.question_too_short": (
        "The research question must be longer than {min_length} characters."
    ),
    "validation.objectives_required": "Add at least one research objective.",
    "validation.objective_blank": "Objective {number} is empty.",
    "validation.timeframe_required": "A project timeframe is required.",
    "validation.completion_before_start": (
        "The expected completion date is before the start date."
    ),
    "validation.significance_required": "Describe the significance of the research.",
    "validation.prior_knowledge_required": "Describe your prior knowledge of the topic.",
    "validation.unknown_step": "Unknown wizard step: {step}",

    # Research fields
    "mapping.not_specified": "Not specified",
    "mapping.research_field.computer-science": "Computer Science",
    "mapping.research_field.educational-technology": "Educational Technology",
    "mapping.research_field.engineering": "Engineering",
    "mapping.research_field.mathematics": "Mathematics",
    "mapping.research_field.physics": "Physics",
    "mapping.research_field.chemistry": "Chemistry",
    "mapping.research_field.biology": "Biology",
    "mapping.research_field.medicine": "Medicine",
    "mapping.research_field.psychology": "Psychology",
    "mapping.research_field.economics": "Economics",
    "mapping.research_field.sociology": "Sociology",
    "mapping.research_field.education": "Education",
    "mapping.research_field.linguistics": "Linguistics",
    "mapping.research_field.history": "History",
    "mapping.research_field.philosophy": "Philosophy",
    "mapping.research_field.environmental-science": "Environmental Science",
    "mapping.research_field.political-science": "Political Science",
    "mapping.research_field.anthropology": "Anthropology",
    "mapping.research_field.other": "Other",
    "mapping.research_field_desc.computer-science": "Software, AI, algorithms, systems",
    "mapping.research_field_desc.engineering": "Mechanical, electrical, civil, chemical",
    "mapping.research_field_desc.mathematics": "Pure math, applied math, statistics",
    "mapping.research_field_desc.physics": "Theoretical, experimental, applied physics",
    "mapping.research_field_desc.chemistry": "Organic, inorganic, analytical chemistry",
    "mapping.research_field_desc.biology": "Molecular, cellular, ecological biology",
    "mapping.research_field_desc.psychology": "Cognitive, social, clinical psychology",
    "mapping.research_field_desc.economics": "Microeconomics, macroeconomics, finance",
    "mapping.research_field_desc.sociology": "Social structures, behavior, culture",
    "mapping.research_field_desc.other": "Interdisciplinary or other fields",
}
