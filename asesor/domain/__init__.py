"""Domain models, questionnaire catalog and profile scoring."""
