"""
asesor - Financial risk-profile advisor

Scores questionnaire answers into an investor profile and suggests a
portfolio template for it.

Modules:
    - core: Settings, logging, exceptions and scoring constants
    - domain: Pydantic models, questionnaire catalog, scoring and suggestions
    - services: Profiling facade and report views
    - utils: Parsing helpers for free-text answers
"""

__version__ = "1.0.0"
