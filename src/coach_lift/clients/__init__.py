"""Input clients for coach-lift."""

from .questionnaire import QuestionnaireClient

__all__ = ["QuestionnaireClient"]
