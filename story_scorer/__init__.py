"""
User Story Scorer - Source Package
"""

from .evaluators import get_evaluator, list_evaluators
from .evaluators.user_story import score_user_story, get_template, list_categories

__all__ = [
    'get_evaluator',
    'list_evaluators',
    'score_user_story',
    'get_template',
    'list_categories',
]
