"""
User Story Evaluator Package v1.0

Scores a user story against a fixed rubric:
- Structure (As a / I want / so that), 0-30
- Acceptance criteria (Given / When / Then lines), 0-25
- Clarity (ambiguous words, length), 0-25
- INVEST signals, 0-20
- Penalties for weak modal words

Usage:
    from story_scorer.evaluators.user_story import score_user_story

    result = score_user_story("As a user, I want ... so that ...")
    print(result.score, result.breakdown.structure)
    print(result.feedback)
"""

from .evaluator import (
    UserStoryEvaluator,
    EvaluationResult,
    format_comparative_summary
)
from .components import StoryComponents, extract_story_components
from .scoring import (
    ScoreBreakdown,
    StoryScore,
    score_user_story,
    score_structure,
    score_acceptance_criteria,
    score_clarity,
    score_invest,
    score_penalties,
    calculate_total_score
)
from .feedback import generate_feedback
from .templates import (
    StoryCategory,
    CategoryTemplate,
    STORIES,
    DEFAULT_CATEGORY,
    BAD_STORY,
    REFERENCE_STORY,
    get_template,
    list_categories
)
from .taxonomies import PASS_THRESHOLD

__version__ = '1.0.0'

__all__ = [
    'UserStoryEvaluator',
    'EvaluationResult',
    'format_comparative_summary',
    'StoryComponents',
    'extract_story_components',
    'ScoreBreakdown',
    'StoryScore',
    'score_user_story',
    'score_structure',
    'score_acceptance_criteria',
    'score_clarity',
    'score_invest',
    'score_penalties',
    'calculate_total_score',
    'generate_feedback',
    'StoryCategory',
    'CategoryTemplate',
    'STORIES',
    'DEFAULT_CATEGORY',
    'BAD_STORY',
    'REFERENCE_STORY',
    'get_template',
    'list_categories',
    'PASS_THRESHOLD',
]
