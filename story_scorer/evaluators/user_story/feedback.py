"""
User Story Feedback Generation

Produces one suggestion per triggered rule, in rule evaluation order:
structure, acceptance criteria, clarity, INVEST, penalties.
INVEST deductions for missing criteria or missing "so that" are already
reported by the earlier sections and add no message of their own.
"""

from typing import List

from .components import StoryComponents
from .taxonomies import (
    STRUCTURE_MARKERS, FEEDBACK_MESSAGES,
    MIN_WORDS, MAX_WORDS, AND_LIMIT
)


def generate_feedback(components: StoryComponents) -> List[str]:
    """Generate ordered feedback for all rubric dimensions"""

    feedback = []
    feedback.extend(_structure_feedback(components))
    feedback.extend(_acceptance_criteria_feedback(components))
    feedback.extend(_clarity_feedback(components))
    feedback.extend(_invest_feedback(components))
    feedback.extend(_penalty_feedback(components))

    return feedback


def _structure_feedback(components: StoryComponents) -> List[str]:
    present = {
        'as_a': components.has_as_a,
        'i_want': components.has_i_want,
        'so_that': components.has_so_that,
    }
    return [
        marker['feedback']
        for name, marker in STRUCTURE_MARKERS.items()
        if not present[name]
    ]


def _acceptance_criteria_feedback(components: StoryComponents) -> List[str]:
    if components.gwt_count == 0:
        return [FEEDBACK_MESSAGES['missing_gwt']]
    return []


def _clarity_feedback(components: StoryComponents) -> List[str]:
    # Ambiguous words only cost points; they have no message
    feedback = []
    if components.word_count < MIN_WORDS:
        feedback.append(FEEDBACK_MESSAGES['too_short'])
    if components.word_count > MAX_WORDS:
        feedback.append(FEEDBACK_MESSAGES['too_long'])
    return feedback


def _invest_feedback(components: StoryComponents) -> List[str]:
    if components.and_count > AND_LIMIT:
        return [FEEDBACK_MESSAGES['too_many_ands']]
    return []


def _penalty_feedback(components: StoryComponents) -> List[str]:
    if components.weak_words:
        return [FEEDBACK_MESSAGES['weak_words']]
    return []
