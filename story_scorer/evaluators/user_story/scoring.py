"""
User Story Scoring - Structure, Acceptance Criteria, Clarity, INVEST, Penalties

Each dimension is scored independently from the extracted components.
Sub-scores keep their fractional values; rounding happens once, on the total.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from .components import StoryComponents, extract_story_components
from .feedback import generate_feedback
from .taxonomies import (
    MAX_STRUCTURE, MAX_ACCEPTANCE_CRITERIA, MAX_CLARITY, MAX_INVEST, MAX_SCORE,
    STRUCTURE_MARKERS, GWT_TARGET,
    AMBIGUOUS_WORD_DEDUCTION, AMBIGUOUS_WORD_CAP,
    MIN_WORDS, MAX_WORDS, LENGTH_DEDUCTION,
    AND_LIMIT, INVEST_DEDUCTION, WEAK_WORD_PENALTY
)


@dataclass
class ScoreBreakdown:
    """Per-dimension sub-scores"""
    structure: float = 0.0  # 0-30
    acceptance_criteria: float = 0.0  # 0-25
    clarity: float = 0.0  # 0-25
    invest: float = 0.0  # 0-20
    penalties: float = 0.0  # 0 or 5

    @property
    def total(self) -> float:
        return self.structure + self.acceptance_criteria + self.clarity + self.invest - self.penalties

    def to_dict(self) -> Dict[str, float]:
        """Serialise with the external field names"""
        return {
            'structure': self.structure,
            'acceptanceCriteria': self.acceptance_criteria,
            'clarity': self.clarity,
            'invest': self.invest,
            'penalties': self.penalties,
        }

    def rounded(self) -> Dict[str, int]:
        """Display values (each field rounded on its own)"""
        return {name: _round_half_up(value) for name, value in self.to_dict().items()}


@dataclass
class StoryScore:
    """Scorer output: total, breakdown and ordered feedback"""
    score: int
    breakdown: ScoreBreakdown
    feedback: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            'score': self.score,
            'breakdown': self.breakdown.to_dict(),
            'feedback': list(self.feedback),
        }


def score_user_story(text: str) -> StoryScore:
    """
    Score a user story against the rubric

    Pure and total: any string (including empty) yields a result.

    Returns: StoryScore with score in [0, 100]
    """

    components = extract_story_components(text)
    breakdown = score_components(components)

    return StoryScore(
        score=calculate_total_score(breakdown),
        breakdown=breakdown,
        feedback=generate_feedback(components)
    )


def score_components(components: StoryComponents) -> ScoreBreakdown:
    """Score every dimension from already-extracted components"""
    return ScoreBreakdown(
        structure=score_structure(components),
        acceptance_criteria=score_acceptance_criteria(components),
        clarity=score_clarity(components),
        invest=score_invest(components),
        penalties=score_penalties(components)
    )


def score_structure(components: StoryComponents) -> float:
    """Structure: share of As a / I want / so that markers present (0-30)"""
    return components.markers_present / len(STRUCTURE_MARKERS) * MAX_STRUCTURE


def score_acceptance_criteria(components: StoryComponents) -> float:
    """Acceptance criteria: Given/When/Then lines, capped at three (0-25)"""
    return min(GWT_TARGET, components.gwt_count) / GWT_TARGET * MAX_ACCEPTANCE_CRITERIA


def score_clarity(components: StoryComponents) -> float:
    """Clarity: deduct for ambiguous words and extreme length (0-25)"""

    clarity = MAX_CLARITY
    clarity -= min(len(components.ambiguous_words), AMBIGUOUS_WORD_CAP) * AMBIGUOUS_WORD_DEDUCTION

    if components.word_count < MIN_WORDS:
        clarity -= LENGTH_DEDUCTION
    if components.word_count > MAX_WORDS:
        clarity -= LENGTH_DEDUCTION

    return max(0, min(MAX_CLARITY, clarity))


def score_invest(components: StoryComponents) -> float:
    """
    INVEST signals (0-20)

    - Independent/Small: too many "and"s suggest several features
    - Testable: acceptance criteria present
    - Valuable: "so that" present
    """

    invest = MAX_INVEST

    if components.and_count > AND_LIMIT:
        invest -= INVEST_DEDUCTION
    if components.gwt_count == 0:
        invest -= INVEST_DEDUCTION
    if not components.has_so_that:
        invest -= INVEST_DEDUCTION

    return max(0, invest)


def score_penalties(components: StoryComponents) -> float:
    """Weak modal words cost a flat penalty, however many occur"""
    return WEAK_WORD_PENALTY if components.weak_words else 0


def calculate_total_score(breakdown: ScoreBreakdown) -> int:
    """Round the signed sum once and clamp to [0, 100]"""
    return max(0, min(MAX_SCORE, _round_half_up(breakdown.total)))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
