"""
User Story Evaluator - Main evaluation class

This is the primary interface for callers that want more than the raw
score. It coordinates:
- Component extraction
- Scoring
- Feedback generation
- Pass/fail against the threshold
- Markdown reporting
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from .components import StoryComponents, extract_story_components
from .scoring import ScoreBreakdown, score_components, calculate_total_score
from .feedback import generate_feedback
from .templates import StoryCategory, get_template, resolve_category
from .taxonomies import (
    PASS_THRESHOLD, MAX_STRUCTURE, MAX_ACCEPTANCE_CRITERIA,
    MAX_CLARITY, MAX_INVEST, MAX_SCORE
)


@dataclass
class EvaluationResult:
    """Complete evaluation output"""
    score: int
    breakdown: ScoreBreakdown
    feedback: List[str]
    components: StoryComponents
    passed: bool
    pass_threshold: int = PASS_THRESHOLD
    category: Optional[str] = None
    original_text: str = ''

    def to_dict(self) -> Dict:
        """JSON-ready evaluation data"""
        return {
            'score': self.score,
            'passed': self.passed,
            'pass_threshold': self.pass_threshold,
            'category': self.category,
            'breakdown': self.breakdown.to_dict(),
            'feedback': list(self.feedback),
            'components': {
                'has_as_a': self.components.has_as_a,
                'has_i_want': self.components.has_i_want,
                'has_so_that': self.components.has_so_that,
                'gwt_count': self.components.gwt_count,
                'word_count': self.components.word_count,
                'and_count': self.components.and_count,
                'ambiguous_words': self.components.ambiguous_words,
                'weak_words': self.components.weak_words,
            },
        }


class UserStoryEvaluator:
    """
    Main evaluator class for user story quality

    Usage:
        evaluator = UserStoryEvaluator()
        result = evaluator.evaluate("As a user, I want ... so that ...")
        print(result.score, result.passed)
        print(result.feedback)
    """

    def __init__(self, pass_threshold: int = PASS_THRESHOLD):
        self.pass_threshold = pass_threshold

    def evaluate(
        self,
        story: Union[str, Dict],
        category: Optional[Union[StoryCategory, str]] = None
    ) -> EvaluationResult:
        """
        Main evaluation pipeline

        Args:
            story: Story text (string) or dict with 'story' key (and optional 'category')
            category: Optional category the story was written for

        Returns:
            EvaluationResult with score, breakdown, ordered feedback, pass/fail
        """

        # Handle both string and dict inputs
        if isinstance(story, dict):
            category = story.get('category', category)
            story = story.get('story', '')

        if category is not None:
            category = resolve_category(category).value

        # Step 1: Extract components
        components = extract_story_components(story)

        print(f"  ✓ Structure markers: {components.markers_present}/3")
        print(f"  ✓ Given/When/Then lines: {components.gwt_count}")
        if components.ambiguous_words:
            print(f"  ⚠ Ambiguous words: {', '.join(components.ambiguous_words)}")
        if components.weak_words:
            print(f"  ⚠ Weak words: {', '.join(components.weak_words)}")

        # Step 2: Score
        breakdown = score_components(components)
        score = calculate_total_score(breakdown)

        # Step 3: Feedback
        feedback = generate_feedback(components)

        return EvaluationResult(
            score=score,
            breakdown=breakdown,
            feedback=feedback,
            components=components,
            passed=score >= self.pass_threshold,
            pass_threshold=self.pass_threshold,
            category=category,
            original_text=story
        )

    def evaluate_template(
        self,
        category: Union[StoryCategory, str],
        which: str = 'bad'
    ) -> EvaluationResult:
        """
        Evaluate one of the stored category templates

        Args:
            category: Category identifier
            which: 'bad' (draft seed) or 'reference' (exemplar)
        """

        if which not in ('bad', 'reference'):
            raise ValueError(f"Unknown template: '{which}'. Available: bad, reference")

        template = get_template(category)
        return self.evaluate(getattr(template, which), category=category)

    def evaluate_batch(self, stories: Dict[str, Union[str, Dict]]) -> Dict[str, EvaluationResult]:
        """
        Evaluate multiple stories

        Args:
            stories: Dict of {author: story}

        Returns:
            Dict of {author: EvaluationResult}
        """

        results = {}
        for name, story in stories.items():
            print(f"\n{'='*60}")
            print(f"Evaluating: {name}")
            print('='*60)
            results[name] = self.evaluate(story)

        return results

    def generate_report(self, result: EvaluationResult, author: str = "Author") -> str:
        """
        Generate a formatted report for a single evaluation

        Args:
            result: EvaluationResult from evaluate()
            author: Name to use in report

        Returns:
            Formatted markdown report string
        """

        shown = result.breakdown.rounded()
        verdict = "PASS" if result.passed else "NOT YET"

        if result.feedback:
            suggestions = "\n".join(f"- {item}" for item in result.feedback)
        else:
            suggestions = "No suggestions. This story meets every rubric check."

        category_line = f"**Category:** {result.category}  \n" if result.category else ""

        report = f"""# User Story Report: {author}

{category_line}**Score:** {result.score}/{MAX_SCORE} ({verdict}, threshold {result.pass_threshold})

---

## Breakdown

- Structure: {shown['structure']} / {MAX_STRUCTURE}
- Acceptance criteria: {shown['acceptanceCriteria']} / {MAX_ACCEPTANCE_CRITERIA}
- Clarity: {shown['clarity']} / {MAX_CLARITY}
- INVEST: {shown['invest']} / {MAX_INVEST}
- Penalties: -{shown['penalties']}

---

## Suggestions

{suggestions}

---

*Score Formula: Structure + Acceptance criteria + Clarity + INVEST - Penalties*
"""

        return report


def format_comparative_summary(results: Dict[str, EvaluationResult]) -> str:
    """
    Generate comparative summary across multiple authors

    Args:
        results: Dict of {author: EvaluationResult}

    Returns:
        Formatted markdown summary
    """

    summary = "# User Stories: Comparative Summary\n\n"
    summary += "| Author | Score | Result | Structure | Criteria | Clarity | INVEST | Penalties | Key Growth Area |\n"
    summary += "|--------|-------|--------|-----------|----------|---------|--------|-----------|-----------------|\n"

    for name, result in results.items():
        shown = result.breakdown.rounded()
        verdict = "Pass" if result.passed else "Not yet"
        # First suggestion is the earliest rule that fired
        growth = result.feedback[0] if result.feedback else "None"

        summary += (
            f"| {name} | {result.score}/{MAX_SCORE} | {verdict} | {shown['structure']} | "
            f"{shown['acceptanceCriteria']} | {shown['clarity']} | {shown['invest']} | "
            f"-{shown['penalties']} | {growth} |\n"
        )

    passed = sum(1 for result in results.values() if result.passed)
    summary += f"\n**Passed:** {passed} of {len(results)}\n"

    return summary
