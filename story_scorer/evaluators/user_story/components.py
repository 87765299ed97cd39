"""
User Story Components - Extract rubric signals from story text

This module handles all text analysis. Scoring and feedback only read
the signals recorded here.
"""

from typing import List
from dataclasses import dataclass, field

from .taxonomies import (
    STRUCTURE_MARKERS, GWT_LINE_PATTERN, LINE_SPLIT_PATTERN,
    AMBIGUOUS_PATTERNS, AND_PATTERN, WEAK_PATTERNS
)


@dataclass
class StoryComponents:
    """Literal signals extracted from a trimmed user story"""
    has_as_a: bool
    has_i_want: bool
    has_so_that: bool
    gwt_count: int  # uncapped
    word_count: int
    and_count: int
    ambiguous_words: List[str] = field(default_factory=list)
    weak_words: List[str] = field(default_factory=list)

    @property
    def markers_present(self) -> int:
        return sum([self.has_as_a, self.has_i_want, self.has_so_that])


def extract_story_components(text: str) -> StoryComponents:
    """Extract all rubric signals from raw story text"""

    story = text.strip()

    has_as_a, has_i_want, has_so_that = _extract_markers(story)

    return StoryComponents(
        has_as_a=has_as_a,
        has_i_want=has_i_want,
        has_so_that=has_so_that,
        gwt_count=_count_gwt_lines(story),
        word_count=_count_words(story),
        and_count=_count_ands(story),
        ambiguous_words=_find_words(story, AMBIGUOUS_PATTERNS),
        weak_words=_find_words(story, WEAK_PATTERNS)
    )


def _extract_markers(story: str):
    """Check the As a / I want / so that markers anywhere in the text"""
    return tuple(
        bool(marker['pattern'].search(story))
        for marker in STRUCTURE_MARKERS.values()
    )


def _count_gwt_lines(story: str) -> int:
    """Count lines starting with Given/When/Then"""
    lines = [line.strip() for line in LINE_SPLIT_PATTERN.split(story)]
    return sum(1 for line in lines if GWT_LINE_PATTERN.match(line))


def _count_words(story: str) -> int:
    return len(story.split())


def _count_ands(story: str) -> int:
    return len(AND_PATTERN.findall(story))


def _find_words(story: str, patterns) -> List[str]:
    """Return each listed word present at least once, in list order"""
    return [word for word, pattern in patterns.items() if pattern.search(story)]
