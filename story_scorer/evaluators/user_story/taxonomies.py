"""
User Story Taxonomies - Static rubric data

Contains:
- Structure markers (As a / I want / so that)
- Acceptance criteria keywords (Given / When / Then)
- Ambiguous and weak word lists
- Dimension maxima, limits and deductions
- Feedback messages (emitted verbatim, in rule order)
"""

import re

# ==================== DIMENSION MAXIMA ====================

MAX_STRUCTURE = 30
MAX_ACCEPTANCE_CRITERIA = 25
MAX_CLARITY = 25
MAX_INVEST = 20

MAX_SCORE = 100
PASS_THRESHOLD = 70

# ==================== STRUCTURE MARKERS ====================

# Order matters: feedback for missing markers is emitted in this order
STRUCTURE_MARKERS = {
    'as_a': {
        'pattern': re.compile(r'\bAs a\b', re.I),
        'feedback': "Consider starting with 'As a <role>'",
    },
    'i_want': {
        'pattern': re.compile(r'\bI want\b', re.I),
        'feedback': "Add 'I want <capability>'",
    },
    'so_that': {
        'pattern': re.compile(r'\bso that\b', re.I),
        'feedback': "Explain the value with 'so that <benefit>'",
    },
}

# ==================== ACCEPTANCE CRITERIA ====================

# Prefix match on a trimmed line ("Whenever" counts too)
GWT_LINE_PATTERN = re.compile(r'^(?:Given|When|Then)', re.I)
LINE_SPLIT_PATTERN = re.compile(r'\n+')

GWT_TARGET = 3

# ==================== CLARITY ====================

AMBIGUOUS_WORDS = [
    'quickly', 'easily', 'etc', 'and/or', 'some', 'many',
    'various', 'optimize', 'improve', 'better', 'nice', 'fast'
]

AMBIGUOUS_WORD_DEDUCTION = 3
AMBIGUOUS_WORD_CAP = 5

MIN_WORDS = 12
MAX_WORDS = 200
LENGTH_DEDUCTION = 5

# ==================== INVEST ====================

AND_PATTERN = re.compile(r'\band\b', re.I)
AND_LIMIT = 5
INVEST_DEDUCTION = 5

# ==================== PENALTIES ====================

WEAK_WORDS = ['should', 'could', 'might']
WEAK_WORD_PENALTY = 5

# ==================== FEEDBACK MESSAGES ====================

FEEDBACK_MESSAGES = {
    'missing_gwt': "Add acceptance criteria with Given/When/Then",
    'too_short': "Story is too short; add detail.",
    'too_long': "Story is too long; make it concise.",
    'too_many_ands': "May include multiple features; try to split.",
    'weak_words': "Prefer clear statements over weak words like 'should/could/might'.",
}


def build_word_patterns(words):
    """Build word -> compiled whole-word, case-insensitive pattern lookup"""
    return {word: re.compile(rf'\b{re.escape(word)}\b', re.I) for word in words}


# Pre-built lookups for performance
AMBIGUOUS_PATTERNS = build_word_patterns(AMBIGUOUS_WORDS)
WEAK_PATTERNS = build_word_patterns(WEAK_WORDS)
