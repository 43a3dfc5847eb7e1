"""
DOMAIN SERVICES - Pure computations with no I/O.

Each service is deterministic: identical input gives identical output, and
instances hold no per-call state.
"""

from growthkit.domain.services.significance_calculator import (
    ABTestInput,
    ABTestResult,
    SignificanceCalculator,
    compute_significance,
)
from growthkit.domain.services.subject_line_scorer import (
    Feedback,
    FeedbackType,
    SubjectLineInput,
    SubjectLineResult,
    SubjectLineScorer,
    score_subject_line,
)
from growthkit.domain.services.headline_generator import HeadlineGenerator

__all__ = [
    "ABTestInput",
    "ABTestResult",
    "SignificanceCalculator",
    "compute_significance",
    "Feedback",
    "FeedbackType",
    "SubjectLineInput",
    "SubjectLineResult",
    "SubjectLineScorer",
    "score_subject_line",
    "HeadlineGenerator",
]
