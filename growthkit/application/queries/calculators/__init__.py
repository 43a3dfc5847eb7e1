"""Interactive tool queries. Each one wraps a pure domain service."""

from growthkit.application.queries.calculators.calculate_ab_test import (
    CalculateABTestQuery,
    CalculateABTestHandler,
)
from growthkit.application.queries.calculators.score_subject_line import (
    ScoreSubjectLineQuery,
    ScoreSubjectLineHandler,
)
from growthkit.application.queries.calculators.generate_headlines import (
    GenerateHeadlinesQuery,
    GenerateHeadlinesHandler,
)

__all__ = [
    "CalculateABTestQuery",
    "CalculateABTestHandler",
    "ScoreSubjectLineQuery",
    "ScoreSubjectLineHandler",
    "GenerateHeadlinesQuery",
    "GenerateHeadlinesHandler",
]
