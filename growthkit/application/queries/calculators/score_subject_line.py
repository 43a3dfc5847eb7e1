"""Score Subject Line Query."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.services import (
    SubjectLineInput,
    SubjectLineResult,
    SubjectLineScorer,
)
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import CalculatorName, increment_calculator_run


@dataclass(frozen=True)
class ScoreSubjectLineQuery(Query[SubjectLineResult]):
    user_email: UserEmail
    subject_line: str


class ScoreSubjectLineHandler(QueryHandler[SubjectLineResult]):
    def __init__(self, user_repository: UserRepository, scorer: SubjectLineScorer):
        self._user_repository = user_repository
        self._scorer = scorer

    async def execute(self, query: ScoreSubjectLineQuery) -> SubjectLineResult:
        await load_actor(self._user_repository, query.user_email)

        result = self._scorer.score(SubjectLineInput(subject_line=query.subject_line))
        increment_calculator_run(CalculatorName.SUBJECT_LINE)
        return result
