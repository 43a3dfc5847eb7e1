"""Generate Headlines Query."""

from dataclasses import dataclass
from growthkit.application.common.actors import load_actor
from growthkit.application.common.interfaces import Query, QueryHandler
from growthkit.domain.ports.repositories import UserRepository
from growthkit.domain.services import HeadlineGenerator
from growthkit.domain.value_objects.user_email import UserEmail
from growthkit.observability.metrics import CalculatorName, increment_calculator_run


@dataclass(frozen=True)
class GenerateHeadlinesQuery(Query[list[str]]):
    user_email: UserEmail
    topic: str
    tone: str


class GenerateHeadlinesHandler(QueryHandler[list[str]]):
    def __init__(self, user_repository: UserRepository, generator: HeadlineGenerator):
        self._user_repository = user_repository
        self._generator = generator

    async def execute(self, query: GenerateHeadlinesQuery) -> list[str]:
        await load_actor(self._user_repository, query.user_email)

        headlines = self._generator.generate(query.topic, query.tone)
        increment_calculator_run(CalculatorName.HEADLINE)
        return headlines
